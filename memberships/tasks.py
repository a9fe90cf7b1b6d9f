"""
Celery tasks for the memberships app.

Billing failures of new memberships are reported to the site operators
(``settings.ADMINS``) by email.
"""
from celery import shared_task
from django.core.mail import mail_admins
import logging

from .models import Membership

logger = logging.getLogger(__name__)

OUTCOME_SUBJECTS = {
    'charge_failed': 'Initial membership payment failed',
    'subscription_failed': 'Recurring subscription could not be created',
}


@shared_task(bind=True, max_retries=3, default_retry_delay=60)
def notify_billing_failure(self, membership_id, outcome, error_message, payment_id=None):
    """
    Email operators about a membership whose billing failed.

    Args:
        membership_id (str): The membership that failed to bill
        outcome (str): 'charge_failed' or 'subscription_failed'
        error_message (str): Message of the gateway exception
        payment_id (str, optional): Initial payment, when the charge went through

    Returns:
        dict: Status of the notification
    """
    try:
        membership = Membership.objects.select_related('user', 'offer').get(id=membership_id)
    except Membership.DoesNotExist:
        logger.error(f"Membership {membership_id} does not exist")
        return {
            'status': 'error',
            'message': f'Membership {membership_id} does not exist'
        }

    lines = [
        f"Membership: {membership.id}",
        f"Member: {membership.user.email or membership.user.get_username()}",
        f"Offer: {membership.offer.label if membership.offer else '-'}",
        f"Error: {error_message}",
    ]
    if payment_id:
        lines.append(f"Initial payment: {payment_id}")

    try:
        mail_admins(
            subject=OUTCOME_SUBJECTS.get(outcome, 'Membership billing failed'),
            message='\n'.join(lines),
            fail_silently=False,
        )
    except Exception as exc:
        logger.error(f"Failed to send billing failure notification for {membership_id}: {str(exc)}")
        raise self.retry(exc=exc)

    logger.info(f"Billing failure notification sent for membership {membership_id}")
    return {
        'status': 'success',
        'membership_id': membership_id,
        'outcome': outcome,
    }
