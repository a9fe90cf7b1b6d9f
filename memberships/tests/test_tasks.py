"""
Tests for memberships Celery tasks.
"""
import uuid
import pytest
from unittest.mock import patch
from django.core import mail

from memberships.tasks import notify_billing_failure


@pytest.mark.django_db
class TestNotifyBillingFailure:
    """Test notify_billing_failure Celery task."""

    def test_mails_admins(self, membership):
        result = notify_billing_failure(str(membership.id), 'subscription_failed', 'Duplicate subscription', 'pay_1')

        assert result['status'] == 'success'
        assert result['outcome'] == 'subscription_failed'
        assert len(mail.outbox) == 1

        message = mail.outbox[0]
        assert 'Recurring subscription could not be created' in message.subject
        assert 'member@example.com' in message.body
        assert 'Monthly membership' in message.body
        assert 'Duplicate subscription' in message.body
        assert 'pay_1' in message.body

    def test_charge_failure_subject(self, membership):
        notify_billing_failure(str(membership.id), 'charge_failed', 'Declined')

        assert 'Initial membership payment failed' in mail.outbox[0].subject
        assert 'Initial payment' not in mail.outbox[0].body

    def test_nonexistent_membership(self):
        result = notify_billing_failure(str(uuid.uuid4()), 'charge_failed', 'Declined')

        assert result['status'] == 'error'
        assert 'does not exist' in result['message']
        assert len(mail.outbox) == 0

    @patch('memberships.tasks.mail_admins', side_effect=Exception('SMTP unavailable'))
    def test_retry_on_mail_failure(self, mock_mail_admins, membership):
        with patch.object(notify_billing_failure, 'retry') as mock_retry:
            mock_retry.side_effect = Exception('Retry triggered')

            with pytest.raises(Exception):
                notify_billing_failure(str(membership.id), 'charge_failed', 'Declined')

            mock_retry.assert_called_once()
