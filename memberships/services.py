import logging

from django.core.exceptions import PermissionDenied

from .models import Membership

logger = logging.getLogger(__name__)


class MembershipService:
    """
    Service layer for membership purchases.
    """

    @staticmethod
    def purchase(user, offer, payment_method):
        """
        Create a membership for an offer and let its provider bill it.

        Args:
            user: Account holder
            offer: MembershipOffer being purchased
            payment_method: PaymentMethod owned by the user

        Returns:
            Tuple of the created Membership and the provider's billing result
            (None for providers that do not bill)

        Raises:
            PermissionDenied: If the payment method belongs to someone else
        """
        if payment_method.owner_id != user.pk:
            raise PermissionDenied("Payment method does not belong to this user.")

        membership = Membership.objects.create(
            membership_type=offer.membership_type,
            user=user,
            offer=offer,
        )
        logger.info(
            "Membership created",
            extra={'membership_id': str(membership.id), 'offer_id': str(offer.id)}
        )

        provider = offer.membership_type.get_provider()
        result = provider.post_create_membership(membership, {
            'membership_offer': offer,
            'payment_method': payment_method,
        })

        membership.refresh_from_db()
        return membership, result
