"""
Authorize.Net membership provider.

Bills a new membership in two steps: an immediate charge of the offer price
through the configured gateway, then an ARB subscription that repeats the
charge monthly from one month out.
"""

import logging
from typing import Optional, Dict, Any

from django.conf import settings

from payments.authnet import AuthNetException
from payments.gateways import AuthorizeNetGateway, PaymentGatewayException, load_gateway
from payments.models import Payment
from memberships.results import BillingOutcome, MembershipBillingResult
from memberships.serializers import AuthnetConfigurationSerializer
from memberships.subscriptions import SubscriptionGatewayProxy, build_subscription
from memberships.tasks import notify_billing_failure
from .base import MembershipProviderBase

logger = logging.getLogger(__name__)

SUBSCRIPTION_PAYMENT_TYPE = 'authnet_subscription'


class AuthnetMembershipProvider(MembershipProviderBase):
    """
    Membership provider backed by an Authorize.Net gateway.

    Configuration:
        gateway: Id of the PaymentGateway used for charges and subscriptions
    """

    provider_id = 'authnet'
    label = 'Authorize.net'
    configuration_serializer_class = AuthnetConfigurationSerializer

    def default_configuration(self) -> Dict[str, Any]:
        return {'gateway': ''}

    def submit_configuration(self, serializer):
        if not serializer.errors:
            self.configuration['gateway'] = serializer.validated_data['gateway']

    def get_gateway_plugin(self) -> AuthorizeNetGateway:
        """
        Load the configured gateway plugin.

        Raises:
            ImproperlyConfigured: If no gateway is configured
            PaymentGateway.DoesNotExist: If the configured gateway is gone
        """
        return load_gateway(self.configuration['gateway'])

    def post_create_membership(self, membership, plugin_values: Optional[Dict[str, Any]] = None) -> MembershipBillingResult:
        """
        Charge the offer price now and create the recurring subscription.

        Declines and subscription failures are logged, reported to operators
        and returned in the result; configuration errors propagate.

        Args:
            membership: The new Membership
            plugin_values: Must contain 'membership_offer' and 'payment_method'
        """
        plugin_values = plugin_values or {}
        offer = plugin_values['membership_offer']
        payment_method = plugin_values['payment_method']

        try:
            payment = self.make_initial_payment(membership, offer, payment_method)
        except PaymentGatewayException as e:
            logger.warning(
                "Initial membership payment failed",
                extra={'membership_id': str(membership.id), 'error': str(e), 'error_code': e.error_code}
            )
            result = MembershipBillingResult(BillingOutcome.CHARGE_FAILED, error=e)
            self._finish(membership, result)
            return result

        try:
            self.create_authnet_subscription(membership, offer, payment_method)
        except AuthNetException as e:
            logger.warning(
                "Authorize.Net subscription creation failed",
                extra={
                    'membership_id': str(membership.id),
                    'payment_id': str(payment.id),
                    'error': str(e),
                    'error_code': e.message_code,
                }
            )
            if self._void_on_subscription_failure():
                self._void_initial_payment(payment)
            result = MembershipBillingResult(BillingOutcome.SUBSCRIPTION_FAILED, payment=payment, error=e)
            self._finish(membership, result)
            return result

        result = MembershipBillingResult(BillingOutcome.SUBSCRIBED, payment=payment)
        self._finish(membership, result)
        return result

    def make_initial_payment(self, membership, offer, payment_method) -> Payment:
        """
        Charge the offer price immediately.

        The payment is linked to the membership and saved only after the
        gateway accepted the charge.

        Raises:
            PaymentGatewayException: If the charge fails
        """
        price = offer.price
        payment = Payment(
            type=SUBSCRIPTION_PAYMENT_TYPE,
            amount=price.number,
            currency_code=price.currency_code,
            payment_method=payment_method,
            payment_gateway_id=payment_method.get_payment_gateway_id(),
        )
        self.get_gateway_plugin().create_payment(payment)
        payment.membership = membership
        payment.save()
        return payment

    def create_authnet_subscription(self, membership, offer, payment_method):
        """
        Create the recurring subscription at Authorize.Net.

        Raises:
            AuthNetException: If the processor rejects the subscription
        """
        gateway = self.get_gateway_plugin()
        subscription = build_subscription(offer, payment_method, gateway)
        SubscriptionGatewayProxy.for_plugin(gateway).create_subscription(subscription)

    def _void_on_subscription_failure(self) -> bool:
        return getattr(settings, 'MEMBERSHIP_AUTHNET', {}).get('VOID_ON_SUBSCRIPTION_FAILURE', False)

    def _void_initial_payment(self, payment):
        try:
            self.get_gateway_plugin().void_payment(payment)
        except PaymentGatewayException as e:
            logger.error(
                "Could not void initial payment after subscription failure",
                extra={'payment_id': str(payment.id), 'error': str(e)}
            )

    def _finish(self, membership, result: MembershipBillingResult):
        membership.status = 'active' if result.success else 'billing_failed'
        membership.save(update_fields=['status', 'updated_at'])

        if result.success or not getattr(settings, 'MEMBERSHIP_AUTHNET', {}).get('NOTIFY_OPERATORS', True):
            return

        try:
            notify_billing_failure.delay(
                str(membership.id),
                result.outcome.value,
                str(result.error),
                str(result.payment.id) if result.payment else None
            )
        except Exception as e:
            logger.error(
                "Failed to queue billing failure notification",
                extra={'membership_id': str(membership.id), 'error': str(e)},
                exc_info=True
            )
