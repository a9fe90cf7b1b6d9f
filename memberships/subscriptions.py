"""
Recurring billing subscriptions at Authorize.Net.

``build_subscription`` turns an offer and a payment method into an ARB
subscription value without any network access; ``SubscriptionGatewayProxy``
submits it with the credentials of a gateway plugin.
"""

import datetime
import logging
from typing import Optional

from dateutil.relativedelta import relativedelta
from django.utils import timezone

from payments.authnet import (
    ARBCreateSubscriptionRequest,
    CustomerProfileId,
    PaymentSchedule,
    Subscription,
)
from payments.gateways import AuthorizeNetGateway
from payments.price import format_price

logger = logging.getLogger(__name__)

INTERVAL_LENGTH = 1
INTERVAL_UNIT = 'months'


def subscription_start_date(today: Optional[datetime.date] = None) -> str:
    """
    First recurring charge date: one calendar month from today, as YYYY-MM-DD.

    The initial charge is taken when the membership is created, so the
    recurring schedule starts one cycle later. Days past the end of a shorter
    month are clamped (Jan 31 -> Feb 28/29).
    """
    if today is None:
        today = timezone.localdate()
    return (today + relativedelta(months=INTERVAL_LENGTH)).strftime('%Y-%m-%d')


def build_subscription(offer, payment_method, gateway, today: Optional[datetime.date] = None) -> Subscription:
    """
    Build the ARB subscription for a membership offer.

    Args:
        offer: MembershipOffer being purchased
        payment_method: PaymentMethod holding the remote payment profile
        gateway: Gateway plugin used to look up the remote customer profile
        today: Date the subscription is created on (defaults to today)

    Returns:
        Subscription with schedule and profile attached
    """
    price = offer.price
    subscription = Subscription(
        name=offer.label,
        amount=format_price(price),
        amount_number=price.number,
    )
    subscription.add_payment_schedule(PaymentSchedule(
        interval_length=INTERVAL_LENGTH,
        interval_unit=INTERVAL_UNIT,
        start_date=subscription_start_date(today),
    ))
    subscription.add_profile(CustomerProfileId(
        customer_profile_id=gateway.get_remote_customer_id(payment_method.owner),
        customer_payment_profile_id=payment_method.remote_id,
    ))
    return subscription


class ProxyAlreadyBound(RuntimeError):
    """Raised when a proxy that already has a gateway plugin is bound again"""


class SubscriptionGatewayProxy:
    """
    Uses an Authorize.Net gateway plugin's credentials for ARB calls.

    A proxy is bound to one plugin for its lifetime.
    """

    def __init__(self, session=None):
        self.session = session
        self.plugin = None
        self.authnet_configuration = None

    @classmethod
    def for_plugin(cls, plugin, session=None) -> 'SubscriptionGatewayProxy':
        proxy = cls(session=session)
        proxy.bind(plugin)
        return proxy

    def bind(self, plugin):
        """
        Set the proxied plugin.

        Raises:
            ProxyAlreadyBound: If a plugin was already set
            TypeError: If the plugin is not an Authorize.Net gateway
        """
        if self.plugin is not None:
            raise ProxyAlreadyBound('Proxied plugin already set.')
        if not isinstance(plugin, AuthorizeNetGateway):
            raise TypeError(f"Expected an Authorize.Net gateway plugin, got {type(plugin).__name__}")

        self.authnet_configuration = plugin.get_authnet_configuration()
        self.plugin = plugin

    def create_subscription(self, subscription: Subscription) -> None:
        """
        Create the subscription at Authorize.Net.

        Raises:
            AuthNetException: If the request fails or is rejected
        """
        if self.plugin is None:
            raise RuntimeError('No proxied plugin set.')

        request = ARBCreateSubscriptionRequest(
            self.authnet_configuration,
            self.session or self.plugin.http_session,
            subscription
        )
        data = request.execute()

        logger.info(
            "Authorize.Net subscription created",
            extra={
                'gateway': self.plugin.gateway_id,
                'subscription_id': data.get('subscriptionId'),
            }
        )
