"""
Minimal client for the Authorize.Net JSON API.

Only the requests used by the membership billing flow are implemented:
charging a stored customer payment profile, voiding a transaction, and
creating an ARB (Automated Recurring Billing) subscription.
"""

from .configuration import Configuration
from .exceptions import AuthNetException
from .types import Subscription, PaymentSchedule, CustomerProfileId
from .client import ApiRequest, CreateTransactionRequest, ARBCreateSubscriptionRequest

__all__ = [
    'Configuration',
    'AuthNetException',
    'Subscription',
    'PaymentSchedule',
    'CustomerProfileId',
    'ApiRequest',
    'CreateTransactionRequest',
    'ARBCreateSubscriptionRequest',
]
