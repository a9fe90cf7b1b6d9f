"""
Value objects for ARB subscription requests.

Each type renders itself with ``to_dict()`` using the camelCase element names
and element order the API schema expects.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from payments.price import quantize_amount

# ARB treats 9999 occurrences as a subscription without an end date.
ONGOING_OCCURRENCES = 9999


@dataclass(frozen=True)
class PaymentSchedule:
    interval_length: int
    interval_unit: str
    start_date: str
    total_occurrences: int = ONGOING_OCCURRENCES

    def to_dict(self) -> dict:
        return {
            'interval': {
                'length': str(self.interval_length),
                'unit': self.interval_unit,
            },
            'startDate': self.start_date,
            'totalOccurrences': str(self.total_occurrences),
        }


@dataclass(frozen=True)
class CustomerProfileId:
    customer_profile_id: str
    customer_payment_profile_id: str

    def to_dict(self) -> dict:
        return {
            'customerProfileId': self.customer_profile_id,
            'customerPaymentProfileId': self.customer_payment_profile_id,
        }


@dataclass
class Subscription:
    """
    A recurring billing subscription to be created at Authorize.Net.

    Attributes:
        name: Subscription name shown in the merchant interface
        amount: Display-formatted amount (e.g. '$19.99')
        amount_number: Amount charged every interval
        payment_schedule: Interval and start date
        profile: Customer and payment profile to charge
    """
    name: str
    amount: str
    amount_number: Decimal
    payment_schedule: Optional[PaymentSchedule] = None
    profile: Optional[CustomerProfileId] = None

    def add_payment_schedule(self, payment_schedule: PaymentSchedule):
        self.payment_schedule = payment_schedule

    def add_profile(self, profile: CustomerProfileId):
        self.profile = profile

    def to_dict(self) -> dict:
        data = {'name': self.name[:50]}
        if self.payment_schedule is not None:
            data['paymentSchedule'] = self.payment_schedule.to_dict()
        # The API takes a plain decimal; the display string stays local.
        data['amount'] = str(quantize_amount(self.amount_number))
        if self.profile is not None:
            data['profile'] = self.profile.to_dict()
        return data
