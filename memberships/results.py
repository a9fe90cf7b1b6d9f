from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BillingOutcome(str, Enum):
    SUBSCRIBED = 'subscribed'
    CHARGE_FAILED = 'charge_failed'
    SUBSCRIPTION_FAILED = 'subscription_failed'


@dataclass
class MembershipBillingResult:
    """
    Outcome of billing a new membership.

    Attributes:
        outcome: Which terminal state the billing reached
        payment: The initial payment, when the charge succeeded
        error: The exception that ended billing, if any
    """
    outcome: BillingOutcome
    payment: Optional[object] = None
    error: Optional[Exception] = None

    @property
    def success(self) -> bool:
        return self.outcome == BillingOutcome.SUBSCRIBED
