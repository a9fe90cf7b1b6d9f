"""
Base classes for payment gateway plugins.

A gateway plugin wraps one stored ``PaymentGateway`` record and performs
the remote calls for it. Business logic talks to plugins only through
this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any


class PaymentGatewayException(Exception):
    """
    Raised when a gateway operation fails.

    Carries a machine-readable ``error_code`` and the raw gateway response
    when there is one.
    """
    def __init__(self, message: str, error_code: Optional[str] = None, gateway_response: Optional[Dict] = None):
        self.message = message
        self.error_code = error_code
        self.gateway_response = gateway_response
        super().__init__(self.message)


class DeclineException(PaymentGatewayException):
    """The processor declined the transaction"""


class HardDeclineException(DeclineException):
    """The processor declined the transaction and it should not be retried"""


class BasePaymentGateway(ABC):
    """
    Abstract base class for payment gateway plugins.

    Attributes:
        gateway_id: Id of the stored PaymentGateway record
        configuration: Plugin configuration (credentials)
        mode: 'test' or 'live'
    """

    def __init__(self, gateway_id: str, configuration: Optional[Dict[str, Any]] = None, mode: str = 'test'):
        self.gateway_id = gateway_id
        self.configuration = {**self.default_configuration(), **(configuration or {})}
        self.mode = mode

    def default_configuration(self) -> Dict[str, Any]:
        return {}

    def get_configuration(self) -> Dict[str, Any]:
        return self.configuration

    def get_mode(self) -> str:
        return self.mode

    def get_remote_provider_key(self) -> str:
        """Key under which remote customer ids of this gateway are stored"""
        return f"{self.gateway_id}|{self.mode}"

    @abstractmethod
    def create_payment(self, payment, capture: bool = True):
        """
        Charge a payment.

        On success the payment's remote id and state are updated; the
        payment is not saved.

        Args:
            payment: Unsaved Payment instance
            capture: Capture immediately instead of authorizing only

        Raises:
            PaymentGatewayException: If the charge fails or is declined
        """

    @abstractmethod
    def get_remote_customer_id(self, owner) -> Optional[str]:
        """
        Return the processor-side customer id of a user, or None.
        """

    @abstractmethod
    def void_payment(self, payment):
        """
        Void a previously authorized or captured payment.

        Raises:
            PaymentGatewayException: If the void fails
        """
