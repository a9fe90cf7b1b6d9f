"""
Payment gateway plugins.

Provides a unified interface for charging stored payment methods and
looking up processor-side customer ids.
"""

from .base import (
    BasePaymentGateway,
    PaymentGatewayException,
    DeclineException,
    HardDeclineException,
)
from .authorizenet import AuthorizeNetGateway
from .factory import load_gateway, get_gateway_class, register_gateway, list_available_gateways

__all__ = [
    'BasePaymentGateway',
    'PaymentGatewayException',
    'DeclineException',
    'HardDeclineException',
    'AuthorizeNetGateway',
    'load_gateway',
    'get_gateway_class',
    'register_gateway',
    'list_available_gateways',
]
