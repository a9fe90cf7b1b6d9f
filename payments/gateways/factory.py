"""
Payment gateway plugin registry.

Maps plugin ids stored on ``PaymentGateway`` records to plugin classes and
resolves stored gateways to ready-to-use plugin objects.
"""

from django.core.exceptions import ImproperlyConfigured

from .base import BasePaymentGateway, PaymentGatewayException
from .authorizenet import AuthorizeNetGateway


GATEWAY_REGISTRY = {
    'authorizenet_acceptjs': AuthorizeNetGateway,
}


def get_gateway_class(plugin_id: str) -> type:
    """
    Get the plugin class for a plugin id.

    Raises:
        PaymentGatewayException: If the plugin id is not registered
    """
    plugin_id = plugin_id.lower().strip()

    if plugin_id not in GATEWAY_REGISTRY:
        supported = ', '.join(GATEWAY_REGISTRY.keys())
        raise PaymentGatewayException(
            message=f"Unsupported payment gateway: {plugin_id}. Supported gateways: {supported}",
            error_code='unsupported_gateway'
        )

    return GATEWAY_REGISTRY[plugin_id]


def load_gateway(gateway_id: str) -> BasePaymentGateway:
    """
    Load a stored payment gateway and return its plugin.

    Args:
        gateway_id: Id of a PaymentGateway record

    Raises:
        ImproperlyConfigured: If no gateway id is given
        PaymentGateway.DoesNotExist: If the record does not exist

    Example:
        >>> plugin = load_gateway('authnet_sandbox')
        >>> plugin.get_mode()
        'test'
    """
    from payments.models import PaymentGateway

    if not gateway_id:
        raise ImproperlyConfigured("No payment gateway is configured.")

    return PaymentGateway.objects.get(id=gateway_id).get_plugin()


def register_gateway(name: str, gateway_class: type):
    """
    Register a new gateway plugin.

    Args:
        name: Plugin id (e.g., 'custom_gateway')
        gateway_class: Class that extends BasePaymentGateway
    """
    if not (isinstance(gateway_class, type) and issubclass(gateway_class, BasePaymentGateway)):
        raise PaymentGatewayException(
            message="Gateway class must extend BasePaymentGateway",
            error_code='invalid_gateway_class'
        )

    GATEWAY_REGISTRY[name.lower()] = gateway_class


def list_available_gateways():
    """
    List all registered gateway plugin ids.
    """
    return list(GATEWAY_REGISTRY.keys())
