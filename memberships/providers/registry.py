from typing import Optional, Dict, Any

from .base import MembershipProviderBase
from .authnet import AuthnetMembershipProvider


PROVIDER_REGISTRY = {
    AuthnetMembershipProvider.provider_id: AuthnetMembershipProvider,
}


def get_provider(provider_id: str, configuration: Optional[Dict[str, Any]] = None) -> MembershipProviderBase:
    """
    Instantiate a membership provider.

    Raises:
        ValueError: If the provider id is not registered
    """
    try:
        provider_class = PROVIDER_REGISTRY[provider_id]
    except KeyError:
        supported = ', '.join(PROVIDER_REGISTRY.keys())
        raise ValueError(
            f"Unsupported membership provider: {provider_id}. Supported providers: {supported}"
        ) from None

    return provider_class(configuration)


def register_provider(name: str, provider_class: type):
    if not (isinstance(provider_class, type) and issubclass(provider_class, MembershipProviderBase)):
        raise ValueError("Provider class must extend MembershipProviderBase")

    PROVIDER_REGISTRY[name] = provider_class


def list_available_providers():
    return [(name, cls.label) for name, cls in PROVIDER_REGISTRY.items()]
