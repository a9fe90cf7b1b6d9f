"""
Membership provider plugins.

A provider decides how a membership is paid for. Membership types select
one by id and store its configuration.
"""

from .base import MembershipProviderBase
from .authnet import AuthnetMembershipProvider
from .registry import PROVIDER_REGISTRY, get_provider, register_provider, list_available_providers

__all__ = [
    'MembershipProviderBase',
    'AuthnetMembershipProvider',
    'PROVIDER_REGISTRY',
    'get_provider',
    'register_provider',
    'list_available_providers',
]
