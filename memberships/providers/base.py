from typing import Optional, Dict, Any


class MembershipProviderBase:
    """
    Base class for membership providers.

    Subclasses set ``provider_id`` and ``label`` and may override the
    configuration hooks and ``post_create_membership``.
    """

    provider_id = None
    label = None
    configuration_serializer_class = None

    def __init__(self, configuration: Optional[Dict[str, Any]] = None):
        self.configuration = {**self.default_configuration(), **(configuration or {})}

    def default_configuration(self) -> Dict[str, Any]:
        return {}

    def get_configuration(self) -> Dict[str, Any]:
        return self.configuration

    def get_configuration_serializer(self, data=None):
        """
        Return the serializer used to edit this provider's configuration.

        Without ``data`` the serializer is bound to the current configuration.
        """
        if self.configuration_serializer_class is None:
            return None
        if data is None:
            return self.configuration_serializer_class(instance=self.configuration)
        return self.configuration_serializer_class(data=data)

    def validate_configuration(self, data):
        """Validate submitted configuration; returns the bound serializer"""
        serializer = self.get_configuration_serializer(data=data)
        if serializer is not None:
            serializer.is_valid()
        return serializer

    def submit_configuration(self, serializer):
        """Copy validated values into the configuration"""

    def post_create_membership(self, membership, plugin_values: Optional[Dict[str, Any]] = None):
        """
        Called after a membership is created.

        Args:
            membership: The new Membership
            plugin_values: Provider-specific values collected at purchase time
        """
        return None
