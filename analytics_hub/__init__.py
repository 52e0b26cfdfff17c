from analytics_hub.core.dispatcher import Analytics
from analytics_hub.core.errors import AnalyticsError, ConfigurationError, UnknownProviderError
from analytics_hub.core.registry import ProviderDescriptor, Registry
from analytics_hub.page.document import Page
from analytics_hub.providers import default_registry, register_builtin_providers
from analytics_hub.providers.base import Provider

__all__ = [
    "Analytics",
    "AnalyticsError",
    "ConfigurationError",
    "Page",
    "Provider",
    "ProviderDescriptor",
    "Registry",
    "UnknownProviderError",
    "default_registry",
    "register_builtin_providers",
]
