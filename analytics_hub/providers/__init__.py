from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from analytics_hub.core.registry import Registry


def register_builtin_providers(registry: "Registry") -> "Registry":
    from analytics_hub.providers.customerio_adapter import CustomerIOAdapter
    from analytics_hub.providers.google_analytics_adapter import GoogleAnalyticsAdapter
    from analytics_hub.providers.intercom_adapter import IntercomAdapter
    from analytics_hub.providers.kissmetrics_adapter import KISSmetricsAdapter
    from analytics_hub.providers.klaviyo_adapter import KlaviyoAdapter
    from analytics_hub.providers.mixpanel_adapter import MixpanelAdapter
    from analytics_hub.providers.posthog_adapter import PostHogAnalyticsAdapter

    registry.add_provider("Customer.io", CustomerIOAdapter)
    registry.add_provider("Google Analytics", GoogleAnalyticsAdapter)
    registry.add_provider("Intercom", IntercomAdapter)
    registry.add_provider("KISSmetrics", KISSmetricsAdapter)
    registry.add_provider("Klaviyo", KlaviyoAdapter)
    registry.add_provider("Mixpanel", MixpanelAdapter)
    registry.add_provider("PostHog", PostHogAnalyticsAdapter)
    return registry


def default_registry() -> "Registry":
    """A fresh registry with every bundled adapter installed."""
    from analytics_hub.core.registry import Registry

    return register_builtin_providers(Registry())
