class AnalyticsError(Exception):
    """Base class for errors raised by analytics_hub."""


class UnknownProviderError(AnalyticsError, ValueError):
    def __init__(self, name: str):
        super().__init__(f'Could not find a provider named "{name}"')
        self.name = name


class ConfigurationError(AnalyticsError, ValueError):
    """Provider options could not be resolved."""
