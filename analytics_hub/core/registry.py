from collections.abc import Callable, Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from analytics_hub.core.errors import UnknownProviderError
from analytics_hub.core.options import resolve_options
from analytics_hub.page.document import Page
from analytics_hub.providers.base import HookedProvider

logger = structlog.get_logger()

ProviderFactory = Callable[[str, dict[str, Any], Page], Any]


class ProviderDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    factory: ProviderFactory
    key: str | None = None
    defaults: dict[str, Any] = Field(default_factory=dict)

    def build(self, config: Any, page: Page) -> Any:
        """Resolve ``config`` against this provider's defaults and construct it."""
        options = resolve_options(self.name, config, key=self.key, defaults=self.defaults)
        return self.factory(self.name, options, page)


class Registry:
    """Provider descriptors that ``Analytics.initialize`` can enable by name."""

    def __init__(self) -> None:
        self._descriptors: dict[str, ProviderDescriptor] = {}

    def add_provider(self, name: str, definition: Any) -> ProviderDescriptor:
        """Register ``definition`` under ``name``, replacing any previous one.

        ``definition`` is either a provider class (anything callable as
        ``cls(name, options, page)``, optionally carrying ``key`` and
        ``defaults``) or a mapping of hooks with optional ``options`` and
        ``key`` entries.
        """
        if isinstance(definition, Mapping):
            hooks = dict(definition)

            def factory(provider_name: str, options: dict[str, Any], page: Page) -> Any:
                return HookedProvider(provider_name, options, page, hooks=hooks)

            descriptor = ProviderDescriptor(
                name=name,
                factory=factory,
                key=hooks.get("key"),
                defaults=dict(hooks.get("options") or {}),
            )
        else:
            descriptor = ProviderDescriptor(
                name=name,
                factory=definition,
                key=getattr(definition, "key", None),
                defaults=dict(getattr(definition, "defaults", None) or {}),
            )

        if name in self._descriptors:
            logger.debug("Provider re-registered", provider=name)
        self._descriptors[name] = descriptor
        return descriptor

    register = add_provider

    def get(self, name: str) -> ProviderDescriptor:
        try:
            return self._descriptors[name]
        except KeyError:
            raise UnknownProviderError(name) from None

    def names(self) -> list[str]:
        return list(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)
