from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from analytics_hub.page.document import Page


class Provider:
    """Base for provider adapters.

    Subclasses declare ``key`` when a bare credential string is enough to
    configure them, ``defaults`` for their remaining options, override
    ``initialize`` with their bootstrap, and define whichever of
    ``identify`` / ``track`` / ``pageview`` their backend supports.
    """

    key: ClassVar[str | None] = None
    defaults: ClassVar[dict[str, Any]] = {}

    def __init__(self, name: str, options: dict[str, Any], page: Page):
        self.name = name
        self.options = options
        self.page = page
        self.initialize(self.options)

    def initialize(self, options: dict[str, Any]) -> None:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


_HOOKS = ("identify", "track", "pageview")


class HookedProvider(Provider):
    """A provider assembled from a plain mapping of hook functions.

    Hooks receive the provider instance first, so they can read
    ``provider.options`` and ``provider.page``. Only the hooks present in the
    mapping become methods, which keeps capability checks accurate.
    """

    def __init__(
        self,
        name: str,
        options: dict[str, Any],
        page: Page,
        hooks: Mapping[str, Callable[..., Any]],
    ):
        for hook in _HOOKS:
            fn = hooks.get(hook)
            if fn is not None:
                setattr(self, hook, _bind(self, fn))
        self._initialize_hook = hooks.get("initialize")
        super().__init__(name, options, page)

    def initialize(self, options: dict[str, Any]) -> None:
        if self._initialize_hook is not None:
            self._initialize_hook(self, options)


def _bind(provider: Provider, fn: Callable[..., Any]) -> Callable[..., Any]:
    def bound(*args: Any) -> Any:
        return fn(provider, *args)

    bound.__name__ = getattr(fn, "__name__", "hook")
    return bound
