import threading
from collections.abc import Callable, Mapping
from typing import Any

import sentry_sdk
import structlog
from apscheduler.schedulers.background import BackgroundScheduler

from analytics_hub.core.config import settings
from analytics_hub.core.registry import Registry
from analytics_hub.core.scheduling import create_scheduler, schedule_once
from analytics_hub.core.utils import clone, get_url_parameter
from analytics_hub.models.types import ProviderConfig, Traits
from analytics_hub.page import autotrack
from analytics_hub.page.document import Page
from analytics_hub.providers.interface import CAPABILITIES

logger = structlog.get_logger()

Callback = Callable[[], Any]


class Analytics:
    """Broadcasts identify/track/pageview calls to every enabled provider.

    Nothing is dispatched until ``initialize`` has run; earlier calls are
    dropped silently so the library can be loaded before the provider list
    is known.

    Deferred callbacks run on the scheduler's worker thread while holding
    the same lock that guards provider and identity changes.
    """

    def __init__(
        self,
        registry: Registry,
        page: Page | None = None,
        scheduler: BackgroundScheduler | None = None,
        timeout_ms: int | None = None,
    ):
        self.registry = registry
        self.page = page or Page()
        self.timeout_ms = settings.callback_timeout_ms if timeout_ms is None else timeout_ms
        self.providers: list[Any] = []
        self.user_id: str | None = None
        self.initialized = False
        self._scheduler = scheduler
        self._owns_scheduler = scheduler is None
        self._lock = threading.RLock()

    # Initialize
    # ----------

    def initialize(self, providers: Mapping[str, ProviderConfig]) -> None:
        """Enable ``providers``, a mapping of provider name to an API key or
        a mapping of options. Replaces any previously enabled providers."""
        with self._lock:
            self.providers = []
            self.user_id = None

            for name, config in providers.items():
                descriptor = self.registry.get(name)
                self.providers.append(descriptor.build(config, self.page))

            self.initialized = True
            search = self.page.location.search
        logger.info(
            "Analytics initialized",
            providers=[getattr(p, "name", repr(p)) for p in self.providers],
        )

        user_id = get_url_parameter(search, "ajs_uid")
        if user_id:
            self.identify(user_id)
        event = get_url_parameter(search, "ajs_event")
        if event:
            self.track(event)

    # Dispatch
    # --------

    def identify(
        self,
        user_id: str | Traits | None = None,
        traits: Traits | Callback | None = None,
        callback: Callback | None = None,
    ) -> None:
        """Tie the current visitor to ``user_id`` and record ``traits``.

        ``identify(traits)`` updates traits without changing the cached id,
        and a callable in the traits slot is taken as the callback.
        """
        if not self.initialized:
            return

        if callable(traits):
            callback, traits = traits, None

        if isinstance(user_id, Mapping):
            traits, user_id = user_id, None

        with self._lock:
            if user_id is not None:
                self.user_id = user_id
            else:
                user_id = self.user_id

        self._broadcast("identify", lambda: (user_id, clone(traits)))
        self._after_timeout(callback)

    def track(
        self,
        event: str,
        properties: Traits | Callback | None = None,
        callback: Callback | None = None,
    ) -> None:
        if not self.initialized:
            return

        if callable(properties):
            callback, properties = properties, None

        self._broadcast("track", lambda: (event, clone(properties)))
        self._after_timeout(callback)

    def pageview(self, url: str | None = None) -> None:
        """Record a pageview for single-page apps where the URL changes
        without a real page load."""
        if not self.initialized:
            return

        self._broadcast("pageview", lambda: (url,))

    # Auto-tracking
    # -------------

    def track_link(self, links: Any, event: str, properties: Any = None) -> None:
        autotrack.track_link(self, links, event, properties)

    def track_form(self, forms: Any, event: str, properties: Any = None) -> None:
        autotrack.track_form(self, forms, event, properties)

    track_click = track_link
    track_submit = track_form

    # Timing
    # ------

    def defer(self, callback: Callback) -> None:
        """Run ``callback`` once the timeout has elapsed.

        The delay only gives provider requests a chance to go out; it says
        nothing about whether they finished.
        """
        if self._scheduler is None:
            self._scheduler = create_scheduler()

        def locked_callback() -> None:
            with self._lock:
                callback()

        schedule_once(self._scheduler, locked_callback, self.timeout_ms)

    def shutdown(self, wait: bool = True) -> None:
        """Stop the scheduler this dispatcher created for deferred callbacks.

        An injected scheduler belongs to the caller and is left running.
        """
        if self._owns_scheduler and self._scheduler is not None and self._scheduler.running:
            self._scheduler.shutdown(wait=wait)
            logger.info("Analytics scheduler stopped")

    def _after_timeout(self, callback: Callback | None) -> None:
        if callback is not None and callable(callback):
            self.defer(callback)

    def _broadcast(self, method: str, make_args: Callable[[], tuple[Any, ...]]) -> None:
        capability = CAPABILITIES[method]
        with self._lock:
            snapshot = list(self.providers)
        for provider in snapshot:
            if not isinstance(provider, capability):
                continue
            try:
                getattr(provider, method)(*make_args())
            except Exception as e:
                logger.error(
                    "Provider call failed",
                    provider=getattr(provider, "name", repr(provider)),
                    method=method,
                    error=str(e),
                )
                sentry_sdk.capture_exception(e)
