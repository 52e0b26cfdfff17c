import logging
from typing import Any

import posthog as posthog_module

from analytics_hub.page.document import Page
from analytics_hub.providers.base import Provider

logger = logging.getLogger(__name__)


def _on_error(error: Exception, items: list) -> None:
    logger.warning("PostHog flush error: %s (%d items dropped)", error, len(items))


class PostHogAnalyticsAdapter(Provider):
    key = "apiKey"
    defaults = {
        "apiKey": None,
        "host": "https://app.posthog.com",
        "distinctId": "anonymous",
    }

    def __init__(self, name: str, options: dict[str, Any], page: Page):
        self._client = posthog_module.Client(
            project_api_key=options["apiKey"],
            host=options["host"],
            debug=False,
            on_error=_on_error,
        )
        self._distinct_id = options["distinctId"]
        super().__init__(name, options, page)

    def identify(self, user_id: str | None, traits: dict[str, Any] | None) -> None:
        if user_id:
            self._distinct_id = user_id
        try:
            self._client.identify(
                distinct_id=self._distinct_id,
                properties=traits,
            )
        except Exception:
            logger.warning("PostHog identify failed", exc_info=True)

    def track(self, event: str, properties: dict[str, Any] | None) -> None:
        try:
            self._client.capture(
                distinct_id=self._distinct_id,
                event=event,
                properties=properties,
            )
        except Exception:
            logger.warning("PostHog track failed for event: %s", event, exc_info=True)

    def pageview(self, url: str | None) -> None:
        current_url = url or self.page.location.href
        try:
            self._client.capture(
                distinct_id=self._distinct_id,
                event="$pageview",
                properties={"$current_url": current_url},
            )
        except Exception:
            logger.warning("PostHog pageview failed for: %s", current_url, exc_info=True)
