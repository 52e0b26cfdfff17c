from typing import Any

from analytics_hub.providers.base import Provider


class KlaviyoAdapter(Provider):
    key = "apiKey"
    defaults = {"apiKey": None}

    def initialize(self, options: dict[str, Any]) -> None:
        self._learnq = self.page.queue("_learnq")
        self._learnq.push(["account", options["apiKey"]])
        self.page.load_script("//a.klaviyo.com/media/js/learnmarklet.js")

    def identify(self, user_id: str | None, traits: dict[str, Any] | None) -> None:
        traits = traits if traits is not None else {}
        if user_id:
            traits["$id"] = user_id
        self._learnq.push(["identify", traits])

    def track(self, event: str, properties: dict[str, Any] | None) -> None:
        self._learnq.push(["track", event, properties])
