from typing import Any

from analytics_hub.providers.base import Provider


class KISSmetricsAdapter(Provider):
    key = "apiKey"
    defaults = {"apiKey": None}

    def initialize(self, options: dict[str, Any]) -> None:
        self._kmq = self.page.queue("_kmq")
        self.page.load_script("//i.kissmetrics.com/i.js")
        self.page.load_script(f"//doug1izaerwt3.cloudfront.net/{options['apiKey']}.1.js")

    def identify(self, user_id: str | None, traits: dict[str, Any] | None) -> None:
        if user_id:
            self._kmq.push(["identify", user_id])
        if traits:
            self._kmq.push(["set", traits])

    def track(self, event: str, properties: dict[str, Any] | None) -> None:
        self._kmq.push(["record", event, properties])
