from numbers import Number
from typing import Any

from analytics_hub.models.types import ScriptOptions
from analytics_hub.providers.base import Provider


class GoogleAnalyticsAdapter(Provider):
    key = "trackingId"
    defaults = {
        "anonymizeIp": False,
        "enhancedLinkAttribution": False,
        "siteSpeedSampleRate": None,
        "domain": None,
        "trackingId": None,
    }

    def initialize(self, options: dict[str, Any]) -> None:
        self._gaq = self.page.queue("_gaq")
        self._gaq.push(["_setAccount", options["trackingId"]])

        if options["domain"]:
            self._gaq.push(["_setDomainName", options["domain"]])
        if options["enhancedLinkAttribution"]:
            prefix = "https://www." if self.page.location.protocol == "https:" else "http://www."
            plugin_url = f"{prefix}google-analytics.com/plugins/ga/inpage_linkid.js"
            self._gaq.push(["_require", "inpage_linkid", plugin_url])
        if _is_number(options["siteSpeedSampleRate"]):
            self._gaq.push(["_setSiteSpeedSampleRate", options["siteSpeedSampleRate"]])
        if options["anonymizeIp"]:
            self._gaq.push(["_gat._anonymizeIp"])

        self._gaq.push(["_trackPageview", self.page.canonical_url])

        self.page.load_script(
            ScriptOptions(
                http="http://www.google-analytics.com/ga.js",
                https="https://ssl.google-analytics.com/ga.js",
            )
        )

    def track(self, event: str, properties: dict[str, Any] | None) -> None:
        properties = properties or {}
        value = properties.get("value")
        self._gaq.push([
            "_trackEvent",
            properties.get("category") or "All",
            event,
            properties.get("label"),
            value if _is_number(value) else None,
            properties.get("noninteraction"),
        ])

    def pageview(self, url: str | None) -> None:
        self._gaq.push(["_trackPageview", url])


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)
