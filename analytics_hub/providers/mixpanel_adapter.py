from typing import Any

from analytics_hub.core.utils import alias, is_email
from analytics_hub.providers.base import Provider

# Mixpanel reserves `$`-prefixed names for the traits it understands.
TRAIT_ALIASES = {
    "created": "$created",
    "email": "$email",
    "firstName": "$first_name",
    "lastName": "$last_name",
    "lastSeen": "$last_seen",
    "name": "$name",
    "username": "$username",
}


class MixpanelAdapter(Provider):
    key = "token"
    defaults = {
        "alias": True,
        "nameTag": True,
        "people": False,
        "token": None,
    }

    def initialize(self, options: dict[str, Any]) -> None:
        self._mixpanel = self.page.queue("mixpanel")
        self.page.load_script("//cdn.mxpnl.com/libs/mixpanel-2.2.min.js")
        self._mixpanel.call("init", options["token"], dict(options))

    def identify(self, user_id: str | None, traits: dict[str, Any] | None) -> None:
        if user_id and is_email(user_id) and traits is not None and not traits.get("email"):
            traits["email"] = user_id

        if traits:
            alias(traits, TRAIT_ALIASES)

        if user_id:
            self._mixpanel.call("identify", user_id)
            if self.options["nameTag"]:
                self._mixpanel.call("name_tag", (traits or {}).get("$email") or user_id)
            if self.options["alias"]:
                self._mixpanel.call("alias", user_id)

        if traits:
            self._mixpanel.call("register", traits)
            if self.options["people"]:
                self._mixpanel.call("people.set", traits)

    def track(self, event: str, properties: dict[str, Any] | None) -> None:
        self._mixpanel.call("track", event, properties)

    def pageview(self, url: str | None) -> None:
        self._mixpanel.call("track_pageview", url)
