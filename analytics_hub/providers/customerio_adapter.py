from typing import Any

from analytics_hub.core.utils import get_seconds, is_email
from analytics_hub.models.types import ScriptOptions
from analytics_hub.providers.base import Provider


class CustomerIOAdapter(Provider):
    key = "siteId"
    defaults = {"siteId": None}

    def initialize(self, options: dict[str, Any]) -> None:
        self._cio = self.page.queue("_cio")
        self.page.load_script(
            ScriptOptions(
                http="https://assets.customer.io/assets/track.js",
                https="https://assets.customer.io/assets/track.js",
                id="cio-tracker",
                attributes={"data-site-id": options["siteId"]},
            )
        )

    def identify(self, user_id: str | None, traits: dict[str, Any] | None) -> None:
        # Customer.io keys every profile by id, anonymous traits are useless to it.
        if not user_id:
            return

        traits = traits if traits is not None else {}
        traits["id"] = user_id

        if not traits.get("email") and is_email(user_id):
            traits["email"] = user_id

        if traits.get("created"):
            traits["created_at"] = get_seconds(traits.pop("created"))

        self._cio.call("identify", traits)

    def track(self, event: str, properties: dict[str, Any] | None) -> None:
        self._cio.call("track", event, properties)
