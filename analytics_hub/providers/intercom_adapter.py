from typing import Any

from analytics_hub.core.utils import get_seconds, is_email
from analytics_hub.models.types import ScriptOptions
from analytics_hub.providers.base import Provider

LIBRARY_URL = "https://api.intercom.io/api/js/library.js"


class IntercomAdapter(Provider):
    """Intercom boots from ``intercomSettings`` when its library loads, so the
    library is only requested once a user is identified."""

    key = "appId"
    defaults = {"appId": None, "activator": None, "userHash": None}

    def identify(self, user_id: str | None, traits: dict[str, Any] | None) -> None:
        if not user_id:
            return

        intercom_settings: dict[str, Any] = {
            "app_id": self.options["appId"],
            "user_id": user_id,
            "user_hash": self.options["userHash"],
            "custom_data": traits or {},
        }

        if traits:
            intercom_settings["email"] = traits.get("email")
            intercom_settings["name"] = traits.get("name")
            if traits.get("created") is not None:
                intercom_settings["created_at"] = get_seconds(traits["created"])

        if is_email(user_id) and traits is not None and not traits.get("email"):
            intercom_settings["email"] = user_id

        if self.options["activator"]:
            intercom_settings["widget"] = {"activator": self.options["activator"]}

        self.page.globals["intercomSettings"] = intercom_settings
        self.page.load_script(ScriptOptions(http=LIBRARY_URL, https=LIBRARY_URL))
