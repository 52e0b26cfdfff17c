from typing import Any

import structlog

from analytics_hub.core.config import settings
from analytics_hub.core.utils import parse_url
from analytics_hub.models.types import ScriptOptions, ScriptTag

logger = structlog.get_logger()


class CommandQueue(list):
    """A provider's global command queue (``_kmq``, ``_gaq``, ...).

    Vendor libraries drain these once their script loads; until then commands
    simply accumulate in order.
    """

    def push(self, *commands: Any) -> None:
        self.extend(commands)

    def call(self, method: str, *args: Any) -> None:
        self.append([method, *args])


class Page:
    """The host document that provider bootstraps write into."""

    def __init__(self, url: str | None = None):
        self.location = parse_url(url or settings.page_url)
        self.globals: dict[str, Any] = {}
        self.scripts: list[ScriptTag] = []
        self.history: list[str] = []
        self.canonical_url: str | None = None

    def queue(self, name: str) -> CommandQueue:
        """Return the global command queue ``name``, creating it if needed."""
        existing = self.globals.get(name)
        if not isinstance(existing, CommandQueue):
            existing = CommandQueue(existing or [])
            self.globals[name] = existing
        return existing

    def load_script(self, options: str | ScriptOptions) -> ScriptTag:
        """Inject an async script tag ahead of the existing ones."""
        if isinstance(options, str):
            options = ScriptOptions(fragment=options)

        protocol = "https:" if self.location.protocol == "https:" else "http:"
        override = options.https if protocol == "https:" else options.http
        src = override or f"{protocol}{options.fragment}"

        tag = ScriptTag(src=src, id=options.id, attributes=dict(options.attributes))
        self.scripts.insert(0, tag)
        logger.debug("Script injected", src=src)
        return tag

    def navigate(self, url: str) -> None:
        self.location = parse_url(url, self.location)
        self.history.append(self.location.href)
        logger.debug("Navigated", href=self.location.href)
