"""Pure helpers shared by the dispatcher and the provider adapters."""

import math
import re
from collections.abc import Mapping, MutableMapping
from datetime import datetime
from typing import Any
from urllib.parse import unquote, urljoin, urlsplit

from analytics_hub.models.types import DomEvent, PageLocation

_EMAIL_RE = re.compile(r".+@.+\..+")


def clone(obj: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Copy the top level of ``obj`` so providers can rename or delete keys
    without touching each other's view. Nested values stay shared."""
    if obj is None:
        return None
    return dict(obj)


def alias(obj: MutableMapping[str, Any], aliases: Mapping[str, str]) -> None:
    """Rename keys of ``obj`` in place. Keys missing from ``obj`` are ignored."""
    for key, new_key in aliases.items():
        if key in obj:
            obj[new_key] = obj.pop(key)


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return _EMAIL_RE.search(value) is not None


def get_seconds(timestamp: int | float | datetime | str) -> int:
    """Convert a millisecond timestamp (or a datetime / ISO-8601 string) to Unix seconds."""
    if isinstance(timestamp, datetime):
        return math.floor(timestamp.timestamp())
    if isinstance(timestamp, str):
        return math.floor(datetime.fromisoformat(timestamp).timestamp())
    return math.floor(timestamp / 1000)


def get_url_parameter(query_string: str, key: str) -> str | None:
    """Return the decoded value of ``key`` in a query string, or None.

    Pairs that do not split into exactly one name and one value are skipped.
    """
    for pair in query_string.replace("?", "", 1).split("&"):
        parts = pair.split("=")
        if len(parts) == 2 and parts[0] == key:
            return unquote(parts[1])
    return None


def parse_url(url: str, base: PageLocation | None = None) -> PageLocation:
    """Split ``url`` into its location parts, borrowing missing ones from ``base``."""
    if base is not None:
        url = urljoin(base.href, url)
    parts = urlsplit(url)
    protocol = f"{parts.scheme}:" if parts.scheme else (base.protocol if base else "http:")
    hostname = parts.hostname or (base.hostname if base else "")
    port = str(parts.port) if parts.port else (base.port if base and not parts.hostname else "")
    return PageLocation(
        href=url,
        host=f"{hostname}:{port}" if port else hostname,
        port=port,
        hash=f"#{parts.fragment}" if parts.fragment else "",
        hostname=hostname,
        pathname=parts.path or "/",
        protocol=protocol,
        search=f"?{parts.query}" if parts.query else "",
        query=parts.query,
    )


def is_meta(event: DomEvent) -> bool:
    """Whether a click would open a new tab or window instead of navigating.

    Covers modifier keys and the middle mouse button, reported either as
    ``which == 2`` or as the legacy ``button`` bitmask where 4 is middle.
    """
    if event.meta_key or event.alt_key or event.ctrl_key or event.shift_key:
        return True
    if not event.which and event.button is not None:
        return bool(event.button & 4) and not event.button & 1 and not event.button & 2
    return event.which == 2
