from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsIdentify(Protocol):
    def identify(self, user_id: str | None, traits: dict[str, Any] | None) -> None: ...


@runtime_checkable
class SupportsTrack(Protocol):
    def track(self, event: str, properties: dict[str, Any] | None) -> None: ...


@runtime_checkable
class SupportsPageview(Protocol):
    def pageview(self, url: str | None) -> None: ...


CAPABILITIES: dict[str, type] = {
    "identify": SupportsIdentify,
    "track": SupportsTrack,
    "pageview": SupportsPageview,
}
