from collections.abc import Callable
from dataclasses import dataclass, field

from analytics_hub.models.types import DomEvent

Listener = Callable[[DomEvent], None]


@dataclass(eq=False)
class Element:
    listeners: dict[str, list[Listener]] = field(default_factory=dict, init=False, repr=False)

    def bind(self, event_type: str, listener: Listener) -> None:
        self.listeners.setdefault(event_type, []).append(listener)

    def dispatch(self, event: DomEvent) -> DomEvent:
        """Run the listeners bound for ``event.type`` and return the event."""
        for listener in list(self.listeners.get(event.type, [])):
            listener(event)
        return event


@dataclass(eq=False)
class Link(Element):
    href: str | None = None
    target: str | None = None

    def click(self, **modifiers) -> DomEvent:
        return self.dispatch(DomEvent(type="click", **modifiers))


@dataclass(eq=False)
class Form(Element):
    action: str | None = None
    submissions: int = 0

    def submit(self) -> None:
        # Programmatic submission does not fire the submit listeners.
        self.submissions += 1

    def request_submit(self) -> DomEvent:
        event = self.dispatch(DomEvent(type="submit"))
        if not event.default_prevented:
            self.submit()
        return event
