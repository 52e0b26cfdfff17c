"""Track outbound link clicks and form submissions that would otherwise leave
the page before the track calls go out."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from analytics_hub.core.utils import is_meta
from analytics_hub.models.types import DomEvent
from analytics_hub.page.elements import Element, Form, Link

if TYPE_CHECKING:
    from analytics_hub.core.dispatcher import Analytics


def _as_list(elements: Any) -> list[Any]:
    if not elements:
        return []
    if isinstance(elements, Element):
        return [elements]
    return list(elements) if isinstance(elements, Iterable) else [elements]


def _resolve_properties(properties: Any, element: Element) -> Any:
    return properties(element) if callable(properties) else properties


def track_link(
    analytics: "Analytics", links: Link | Iterable[Link] | None, event: str, properties: Any = None
) -> None:
    """Track ``event`` whenever one of ``links`` is clicked.

    ``properties`` may be a callable taking the clicked link. A plain
    left-click on a same-window link has its navigation held back and
    replayed after the timeout.
    """
    for link in _as_list(links):

        def on_click(e: DomEvent, link: Link = link) -> None:
            analytics.track(event, _resolve_properties(properties, link))

            if link.href and link.target != "_blank" and not is_meta(e):
                e.prevent_default()
                href = link.href
                analytics.defer(lambda: analytics.page.navigate(href))

        link.bind("click", on_click)


def track_form(
    analytics: "Analytics", forms: Form | Iterable[Form] | None, event: str, properties: Any = None
) -> None:
    """Track ``event`` whenever one of ``forms`` is submitted, resubmitting
    the form after the timeout."""
    for form in _as_list(forms):

        def on_submit(e: DomEvent, form: Form = form) -> None:
            analytics.track(event, _resolve_properties(properties, form))
            e.prevent_default()
            analytics.defer(form.submit)

        form.bind("submit", on_submit)
