from __future__ import annotations

from dataclasses import dataclass

from .elements import Element, Marker, RoundEnvironment
from .errors import ValidationError

_MEMBER_MARKERS = (Marker.VIEW_ID, Marker.ON_CLICK, Marker.ON_LONG_CLICK)


@dataclass(frozen=True, slots=True)
class UnboundElement:
    element: Element
    marker: Marker

    def describe(self) -> str:
        return (
            f"{self.element.qualified_name}: @{self.marker.value} on class "
            f"without @{Marker.CONTENT_VIEW.value}"
        )


def find_unbound_elements(round_env: RoundEnvironment) -> list[UnboundElement]:
    """Return member markers whose enclosing class carries no @BindContentView."""
    unbound: list[UnboundElement] = []
    for marker in _MEMBER_MARKERS:
        for element in round_env.elements_annotated_with(marker):
            if not element.enclosing.has_marker(Marker.CONTENT_VIEW):
                unbound.append(UnboundElement(element=element, marker=marker))
    return unbound


def validate_bindings(round_env: RoundEnvironment) -> None:
    unbound = find_unbound_elements(round_env)
    if unbound:
        raise ValidationError(
            "Markers outside bound classes:\n" + "\n".join(u.describe() for u in unbound)
        )
