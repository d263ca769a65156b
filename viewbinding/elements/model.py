"""Dataclasses for the resolved element model: packages, classes, fields, methods."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union


class Marker(Enum):
    """The fixed marker vocabulary; values are the host-side annotation names."""

    CONTENT_VIEW = "BindContentView"
    VIEW_ID = "BindViewID"
    ON_CLICK = "BindOnClick"
    ON_LONG_CLICK = "BindOnLongClick"

    @property
    def is_array(self) -> bool:
        return self in (Marker.ON_CLICK, Marker.ON_LONG_CLICK)


MarkerValue = Union[int, tuple[int, ...]]

# Element kind each marker may be attached to.
MARKER_TARGETS: dict[Marker, str] = {
    Marker.CONTENT_VIEW: "class",
    Marker.VIEW_ID: "field",
    Marker.ON_CLICK: "method",
    Marker.ON_LONG_CLICK: "method",
}


@dataclass(slots=True, eq=False)
class PackageElement:
    qualified_name: str

    kind = "package"

    @property
    def is_unnamed(self) -> bool:
        return not self.qualified_name


@dataclass(slots=True, eq=False)
class TypeElement:
    simple_name: str
    enclosing: "PackageElement | TypeElement"
    markers: dict[Marker, MarkerValue] = field(default_factory=dict)

    kind = "class"

    @property
    def qualified_name(self) -> str:
        outer = self.enclosing.qualified_name
        return f"{outer}.{self.simple_name}" if outer else self.simple_name

    def has_marker(self, marker: Marker) -> bool:
        return marker in self.markers

    def marker_value(self, marker: Marker) -> MarkerValue | None:
        return self.markers.get(marker)


@dataclass(slots=True, eq=False)
class FieldElement:
    simple_name: str
    enclosing: TypeElement
    type_name: str
    markers: dict[Marker, MarkerValue] = field(default_factory=dict)

    kind = "field"

    @property
    def qualified_name(self) -> str:
        return f"{self.enclosing.qualified_name}.{self.simple_name}"

    def has_marker(self, marker: Marker) -> bool:
        return marker in self.markers

    def marker_value(self, marker: Marker) -> MarkerValue | None:
        return self.markers.get(marker)


@dataclass(slots=True, eq=False)
class MethodElement:
    simple_name: str
    enclosing: TypeElement
    markers: dict[Marker, MarkerValue] = field(default_factory=dict)

    kind = "method"

    @property
    def qualified_name(self) -> str:
        return f"{self.enclosing.qualified_name}.{self.simple_name}()"

    def has_marker(self, marker: Marker) -> bool:
        return marker in self.markers

    def marker_value(self, marker: Marker) -> MarkerValue | None:
        return self.markers.get(marker)


Element = Union[TypeElement, FieldElement, MethodElement]


@dataclass(slots=True)
class RoundEnvironment:
    """Element universe discovered for one processing round, in discovery order."""

    elements: list[Element]
    packages: list[PackageElement] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)

    def elements_annotated_with(self, marker: Marker) -> list[Element]:
        return [e for e in self.elements if e.has_marker(marker)]

    def types(self) -> list[TypeElement]:
        return [e for e in self.elements if isinstance(e, TypeElement)]
