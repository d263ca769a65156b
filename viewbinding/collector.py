"""Marker collection: fold the four marker kinds into one BindingRecord per owner class."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .elements import Marker, RoundEnvironment, TypeElement
from .ir import BindingRecord, ClickHandlerBinding, ViewFieldBinding

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _RecordBuilder:
    owner: TypeElement
    layout_id: int
    view_fields: list[ViewFieldBinding] = field(default_factory=list)
    click_handlers: list[ClickHandlerBinding] = field(default_factory=list)
    long_click_handlers: list[ClickHandlerBinding] = field(default_factory=list)

    def build(self) -> BindingRecord:
        return BindingRecord(
            owner=self.owner,
            layout_id=self.layout_id,
            view_fields=tuple(self.view_fields),
            click_handlers=tuple(self.click_handlers),
            long_click_handlers=tuple(self.long_click_handlers),
        )


def collect_bindings(round_env: RoundEnvironment) -> list[BindingRecord]:
    """Build one BindingRecord per class carrying @BindContentView.

    Records follow the discovery order of their owner classes; entries inside
    a record follow the discovery order of their markers. Fields and methods
    whose immediate enclosing class is not bound are dropped.
    """
    builders: dict[str, _RecordBuilder] = {}
    for element in round_env.elements_annotated_with(Marker.CONTENT_VIEW):
        if not isinstance(element, TypeElement):
            continue
        qname = element.qualified_name
        if qname in builders:
            continue
        builders[qname] = _RecordBuilder(owner=element, layout_id=element.marker_value(Marker.CONTENT_VIEW))

    for element in round_env.elements_annotated_with(Marker.VIEW_ID):
        builder = _owner_builder(builders, element, Marker.VIEW_ID)
        if builder is not None:
            builder.view_fields.append(ViewFieldBinding(element=element, view_id=element.marker_value(Marker.VIEW_ID)))

    for element in round_env.elements_annotated_with(Marker.ON_CLICK):
        builder = _owner_builder(builders, element, Marker.ON_CLICK)
        if builder is not None:
            builder.click_handlers.append(
                ClickHandlerBinding(element=element, view_ids=tuple(element.marker_value(Marker.ON_CLICK)))
            )

    for element in round_env.elements_annotated_with(Marker.ON_LONG_CLICK):
        builder = _owner_builder(builders, element, Marker.ON_LONG_CLICK)
        if builder is not None:
            builder.long_click_handlers.append(
                ClickHandlerBinding(element=element, view_ids=tuple(element.marker_value(Marker.ON_LONG_CLICK)))
            )

    records = [builder.build() for builder in builders.values()]
    logger.debug("Collected %d binding record(s)", len(records))
    return records


def _owner_builder(builders: dict[str, _RecordBuilder], element, marker: Marker) -> _RecordBuilder | None:
    owner = element.enclosing
    builder = builders.get(owner.qualified_name)
    if builder is None or builder.owner is not owner:
        logger.debug(
            "Dropping @%s on %s: enclosing class %s has no @%s",
            marker.value,
            element.qualified_name,
            owner.qualified_name,
            Marker.CONTENT_VIEW.value,
        )
        return None
    return builder
