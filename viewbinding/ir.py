from __future__ import annotations

from dataclasses import dataclass

from .elements import FieldElement, MethodElement, TypeElement


@dataclass(frozen=True, slots=True)
class ViewFieldBinding:
    """A field looked up by view id and cast to its declared type."""

    element: FieldElement
    view_id: int

    @property
    def name(self) -> str:
        return self.element.simple_name

    @property
    def type_name(self) -> str:
        return self.element.type_name


@dataclass(frozen=True, slots=True)
class ClickHandlerBinding:
    """One handler method bound to one or more view ids (click or long-click)."""

    element: MethodElement
    view_ids: tuple[int, ...]

    @property
    def method_name(self) -> str:
        return self.element.simple_name


@dataclass(frozen=True, slots=True)
class BindingRecord:
    """Everything needed to emit the binding companion of one owner class."""

    owner: TypeElement
    layout_id: int
    view_fields: tuple[ViewFieldBinding, ...] = ()
    click_handlers: tuple[ClickHandlerBinding, ...] = ()
    long_click_handlers: tuple[ClickHandlerBinding, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.view_fields or self.click_handlers or self.long_click_handlers)
