from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from viewbinding.elements import (
    Element,
    FieldElement,
    Marker,
    MethodElement,
    PackageElement,
    RoundEnvironment,
    TypeElement,
)

FIXTURE_MODEL_DIR = Path(__file__).resolve().parent / "fixtures" / "model"


@pytest.fixture
def fixture_model_dir() -> Path:
    return FIXTURE_MODEL_DIR


@pytest.fixture
def write_model(tmp_path: Path) -> Callable[..., Path]:
    """Write one or more model payloads into a fresh model directory."""

    def _write_model(*payloads: dict[str, Any], name: str = "model") -> Path:
        model_dir = tmp_path / name
        model_dir.mkdir(parents=True, exist_ok=True)
        for index, payload in enumerate(payloads):
            (model_dir / f"{index:02d}.json").write_text(json.dumps(payload), encoding="utf-8")
        return model_dir

    return _write_model


@pytest.fixture
def package() -> PackageElement:
    return PackageElement("com.example.app")


@pytest.fixture
def make_class() -> Callable[..., TypeElement]:
    def _make_class(
        name: str,
        enclosing: PackageElement | TypeElement,
        *,
        layout: int | None = None,
    ) -> TypeElement:
        markers = {Marker.CONTENT_VIEW: layout} if layout is not None else {}
        return TypeElement(simple_name=name, enclosing=enclosing, markers=markers)

    return _make_class


@pytest.fixture
def make_field() -> Callable[..., FieldElement]:
    def _make_field(
        name: str,
        owner: TypeElement,
        type_name: str,
        *,
        view_id: int | None = None,
    ) -> FieldElement:
        markers = {Marker.VIEW_ID: view_id} if view_id is not None else {}
        return FieldElement(simple_name=name, enclosing=owner, type_name=type_name, markers=markers)

    return _make_field


@pytest.fixture
def make_method() -> Callable[..., MethodElement]:
    def _make_method(
        name: str,
        owner: TypeElement,
        *,
        click: tuple[int, ...] | None = None,
        long_click: tuple[int, ...] | None = None,
    ) -> MethodElement:
        markers: dict = {}
        if click is not None:
            markers[Marker.ON_CLICK] = tuple(click)
        if long_click is not None:
            markers[Marker.ON_LONG_CLICK] = tuple(long_click)
        return MethodElement(simple_name=name, enclosing=owner, markers=markers)

    return _make_method


@pytest.fixture
def make_round() -> Callable[..., RoundEnvironment]:
    def _make_round(*elements: Element) -> RoundEnvironment:
        return RoundEnvironment(elements=list(elements))

    return _make_round


@pytest.fixture
def sample_round(package, make_class, make_field, make_method, make_round) -> RoundEnvironment:
    """Sample(layout 100) with title:TextView(200) and onSave bound to 300 and 301."""
    sample = make_class("Sample", package, layout=100)
    return make_round(
        sample,
        make_field("title", sample, "TextView", view_id=200),
        make_method("onSave", sample, click=(300, 301)),
    )
