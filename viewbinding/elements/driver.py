"""Top-level entry point: load_model_directory."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..errors import ModelError
from .model import (
    MARKER_TARGETS,
    Element,
    FieldElement,
    Marker,
    MarkerValue,
    MethodElement,
    PackageElement,
    RoundEnvironment,
    TypeElement,
)

logger = logging.getLogger(__name__)

_MARKERS_BY_NAME = {marker.value: marker for marker in Marker}


def load_model_directory(model_dir: Path) -> RoundEnvironment:
    files = sorted(model_dir.rglob("*.json"))
    if not files:
        raise ModelError(f"No .json model files found in {model_dir}")

    elements: list[Element] = []
    packages: dict[str, PackageElement] = {}
    seen_types: dict[str, Path] = {}
    for file_path in files:
        try:
            payload = json.loads(file_path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            raise ModelError(f"{file_path}: not valid UTF-8 ({exc})") from exc
        except json.JSONDecodeError as exc:
            raise ModelError(f"{file_path}: invalid JSON ({exc})") from exc
        if not isinstance(payload, dict) or not isinstance(payload.get("packages", []), list):
            raise ModelError(f"{file_path}: expected an object with a 'packages' list")

        for raw_package in payload.get("packages", []):
            name = raw_package.get("name", "") if isinstance(raw_package, dict) else None
            if not isinstance(name, str):
                raise ModelError(f"{file_path}: package name must be a string")
            _require_encodable(name, file_path, "package")
            package = packages.setdefault(name, PackageElement(name))
            for raw_class in _list_of(raw_package, "classes", file_path, name or "<unnamed>"):
                _load_type(raw_class, package, file_path, elements, seen_types)

    logger.debug("Loaded %d element(s) from %d model file(s)", len(elements), len(files))
    return RoundEnvironment(elements=elements, packages=list(packages.values()), files=files)


def _load_type(
    raw: Any,
    enclosing: PackageElement | TypeElement,
    file_path: Path,
    elements: list[Element],
    seen_types: dict[str, Path],
) -> None:
    where = enclosing.qualified_name or "<unnamed>"
    name = _require_name(raw, file_path, where)
    element = TypeElement(simple_name=name, enclosing=enclosing)
    qname = element.qualified_name
    if qname in seen_types:
        raise ModelError(
            f"{file_path}: class '{qname}' already declared in {seen_types[qname]}"
        )
    seen_types[qname] = file_path
    element.markers = _load_markers(raw, "class", file_path, qname)
    elements.append(element)

    for raw_field in _list_of(raw, "fields", file_path, qname):
        field_name = _require_name(raw_field, file_path, qname)
        type_name = raw_field.get("type")
        if not isinstance(type_name, str) or not type_name.strip():
            raise ModelError(f"{file_path}: {qname}.{field_name}: field 'type' is required")
        _require_encodable(type_name, file_path, f"{qname}.{field_name}")
        field_element = FieldElement(simple_name=field_name, enclosing=element, type_name=type_name.strip())
        field_element.markers = _load_markers(raw_field, "field", file_path, field_element.qualified_name)
        elements.append(field_element)

    for raw_method in _list_of(raw, "methods", file_path, qname):
        method_name = _require_name(raw_method, file_path, qname)
        method_element = MethodElement(simple_name=method_name, enclosing=element)
        method_element.markers = _load_markers(raw_method, "method", file_path, method_element.qualified_name)
        elements.append(method_element)

    for raw_nested in _list_of(raw, "classes", file_path, qname):
        _load_type(raw_nested, element, file_path, elements, seen_types)


def _list_of(raw: Any, key: str, file_path: Path, where: str) -> list[Any]:
    value = raw.get(key, [])
    if not isinstance(value, list):
        raise ModelError(f"{file_path}: {where}: '{key}' must be a list")
    return value


def _require_name(raw: Any, file_path: Path, where: str) -> str:
    if not isinstance(raw, dict):
        raise ModelError(f"{file_path}: {where}: expected an object, got {type(raw).__name__}")
    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ModelError(f"{file_path}: {where}: element without a 'name'")
    _require_encodable(name, file_path, where)
    return name.strip()


def _require_encodable(value: str, file_path: Path, where: str) -> None:
    # Names end up in UTF-8 sources; lone surrogates cannot be written.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ModelError(f"{file_path}: {where}: {value!r} is not encodable as UTF-8") from exc


def _load_markers(raw: dict, kind: str, file_path: Path, where: str) -> dict[Marker, MarkerValue]:
    raw_markers = raw.get("markers", {})
    if not isinstance(raw_markers, dict):
        raise ModelError(f"{file_path}: {where}: 'markers' must be an object")

    markers: dict[Marker, MarkerValue] = {}
    for marker_name, value in raw_markers.items():
        marker = _MARKERS_BY_NAME.get(marker_name)
        if marker is None:
            known = ", ".join(sorted(_MARKERS_BY_NAME))
            raise ModelError(f"{file_path}: {where}: unknown marker '{marker_name}' (known: {known})")
        if MARKER_TARGETS[marker] != kind:
            raise ModelError(
                f"{file_path}: {where}: @{marker.value} applies to a {MARKER_TARGETS[marker]}, not a {kind}"
            )
        markers[marker] = _coerce_value(marker, value, file_path, where)
    return markers


def _coerce_value(marker: Marker, value: Any, file_path: Path, where: str) -> MarkerValue:
    # Ids are passed through unchecked; the host defines which ids are valid.
    if marker.is_array:
        if _is_id(value):
            return (value,)
        if isinstance(value, list) and all(_is_id(item) for item in value):
            return tuple(value)
        raise ModelError(f"{file_path}: {where}: @{marker.value} expects an integer array, got {value!r}")
    if not _is_id(value):
        raise ModelError(f"{file_path}: {where}: @{marker.value} expects an integer, got {value!r}")
    return value


def _is_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
