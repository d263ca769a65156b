"""Resolved element model and the JSON model-directory loader."""

from .driver import load_model_directory
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

__all__ = [
    "MARKER_TARGETS",
    "Element",
    "FieldElement",
    "Marker",
    "MarkerValue",
    "MethodElement",
    "PackageElement",
    "RoundEnvironment",
    "TypeElement",
    "load_model_directory",
]
