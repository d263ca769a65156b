"""Package resolution and artifact naming for generated bindings."""
from __future__ import annotations

from pathlib import PurePosixPath

from .elements import Element, PackageElement, TypeElement

BINDING_SUFFIX = "_ViewBinding"


def package_of(element: Element | PackageElement) -> PackageElement:
    """Walk the enclosing chain up to the package (nested classes resolve to the outer package)."""
    current = element
    while not isinstance(current, PackageElement):
        current = current.enclosing
    return current


def binding_simple_name(owner: TypeElement) -> str:
    return f"{owner.simple_name}{BINDING_SUFFIX}"


def binding_qualified_name(owner: TypeElement) -> str:
    package = package_of(owner)
    simple = binding_simple_name(owner)
    if package.is_unnamed:
        return simple
    return f"{package.qualified_name}.{simple}"


def source_relative_path(qualified_name: str) -> PurePosixPath:
    """Map 'a.b.C' to 'a/b/C.java'."""
    parts = qualified_name.split(".")
    return PurePosixPath(*parts[:-1], f"{parts[-1]}.java")
