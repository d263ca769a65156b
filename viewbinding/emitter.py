"""Source emission: render one BindingRecord into a <Owner>_ViewBinding Java class."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .base import GeneratedArtifact, GenerationOptions
from .errors import FilerError
from .filer import Filer
from .ir import BindingRecord, ClickHandlerBinding
from .naming import binding_qualified_name, binding_simple_name, package_of

logger = logging.getLogger(__name__)

GENERATED_HEADER = "// Generated by viewbinding. Do not edit by hand."
VIEW_CLASS = "android.view.View"


@dataclass(frozen=True, slots=True)
class EmitFailure:
    artifact_name: str
    owner: str
    cause: str

    def describe(self) -> str:
        return f"{self.artifact_name} (for {self.owner}): {self.cause}"


@dataclass(slots=True)
class EmitResult:
    artifacts: list[GeneratedArtifact] = field(default_factory=list)
    failures: list[EmitFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def render_binding(record: BindingRecord, options: GenerationOptions | None = None) -> str:
    """Return the Java source of the binding class for one record.

    Statement order inside bind(): content view, field lookups, click
    listeners, long-click listeners. Handlers with several ids get one
    registration per id.
    """
    options = options or GenerationOptions()
    owner = record.owner
    owner_type = owner.qualified_name
    package = package_of(owner)
    binder = options.binder_interface
    binder_simple = binder.rsplit(".", 1)[-1]
    ind = options.indent

    lines: list[str] = []
    if options.header:
        lines.append(GENERATED_HEADER)
        lines.append("")
    if not package.is_unnamed:
        lines.append(f"package {package.qualified_name};")
        lines.append("")
    lines.append(f"import {binder};")
    lines.append(f"import {VIEW_CLASS};")
    lines.append("")
    lines.append(f"public class {binding_simple_name(owner)} implements {binder_simple}<{owner_type}> {{")
    lines.append(f"{ind}@Override")
    lines.append(f"{ind}public void bind(final {owner_type} target) {{")
    lines.append(f"{ind * 2}target.setContentView({record.layout_id});")

    for view_field in record.view_fields:
        lines.append(
            f"{ind * 2}target.{view_field.name} = ({view_field.type_name}) "
            f"target.findViewById({view_field.view_id});"
        )

    for handler in record.click_handlers:
        lines.extend(_listener_lines(handler, ind, long_click=False))

    for handler in record.long_click_handlers:
        lines.extend(_listener_lines(handler, ind, long_click=True))

    lines.append(f"{ind}}}")
    lines.append("}")
    return "\n".join(lines) + "\n"


def _listener_lines(handler: ClickHandlerBinding, ind: str, *, long_click: bool) -> list[str]:
    if long_click:
        setter, listener, signature = "setOnLongClickListener", "OnLongClickListener", "boolean onLongClick"
    else:
        setter, listener, signature = "setOnClickListener", "OnClickListener", "void onClick"

    lines: list[str] = []
    for view_id in handler.view_ids:
        lines.append(f"{ind * 2}target.findViewById({view_id}).{setter}(new View.{listener}() {{")
        lines.append(f"{ind * 3}@Override")
        lines.append(f"{ind * 3}public {signature}(View v) {{")
        lines.append(f"{ind * 4}target.{handler.method_name}(v);")
        if long_click:
            lines.append(f"{ind * 4}return true;")
        lines.append(f"{ind * 3}}}")
        lines.append(f"{ind * 2}}});")
    return lines


def write_binding(
    record: BindingRecord,
    filer: Filer,
    options: GenerationOptions | None = None,
) -> GeneratedArtifact:
    """Render one record and write it through the filer."""
    type_name = binding_qualified_name(record.owner)
    source = render_binding(record, options)
    source_file = filer.create_source_file(type_name)
    with source_file.open_writer() as writer:
        writer.write(source)
    logger.debug("Wrote %s to %s", type_name, source_file.path)
    return GeneratedArtifact(
        path=source_file.path,
        artifact_type="java-source",
        type_name=type_name,
        owner=record.owner.qualified_name,
    )


def emit_bindings(
    records: Iterable[BindingRecord],
    filer: Filer,
    options: GenerationOptions | None = None,
) -> EmitResult:
    """Write one artifact per record; a failing artifact does not stop the others."""
    result = EmitResult()
    for record in records:
        type_name = binding_qualified_name(record.owner)
        try:
            result.artifacts.append(write_binding(record, filer, options))
        except (OSError, UnicodeError, FilerError) as exc:
            failure = EmitFailure(
                artifact_name=type_name,
                owner=record.owner.qualified_name,
                cause=str(exc) or type(exc).__name__,
            )
            logger.error("Failed to write %s: %s", failure.artifact_name, failure.cause)
            result.failures.append(failure)
    return result
