from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_BINDER_INTERFACE = "com.wzz.demo.annotations.IBinder"


@dataclass(slots=True)
class GenerationOptions:
    model_dir: Path | None = None
    output_dir: Path | None = None
    binder_interface: str = DEFAULT_BINDER_INTERFACE
    indent: str = "\t"
    header: bool = True
    strict: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_extra(
        cls,
        model_dir: Path | None,
        output_dir: Path | None,
        extra: dict[str, Any] | None = None,
    ) -> "GenerationOptions":
        """Build options from a config/--option dict; unknown keys stay in extra."""
        remaining = dict(extra or {})
        options = cls(model_dir=model_dir, output_dir=output_dir)

        if "binder_interface" in remaining:
            value = remaining.pop("binder_interface")
            if not isinstance(value, str) or "." not in value.strip("."):
                raise ValueError(f"binder_interface must be a qualified type name, got {value!r}")
            options.binder_interface = value
        if "indent" in remaining:
            value = remaining.pop("indent")
            if isinstance(value, int) and not isinstance(value, bool) and value > 0:
                value = " " * value
            if not isinstance(value, str) or not value or value.strip():
                raise ValueError(f"indent must be whitespace or a positive width, got {value!r}")
            options.indent = value
        for key in ("header", "strict"):
            if key in remaining:
                value = remaining.pop(key)
                if not isinstance(value, bool):
                    raise ValueError(f"{key} must be true or false, got {value!r}")
                setattr(options, key, value)

        options.extra = remaining
        return options


@dataclass(slots=True)
class GeneratedArtifact:
    path: Path
    artifact_type: str
    type_name: str | None = None
    owner: str | None = None
