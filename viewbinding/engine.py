from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .base import GeneratedArtifact, GenerationOptions
from .collector import collect_bindings
from .elements import RoundEnvironment, load_model_directory
from .emitter import EmitFailure, emit_bindings
from .errors import GenerationError
from .filer import DirectoryFiler, Filer
from .ir import BindingRecord
from .validation import validate_bindings

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    round_env: RoundEnvironment
    records: list[BindingRecord]
    artifacts: list[GeneratedArtifact] = field(default_factory=list)
    failures: list[EmitFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def run_generation(
    *,
    model_dir: Path,
    output_dir: Path,
    options: GenerationOptions | None = None,
    filer: Filer | None = None,
) -> RunResult:
    options = options or GenerationOptions(model_dir=model_dir, output_dir=output_dir)
    try:
        round_env = load_model_directory(model_dir)
        if options.strict:
            validate_bindings(round_env)
        records = collect_bindings(round_env)
    except GenerationError:
        raise
    except Exception as exc:  # pragma: no cover - defensive coding
        raise GenerationError(
            f"Failed to prepare generation from model_dir={model_dir} to output_dir={output_dir}"
        ) from exc

    filer = filer or DirectoryFiler(output_dir)
    try:
        emitted = emit_bindings(records, filer, options)
    except GenerationError:
        raise
    except Exception as exc:  # pragma: no cover - defensive coding
        raise GenerationError(
            f"Failed while emitting {len(records)} binding(s) into {output_dir}"
        ) from exc
    logger.info(
        "Generated %d binding(s) for %d bound class(es), %d failure(s)",
        len(emitted.artifacts),
        len(records),
        len(emitted.failures),
    )
    return RunResult(
        round_env=round_env,
        records=records,
        artifacts=emitted.artifacts,
        failures=emitted.failures,
    )
