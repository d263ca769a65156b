"""View-binding generator: emits <Owner>_ViewBinding companions from marker-bearing classes."""

from .collector import collect_bindings
from .emitter import EmitFailure, EmitResult, emit_bindings, render_binding, write_binding
from .engine import RunResult, run_generation
from .errors import FilerError, GenerationError, ModelError, ValidationError

__all__ = [
    "EmitFailure",
    "EmitResult",
    "FilerError",
    "GenerationError",
    "ModelError",
    "RunResult",
    "ValidationError",
    "collect_bindings",
    "emit_bindings",
    "render_binding",
    "run_generation",
    "write_binding",
]
