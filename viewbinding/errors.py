from __future__ import annotations


class GenerationError(Exception):
    """Base error for all generation-related failures."""


class ModelError(GenerationError):
    """Errors raised while loading the resolved element model."""


class ValidationError(GenerationError):
    """Errors raised while validating marker placement across a round."""


class FilerError(GenerationError):
    """Errors raised by the output provider when it refuses to create a file."""
