"""Internal application services (pure helpers, no I/O)."""

from .validation import (
    ValidationError,
    validate_pins,
    validate_roll,
    validate_rolls,
)

__all__ = [
    "ValidationError",
    "validate_pins",
    "validate_roll",
    "validate_rolls",
]
