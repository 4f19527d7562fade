"""Configuration helpers for generation options."""

from .options import DEFAULT_OPTIONS, VALID_ROSTER_SIZES, GenerateOptions

__all__ = [
    "DEFAULT_OPTIONS",
    "VALID_ROSTER_SIZES",
    "GenerateOptions",
]
