"""Error types raised while loading and summarizing report data."""
from __future__ import annotations


class CatsumError(Exception):
    """Base error for report pipeline failures."""


class SourceFetchError(CatsumError):
    """The CSV source could not be retrieved or parsed."""


class SchemaMismatch(CatsumError):
    """Retrieved columns do not match the expected schema."""


class DivisionUndefined(CatsumError, ZeroDivisionError):
    """A ratio was requested against a zero or missing reference total."""


__all__ = [
    "CatsumError",
    "SourceFetchError",
    "SchemaMismatch",
    "DivisionUndefined",
]
