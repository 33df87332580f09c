"""Exception hierarchy for quantile computation.

Every error derives from ``QuantileError`` and also from the closest builtin
(``TypeError``, ``ValueError``, ``IndexError``) so callers can catch either.
"""
from __future__ import annotations


class QuantileError(Exception):
    """Base class for all quantseq errors."""


class UsageError(QuantileError, TypeError):
    """Wrong number of call arguments."""


class ArgumentTypeError(QuantileError, TypeError):
    """An argument or a selected element has an unsupported shape or kind."""


class DomainError(QuantileError, ValueError):
    """A numeric argument is outside its allowed range."""


class EmptySequenceError(QuantileError, ValueError):
    """The flattened data holds no elements."""


class AxisError(QuantileError, IndexError):
    """Axis outside the dimensions of the data."""


__all__ = [
    "QuantileError",
    "UsageError",
    "ArgumentTypeError",
    "DomainError",
    "EmptySequenceError",
    "AxisError",
]
