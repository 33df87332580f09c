"""Numeric kinds and the arithmetic used to interpolate between order statistics.

Elements may be native reals, ``decimal.Decimal`` values or dimensioned
quantities (any object exposing ``magnitude`` and ``units``, such as
``pint.Quantity``). The engine never touches element types directly: it goes
through an ``Arithmetic`` implementation chosen once from the probability's
representation.
"""
from __future__ import annotations

import math
import numbers
from decimal import ROUND_FLOOR, Decimal
from fractions import Fraction
from typing import Any, Callable, List, Optional, Protocol, Tuple

from .errors import ArgumentTypeError

NumericPredicate = Callable[[Any], bool]


def is_native(x: Any) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool) and not is_quantity(x)


def is_decimal(x: Any) -> bool:
    return isinstance(x, Decimal)


def is_quantity(x: Any) -> bool:
    return hasattr(x, "magnitude") and hasattr(x, "units")


_KINDS: List[NumericPredicate] = [is_native, is_decimal, is_quantity]


def register_numeric_kind(predicate: NumericPredicate) -> None:
    """Accept another element representation.

    Values matching ``predicate`` must support ``+`` between themselves,
    ``*`` with a plain float weight and the rich comparison operators.
    """
    _KINDS.append(predicate)


def is_numeric_like(x: Any) -> bool:
    return any(pred(x) for pred in _KINDS)


def validate(x: Any) -> Any:
    if not is_numeric_like(x):
        raise ArgumentTypeError(
            f"Unexpected type of value in function quantile_seq: {type(x).__name__}"
        )
    return x


def to_decimal(x: Any) -> Decimal:
    if isinstance(x, Decimal):
        return x
    if isinstance(x, numbers.Integral):
        return Decimal(int(x))
    if isinstance(x, numbers.Rational):
        return Decimal(x.numerator) / Decimal(x.denominator)
    # str() gives the shortest repr, so 0.1 becomes Decimal("0.1")
    return Decimal(str(float(x)))


def _align(a: Any, b: Any) -> Tuple[Any, Any]:
    # Decimal does not mix with float: promote natives, demote for float quantities
    if isinstance(a, Decimal):
        if is_quantity(b):
            return (a, b) if isinstance(b.magnitude, Decimal) else (float(a), b)
        if is_native(b):
            return a, to_decimal(b)
    elif isinstance(b, Decimal):
        if is_quantity(a):
            return (a, b) if isinstance(a.magnitude, Decimal) else (a, float(b))
        if is_native(a):
            return to_decimal(a), b
    return a, b


class Arithmetic(Protocol):
    name: str

    def add(self, a: Any, b: Any) -> Any: ...  # noqa: E701 - protocol stub
    def multiply(self, a: Any, weight: Any) -> Any: ...  # noqa: E701
    def compare(self, a: Any, b: Any) -> int: ...  # noqa: E701
    def is_integer(self, x: Any) -> bool: ...  # noqa: E701
    def rank(self, prob: Any, length: int) -> Any: ...  # noqa: E701
    def split(self, index: Any) -> Tuple[int, Optional[Any]]: ...  # noqa: E701
    def complement(self, weight: Any) -> Any: ...  # noqa: E701


class _ElementOps:
    """add/multiply/compare shared by every arithmetic."""

    def add(self, a: Any, b: Any) -> Any:
        a, b = _align(a, b)
        return a + b

    def multiply(self, a: Any, weight: Any) -> Any:
        a, weight = _align(a, weight)
        return a * weight

    def compare(self, a: Any, b: Any) -> int:
        if a > b:
            return 1
        if a < b:
            return -1
        return 0


class FloatArithmetic(_ElementOps):
    """Ranks and weights as native numbers (float, int, Fraction)."""

    name = "float"

    def is_integer(self, x: Any) -> bool:
        if isinstance(x, numbers.Integral):
            return True
        if isinstance(x, numbers.Rational):
            return x.denominator == 1
        return math.isfinite(x) and float(x).is_integer()

    def rank(self, prob: Any, length: int) -> Any:
        return prob * (length - 1)

    def split(self, index: Any) -> Tuple[int, Optional[Any]]:
        frac = index % 1
        if frac == 0:
            return int(index), None
        return math.floor(index), frac

    def complement(self, weight: Any) -> Any:
        return 1 - weight


class DecimalArithmetic(_ElementOps):
    """Ranks and weights as ``decimal.Decimal`` in the active context."""

    name = "decimal"

    def is_integer(self, x: Any) -> bool:
        x = to_decimal(x)
        return x.is_finite() and x == x.to_integral_value()

    def rank(self, prob: Any, length: int) -> Any:
        # Fractions stay exact so i/(N+1) * (len-1) lands on whole ranks
        if isinstance(prob, Fraction):
            return prob * (length - 1)
        return to_decimal(prob) * (length - 1)

    def split(self, index: Any) -> Tuple[int, Optional[Any]]:
        if isinstance(index, Fraction):
            k = math.floor(index)
            if k == index:
                return k, None
            return k, to_decimal(index - k)
        floor = index.to_integral_value(rounding=ROUND_FLOOR)
        if floor == index:
            return int(floor), None
        return int(floor), index - floor

    def complement(self, weight: Any) -> Any:
        return Decimal(1) - weight


FLOAT = FloatArithmetic()
DECIMAL = DecimalArithmetic()

__all__ = [
    "Arithmetic",
    "DECIMAL",
    "FLOAT",
    "DecimalArithmetic",
    "FloatArithmetic",
    "is_decimal",
    "is_native",
    "is_numeric_like",
    "is_quantity",
    "register_numeric_kind",
    "to_decimal",
    "validate",
]
