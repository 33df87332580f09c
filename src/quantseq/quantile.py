"""Quantiles of (optionally nested) collections by partial selection.

The data is never fully sorted. For each requested probability ``p`` the
fractional rank ``p * (len - 1)`` is computed; whole ranks are answered by a
single selection, fractional ranks interpolate linearly between the two
neighbouring order statistics.

Call shapes::

    quantile_seq(data, prob)
    quantile_seq(data, prob, sorted)
    quantile_seq(data, prob, axis)
    quantile_seq(data, prob, sorted, axis)

``prob`` is a probability in [0, 1], a count ``N > 1`` meaning the ``N``
evenly spaced probabilities ``i / (N + 1)``, or a list of probabilities.

    >>> quantile_seq([3, -1, 5, 7], 0.5)
    4.0
    >>> quantile_seq([3, -1, 5, 7], [1/3, 2/3])
    [3, 5]
    >>> quantile_seq([3, -1, 5, 7], 2)
    [3, 5]
    >>> quantile_seq([-1, 3, 5, 7], 0.5, True)
    4.0

With ``sorted=True`` the data is trusted to be ascending and indexed
directly; nothing checks that claim.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .arith import DECIMAL, FLOAT, Arithmetic, is_decimal, is_native, to_decimal, validate
from .arrays import apply_along_axis, flatten, is_collection
from .config import DEFAULT_CONFIG, QuantileConfig
from .errors import ArgumentTypeError, DomainError, EmptySequenceError, UsageError
from .logutil import get_logger
from .select import partition_select

_UNEXPECTED = "Unexpected type of argument in function quantile_seq"


class SpecKind(Enum):
    SINGLE = "single"
    COUNT = "count"
    LIST = "list"


@dataclass(frozen=True)
class ProbabilitySpec:
    """A probability argument resolved into the probabilities to evaluate.

    ``steps`` pairs each probability with the arithmetic used for its rank and
    interpolation weights; ``as_decimal`` re-wraps every result as Decimal.
    """

    kind: SpecKind
    steps: Tuple[Tuple[Any, Arithmetic], ...]
    as_decimal: bool = False

    def evaluate(self, data: Any, is_sorted: bool, cfg: QuantileConfig) -> Any:
        if not self.steps:
            # An empty probability list never looks at the data
            return []
        flat = flatten(data)
        if not flat:
            raise EmptySequenceError("Cannot calculate quantile of an empty sequence")
        results: List[Any] = []
        for prob, arith in self.steps:
            # Selection only permutes the private copy, so it is reused across probabilities
            value = _quantile(flat, prob, is_sorted, arith, cfg.selection_sample_cutoff)
            results.append(self._finish(value, cfg))
        if self.kind is SpecKind.SINGLE:
            return results[0]
        return results

    def _finish(self, value: Any, cfg: QuantileConfig) -> Any:
        if self.as_decimal and is_native(value):
            value = to_decimal(value)
        if cfg.decimal_places is not None and isinstance(value, Decimal):
            value = value.quantize(Decimal(1).scaleb(-cfg.decimal_places))
        return value


def _quantile(flat: List[Any], prob: Any, is_sorted: bool, arith: Arithmetic, cutoff: int) -> Any:
    index = arith.rank(prob, len(flat))
    k, frac = arith.split(index)

    if frac is None:
        value = flat[k] if is_sorted else partition_select(flat, k, arith.compare, cutoff)
        return validate(value)

    if is_sorted:
        left = flat[k]
        right = flat[k + 1]
    else:
        right = partition_select(flat, k + 1, arith.compare, cutoff)
        # Everything before k+1 is <= right; the k-th statistic is their maximum
        left = flat[k]
        for i in range(k):
            if arith.compare(flat[i], left) > 0:
                left = flat[i]

    validate(left)
    validate(right)

    # Q(p) = (1 - f) * x[k] + f * x[k + 1]
    return arith.add(arith.multiply(left, arith.complement(frac)), arith.multiply(right, frac))


def _count_spec(n: int, arith: Arithmetic, cfg: QuantileConfig) -> ProbabilitySpec:
    if n > cfg.max_count:
        raise DomainError(
            f"N must be less than or equal to {cfg.max_count}, as that is the maximum length of a list"
        )
    get_logger("quantile").debug("expanding count N=%d into evenly spaced probabilities", n)
    if arith is DECIMAL:
        steps = tuple((Fraction(i, n + 1), DECIMAL) for i in range(1, n + 1))
        return ProbabilitySpec(SpecKind.COUNT, steps, as_decimal=True)
    n_plus_one = n + 1
    return ProbabilitySpec(SpecKind.COUNT, tuple((i / n_plus_one, FLOAT) for i in range(1, n + 1)))


def _resolve_native(prob: Any, cfg: QuantileConfig) -> ProbabilitySpec:
    if math.isnan(prob):
        raise DomainError("N/prob must not be NaN")
    if prob < 0:
        raise DomainError("N/prob must be non-negative")
    if prob <= 1:
        return ProbabilitySpec(SpecKind.SINGLE, ((prob, FLOAT),))
    if not FLOAT.is_integer(prob):
        raise DomainError("N must be a positive integer")
    return _count_spec(int(prob), FLOAT, cfg)


def _resolve_decimal(prob: Decimal, cfg: QuantileConfig) -> ProbabilitySpec:
    if prob.is_nan():
        raise DomainError("N/prob must not be NaN")
    if prob < 0:
        raise DomainError("N/prob must be non-negative")
    if prob <= Decimal(1):
        return ProbabilitySpec(SpecKind.SINGLE, ((prob, DECIMAL),), as_decimal=True)
    if not DECIMAL.is_integer(prob):
        raise DomainError("N must be a positive integer")
    return _count_spec(int(prob), DECIMAL, cfg)


def _resolve_list(probs: Any) -> ProbabilitySpec:
    items = probs.tolist() if isinstance(probs, np.ndarray) else list(probs)
    steps: List[Tuple[Any, Arithmetic]] = []
    # Validate everything before computing anything
    for prob in items:
        if is_native(prob):
            in_range = not math.isnan(prob) and 0 <= prob <= 1
            arith: Arithmetic = FLOAT
        elif is_decimal(prob):
            in_range = not prob.is_nan() and 0 <= prob <= 1
            arith = DECIMAL
        else:
            raise ArgumentTypeError(_UNEXPECTED)
        if not in_range:
            raise DomainError("Probability must be between 0 and 1, inclusive")
        steps.append((prob, arith))
    return ProbabilitySpec(SpecKind.LIST, tuple(steps))


def resolve_probability(prob_or_n: Any, cfg: QuantileConfig = DEFAULT_CONFIG) -> ProbabilitySpec:
    """Interpret a probability, count or probability list."""
    if is_native(prob_or_n):
        return _resolve_native(prob_or_n, cfg)
    if is_decimal(prob_or_n):
        return _resolve_decimal(prob_or_n, cfg)
    if is_collection(prob_or_n):
        return _resolve_list(prob_or_n)
    raise ArgumentTypeError(_UNEXPECTED)


def _bind_optional(rest: Sequence[Any], is_sorted: Optional[bool], axis: Optional[int]) -> Tuple[Any, Any]:
    if len(rest) == 2:
        if is_sorted is not None or axis is not None:
            raise UsageError("sorted and axis given both positionally and by keyword")
        return rest[0], rest[1]
    if len(rest) == 1:
        extra = rest[0]
        if isinstance(extra, (bool, np.bool_)):
            if is_sorted is not None:
                raise UsageError("sorted given both positionally and by keyword")
            return extra, axis
        if isinstance(extra, numbers.Integral):
            if axis is not None:
                raise UsageError("axis given both positionally and by keyword")
            return is_sorted, extra
        raise ArgumentTypeError(_UNEXPECTED)
    return is_sorted, axis


def quantile_seq(
    *args: Any,
    is_sorted: Optional[bool] = None,
    axis: Optional[int] = None,
    cfg: Optional[QuantileConfig] = None,
) -> Any:
    """Compute the quantile(s) of ``data``.

    Args:
        data: list, tuple or numpy array, nested to any depth. Without an axis
            all elements take part.
        prob_or_n: probability in [0, 1], count ``N > 1`` or list of probabilities.
        sorted: optional bool, the data is already ascending (default False).
        axis: optional int, compute along this axis instead of over all elements.

    Returns:
        A single value for a probability, a list for a count or list, or a
        reduced collection when an axis is given.
    """
    if len(args) < 2 or len(args) > 4:
        raise UsageError("Function quantile_seq requires two, three or four parameters")
    data, prob_or_n = args[0], args[1]
    is_sorted, axis = _bind_optional(args[2:], is_sorted, axis)
    cfg = cfg or DEFAULT_CONFIG

    if not is_collection(data):
        raise ArgumentTypeError(_UNEXPECTED)
    if is_sorted is None:
        is_sorted = False
    if not isinstance(is_sorted, (bool, np.bool_)):
        raise ArgumentTypeError(_UNEXPECTED)

    spec = resolve_probability(prob_or_n, cfg)
    if axis is None:
        return spec.evaluate(data, bool(is_sorted), cfg)
    get_logger("quantile").debug("computing %s quantile along axis %s", spec.kind.value, axis)
    return apply_along_axis(data, axis, lambda part: spec.evaluate(part, bool(is_sorted), cfg))


def quantiles(
    data: Any,
    n: int,
    is_sorted: bool = False,
    axis: Optional[int] = None,
    cfg: Optional[QuantileConfig] = None,
) -> Any:
    """The ``n`` evenly spaced quantiles ``i / (n + 1)``; unlike the overload, ``n = 1`` is allowed.

    With ``axis`` each 1-D slice along it yields its own list of ``n`` quantiles.
    """
    cfg = cfg or DEFAULT_CONFIG
    if not is_collection(data):
        raise ArgumentTypeError(_UNEXPECTED)
    if not isinstance(is_sorted, (bool, np.bool_)):
        raise ArgumentTypeError(_UNEXPECTED)
    if is_decimal(n):
        arith: Arithmetic = DECIMAL
        valid = DECIMAL.is_integer(n) and n >= 1
    elif is_native(n):
        arith = FLOAT
        valid = FLOAT.is_integer(n) and n >= 1
    else:
        raise ArgumentTypeError(_UNEXPECTED)
    if not valid:
        raise DomainError("N must be a positive integer")
    spec = _count_spec(int(n), arith, cfg)
    if axis is None:
        return spec.evaluate(data, bool(is_sorted), cfg)
    return apply_along_axis(data, axis, lambda part: spec.evaluate(part, bool(is_sorted), cfg))


def median(data: Any, is_sorted: bool = False) -> Any:
    return quantile_seq(data, 0.5, is_sorted)


__all__ = ["ProbabilitySpec", "SpecKind", "median", "quantile_seq", "quantiles", "resolve_probability"]
