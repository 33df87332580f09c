"""Collection helpers: nested lists, tuples and numpy arrays.

Flattening is depth-first and left-to-right, and always returns a fresh list
so callers may reorder it freely.
"""
from __future__ import annotations

import numbers
from typing import Any, Callable, List, Sequence

import numpy as np

from .errors import ArgumentTypeError, AxisError


def is_collection(x: Any) -> bool:
    return isinstance(x, (list, tuple, np.ndarray))


def flatten(data: Any) -> List[Any]:
    if isinstance(data, np.ndarray):
        return data.ravel().tolist()
    flat: List[Any] = []
    _flatten_into(data, flat)
    return flat


def _flatten_into(items: Sequence[Any], out: List[Any]) -> None:
    for item in items:
        if isinstance(item, np.ndarray):
            out.extend(item.ravel().tolist())
        elif isinstance(item, (list, tuple)):
            _flatten_into(item, out)
        else:
            out.append(item)


def ndim(data: Any) -> int:
    if isinstance(data, np.ndarray):
        return data.ndim
    depth = 0
    node = data
    while isinstance(node, (list, tuple, np.ndarray)):
        depth += 1
        if len(node) == 0:
            break
        node = node[0]
    return depth


def apply_along_axis(data: Any, axis: int, fn: Callable[[Any], Any]) -> Any:
    """Reduce ``axis`` of ``data`` by calling ``fn`` on each 1-D slice along it.

    The reduced axis is dropped; when ``fn`` returns a list, that list becomes
    the innermost axis of the result. numpy input gives a numpy result.
    """
    if isinstance(axis, bool) or not isinstance(axis, numbers.Integral):
        raise ArgumentTypeError(f"Axis must be an integer, got {type(axis).__name__}")
    dims = ndim(data)
    if not 0 <= axis < dims:
        raise AxisError(f"Axis {axis} out of range for {dims}-dimensional data")
    if isinstance(data, np.ndarray):
        result = _apply(data.tolist(), int(axis), fn)
        return np.asarray(result) if isinstance(result, list) else result
    return _apply(data, int(axis), fn)


def _apply(mat: Sequence[Any], axis: int, fn: Callable[[Any], Any]) -> Any:
    if axis > 0:
        return [_apply(sub, axis - 1, fn) for sub in mat]
    if len(mat) == 0 or not is_collection(mat[0]):
        return fn(mat)
    # Move the reduced axis one level deeper until it is innermost
    return [_apply(column, 0, fn) for column in _transpose(mat)]


def _transpose(mat: Sequence[Sequence[Any]]) -> List[List[Any]]:
    width = len(mat[0])
    if any(len(row) != width for row in mat):
        raise ArgumentTypeError("Cannot reduce along an axis of a ragged collection")
    return [[row[i] for row in mat] for i in range(width)]


__all__ = ["apply_along_axis", "flatten", "is_collection", "ndim"]
