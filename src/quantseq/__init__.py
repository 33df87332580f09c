"""Package metadata and public API for quantseq.

The version is read from importlib.metadata so that an editable install or
wheel reports the version declared in pyproject.toml, with a hardcoded
fallback for direct source usage without installation.
"""

from __future__ import annotations

from importlib import metadata as _metadata

from .config import QuantileConfig
from .errors import (
	ArgumentTypeError,
	AxisError,
	DomainError,
	EmptySequenceError,
	QuantileError,
	UsageError,
)
from .quantile import median, quantile_seq, quantiles

__all__ = [
	"__version__",
	"ArgumentTypeError",
	"AxisError",
	"DomainError",
	"EmptySequenceError",
	"QuantileConfig",
	"QuantileError",
	"UsageError",
	"median",
	"quantile_seq",
	"quantiles",
]

_FALLBACK_VERSION = "0.1.0"  # MUST match pyproject.toml [project].version

try:  # pragma: no cover - success path covered indirectly via CLI test
	__version__ = _metadata.version("quantseq")  # type: ignore[assignment]
except Exception:  # pragma: no cover - fallback exercised if metadata missing
	__version__ = _FALLBACK_VERSION
