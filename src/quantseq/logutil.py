"""Logging for quantseq.

Everything logs under the ``quantseq`` logger, which is set up on first use
with a stderr handler at WARNING. The library itself only emits DEBUG records
(probability expansion, axis reduction); warnings come from the CLI and the
service when input is skipped or rejected. Embedding applications that already
configured a handler on ``quantseq`` keep theirs.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_NAME = "quantseq"
LEVELS = ("debug", "info", "warning", "error")

_LOGGER: Optional[logging.Logger] = None


def _root() -> logging.Logger:
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger(ROOT_NAME)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
            logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
        _LOGGER = logger
    return _LOGGER


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """The package logger, or ``quantseq.<component>`` beneath it."""
    root = _root()
    return root.getChild(component) if component else root


def set_level(level: Union[str, int]) -> int:
    """Set the package threshold from a level name (``"debug"``) or number."""
    if isinstance(level, str):
        if level.lower() not in LEVELS:
            raise ValueError(f"unknown log level {level!r}; choose from {', '.join(LEVELS)}")
        level = getattr(logging, level.upper())
    _root().setLevel(level)
    return level


__all__ = ["LEVELS", "ROOT_NAME", "get_logger", "set_level"]
