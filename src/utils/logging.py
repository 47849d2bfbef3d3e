"""Logger factory shared by data, calculation and dashboard modules."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
LOG_LEVEL_ENV = 'FINTRACK_LOG_LEVEL'


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = str(level or os.getenv(LOG_LEVEL_ENV, 'INFO')).strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str, level: str | int | None = None) -> logging.Logger:
    """Return a named logger with a single stream handler attached."""
    logger = logging.getLogger(name)
    if not any(getattr(h, '_fintrack', False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._fintrack = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    return logger
