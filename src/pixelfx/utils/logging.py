"""Logging helpers for pixelfx."""

from __future__ import annotations

import json
import logging
from collections import deque
from datetime import datetime, timezone
from typing import Any, Optional

from ..config import LOG_FORMAT, LOG_HISTORY_LIMIT, LOGGER_NAME

_LOGGER: Optional[logging.Logger] = None
_HISTORY: Optional["RecentLogHandler"] = None


class RecentLogHandler(logging.Handler):
    """Keep the most recent log records in memory for later inspection.

    Filter jobs usually run far away from a terminal, so the worker keeps a
    bounded history that callers can query or dump as JSON after the fact.
    """

    def __init__(self, capacity: int = LOG_HISTORY_LIMIT) -> None:
        super().__init__()
        self._entries: deque[dict[str, Any]] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            self.handleError(record)
            return
        self._entries.append(
            {
                "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": message,
            }
        )

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        """Return stored entries, optionally restricted to one *level*."""

        if level is None:
            return list(self._entries)
        wanted = level.upper()
        return [entry for entry in self._entries if entry["level"] == wanted]

    def clear(self) -> None:
        self._entries.clear()

    def export(self) -> str:
        """Return the stored entries as indented JSON text."""

        return json.dumps(list(self._entries), ensure_ascii=False, indent=2)


def get_logger() -> logging.Logger:
    """Return the package logger, configuring it on first use."""

    global _LOGGER, _HISTORY
    if _LOGGER is None:
        _LOGGER = logging.getLogger(LOGGER_NAME)
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(LOG_FORMAT)
            handler.setFormatter(formatter)
            _LOGGER.addHandler(handler)
        _HISTORY = RecentLogHandler()
        _LOGGER.addHandler(_HISTORY)
        _LOGGER.setLevel(logging.INFO)
    return _LOGGER


def get_log_history() -> RecentLogHandler:
    """Return the in-memory history attached to the package logger."""

    get_logger()
    assert _HISTORY is not None
    return _HISTORY

logger = get_logger()
