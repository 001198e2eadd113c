"""Structured JSON logging for the command-line tools.

Records go to stderr by default so stdout stays reserved for results.
"""

from __future__ import annotations

import json
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TextIO

LEVELS = {"DEBUG": 0, "INFO": 1, "WARN": 2, "ERROR": 3}


@dataclass
class LogRecord:
    """Structured log record."""

    level: str
    message: str
    timestamp: float = field(default_factory=time.time)
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "level": self.level,
            "message": self.message,
            "timestamp": self.timestamp,
            **self.data,
        }

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), default=str)


class StructuredLogger:
    """Structured logger emitting one JSON object per line."""

    def __init__(
        self,
        name: str,
        output: TextIO | None = None,
        min_level: str = "INFO",
    ) -> None:
        self.name = name
        self.output = output
        self._min_level = _level_number(min_level)

    def set_level(self, level: str) -> None:
        """Set minimum level for this logger."""
        self._min_level = _level_number(level)

    def _log(self, level: str, message: str, **data: Any) -> None:
        if LEVELS[level] < self._min_level:
            return

        record = LogRecord(level=level, message=message, data={"logger": self.name, **data})
        print(record.to_json(), file=self.output or sys.stderr)

    def debug(self, message: str, **data: Any) -> None:
        """Log at DEBUG level."""
        self._log("DEBUG", message, **data)

    def info(self, message: str, **data: Any) -> None:
        """Log at INFO level."""
        self._log("INFO", message, **data)

    @contextmanager
    def timer(self, operation: str, level: str = "DEBUG"):
        """Context manager for timing operations.

        Usage:
            with logger.timer("ga_minimize"):
                result = minimize(...)
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self._log(level.upper(), f"{operation} completed", elapsed_ms=elapsed * 1000)


def _level_number(level: str) -> int:
    key = level.upper()
    if key == "WARNING":
        key = "WARN"
    return LEVELS.get(key, LEVELS["INFO"])


# Global logger cache
_loggers: dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name (typically __name__).

    Returns:
        StructuredLogger instance.
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name)
    return _loggers[name]


def set_log_level(level: str) -> None:
    """Set minimum log level for all loggers.

    Args:
        level: One of DEBUG, INFO, WARN, ERROR.
    """
    for logger in _loggers.values():
        logger.set_level(level)
