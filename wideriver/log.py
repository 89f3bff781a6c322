"""Timestamped logging to stdout and stderr with a threshold."""

from __future__ import annotations

import sys
import time
from typing import Optional, TextIO

from .enums import LogThreshold, log_threshold_val

COLUMN_WIDTH = 24

_THRESHOLD_CHAR = {
    LogThreshold.DEBUG: "D",
    LogThreshold.INFO: "I",
    LogThreshold.WARNING: "W",
    LogThreshold.ERROR: "E",
    LogThreshold.FATAL: "F",
}


class Log:
    """Writes messages at or above a threshold; errors go to the error stream."""

    def __init__(
        self,
        threshold: LogThreshold = LogThreshold.INFO,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        self.threshold = LogThreshold(threshold)
        self._out = out
        self._err = err

    def set_threshold(self, name: str) -> None:
        """Set the threshold by name; ValueError when the name is unknown."""
        threshold = log_threshold_val(name)
        if threshold is None:
            raise ValueError(f"invalid log threshold '{name}'")
        self.threshold = threshold

    def _stream(self, level: LogThreshold) -> TextIO:
        if level >= LogThreshold.ERROR:
            return self._err if self._err is not None else sys.stderr
        return self._out if self._out is not None else sys.stdout

    @staticmethod
    def _prefix(level: LogThreshold) -> str:
        stamp = time.strftime("%H:%M:%S", time.localtime())
        return f"{_THRESHOLD_CHAR[level]} [{stamp}] "

    def _write(self, level: LogThreshold, text: str) -> None:
        if level < self.threshold:
            return
        stream = self._stream(level)
        stream.write(text)
        stream.flush()

    def _line(self, level: LogThreshold, message: str) -> None:
        self._write(level, f"{self._prefix(level)}{message}\n")

    @staticmethod
    def _cell(text: str) -> str:
        return text[: COLUMN_WIDTH - 1].ljust(COLUMN_WIDTH)

    def debug(self, message: str) -> None:
        self._line(LogThreshold.DEBUG, message)

    def info(self, message: str) -> None:
        self._line(LogThreshold.INFO, message)

    def warning(self, message: str) -> None:
        self._line(LogThreshold.WARNING, message)

    def error(self, message: str) -> None:
        self._line(LogThreshold.ERROR, message)

    def fatal(self, message: str) -> None:
        self._line(LogThreshold.FATAL, message)

    def column_start(self, text: str) -> None:
        """Begin a debug line with a prefixed, fixed-width column."""
        level = LogThreshold.DEBUG
        self._write(level, self._prefix(level) + self._cell(text))

    def column(self, text: str) -> None:
        """Continue a debug line with a fixed-width column."""
        self._write(LogThreshold.DEBUG, self._cell(text))

    def column_end(self, text: str) -> None:
        """Finish a debug line."""
        self._write(LogThreshold.DEBUG, f"{text}\n")