"""Levelled log lines written to a text stream."""

from __future__ import annotations

import enum
import sys
from typing import TextIO


class LogLevel(enum.IntEnum):
    """Severity; a logger prints messages at or below its own level."""

    ERROR = 0
    INFO = 1
    DEBUG = 2


class Logger:
    """Writes ``LEVEL: message`` lines for messages within its level."""

    def __init__(self, level: int = LogLevel.DEBUG, stream: TextIO | None = None) -> None:
        self.level = level
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def log(self, message: str, level: int) -> None:
        if self.level < level:
            return
        try:
            prefix = f"{LogLevel(level).name}: "
        except ValueError:
            prefix = ""
        self.stream.write(f"{prefix}{message}\n")

    def error(self, message: str) -> None:
        self.log(message, LogLevel.ERROR)

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO)

    def debug(self, message: str) -> None:
        self.log(message, LogLevel.DEBUG)