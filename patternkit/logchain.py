"""Log messages passed along a chain of level-specific handlers."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import ClassVar, TextIO


class LogLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class Handler:
    """A link in the chain; handles its own level and passes the rest on."""

    level: ClassVar[LogLevel | None] = None
    label: ClassVar[str] = ""

    def __init__(self, next_handler: Handler | None = None, stream: TextIO | None = None) -> None:
        self.next_handler = next_handler
        self.stream = stream

    def handle(self, level: LogLevel, message: str) -> bool:
        """Write the message if it is this handler's level, else pass it on.

        Returns whether some handler in the chain wrote the message.
        """
        if self.level is not None and level == self.level:
            out = self.stream if self.stream is not None else sys.stdout
            out.write(f"{self.label}: {message}\n")
            return True
        if self.next_handler is not None:
            return self.next_handler.handle(level, message)
        return False


class DebugHandler(Handler):
    level = LogLevel.DEBUG
    label = "Debug"


class InfoHandler(Handler):
    level = LogLevel.INFO
    label = "Info"


class WarningHandler(Handler):
    level = LogLevel.WARNING
    label = "Warning"


class ErrorHandler(Handler):
    level = LogLevel.ERROR
    label = "Error"


def build_chain(stream: TextIO | None = None) -> Handler:
    """Return a debug -> info -> warning -> error chain writing to ``stream``."""
    return DebugHandler(
        InfoHandler(WarningHandler(ErrorHandler(None, stream), stream), stream),
        stream,
    )