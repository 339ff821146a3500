"""Per-file log books with error, warning and plain entries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Log(ABC):
    """Keeps formatted log lines grouped by file name."""

    DEFAULT_FILES = ("message", "notification", "top")

    def __init__(self) -> None:
        self._logs: dict[str, list[str]] = {name: [] for name in self.DEFAULT_FILES}

    @property
    def files(self) -> tuple[str, ...]:
        return tuple(self._logs)

    def add(self, message: str, file_name: str, date: str) -> str:
        """Append a formatted line to ``file_name`` and return it."""
        line = self._format(message, date)
        self._logs.setdefault(file_name, []).append(line)
        return line

    def entries(self, file_name: str) -> list[str]:
        """Return a copy of the lines logged to ``file_name``."""
        return list(self._logs.get(file_name, ()))

    @abstractmethod
    def _format(self, message: str, date: str) -> str:
        """Turn a message into a log line."""


class ErrorLog(Log):
    def _format(self, message: str, date: str) -> str:
        return f"{date}[error]{message}"


class WarningLog(Log):
    def _format(self, message: str, date: str) -> str:
        return f"{date}[warn]{message}"


class NormalLog(Log):
    def _format(self, message: str, date: str) -> str:
        return f"{date}{message}"


@dataclass(frozen=True)
class Client:
    name: str
    email: str
    phone: str