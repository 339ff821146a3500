"""Files and directories listed through a common composite interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Entry(ABC):
    """Anything that can appear in a directory."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def ls(self, prefix: str) -> list[str]:
        """Return listing lines for this entry."""


class File(Entry):
    def ls(self, prefix: str = "|") -> list[str]:
        return [f"{prefix}File: {self.name}"]


class Directory(Entry):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.children: list[Entry] = []

    def ls(self, prefix: str = "|->") -> list[str]:
        lines = [f"{prefix}Directory: {self.name}"]
        for child in self.children:
            lines.extend(child.ls(prefix + "->"))
        return lines

    def add(self, item: Entry) -> None:
        """Append an entry to this directory."""
        self.children.append(item)