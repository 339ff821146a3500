"""Undoable rectangle dimensions using saved snapshots."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    height: int
    width: int


class History:
    """A last-in, first-out store of snapshots."""

    def __init__(self) -> None:
        self._snapshots: list[Snapshot] = []

    def push(self, snapshot: Snapshot) -> None:
        self._snapshots.append(snapshot)

    def pop(self) -> Snapshot:
        """Remove and return the latest snapshot; IndexError if there is none."""
        if not self._snapshots:
            raise IndexError("nothing to undo")
        return self._snapshots.pop()

    def __len__(self) -> int:
        return len(self._snapshots)


@dataclass
class Rectangle:
    """Dimensions that can be saved and later restored."""

    height: int
    width: int
    history: History = field(default_factory=History, repr=False, compare=False)

    def save(self) -> Snapshot:
        """Record the current dimensions and return the snapshot."""
        logger.info("Saving state: Height = %s, Width = %s", self.height, self.width)
        snapshot = Snapshot(self.height, self.width)
        self.history.push(snapshot)
        return snapshot

    def restore(self) -> Snapshot | None:
        """Return to the latest saved dimensions, or keep them if none were saved."""
        try:
            snapshot = self.history.pop()
        except IndexError:
            return None
        self.height, self.width = snapshot.height, snapshot.width
        logger.info("Restored state: Height = %s, Width = %s", self.height, self.width)
        return snapshot