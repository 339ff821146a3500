"""Hotel rooms priced by visitors that know each room type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class RoomVisitor:
    """Gives an amount for each kind of room from its rate table."""

    single_rate: ClassVar[int] = 0
    double_rate: ClassVar[int] = 0
    suite_rate: ClassVar[int] = 0

    def visit_single(self, room: SingleRoom) -> int:
        return self.single_rate

    def visit_double(self, room: DoubleRoom) -> int:
        return self.double_rate

    def visit_suite(self, room: SuiteRoom) -> int:
        return self.suite_rate


class PriceVisitor(RoomVisitor):
    """Nightly price of each room."""

    single_rate = 100
    double_rate = 150
    suite_rate = 250


class MaintenanceVisitor(RoomVisitor):
    """Maintenance cost of each room."""

    single_rate = 20
    double_rate = 30
    suite_rate = 50


class Room(ABC):
    """A room whose ``price`` is set by the last visitor it accepted."""

    def __init__(self) -> None:
        self.price = 0

    def accept(self, visitor: RoomVisitor) -> int:
        """Let ``visitor`` value this room; store and return the amount."""
        self.price = self._visit(visitor)
        return self.price

    @abstractmethod
    def _visit(self, visitor: RoomVisitor) -> int:
        """Call the visitor method for this kind of room."""


class SingleRoom(Room):
    def _visit(self, visitor: RoomVisitor) -> int:
        return visitor.visit_single(self)


class DoubleRoom(Room):
    def _visit(self, visitor: RoomVisitor) -> int:
        return visitor.visit_double(self)


class SuiteRoom(Room):
    def _visit(self, visitor: RoomVisitor) -> int:
        return visitor.visit_suite(self)