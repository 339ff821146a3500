"""Vehicles whose driving behaviour is a swappable strategy."""

from __future__ import annotations

from typing import ClassVar


class DriveStrategy:
    """A way of driving, described by its message."""

    message: ClassVar[str] = ""

    def drive(self) -> str:
        """Drive and return a description of how."""
        return self.message


class NormalDrive(DriveStrategy):
    message = "Driving with normal strategy."


class SportsDrive(DriveStrategy):
    message = "Driving with sports mode."


class Vehicle:
    """A vehicle that drives using whatever strategy it was given."""

    def __init__(self, drive_strategy: DriveStrategy) -> None:
        self.drive_strategy = drive_strategy

    def perform_drive(self) -> str:
        return self.drive_strategy.drive()


class Passenger(Vehicle):
    def __init__(self) -> None:
        super().__init__(NormalDrive())


class Sports(Vehicle):
    def __init__(self) -> None:
        super().__init__(SportsDrive())


class OffRoad(Vehicle):
    def __init__(self) -> None:
        super().__init__(SportsDrive())