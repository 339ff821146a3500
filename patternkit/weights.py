"""Adapting a pounds-reading scale to a kilogram interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

KG_PER_POUND = 0.453592


class WeightMachine(ABC):
    """A scale that reports weight in pounds."""

    @abstractmethod
    def weight(self) -> float:
        """Return the measured weight in pounds."""


class PoundsWeightMachine(WeightMachine):
    """A scale holding a fixed reading in pounds."""

    def __init__(self, pounds: float) -> None:
        self._pounds = pounds

    def weight(self) -> float:
        return self._pounds


class KilogramAdapter:
    """Presents any pounds scale as one that reports kilograms."""

    def __init__(self, machine: WeightMachine) -> None:
        self.machine = machine

    def weight_in_kg(self) -> float:
        """Return the machine's reading converted to kilograms."""
        return self.machine.weight() * KG_PER_POUND