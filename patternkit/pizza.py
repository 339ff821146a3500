"""Pizza prices built up by wrapping a base in toppings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class Pizza(ABC):
    @abstractmethod
    def cost(self) -> float:
        """Return the price of the pizza."""


class PlainPizza(Pizza):
    def cost(self) -> float:
        return 5.0


class Margherita(Pizza):
    def cost(self) -> float:
        return 5.0


class Topping(Pizza):
    """A pizza wrapped with an extra that adds ``price`` to its cost."""

    price: ClassVar[float] = 0.0

    def __init__(self, base: Pizza) -> None:
        self.base = base

    def cost(self) -> float:
        return self.base.cost() + self.price


class Cheese(Topping):
    price = 1.5


class Pepperoni(Topping):
    price = 2.0


class Veggie(Topping):
    price = 1.0