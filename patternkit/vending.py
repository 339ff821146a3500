"""A coin-operated vending machine driven by explicit state objects."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Item:
    """A product on sale in the machine."""

    name: str
    id: int
    price: int
    available: bool = True


class VendingMachine:
    """Holds the inventory, the inserted coins and the current state.

    Every message the machine or its states emit is logged and kept in
    ``messages`` in the order it was produced.
    """

    def __init__(self) -> None:
        self.coins = 0
        self.current_item: Item | None = None
        self.items: list[Item] = []
        self.dispensed: list[Item] = []
        self.messages: list[str] = []
        self.state: State = IdleState(self)
        self.state.on_enter()

    def say(self, message: str) -> None:
        logger.info(message)
        self.messages.append(message)

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def set_state(self, state: State) -> None:
        """Switch to ``state`` and let it run its entry actions."""
        self.state = state
        self.say(f"State changed to: {state.name}")
        state.on_enter()

    def select_item(self, item_id: int) -> Item | None:
        """Make the item with ``item_id`` current; 0 or an unknown id clears it."""
        if item_id == 0:
            self.current_item = None
        else:
            self.current_item = next((item for item in self.items if item.id == item_id), None)
        return self.current_item

    def update_inventory(self) -> None:
        """Take the current item out of the inventory."""
        current = self.current_item
        if current is not None:
            self.items = [item for item in self.items if item is not current]

    def reset(self) -> None:
        """Clear coins and selection and go back to the idle state."""
        self.say("Resetting vending machine state to initial size.")
        self.coins = 0
        self.current_item = None
        self.set_state(IdleState(self))


class State(ABC):
    """One state of a vending machine; each button press is a method."""

    name: ClassVar[str] = ""

    def __init__(self, machine: VendingMachine) -> None:
        self.machine = machine

    def on_enter(self) -> None:
        """Actions run when the machine switches into this state."""

    @abstractmethod
    def insert_coin(self, coin: int) -> None:
        """Drop a coin into the machine."""

    @abstractmethod
    def press_insert(self) -> None:
        """Press the button that starts coin insertion."""

    @abstractmethod
    def press_product(self) -> None:
        """Press the button that ends coin insertion."""

    @abstractmethod
    def press_cancel(self) -> None:
        """Press the cancel button."""

    @abstractmethod
    def select_product(self, product_id: int) -> None:
        """Choose a product by its id."""


class IdleState(State):
    name = "Idle State"

    def on_enter(self) -> None:
        self.machine.coins = 0
        self.machine.current_item = None

    def insert_coin(self, coin: int) -> None:
        self.machine.say("Please press the insert button first.")

    def press_insert(self) -> None:
        self.machine.say("Please insert coin.")
        self.machine.set_state(InsertCoinState(self.machine))

    def press_product(self) -> None:
        self.machine.say("Please press the insert button first.")

    def press_cancel(self) -> None:
        self.machine.say("Please press the insert button first.")

    def select_product(self, product_id: int) -> None:
        self.machine.say("No product selected in idle state.")


class InsertCoinState(State):
    name = "Insert Coin State"

    def __init__(self, machine: VendingMachine) -> None:
        super().__init__(machine)
        self.total_coins = 0

    def insert_coin(self, coin: int) -> None:
        self.total_coins += coin

    def press_insert(self) -> None:
        self.machine.say("Please insert coin.")

    def press_product(self) -> None:
        self.machine.say(f"Coin inserted: {self.total_coins}")
        self.machine.coins = self.total_coins
        self.machine.set_state(SelectProductState(self.machine))

    def press_cancel(self) -> None:
        self.machine.say("Coin insertion cancelled.")
        self.machine.set_state(CancelState(self.machine))

    def select_product(self, product_id: int) -> None:
        self.machine.say("No product selected in insert coin state.")


class SelectProductState(State):
    name = "Select Product State"

    def _can_dispense(self) -> bool:
        item = self.machine.current_item
        if item is None or not item.available:
            return False
        if self.machine.coins < item.price:
            self.machine.say("Insufficient coins for the selected product.")
            return False
        return True

    def insert_coin(self, coin: int) -> None:
        self.machine.say("Product selection in progress. Please wait.")

    def press_insert(self) -> None:
        self.machine.say("Product selection in progress. Please wait.")

    def press_product(self) -> None:
        self.machine.say("Product selection in progress. Please wait.")

    def press_cancel(self) -> None:
        self.machine.say("Product selection cancelled.")
        self.machine.set_state(CancelState(self.machine))

    def select_product(self, product_id: int) -> None:
        self.machine.select_item(product_id)
        self.machine.say(f"Product set to: {product_id}")
        if self._can_dispense():
            self.machine.set_state(DispenseState(self.machine))
        else:
            self.machine.set_state(CancelState(self.machine))


class DispenseState(State):
    """Hands out the selected item, then returns the machine to idle."""

    name = "Dispense State"

    def on_enter(self) -> None:
        self.machine.say("Product dispensed successfully.")
        if self.machine.current_item is not None:
            self.machine.dispensed.append(self.machine.current_item)
        self.machine.update_inventory()
        self.machine.reset()

    def _busy(self) -> None:
        self.machine.say("Dispensing product. Please wait.")

    def insert_coin(self, coin: int) -> None:
        self._busy()

    def press_insert(self) -> None:
        self._busy()

    def press_product(self) -> None:
        self._busy()

    def press_cancel(self) -> None:
        self._busy()

    def select_product(self, product_id: int) -> None:
        self._busy()


class CancelState(State):
    """Refunds the inserted coins, then returns the machine to idle."""

    name = "Cancel State"

    def __init__(self, machine: VendingMachine) -> None:
        super().__init__(machine)
        self.refund = 0

    def on_enter(self) -> None:
        self.machine.say("Transaction cancelled. Returning to idle state.")
        self.refund = self.machine.coins
        self.machine.say(f"Returning coins: {self.refund}")
        self.machine.coins = 0
        self.machine.select_item(0)
        self.machine.reset()

    def insert_coin(self, coin: int) -> None:
        self.machine.say("Transaction cancelled. Cannot insert coins.")

    def press_insert(self) -> None:
        self.machine.say("Transaction cancelled. Cannot insert coins.")

    def press_product(self) -> None:
        self.machine.say("Transaction cancelled. Cannot select products.")

    def press_cancel(self) -> None:
        self.machine.say("Already in cancel state. Returning to idle state.")

    def select_product(self, product_id: int) -> None:
        self.machine.say("Transaction cancelled. Cannot set products.")