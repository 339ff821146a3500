"""Cards, accounts and an interactive cash machine."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar, TextIO

DEFAULT_PIN = "1234"

MENU = (
    "1. Withdraw",
    "2. Deposit",
    "3. Check Balance",
    "4. Change Pin",
    "5. Exit",
)


class Card:
    """A bank card with its own balance and PIN."""

    def __init__(self, balance: int = 0, pin: str = DEFAULT_PIN) -> None:
        self.balance = balance
        self.inserted = False
        self._pin = pin

    def insert(self) -> bool:
        """Mark the card as inserted; False if it already was."""
        if self.inserted:
            return False
        self.inserted = True
        return True

    def remove(self) -> None:
        self.inserted = False

    def set_pin(self, pin: str) -> bool:
        """Change the PIN; False if the new PIN equals the current one."""
        if pin == self._pin:
            return False
        self._pin = pin
        return True

    def check_pin(self, pin: str) -> bool:
        return pin == self._pin

    def deposit(self, amount: int) -> None:
        self.balance += amount

    def withdraw(self, amount: int) -> bool:
        """Take ``amount`` if the balance covers it; the card is ejected either way."""
        allowed = self.balance >= amount
        if allowed:
            self.balance -= amount
        self.remove()
        return allowed


@dataclass
class Account:
    username: str
    cards: list[Card] = field(default_factory=list)

    def add_card(self, balance: int = 0) -> Card:
        card = Card(balance)
        self.cards.append(card)
        return card


class ATM:
    """A cash machine that runs a menu-driven session for an inserted card.

    Input lines come from ``read`` (the built-in ``input`` by default) and
    text goes to ``output`` (standard output by default).
    """

    _active: ClassVar[ATM | None] = None

    def __init__(self, read: Callable[[], str] | None = None, output: TextIO | None = None) -> None:
        self._read = read
        self._output = output
        if ATM._active is not None:
            self._say("ATM already in use")
        else:
            ATM._active = self

    def _say(self, line: str) -> None:
        out = self._output if self._output is not None else sys.stdout
        out.write(line + "\n")

    def _next_line(self) -> str:
        reader = self._read if self._read is not None else input
        return reader().strip()

    def _ask(self, prompt: str) -> str:
        self._say(prompt)
        return self._next_line()

    def _ask_amount(self) -> int | None:
        text = self._ask("Enter amount")
        try:
            return int(text)
        except ValueError:
            self._say("Invalid amount")
            return None

    def create_account(self, username: str) -> Account:
        return Account(username)

    def create_card(self, account: Account, balance: int = 0) -> Card:
        return account.add_card(balance)

    def insert_card(self, card: Card) -> None:
        """Run a full session: PIN check, menu until exit, then eject the card."""
        if not card.insert():
            self._say("Card already inserted")
            return
        try:
            if not card.check_pin(self._ask("Enter pin")):
                self._say("Invalid pin")
                card.remove()
                return
            self._session(card)
        except EOFError:
            pass
        card.remove()
        self._say("Thanks for Choosing Us")

    def _session(self, card: Card) -> None:
        while True:
            for line in MENU:
                self._say(line)
            try:
                option = int(self._next_line())
            except ValueError:
                option = 0
            if option == 1:
                amount = self._ask_amount()
                if amount is not None:
                    if card.withdraw(amount):
                        self._say("Amount withdrawn")
                    else:
                        self._say("Insufficient balance")
            elif option == 2:
                amount = self._ask_amount()
                if amount is not None:
                    card.deposit(amount)
                    self._say("Amount deposited")
            elif option == 3:
                self._say(f"Balance: {card.balance}")
            elif option == 4:
                if card.set_pin(self._ask("Enter new pin")):
                    self._say("Pin changed")
                else:
                    self._say("Invalid pin")
            elif option == 5:
                card.remove()
                return
            else:
                self._say("Invalid option")
                return


def main(argv: list[str] | None = None) -> int:
    """Open an account with one card and run an interactive session."""
    parser = argparse.ArgumentParser(description="Run a cash machine session.")
    parser.add_argument("--username", default="Rahul")
    parser.add_argument("--balance", type=int, default=0)
    args = parser.parse_args(argv)

    atm = ATM()
    account = atm.create_account(args.username)
    card = atm.create_card(account, args.balance)
    atm.insert_card(card)
    return 0


if __name__ == "__main__":
    sys.exit(main())