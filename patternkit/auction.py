"""Bidders that talk to each other only through an auction."""

from __future__ import annotations

from typing import TextIO


class Auction:
    """Relays every bid to all other registered bidders."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.bidders: list[Bidder] = []

    def register(self, bidder: Bidder) -> None:
        self.bidders.append(bidder)

    def broadcast(self, sender: Bidder, amount: int) -> None:
        """Notify every bidder other than ``sender`` of the bid."""
        message = f"{sender.name} placed a bid of {amount}"
        for bidder in self.bidders:
            if bidder is not sender:
                bidder.receive(message)


class Bidder:
    """A participant that joins an auction on creation and keeps its notices."""

    def __init__(self, auction: Auction, name: str, stream: TextIO | None = None) -> None:
        self.auction = auction
        self.name = name
        self.stream = stream
        self.inbox: list[str] = []
        auction.register(self)

    def _write(self, line: str) -> None:
        if self.stream is not None:
            self.stream.write(line + "\n")

    def place_bid(self, amount: int) -> None:
        self._write(f"{self.name} is placing a bid of {amount}")
        self.auction.broadcast(self, amount)

    def receive(self, message: str) -> None:
        self.inbox.append(message)
        self._write(f"{self.name} received notification: {message}")