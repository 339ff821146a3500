"""Observers notified when an item's stock switches between empty and available."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, TextIO


class Observer(ABC):
    """Something that wants to hear about changes to an observable."""

    @abstractmethod
    def update(self) -> str:
        """React to a change and return the notification that was sent."""


class StockObservable:
    """Holds a stock count and notifies observers when it empties or refills.

    Only a change from zero to non-zero, or from non-zero to zero, is taken
    up; any other new value is ignored and the state stays as it was.
    """

    def __init__(self) -> None:
        self.state = 0
        self._observers: list[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Stop notifying ``observer``; unknown observers are ignored."""
        self._observers = [known for known in self._observers if known is not observer]

    def set_state(self, state: int) -> bool:
        """Apply a new state; return whether it was taken up and observers notified."""
        if (self.state == 0) == (state == 0):
            return False
        self.state = state
        for observer in list(self._observers):
            observer.update()
        return True


class _ChannelObserver(Observer):
    channel: ClassVar[str] = ""

    def __init__(
        self,
        name: str,
        address: str,
        observable: StockObservable,
        stream: TextIO | None = None,
    ) -> None:
        self.name = name
        self.address = address
        self.observable = observable
        self.stream = stream
        self.sent: list[str] = []

    def _send(self) -> str:
        message = (
            f"Notification has been sent via {self.channel} to {self.name} "
            f"by using {self.address} for object set as {self.observable.state}"
        )
        self.sent.append(message)
        if self.stream is not None:
            self.stream.write(message + "\n")
        return message

    def update(self) -> str:
        return self._send()


class EmailObserver(_ChannelObserver):
    """Notifies a person by e-mail."""

    channel = "email"

    def __init__(
        self,
        name: str,
        email: str,
        observable: StockObservable,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(name, email, observable, stream)

    @property
    def email(self) -> str:
        return self.address

    def update(self) -> str:
        return self._send()


class MobileObserver(_ChannelObserver):
    """Notifies a person on their mobile phone."""

    channel = "mobile"

    def __init__(
        self,
        name: str,
        mobile_no: str,
        observable: StockObservable,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(name, mobile_no, observable, stream)

    @property
    def mobile_no(self) -> str:
        return self.address

    def update(self) -> str:
        return self._send()