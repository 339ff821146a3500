"""A URL shortener handing out fixed-length codes in a fixed order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import product
from string import ascii_lowercase, ascii_uppercase, digits

CHARSET = "".join(lower + upper for lower, upper in zip(ascii_lowercase, ascii_uppercase)) + digits


class CodePool:
    """Supplies every code of a given length, in order, then reuses released ones.

    Codes are produced lazily; released codes are handed out again only after
    all fresh codes are used, first released first.
    """

    def __init__(self, length: int = 5) -> None:
        if length < 1:
            raise ValueError("code length must be at least 1")
        self.length = length
        self._fresh: Iterator[str] = ("".join(chars) for chars in product(CHARSET, repeat=length))
        self._released: deque[str] = deque()

    def take(self) -> str:
        """Return the next free code; IndexError once none is left."""
        code = next(self._fresh, None)
        if code is not None:
            return code
        if self._released:
            return self._released.popleft()
        raise IndexError("no short codes left")

    def release(self, code: str) -> None:
        """Put a code back so it can be handed out again."""
        self._released.append(code)


@dataclass
class UrlRecord:
    url: str
    short_code: str
    visits: int = 0

    def visit(self) -> str:
        """Count a visit and return the long URL."""
        self.visits += 1
        return self.url


class UrlShortener:
    """Maps short codes to long URLs."""

    def __init__(self, length: int = 5) -> None:
        self._records: dict[str, UrlRecord] = {}
        self._codes = CodePool(length)

    def add(self, long_url: str) -> str:
        """Store ``long_url`` under a fresh code and return the code."""
        code = self._codes.take()
        self._records[code] = UrlRecord(long_url, code)
        return code

    def resolve(self, short_code: str) -> str:
        """Return the long URL for ``short_code``; KeyError if it is unknown."""
        record = self._records.get(short_code)
        if record is None:
            raise KeyError(short_code)
        return record.visit()

    def delete(self, short_code: str) -> None:
        """Forget ``short_code`` and free it for reuse; unknown codes are ignored."""
        if self._records.pop(short_code, None) is not None:
            self._codes.release(short_code)