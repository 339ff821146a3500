"""Shared character objects handed out by a flyweight factory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Glyph:
    """A single character, shared wherever it is used."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError("a glyph holds exactly one character")

    def render(self) -> str:
        return self.char


class GlyphFactory:
    """Creates each glyph once and returns the same object on later requests."""

    def __init__(self) -> None:
        self._glyphs: dict[str, Glyph] = {}

    def get(self, char: str) -> Glyph:
        glyph = self._glyphs.get(char)
        if glyph is None:
            glyph = self._glyphs[char] = Glyph(char)
        return glyph

    def __len__(self) -> int:
        return len(self._glyphs)


def render_text(factory: GlyphFactory, text: str) -> str:
    """Render ``text`` using glyphs obtained from ``factory``."""
    return "".join(factory.get(char).render() for char in text)