"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.enums import Color, Rank

_CHARS: dict[tuple[Color, Rank], str] = {
    (Color.LIGHT, Rank.MAN): "l",
    (Color.LIGHT, Rank.KING): "L",
    (Color.DARK, Rank.MAN): "d",
    (Color.DARK, Rank.KING): "D",
}

_UNICODE: dict[tuple[Color, Rank], str] = {
    (Color.LIGHT, Rank.MAN): "⛀",
    (Color.LIGHT, Rank.KING): "⛁",
    (Color.DARK, Rank.MAN): "⛂",
    (Color.DARK, Rank.KING): "⛃",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a man or king of one side."""

    color: Color
    rank: Rank = Rank.MAN

    # ── Bit encoding ─────────────────────────────────────────────────────

    @property
    def bits(self) -> tuple[int, int]:
        """``(color_bit, type_bit)`` as stored in the board masks."""
        return (int(self.color), int(self.rank))

    @classmethod
    def from_bits(cls, color_bit: int, type_bit: int) -> Piece:
        return _BY_BITS[(color_bit & 1, type_bit & 1)]

    # ── Helpers ──────────────────────────────────────────────────────────

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def promoted(self) -> Piece:
        """The king of the same color."""
        return Piece(self.color, Rank.KING)

    def __str__(self) -> str:
        return _CHARS[(self.color, self.rank)]

    @property
    def symbol(self) -> str:
        """Unicode draughts symbol, e.g. ⛀."""
        return _UNICODE[(self.color, self.rank)]


LIGHT_MAN = Piece(Color.LIGHT, Rank.MAN)
LIGHT_KING = Piece(Color.LIGHT, Rank.KING)
DARK_MAN = Piece(Color.DARK, Rank.MAN)
DARK_KING = Piece(Color.DARK, Rank.KING)

_BY_BITS: dict[tuple[int, int], Piece] = {
    p.bits: p for p in (LIGHT_MAN, LIGHT_KING, DARK_MAN, DARK_KING)
}
