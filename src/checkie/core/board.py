"""Board - bit-packed piece placement on the 32 playable squares."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from checkie.core.enums import Color, Rank
from checkie.core.errors import InvalidLayout
from checkie.core.piece import DARK_KING, DARK_MAN, LIGHT_KING, LIGHT_MAN, Piece
from checkie.core.types import (
    BOARD_SIZE,
    Square,
    check_bounds,
    is_usable,
    parse_alias,
    row_mask,
    shift,
    square_of,
)

_FULL_MASK = (1 << 32) - 1
_START_ROWS: dict[Color, tuple[int, ...]] = {
    Color.LIGHT: (0, 1, 2),
    Color.DARK: (5, 6, 7),
}


@dataclass(frozen=True, slots=True)
class BoardSymbols:
    """Characters used by the textual board layout."""

    empty: str = "."
    light_man: str = "l"
    light_king: str = "L"
    dark_man: str = "d"
    dark_king: str = "D"

    def __post_init__(self) -> None:
        chars = (self.empty, self.light_man, self.light_king, self.dark_man, self.dark_king)
        if any(len(c) != 1 or c.isspace() for c in chars):
            raise ValueError("Board symbols must be single non-blank characters")
        if len(set(chars)) != len(chars):
            raise ValueError("Board symbols must be distinct")

    def piece_for(self, char: str) -> Piece | None:
        """Piece denoted by *char*; raises ``KeyError`` for unknown characters."""
        return {
            self.empty: None,
            self.light_man: LIGHT_MAN,
            self.light_king: LIGHT_KING,
            self.dark_man: DARK_MAN,
            self.dark_king: DARK_KING,
        }[char]

    def char_for(self, piece: Piece | None) -> str:
        if piece is None:
            return self.empty
        return {
            LIGHT_MAN: self.light_man,
            LIGHT_KING: self.light_king,
            DARK_MAN: self.dark_man,
            DARK_KING: self.dark_king,
        }[piece]


class Board:
    """Mutable 8x8 checkers board stored as four 32-bit masks.

    * ``occupation`` - a piece stands on the square.
    * ``color`` - 0 light, 1 dark (meaningful only where occupied).
    * ``type`` - 0 man, 1 king (meaningful only where occupied).
    * ``captured`` - the square's piece was taken earlier in the current turn.

    Bits of the unusable light squares do not exist; accessors for those
    squares read as empty and ignore writes.
    """

    __slots__ = ("occupation", "color", "type", "captured")

    def __init__(
        self,
        occupation: int = 0,
        color: int = 0,
        type: int = 0,
        captured: int = 0,
    ) -> None:
        self.occupation = occupation & _FULL_MASK
        # Color/type bits of empty squares are kept at zero.
        self.color = color & self.occupation
        self.type = type & self.occupation
        self.captured = captured & _FULL_MASK

    @staticmethod
    def _squares_from_bitboard(bitboard: int) -> list[Square]:
        squares: list[Square] = []
        while bitboard:
            lsb = bitboard & -bitboard
            squares.append(square_of(lsb.bit_length() - 1))
            bitboard ^= lsb
        return squares

    # -- Element access -----------------------------------------------------

    def at(self, x: int, y: int) -> Piece | None:
        """Piece on ``(x, y)`` or ``None``."""
        check_bounds(x, y)
        if x % 2 != y % 2:
            return None
        bit = shift(x, y)
        if not (self.occupation >> bit) & 1:
            return None
        return Piece.from_bits(self.color >> bit, self.type >> bit)

    def set(self, x: int, y: int, piece: Piece | None) -> None:
        """Place *piece* on ``(x, y)``; ``None`` empties the square."""
        check_bounds(x, y)
        if not is_usable(x, y):
            return
        mask = 1 << shift(x, y)
        if piece is None:
            self.occupation &= ~mask
            self.color &= ~mask
            self.type &= ~mask
            return

        color_bit, type_bit = piece.bits
        self.occupation |= mask
        self.color = self.color | mask if color_bit else self.color & ~mask
        self.type = self.type | mask if type_bit else self.type & ~mask

    def is_empty(self, x: int, y: int) -> bool:
        check_bounds(x, y)
        return not is_usable(x, y) or not (self.occupation >> shift(x, y)) & 1

    def at_alias(self, alias: str) -> Piece | None:
        return self.at(*parse_alias(alias))

    def set_alias(self, alias: str, piece: Piece | None) -> None:
        self.set(*parse_alias(alias), piece)

    # -- Captured-this-turn flags -------------------------------------------

    def set_captured_flag(self, x: int, y: int, flag: bool) -> None:
        check_bounds(x, y)
        if not is_usable(x, y):
            return
        mask = 1 << shift(x, y)
        self.captured = self.captured | mask if flag else self.captured & ~mask

    def is_captured(self, x: int, y: int) -> bool:
        check_bounds(x, y)
        return is_usable(x, y) and bool((self.captured >> shift(x, y)) & 1)

    def clear_captured_flags(self) -> None:
        self.captured = 0

    # -- Query helpers ------------------------------------------------------

    def pieces_bitboard(self, color: Color, rank: Rank | None = None) -> int:
        """Mask of the squares holding *color*'s pieces, optionally of one *rank*."""
        color_mask = self.color if color is Color.DARK else ~self.color
        mask = self.occupation & color_mask
        if rank is not None:
            mask &= self.type if rank is Rank.KING else ~self.type
        return mask & _FULL_MASK

    def count_pieces(self, color: Color, rank: Rank | None = None) -> int:
        return self.pieces_bitboard(color, rank).bit_count()

    def squares(self, color: Color, rank: Rank | None = None) -> list[Square]:
        """Squares occupied by *color*, in bit order."""
        return self._squares_from_bitboard(self.pieces_bitboard(color, rank))

    def men_on_row(self, color: Color, y: int) -> list[Square]:
        mask = self.pieces_bitboard(color, Rank.MAN) & row_mask(y)
        return self._squares_from_bitboard(mask)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        return Board(self.occupation, self.color, self.type, self.captured)

    def clear(self) -> None:
        self.occupation = self.color = self.type = self.captured = 0

    # -- Factories ----------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def standard(cls) -> Board:
        """Standard start: twelve men per side on the three nearest rows."""
        b = cls()
        for color, rows in _START_ROWS.items():
            for y in rows:
                for x in range(y % 2, BOARD_SIZE, 2):
                    b.set(x, y, Piece(color, Rank.MAN))
        return b

    @classmethod
    def from_aliases(cls, pieces: Iterable[tuple[str, Piece]]) -> Board:
        """Build a board from ``(alias, piece)`` pairs such as ``("C3", LIGHT_MAN)``."""
        b = cls()
        for alias, piece in pieces:
            b.set(*parse_alias(alias), piece)
        return b

    @classmethod
    def from_text(cls, text: str, symbols: BoardSymbols | None = None) -> Board:
        """Parse a row-major grid: eight lines of eight characters, row 8 first."""
        symbols = symbols or BoardSymbols()
        lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        if len(lines) != BOARD_SIZE:
            raise InvalidLayout(f"Expected {BOARD_SIZE} rows, got {len(lines)}")

        b = cls()
        for row_idx, line in enumerate(lines):
            y = BOARD_SIZE - 1 - row_idx
            if len(line) != BOARD_SIZE:
                raise InvalidLayout(f"Row {y + 1} must have {BOARD_SIZE} squares: {line!r}")
            for x, char in enumerate(line):
                try:
                    piece = symbols.piece_for(char)
                except KeyError:
                    raise InvalidLayout(
                        f"Unknown symbol {char!r} in row {y + 1}"
                    ) from None
                if piece is None:
                    continue
                if not is_usable(x, y):
                    raise InvalidLayout(f"Piece on unusable square ({x}, {y})")
                b.set(x, y, piece)
        return b

    def to_text(self, symbols: BoardSymbols | None = None) -> str:
        """Inverse of :meth:`from_text`."""
        symbols = symbols or BoardSymbols()
        return "\n".join(
            "".join(symbols.char_for(self.at(x, y)) for x in range(BOARD_SIZE))
            for y in range(BOARD_SIZE - 1, -1, -1)
        )

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.occupation == other.occupation
            and self.color == other.color
            and self.type == other.type
            and self.captured == other.captured
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for x in range(BOARD_SIZE):
                p = self.at(x, y)
                row.append(str(p) if p else ".")
            rows.append(f"{y + 1} {' '.join(row)}")
        rows.append("  A B C D E F G H")
        return "\n".join(rows)
