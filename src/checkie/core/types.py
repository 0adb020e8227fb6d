"""Square type alias, coordinate helpers and the bit layout of the board.

Only the 32 dark squares are playable. A square ``(x, y)`` is usable when
``x % 2 == y % 2`` and maps to bit ``x // 2 + y * 4``::

    row 8  . 28 . 29 . 30 . 31
    ...
    row 2  . 4  . 5  . 6  . 7        (x odd on odd rows)
    row 1  0 .  1 .  2 .  3 .        (x even on even rows)
           A B  C D  E F  G H
"""

from __future__ import annotations

from typing import TypeAlias

from checkie.core.errors import InvalidAlias, OutOfBounds

Square: TypeAlias = tuple[int, int]  # (x, y), both 0–7

BOARD_SIZE = 8
USABLE_SQUARES = 32

_COLUMNS = "ABCDEFGH"
_ROWS = "12345678"


def in_bounds(x: int, y: int) -> bool:
    """Whether ``(x, y)`` lies on the 8x8 board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def check_bounds(x: int, y: int) -> None:
    """Raise :class:`OutOfBounds` unless ``(x, y)`` lies on the board."""
    if not in_bounds(x, y):
        raise OutOfBounds(f"Coordinate out of bounds: ({x}, {y})")


def is_usable(x: int, y: int) -> bool:
    """Whether ``(x, y)`` is one of the 32 dark, playable squares."""
    return in_bounds(x, y) and x % 2 == y % 2


def shift(x: int, y: int) -> int:
    """Bit index 0–31 of a usable square."""
    return x // 2 + y * 4


def square_of(index: int) -> Square:
    """Inverse of :func:`shift`: usable square addressed by bit *index*."""
    y = index >> 2
    return ((index & 3) * 2 + (y & 1), y)


def square_alias(x: int, y: int) -> str:
    """Human-readable name, e.g. ``(0, 0)`` → ``'A1'``."""
    check_bounds(x, y)
    return _COLUMNS[x] + _ROWS[y]


def parse_alias(alias: str) -> Square:
    """Parse a square alias (case-insensitive), e.g. ``'c3'`` → ``(2, 2)``."""
    if len(alias) != 2:
        raise InvalidAlias(f"Invalid square alias: {alias!r}")
    letter = alias[0].upper()
    digit = alias[1]
    if letter not in _COLUMNS or digit not in _ROWS:
        raise InvalidAlias(f"Invalid square alias: {alias!r}")
    return (_COLUMNS.index(letter), _ROWS.index(digit))


def row_mask(y: int) -> int:
    """Bitmask of the four usable squares on row *y*."""
    return 0b1111 << (y * 4)


DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
