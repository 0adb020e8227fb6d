"""Exception taxonomy for the checkers core."""

from __future__ import annotations


class CheckersError(Exception):
    """Base class for all checkie errors."""


class InvalidAlias(CheckersError, ValueError):
    """Malformed or out-of-range square alias such as ``"J9"``."""


class InvalidLayout(CheckersError, ValueError):
    """A textual board layout that cannot be parsed."""


class OutOfBounds(CheckersError, IndexError):
    """A coordinate outside ``0..7`` was passed to a board accessor."""


class IllegalAction(CheckersError, RuntimeError):
    """Executing a move or jump that the board state does not allow."""
