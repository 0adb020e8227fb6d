"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color. The value doubles as the board's color bit."""

    LIGHT = 0
    DARK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row direction in which this side's men advance."""
        return 1 if self is Color.LIGHT else -1

    @property
    def promotion_row(self) -> int:
        """Row on which this side's men become kings."""
        return 7 if self is Color.LIGHT else 0

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank. The value doubles as the board's type bit."""

    MAN = 0
    KING = 1


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    LIGHT_WINS = 1
    DARK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.LIGHT_WINS if color is Color.LIGHT else cls.DARK_WINS

    @property
    def winner(self) -> Color | None:
        if self is GameResult.LIGHT_WINS:
            return Color.LIGHT
        if self is GameResult.DARK_WINS:
            return Color.DARK
        return None


class GamePhase(IntEnum):
    """Finite-state-machine states for a checkers game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    GAME_OVER = auto()
