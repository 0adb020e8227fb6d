"""Pluggable static evaluators.

Two variants share the :class:`IEvaluator` protocol:

* :class:`MaterialEvaluator` returns a *difference*: own material minus the
  opponent's.
* :class:`PositionalEvaluator` returns a *one-sided* sum: only the
  perspective side's pieces, weighted by square.

The two scales are not interchangeable. A one-sided score cannot see the
opponent's losses, so a search driven by it values keeping its own pieces on
good squares but is indifferent to captures it makes.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Protocol

from checkie.core.enums import Color, Rank
from checkie.core.types import BOARD_SIZE

if TYPE_CHECKING:
    from checkie.core.board import Board

SquareWeights = tuple[tuple[float, ...], ...]  # indexed [x][y]

DEFAULT_MAN_WEIGHT = 1.0
DEFAULT_KING_WEIGHT = 3.0

# Centre squares are worth more than the rim; symmetric in both axes.
DEFAULT_SQUARE_WEIGHTS: SquareWeights = (
    (1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
    (1.0, 1.2, 1.2, 1.2, 1.2, 1.2, 1.2, 1.0),
    (1.0, 1.2, 1.4, 1.4, 1.4, 1.4, 1.2, 1.0),
    (1.0, 1.2, 1.4, 1.6, 1.6, 1.4, 1.2, 1.0),
    (1.0, 1.2, 1.4, 1.6, 1.6, 1.4, 1.2, 1.0),
    (1.0, 1.2, 1.4, 1.4, 1.4, 1.4, 1.2, 1.0),
    (1.0, 1.2, 1.2, 1.2, 1.2, 1.2, 1.2, 1.0),
    (1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
)


class IEvaluator(Protocol):
    """Scores a board from a fixed perspective; higher is better for ``color``."""

    @property
    def color(self) -> Color: ...

    def score(self, board: Board) -> float: ...

    def for_color(self, color: Color) -> IEvaluator: ...


@dataclass(frozen=True, slots=True)
class MaterialEvaluator:
    """Weighted piece count difference."""

    color: Color
    man_weight: float = DEFAULT_MAN_WEIGHT
    king_weight: float = DEFAULT_KING_WEIGHT

    def score(self, board: Board) -> float:
        return self._material(board, self.color) - self._material(
            board, self.color.opposite
        )

    def _material(self, board: Board, color: Color) -> float:
        men = board.count_pieces(color, Rank.MAN)
        kings = board.count_pieces(color, Rank.KING)
        return men * self.man_weight + kings * self.king_weight

    def for_color(self, color: Color) -> MaterialEvaluator:
        return replace(self, color=color)


@dataclass(frozen=True, slots=True)
class PositionalEvaluator:
    """Sum of square weight times piece weight over the perspective side."""

    color: Color
    weights: SquareWeights = DEFAULT_SQUARE_WEIGHTS
    man_weight: float = DEFAULT_MAN_WEIGHT
    king_weight: float = DEFAULT_KING_WEIGHT

    def __post_init__(self) -> None:
        if len(self.weights) != BOARD_SIZE or any(
            len(column) != BOARD_SIZE for column in self.weights
        ):
            raise ValueError("Square weights must be an 8x8 matrix indexed [x][y]")

    def score(self, board: Board) -> float:
        total = 0.0
        for rank, piece_weight in (
            (Rank.MAN, self.man_weight),
            (Rank.KING, self.king_weight),
        ):
            for x, y in board.squares(self.color, rank):
                total += self.weights[x][y] * piece_weight
        return total

    def for_color(self, color: Color) -> PositionalEvaluator:
        return replace(self, color=color)


EVALUATORS: dict[str, type[MaterialEvaluator] | type[PositionalEvaluator]] = {
    "material": MaterialEvaluator,
    "positional": PositionalEvaluator,
}


def make_evaluator(
    name: str,
    color: Color,
    *,
    man_weight: float = DEFAULT_MAN_WEIGHT,
    king_weight: float = DEFAULT_KING_WEIGHT,
) -> IEvaluator:
    """Build an evaluator by name (``"material"`` or ``"positional"``)."""
    try:
        cls = EVALUATORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown evaluator {name!r}; expected one of {sorted(EVALUATORS)}"
        ) from None
    return cls(color, man_weight=man_weight, king_weight=king_weight)
