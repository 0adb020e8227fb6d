"""Concrete player implementations."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, TypeVar

from checkie.core.enums import Color
from checkie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import JumpChain, Move

T = TypeVar("T")


def require_candidates(candidates: Sequence[T]) -> Sequence[T]:
    """Reject an empty candidate list; choosing from nothing is a caller bug."""
    if not candidates:
        raise ValueError("No candidates to choose from")
    return candidates


class PlayerBase(IPlayer):
    """Shared color/name storage for the concrete players."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"{type(self).__name__} ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Color) -> None:
        self._color = value

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False


class RandomPlayer(PlayerBase):
    """Picks uniformly at random from the offered candidates.

    Args:
        color: Side the player plays.
        rng: Random source; pass a seeded ``random.Random`` for
            reproducible games.
    """

    __slots__ = ("_rng",)

    def __init__(
        self,
        color: Color,
        name: str = "",
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(color, name)
        self._rng = rng or random.Random()

    def choose_move(self, moves: Sequence[Move], board: Board) -> Move:
        return self._rng.choice(require_candidates(moves))

    def choose_capture(self, chains: Sequence[JumpChain], board: Board) -> JumpChain:
        return self._rng.choice(require_candidates(chains))


class HumanPlayer(PlayerBase):
    """A human participant answering from a text input source.

    Candidates are listed with their index; the player blocks until a
    valid index is entered.  Malformed or out-of-range input is reported
    and the prompt repeats.

    Args:
        color: Side the human plays.
        name: Display name.
        input_fn: ``(prompt) -> str`` — reads one line of input.
        output_fn: ``(text) -> None`` — shows one line of output.
    """

    __slots__ = ("_input", "_output")

    def __init__(
        self,
        color: Color,
        name: str = "",
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        super().__init__(color, name or f"Player ({color})")
        self._input = input_fn
        self._output = output_fn

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, moves: Sequence[Move], board: Board) -> Move:
        return self._pick(require_candidates(moves))

    def choose_capture(self, chains: Sequence[JumpChain], board: Board) -> JumpChain:
        return self._pick(require_candidates(chains))

    def _pick(self, candidates: Sequence[T]) -> T:
        for idx, candidate in enumerate(candidates):
            self._output(f"{idx}. {candidate}")
        while True:
            text = self._input(f"{self._name}, choose 0-{len(candidates) - 1}: ").strip()
            try:
                index = int(text)
            except ValueError:
                self._output(f'unrecognised option "{text}"')
                continue
            if not 0 <= index < len(candidates):
                self._output(f"no option with index {index}")
                continue
            return candidates[index]
