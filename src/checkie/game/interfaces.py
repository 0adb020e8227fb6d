"""Abstract interfaces for the game layer.

The game loop depends on these ABCs, not on concrete player
implementations, so agents can be swapped at construction time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from checkie.core.enums import Color

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.core.move import JumpChain, Move
    from checkie.core.move_generator import LegalOptions
    from checkie.game.controller import TurnController


class IPlayer(ABC):
    """Interface for a game participant (human or agent)."""

    @property
    @abstractmethod
    def color(self) -> Color:
        """Perspective color; the game loop assigns it from the player's seat."""

    @color.setter
    @abstractmethod
    def color(self, value: Color) -> None: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, moves: Sequence[Move], board: Board) -> Move:
        """Pick one of the non-empty *moves*."""

    @abstractmethod
    def choose_capture(self, chains: Sequence[JumpChain], board: Board) -> JumpChain:
        """Pick one of the non-empty mandatory capture *chains*."""

    def choose(
        self,
        options: LegalOptions,
        board: Board,
        controller: TurnController | None = None,
    ) -> Move | JumpChain:
        """Pick a capture when captures are mandatory, otherwise a move.

        *controller* is the live game state (board plus idle counters) for
        players that look ahead; the default implementation ignores it.
        """
        del controller
        if options.captures:
            return self.choose_capture(options.captures, board)
        return self.choose_move(options.moves, board)
