"""TurnController — owns a board and the idle-move counters of both sides.

Executes chosen moves and capture chains, applies promotion and exposes
the side-to-move's legal options.  Search agents clone controllers freely,
so a controller never shares mutable state with its copies.
"""

from __future__ import annotations

import logging

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Jump, JumpChain, Move
from checkie.core.move_generator import (
    LegalOptions,
    MoveGenerator,
    apply_jump,
    apply_move,
)
from checkie.core.types import Square

_LOGGER = logging.getLogger(__name__)

# A side whose idle counter exceeds this many moves is stalled.
IDLE_MOVE_LIMIT = 8


class TurnController:
    """Board plus per-side counters of consecutive non-capturing king moves."""

    __slots__ = ("_board", "_idle", "_idle_limit")

    def __init__(
        self,
        board: Board | None = None,
        idle_moves: dict[Color, int] | None = None,
        *,
        idle_limit: int = IDLE_MOVE_LIMIT,
    ) -> None:
        self._board = board if board is not None else Board.standard()
        self._idle = [0, 0]
        if idle_moves:
            for color, count in idle_moves.items():
                self._idle[int(color)] = count
        self._idle_limit = idle_limit

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def idle_limit(self) -> int:
        return self._idle_limit

    def idle_moves(self, color: Color) -> int:
        return self._idle[int(color)]

    def is_stalled(self, color: Color) -> bool:
        """Whether *color* has made more idle king moves than allowed."""
        return self._idle[int(color)] > self._idle_limit

    def copy(self) -> TurnController:
        ctrl = TurnController(self._board.copy(), idle_limit=self._idle_limit)
        ctrl._idle = self._idle.copy()
        return ctrl

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_options(self, color: Color) -> LegalOptions:
        return MoveGenerator(self._board).legal_options(color)

    # ── Execution ────────────────────────────────────────────────────────

    def execute_move(self, move: Move) -> None:
        piece = apply_move(self._board, move)
        idx = int(piece.color)
        if piece.is_king:
            self._idle[idx] += 1
        else:
            self._idle[idx] = 0
        _LOGGER.debug("%s plays %s (idle=%d)", piece.color, move, self._idle[idx])

    def execute_jump(self, jump: Jump) -> None:
        """Single hop; captured flags stay set until the chain completes."""
        piece = apply_jump(self._board, jump)
        self._idle[int(piece.color)] = 0

    def execute_capture_chain(self, chain: JumpChain) -> None:
        for jump in chain:
            self.execute_jump(jump)
        self._board.clear_captured_flags()
        _LOGGER.debug("capture %s takes %d piece(s)", chain, len(chain))

    def execute(self, option: Move | JumpChain) -> None:
        """Execute either kind of legal option."""
        if isinstance(option, JumpChain):
            self.execute_capture_chain(option)
        else:
            self.execute_move(option)

    def promote(self) -> list[Square]:
        """Crown every man standing on its promotion row; returns the squares."""
        board = self._board
        promoted: list[Square] = []
        for color in Color:
            for sq in board.men_on_row(color, color.promotion_row):
                piece = board.at(*sq)
                if piece is not None:
                    board.set(*sq, piece.promoted())
                    promoted.append(sq)
        if promoted:
            _LOGGER.debug("promoted %d man/men to king", len(promoted))
        return promoted

    def __repr__(self) -> str:
        return (
            f"TurnController(idle light={self._idle[0]} dark={self._idle[1]})\n"
            f"{self._board!r}"
        )
