"""Core domain layer — pure checkers logic with zero external dependencies.

Quick start::

    from checkie.core import Board, Color, MoveGenerator

    board = Board.standard()
    options = MoveGenerator(board).legal_options(Color.LIGHT)
    for move in options.moves:
        print(move)
"""

from checkie.core.board import Board, BoardSymbols
from checkie.core.enums import Color, GamePhase, GameResult, Rank
from checkie.core.errors import (
    CheckersError,
    IllegalAction,
    InvalidAlias,
    InvalidLayout,
    OutOfBounds,
)
from checkie.core.move import Jump, JumpChain, Move
from checkie.core.move_generator import (
    LegalOptions,
    MoveGenerator,
    apply_jump,
    apply_move,
)
from checkie.core.piece import DARK_KING, DARK_MAN, LIGHT_KING, LIGHT_MAN, Piece
from checkie.core.types import (
    Square,
    is_usable,
    parse_alias,
    shift,
    square_alias,
)

__all__ = [
    # Enums
    "Color",
    "GamePhase",
    "GameResult",
    "Rank",
    # Errors
    "CheckersError",
    "IllegalAction",
    "InvalidAlias",
    "InvalidLayout",
    "OutOfBounds",
    # Types / helpers
    "Square",
    "is_usable",
    "parse_alias",
    "shift",
    "square_alias",
    # Domain objects
    "Board",
    "BoardSymbols",
    "Jump",
    "JumpChain",
    "LegalOptions",
    "Move",
    "MoveGenerator",
    "Piece",
    "apply_jump",
    "apply_move",
    # Piece constants
    "DARK_KING",
    "DARK_MAN",
    "LIGHT_KING",
    "LIGHT_MAN",
]
