"""Move and capture generation plus the two board mutators.

Rules implemented here:

* Men step one square along either forward diagonal and capture along all
  four diagonals by hopping an adjacent enemy onto the empty square behind.
* Kings slide any distance along a diagonal and capture a single enemy at any
  distance, landing on any empty square beyond it.
* Capturing is mandatory and only the longest chains (over all pieces of the
  side) are legal. Promotion is not applied in the middle of a chain.
"""

from __future__ import annotations

from typing import NamedTuple

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.errors import IllegalAction
from checkie.core.move import Jump, JumpChain, Move
from checkie.core.piece import Piece
from checkie.core.types import (
    BOARD_SIZE,
    DIAGONALS,
    Square,
    check_bounds,
    in_bounds,
    is_usable,
    square_alias,
)

# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> dict[Square, dict[tuple[int, int], tuple[Square, ...]]]:
    rays: dict[Square, dict[tuple[int, int], tuple[Square, ...]]] = {}
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            square_rays: dict[tuple[int, int], tuple[Square, ...]] = {}
            for dx, dy in DIAGONALS:
                ax, ay = x + dx, y + dy
                ray: list[Square] = []
                while in_bounds(ax, ay):
                    ray.append((ax, ay))
                    ax += dx
                    ay += dy
                square_rays[(dx, dy)] = tuple(ray)
            rays[(x, y)] = square_rays
    return rays


_RAYS = _build_rays()


class LegalOptions(NamedTuple):
    """Everything the side to move may do: captures *or* moves, never both."""

    captures: list[JumpChain]
    moves: list[Move]

    @property
    def has_captures(self) -> bool:
        return bool(self.captures)

    @property
    def is_empty(self) -> bool:
        return not self.captures and not self.moves


# -- Board mutators --------------------------------------------------------


def _require_piece(board: Board, sq: Square) -> Piece:
    piece = board.at(*sq)
    if piece is None:
        raise IllegalAction(f"No piece on {square_alias(*sq)}")
    return piece


def _require_landing(board: Board, sq: Square) -> None:
    if not is_usable(*sq) or not board.is_empty(*sq):
        raise IllegalAction(f"Cannot land on {square_alias(*sq)}")


def apply_move(board: Board, move: Move) -> Piece:
    """Relocate the piece on ``move.start``; returns the moved piece."""
    piece = _require_piece(board, move.start)
    _require_landing(board, move.end)
    board.set(*move.start, None)
    board.set(*move.end, piece)
    return piece


def apply_jump(board: Board, jump: Jump) -> Piece:
    """Hop over ``jump.over``: flag the square, then remove the taken piece."""
    piece = _require_piece(board, jump.start)
    _require_landing(board, jump.end)
    if board.at(*jump.over) is None:
        raise IllegalAction(f"Nothing to capture on {square_alias(*jump.over)}")
    board.set(*jump.start, None)
    board.set(*jump.end, piece)
    board.set_captured_flag(*jump.over, True)
    board.set(*jump.over, None)
    return piece


def _extend_chain(
    board: Board,
    sq: Square,
    path: tuple[Jump, ...],
    found: list[tuple[Jump, ...]],
) -> None:
    jumps = MoveGenerator(board).possible_jumps_at(*sq)
    if not jumps:
        if path:
            found.append(path)
        return
    for jump in jumps:
        scratch = board.copy()
        apply_jump(scratch, jump)
        _extend_chain(scratch, jump.end, path + (jump,), found)


class MoveGenerator:
    """Pure move/capture queries over a :class:`Board` snapshot."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Geometry -----------------------------------------------------------

    @staticmethod
    def diagonal_ray(x: int, y: int, dx: int, dy: int) -> tuple[Square, ...]:
        """In-bounds squares from ``(x, y)`` stepping by ``(dx, dy)``, origin excluded."""
        check_bounds(x, y)
        try:
            return _RAYS[(x, y)][(dx, dy)]
        except KeyError:
            raise ValueError(f"Not a diagonal direction: ({dx}, {dy})") from None

    # -- Quiet moves ----------------------------------------------------------

    def can_slide(self, piece: Piece, x: int, y: int) -> bool:
        """Whether *piece* standing on ``(x, y)`` has at least one quiet move."""
        check_bounds(x, y)
        return bool(self._slides(piece, x, y))

    def moves_at(self, x: int, y: int) -> list[Move]:
        """Quiet moves of the piece on ``(x, y)`` (empty list for an empty square)."""
        piece = self._board.at(x, y)
        if piece is None:
            return []
        return self._slides(piece, x, y)

    def _slides(self, piece: Piece, x: int, y: int) -> list[Move]:
        board = self._board
        rays = _RAYS[(x, y)]
        moves: list[Move] = []

        if piece.is_king:
            for direction in DIAGONALS:
                for to_sq in rays[direction]:
                    if not board.is_empty(*to_sq):
                        break
                    moves.append(Move((x, y), to_sq))
            return moves

        dy = piece.color.forward
        for dx in (-1, 1):
            ray = rays[(dx, dy)]
            if ray and board.is_empty(*ray[0]):
                moves.append(Move((x, y), ray[0]))
        return moves

    # -- Captures -------------------------------------------------------------

    def possible_jumps_at(self, x: int, y: int) -> list[Jump]:
        """Single capture hops available to the piece on ``(x, y)``."""
        board = self._board
        piece = board.at(x, y)
        if piece is None:
            return []

        enemy = piece.color.opposite
        rays = _RAYS[(x, y)]
        jumps: list[Jump] = []

        for direction in DIAGONALS:
            ray = rays[direction]
            if not piece.is_king:
                if len(ray) >= 2 and self._is_target(ray[0], enemy):
                    if board.is_empty(*ray[1]):
                        jumps.append(Jump((x, y), ray[0], ray[1]))
                continue

            for idx, sq in enumerate(ray):
                if self._is_open(sq):
                    continue
                if self._is_target(sq, enemy):
                    for landing in ray[idx + 1 :]:
                        if not self._is_open(landing):
                            break
                        jumps.append(Jump((x, y), sq, landing))
                break

        return jumps

    def capture_chains_at(self, x: int, y: int) -> list[JumpChain]:
        """Longest capture chains starting on ``(x, y)``."""
        found: list[tuple[Jump, ...]] = []
        _extend_chain(self._board, (x, y), (), found)
        if not found:
            return []
        longest = max(len(path) for path in found)
        return [JumpChain(path) for path in found if len(path) == longest]

    def _is_open(self, sq: Square) -> bool:
        return self._board.is_empty(*sq) and not self._board.is_captured(*sq)

    def _is_target(self, sq: Square, enemy: Color) -> bool:
        piece = self._board.at(*sq)
        return (
            piece is not None
            and piece.color is enemy
            and not self._board.is_captured(*sq)
        )

    # -- Whole side -------------------------------------------------------------

    def all_moves(self, color: Color) -> list[Move]:
        moves: list[Move] = []
        for sq in self._board.squares(color):
            moves.extend(self.moves_at(*sq))
        return moves

    def all_capture_chains(self, color: Color) -> list[JumpChain]:
        chains: list[JumpChain] = []
        for sq in self._board.squares(color):
            chains.extend(self.capture_chains_at(*sq))
        return chains

    def legal_options(self, color: Color) -> LegalOptions:
        """Mandatory longest captures if any exist, otherwise quiet moves."""
        chains = self.all_capture_chains(color)
        if chains:
            longest = max(len(c) for c in chains)
            return LegalOptions([c for c in chains if len(c) == longest], [])
        return LegalOptions([], self.all_moves(color))
