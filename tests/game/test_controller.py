"""Tests for TurnController."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.errors import IllegalAction
from checkie.core.move import Jump, JumpChain, Move
from checkie.core.piece import DARK_MAN, LIGHT_KING, LIGHT_MAN
from checkie.core.types import parse_alias as sq
from checkie.game.controller import IDLE_MOVE_LIMIT, TurnController


def controller_for(*pieces, **kwargs) -> TurnController:
    return TurnController(Board.from_aliases(pieces), **kwargs)


class TestIdleCounters:
    def test_starts_at_zero(self) -> None:
        ctrl = TurnController()
        assert ctrl.idle_moves(Color.LIGHT) == 0
        assert ctrl.idle_moves(Color.DARK) == 0
        assert ctrl.idle_limit == IDLE_MOVE_LIMIT

    def test_king_move_increments(self) -> None:
        ctrl = controller_for(("D4", LIGHT_KING))
        ctrl.execute_move(Move(sq("D4"), sq("E5")))
        ctrl.execute_move(Move(sq("E5"), sq("D4")))
        assert ctrl.idle_moves(Color.LIGHT) == 2
        assert ctrl.idle_moves(Color.DARK) == 0

    def test_man_move_resets(self) -> None:
        ctrl = controller_for(("D4", LIGHT_KING), ("A1", LIGHT_MAN), idle_moves={Color.LIGHT: 5})
        ctrl.execute_move(Move(sq("A1"), sq("B2")))
        assert ctrl.idle_moves(Color.LIGHT) == 0

    def test_jump_resets(self) -> None:
        ctrl = controller_for(("A1", LIGHT_KING), ("C3", DARK_MAN), idle_moves={Color.LIGHT: 5})
        ctrl.execute_jump(Jump(sq("A1"), sq("C3"), sq("E5")))
        assert ctrl.idle_moves(Color.LIGHT) == 0

    def test_stalled_only_above_limit(self) -> None:
        ctrl = controller_for(("D4", LIGHT_KING), idle_moves={Color.LIGHT: IDLE_MOVE_LIMIT})
        assert not ctrl.is_stalled(Color.LIGHT)
        ctrl.execute_move(Move(sq("D4"), sq("E5")))
        assert ctrl.is_stalled(Color.LIGHT)
        assert not ctrl.is_stalled(Color.DARK)

    def test_custom_limit(self) -> None:
        ctrl = controller_for(("D4", LIGHT_KING), idle_limit=0)
        ctrl.execute_move(Move(sq("D4"), sq("E5")))
        assert ctrl.is_stalled(Color.LIGHT)


class TestExecution:
    def test_capture_chain_clears_pieces_and_flags(self) -> None:
        ctrl = controller_for(("C3", LIGHT_MAN), ("D4", DARK_MAN), ("F6", DARK_MAN))
        (chain,) = ctrl.legal_options(Color.LIGHT).captures
        ctrl.execute(chain)
        board = ctrl.board
        assert board.at_alias("G7") == LIGHT_MAN
        assert board.at_alias("C3") is None
        assert board.at_alias("D4") is None
        assert board.at_alias("F6") is None
        assert board.captured == 0
        assert board.count_pieces(Color.DARK) == 0

    def test_execute_dispatches_moves(self) -> None:
        ctrl = controller_for(("C3", LIGHT_MAN))
        ctrl.execute(Move(sq("C3"), sq("D4")))
        assert ctrl.board.at_alias("D4") == LIGHT_MAN

    def test_move_from_empty_square_raises(self) -> None:
        ctrl = controller_for(("C3", LIGHT_MAN))
        with pytest.raises(IllegalAction):
            ctrl.execute_move(Move(sq("E3"), sq("F4")))

    def test_broken_chain_raises(self) -> None:
        ctrl = controller_for(("C3", LIGHT_MAN), ("D4", DARK_MAN))
        chain = JumpChain(
            (
                Jump(sq("C3"), sq("D4"), sq("E5")),
                Jump(sq("E5"), sq("F6"), sq("G7")),
            )
        )
        with pytest.raises(IllegalAction):
            ctrl.execute_capture_chain(chain)


class TestPromotion:
    def test_promotes_both_sides(self) -> None:
        ctrl = controller_for(("B8", LIGHT_MAN), ("C1", DARK_MAN), ("D6", LIGHT_MAN))
        promoted = ctrl.promote()
        assert set(promoted) == {sq("B8"), sq("C1")}
        assert ctrl.board.at_alias("B8").is_king
        assert ctrl.board.at_alias("C1").is_king
        assert not ctrl.board.at_alias("D6").is_king

    def test_chain_ending_on_back_row_promotes_after(self) -> None:
        ctrl = controller_for(("D6", LIGHT_MAN), ("E7", DARK_MAN))
        (chain,) = ctrl.legal_options(Color.LIGHT).captures
        ctrl.execute(chain)
        assert ctrl.board.at_alias("F8") == LIGHT_MAN
        assert ctrl.promote() == [sq("F8")]
        assert ctrl.board.at_alias("F8").is_king

    def test_nothing_to_promote(self) -> None:
        assert TurnController().promote() == []


class TestCopy:
    def test_copy_is_independent(self) -> None:
        ctrl = controller_for(("D4", LIGHT_KING), idle_moves={Color.LIGHT: 3}, idle_limit=5)
        clone = ctrl.copy()
        clone.execute_move(Move(sq("D4"), sq("E5")))
        assert clone.idle_moves(Color.LIGHT) == 4
        assert ctrl.idle_moves(Color.LIGHT) == 3
        assert ctrl.board.at_alias("D4") == LIGHT_KING
        assert clone.idle_limit == 5

    def test_legal_options_from_start(self) -> None:
        options = TurnController().legal_options(Color.LIGHT)
        assert len(options.moves) == 7
        assert not options.captures
