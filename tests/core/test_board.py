"""Tests for Board."""

import pytest

from checkie.core.board import Board, BoardSymbols
from checkie.core.enums import Color, Rank
from checkie.core.errors import InvalidAlias, InvalidLayout, OutOfBounds
from checkie.core.piece import DARK_KING, DARK_MAN, LIGHT_KING, LIGHT_MAN, Piece
from checkie.core.types import is_usable

ALL_PIECES = [LIGHT_MAN, LIGHT_KING, DARK_MAN, DARK_KING]
USABLE = [(x, y) for y in range(8) for x in range(8) if is_usable(x, y)]

STANDARD_TEXT = """
.d.d.d.d
d.d.d.d.
.d.d.d.d
........
........
l.l.l.l.
.l.l.l.l
l.l.l.l.
"""


class TestBoardStandard:
    def test_piece_counts(self) -> None:
        board = Board.standard()
        assert board.count_pieces(Color.LIGHT, Rank.MAN) == 12
        assert board.count_pieces(Color.DARK, Rank.MAN) == 12
        assert board.count_pieces(Color.LIGHT, Rank.KING) == 0
        assert board.count_pieces(Color.DARK, Rank.KING) == 0

    def test_light_rows(self) -> None:
        board = Board.standard()
        assert all(y <= 2 for _, y in board.squares(Color.LIGHT))

    def test_dark_rows(self) -> None:
        board = Board.standard()
        assert all(y >= 5 for _, y in board.squares(Color.DARK))

    def test_corner_squares(self) -> None:
        board = Board.standard()
        assert board.at_alias("A1") == LIGHT_MAN
        assert board.at_alias("H8") == DARK_MAN
        assert board.at_alias("D4") is None

    def test_matches_text_layout(self) -> None:
        assert Board.from_text(STANDARD_TEXT) == Board.standard()
        assert Board.standard().to_text() == STANDARD_TEXT.strip()

    def test_empty(self) -> None:
        board = Board.empty()
        assert board.occupation == 0
        assert all(board.at(x, y) is None for x, y in USABLE)


class TestBoardAccess:
    @pytest.mark.parametrize("piece", ALL_PIECES)
    def test_set_then_at_every_square(self, piece: Piece) -> None:
        board = Board()
        for x, y in USABLE:
            board.set(x, y, piece)
            assert board.at(x, y) == piece
            board.set(x, y, None)
            assert board.at(x, y) is None

    def test_overwrite_clears_old_bits(self) -> None:
        board = Board()
        board.set(3, 3, DARK_KING)
        board.set(3, 3, LIGHT_MAN)
        assert board.at(3, 3) == LIGHT_MAN
        assert board.color == 0
        assert board.type == 0

    def test_removal_zeroes_color_and_type(self) -> None:
        board = Board()
        board.set(3, 3, DARK_KING)
        board.set(3, 3, None)
        assert board.occupation == board.color == board.type == 0

    def test_unusable_square_is_noop(self) -> None:
        board = Board()
        board.set(1, 0, DARK_MAN)
        assert board.at(1, 0) is None
        assert board.occupation == 0
        # (1, 0) shares a bit index with (0, 0); make sure nothing leaked there.
        assert board.at(0, 0) is None

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_out_of_bounds(self, x: int, y: int) -> None:
        board = Board()
        with pytest.raises(OutOfBounds):
            board.at(x, y)
        with pytest.raises(OutOfBounds):
            board.set(x, y, LIGHT_MAN)

    def test_aliases(self) -> None:
        board = Board()
        board.set_alias("e5", DARK_KING)
        assert board.at(4, 4) == DARK_KING
        with pytest.raises(InvalidAlias):
            board.at_alias("K2")

    def test_count_pieces_without_rank(self) -> None:
        board = Board.from_aliases(
            [("A1", LIGHT_MAN), ("C3", LIGHT_KING), ("H8", DARK_KING)]
        )
        assert board.count_pieces(Color.LIGHT) == 2
        assert board.count_pieces(Color.LIGHT, Rank.KING) == 1
        assert board.count_pieces(Color.DARK) == 1
        assert board.count_pieces(Color.DARK, Rank.MAN) == 0


class TestCapturedFlags:
    def test_set_and_clear(self) -> None:
        board = Board()
        board.set_captured_flag(3, 3, True)
        assert board.is_captured(3, 3)
        board.set_captured_flag(3, 3, False)
        assert not board.is_captured(3, 3)
        board.set_captured_flag(5, 5, True)
        board.clear_captured_flags()
        assert board.captured == 0

    def test_unusable_square_never_flagged(self) -> None:
        board = Board()
        board.set_captured_flag(0, 1, True)
        assert not board.is_captured(0, 1)
        assert board.captured == 0


class TestBoardLayouts:
    def test_from_aliases(self) -> None:
        board = Board.from_aliases([("C3", LIGHT_MAN), ("d4", DARK_KING)])
        assert board.at(2, 2) == LIGHT_MAN
        assert board.at(3, 3) == DARK_KING
        assert board.count_pieces(Color.LIGHT) + board.count_pieces(Color.DARK) == 2

    def test_custom_symbols(self) -> None:
        symbols = BoardSymbols(empty="-", light_man="w", light_king="W", dark_man="b", dark_king="B")
        text = "\n".join(["-" * 8] * 7 + ["W-------"])
        board = Board.from_text(text, symbols)
        assert board.at(0, 0) == LIGHT_KING
        assert board.to_text(symbols) == text

    def test_piece_on_unusable_square(self) -> None:
        text = "\n".join(["." * 8] * 7 + [".l......"])
        with pytest.raises(InvalidLayout, match="unusable"):
            Board.from_text(text)

    def test_wrong_row_count(self) -> None:
        with pytest.raises(InvalidLayout):
            Board.from_text("........\n........")

    def test_wrong_row_length(self) -> None:
        text = "\n".join(["." * 8] * 7 + ["l......"])
        with pytest.raises(InvalidLayout):
            Board.from_text(text)

    def test_unknown_symbol(self) -> None:
        text = "\n".join(["." * 8] * 7 + ["x......."])
        with pytest.raises(InvalidLayout, match="Unknown symbol"):
            Board.from_text(text)

    def test_symbols_must_be_distinct(self) -> None:
        with pytest.raises(ValueError):
            BoardSymbols(empty="l")


class TestBoardOperations:
    def test_copy_independence(self) -> None:
        board = Board.standard()
        copy = board.copy()
        assert board == copy
        copy.set(0, 0, None)
        assert board != copy
        assert board.at(0, 0) == LIGHT_MAN

    def test_clear(self) -> None:
        board = Board.standard()
        board.clear()
        assert board == Board.empty()

    def test_men_on_row(self) -> None:
        board = Board.from_aliases([("B8", LIGHT_MAN), ("D8", LIGHT_KING), ("F8", DARK_MAN)])
        assert board.men_on_row(Color.LIGHT, 7) == [(1, 7)]
        assert board.men_on_row(Color.DARK, 7) == [(5, 7)]

    def test_repr_not_empty(self) -> None:
        text = repr(Board.standard())
        assert "A B C D E F G H" in text
        assert "d" in text and "l" in text
