"""Tests for Board, Piece and square helpers."""

import pytest

from chesspad.core.board import Board
from chesspad.core.enums import Color, PieceType
from chesspad.core.piece import Piece
from chesspad.core.types import Square, in_bounds, parse_square, square_name


class TestSquares:
    def test_e2_is_row_six_col_four(self) -> None:
        assert parse_square("e2") == Square(6, 4)
        assert square_name(Square(6, 4)) == "e2"

    def test_corners(self) -> None:
        assert parse_square("a8") == Square(0, 0)
        assert parse_square("h1") == Square(7, 7)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e22", "E2"])
    def test_parse_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)

    def test_str_uses_algebraic_name(self) -> None:
        assert str(Square(4, 4)) == "e4"
        assert str(Square(-1, 3)) == "(-1,3)"

    def test_in_bounds(self) -> None:
        assert in_bounds((0, 7))
        assert not in_bounds((8, 0))
        assert not in_bounds((0, -1))


class TestBoardInitial:
    def test_kings(self) -> None:
        board = Board.initial()
        assert board[parse_square("e1")] == Piece(Color.WHITE, PieceType.KING)
        assert board[parse_square("e8")] == Piece(Color.BLACK, PieceType.KING)

    def test_black_on_top_rows(self) -> None:
        board = Board.initial()
        for col in range(8):
            assert board[Square(0, col)].color == Color.BLACK
            assert board[Square(1, col)] == Piece(Color.BLACK, PieceType.PAWN)
            assert board[Square(6, col)] == Piece(Color.WHITE, PieceType.PAWN)
            assert board[Square(7, col)].color == Color.WHITE

    def test_middle_is_empty(self) -> None:
        board = Board.initial()
        assert all(board.is_empty(Square(r, c)) for r in range(2, 6) for c in range(8))

    def test_piece_counts(self) -> None:
        board = Board.initial()
        assert board.count(Color.WHITE) == 16
        assert board.count(Color.BLACK) == 16
        assert len(board.pieces(Color.WHITE, PieceType.PAWN)) == 8

    def test_mirror_symmetric_about_midline(self) -> None:
        board = Board.initial()
        for sq, piece in board.occupied():
            mirror = board[Square(7 - sq.row, sq.col)]
            assert mirror is not None, f"No mirror piece for {sq}"
            assert mirror.piece_type == piece.piece_type
            assert mirror.color == piece.color.opposite


class TestBoardAccess:
    def test_off_board_read_is_none(self) -> None:
        board = Board.initial()
        assert board[Square(-1, 0)] is None
        assert board[Square(0, 8)] is None

    def test_off_board_write_is_ignored(self) -> None:
        board = Board()
        board[Square(8, 8)] = Piece(Color.WHITE, PieceType.QUEEN)
        assert list(board.occupied()) == []

    def test_move_piece_returns_capture(self) -> None:
        board = Board()
        rook = Piece(Color.WHITE, PieceType.ROOK)
        knight = Piece(Color.BLACK, PieceType.KNIGHT)
        board[Square(7, 0)] = rook
        board[Square(2, 0)] = knight
        captured = board.move_piece(Square(7, 0), Square(2, 0))
        assert captured is knight
        assert board[Square(2, 0)] is rook
        assert board.is_empty(Square(7, 0))

    def test_copy_is_deep(self) -> None:
        board = Board.initial()
        clone = board.copy()
        assert clone == board
        clone[parse_square("e2")].piece_type = PieceType.QUEEN
        assert board[parse_square("e2")].piece_type == PieceType.PAWN

    def test_rows_are_detached(self) -> None:
        board = Board.initial()
        grid = board.rows()
        grid[6][4].piece_type = PieceType.KNIGHT
        assert board[Square(6, 4)].piece_type == PieceType.PAWN


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_from_char_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_str_round_trips_char(self) -> None:
        assert str(Piece(Color.BLACK, PieceType.KING)) == "k"

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KNIGHT).symbol == "♘"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"
