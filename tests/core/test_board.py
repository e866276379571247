"""Tests for Board."""

from openingdrill.core.board import Board
from openingdrill.core.enums import Color, PieceType
from openingdrill.core.move import ResolvedMove
from openingdrill.core.piece import Piece
from openingdrill.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    D5, D6, D7, E2, E4, E5, E7,
    Square,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board.piece_at(E8) == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawn_ranks(self) -> None:
        board = Board.initial()
        assert board.pieces(Color.WHITE, PieceType.PAWN) == [Square(6, f) for f in range(8)]
        assert board.pieces(Color.BLACK, PieceType.PAWN) == [Square(1, f) for f in range(8)]

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in range(2, 6):
            for file in range(8):
                assert board[Square(rank, file)] is None

    def test_constructor_holds_start_position(self) -> None:
        board = Board()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board == Board.initial()

    def test_empty_has_no_pieces(self) -> None:
        assert all(piece is None for _, piece in Board.empty().squares())


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board.empty()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board.set(E4, piece)
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_reset_after_moves(self) -> None:
        board = Board.initial()
        board[E4] = board[E2]
        board[E2] = None
        board.reset()
        assert board == Board.initial()

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert all(piece is None for _, piece in board.squares())

    def test_squares_row_major(self) -> None:
        squares = [sq for sq, _ in Board().squares()]
        assert squares[0] == A8
        assert squares[7] == H8
        assert squares[-1] == H1

    def test_snapshot_is_detached(self) -> None:
        board = Board.initial()
        snap = board.snapshot()
        board[E1] = None
        assert snap[7][4] == Piece(Color.WHITE, PieceType.KING)

    def test_from_placement(self) -> None:
        board = Board.from_placement({"e1": "K", "d7": "p"})
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[D7] == Piece(Color.BLACK, PieceType.PAWN)
        assert sum(1 for _, p in board.squares() if p is not None) == 2

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text


class TestBoardApply:
    def test_simple_move(self) -> None:
        board = Board.initial()
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        board.apply(ResolvedMove(E2, E4, pawn))
        assert board[E2] is None
        assert board[E4] == pawn

    def test_capture_replaces_occupant(self) -> None:
        board = Board.from_placement({"e4": "P", "d5": "p"})
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        board.apply(ResolvedMove(E4, D5, pawn, is_capture=True))
        assert board[D5] == pawn
        assert board[E4] is None

    def test_en_passant_clears_bypassed_pawn(self) -> None:
        board = Board.from_placement({"e5": "P", "d5": "p"})
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        board.apply(ResolvedMove(E5, D6, pawn, is_capture=True, is_en_passant=True))
        assert board[D6] == pawn
        assert board[D5] is None
        assert board[E5] is None

    def test_white_kingside_castle(self) -> None:
        board = Board.initial()
        board[F1] = None
        board[G1] = None
        king = Piece(Color.WHITE, PieceType.KING)
        board.apply(ResolvedMove(E1, G1, king, is_castle_kingside=True))
        assert board[G1] == king
        assert board[F1] == Piece(Color.WHITE, PieceType.ROOK)
        assert board[E1] is None
        assert board[H1] is None

    def test_black_queenside_castle(self) -> None:
        board = Board.from_placement({"e8": "k", "a8": "r"})
        king = Piece(Color.BLACK, PieceType.KING)
        board.apply(ResolvedMove(E8, C8, king, is_castle_queenside=True))
        assert board[C8] == king
        assert board[D8] == Piece(Color.BLACK, PieceType.ROOK)
        assert board[E8] is None
        assert board[A8] is None

    def test_promotion_places_new_kind(self) -> None:
        board = Board.from_placement({"e7": "P"})
        pawn = Piece(Color.WHITE, PieceType.PAWN)
        board.apply(ResolvedMove(E7, E8, pawn, promotion=PieceType.QUEEN))
        assert board[E8] == Piece(Color.WHITE, PieceType.QUEEN)
        assert board[E7] is None

    def test_no_legality_check(self) -> None:
        board = Board.from_placement({"a1": "R"})
        rook = Piece(Color.WHITE, PieceType.ROOK)
        board.apply(ResolvedMove(A1, E5, rook))
        assert board[E5] == rook
