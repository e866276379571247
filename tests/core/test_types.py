"""Tests for squares and pieces."""

import pytest

from openingdrill.core.enums import Color, PieceType
from openingdrill.core.piece import Piece
from openingdrill.core.types import (
    A1,
    A8,
    E4,
    H1,
    Square,
    make_square,
    parse_square,
    square_name,
)


class TestSquares:
    def test_grid_origin_is_a8(self) -> None:
        assert A8 == Square(0, 0)
        assert H1 == Square(7, 7)

    def test_square_name(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(E4) == "e4"
        assert str(Square(0, 7)) == "h8"

    def test_parse_square(self) -> None:
        assert parse_square("e4") == Square(4, 4)
        assert parse_square("a8") == A8

    @pytest.mark.parametrize("name", ["", "e", "i4", "e9", "e44"])
    def test_parse_square_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square"):
            parse_square(name)

    def test_make_square_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            make_square(8, 0)


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_str_roundtrip(self) -> None:
        for char in "PNBRQKpnbrqk":
            assert str(Piece.from_char(char)) == char

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece"):
            Piece.from_char("x")

    def test_san_letter(self) -> None:
        assert Piece(Color.BLACK, PieceType.KNIGHT).san_letter == "N"
        assert Piece(Color.WHITE, PieceType.PAWN).san_letter == ""


class TestColor:
    def test_geometry_helpers(self) -> None:
        assert Color.WHITE.back_rank == 7
        assert Color.BLACK.back_rank == 0
        assert Color.WHITE.forward == -1
        assert Color.BLACK.pawn_start_rank == 1
        assert Color.WHITE.opposite == Color.BLACK
