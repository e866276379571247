"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from openingdrill.core.enums import Color, PieceType
from openingdrill.core.move import ResolvedMove
from openingdrill.core.piece import Piece
from openingdrill.core.types import (
    Square,
    all_squares,
    file_letter,
    parse_square,
    rank_digit,
)

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# (king from, king to, rook from, rook to) files per castling side
_KINGSIDE_FILES = (4, 6, 7, 5)
_QUEENSIDE_FILES = (4, 2, 0, 3)


class Board:
    """Mutable 8x8 grid of optional pieces, indexed by :class:`Square`.

    Holds no move history and performs no legality checks: ``apply`` trusts
    the resolved move it is given.
    A freshly constructed board holds the standard starting position.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        self.reset()

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._grid[sq[0]][sq[1]] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        return self[sq]

    def set(self, sq: Square, piece: Piece | None) -> None:
        self[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> Iterator[tuple[Square, Piece | None]]:
        """Every square with its occupant, in row-major order (a8 first)."""
        for sq in all_squares():
            yield sq, self[sq]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*, in row-major order."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.squares() if piece == target]

    def snapshot(self) -> tuple[tuple[Piece | None, ...], ...]:
        """Immutable copy of the grid for renderers."""
        return tuple(tuple(row) for row in self._grid)

    # -- Mutation / copying -------------------------------------------------

    def apply(self, move: ResolvedMove) -> None:
        """Play *move* on the grid."""
        color = move.piece.color
        if move.is_castle:
            rank = move.from_sq.rank
            king_from, king_to, rook_from, rook_to = (
                _KINGSIDE_FILES if move.is_castle_kingside else _QUEENSIDE_FILES
            )
            self._grid[rank][king_from] = None
            self._grid[rank][rook_from] = None
            self._grid[rank][king_to] = Piece(color, PieceType.KING)
            self._grid[rank][rook_to] = Piece(color, PieceType.ROOK)
            return

        if move.is_en_passant:
            # The bypassed pawn sits beside the mover, not on the destination.
            self._grid[move.from_sq.rank][move.to_sq.file] = None

        placed = move.piece
        if move.promotion is not None:
            placed = Piece(color, move.promotion)
        self[move.from_sq] = None
        self[move.to_sq] = placed

    def copy(self) -> Board:
        b = Board.empty()
        b._grid = [row.copy() for row in self._grid]
        return b

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]

    def reset(self) -> None:
        """Restore the standard starting position."""
        self.clear()
        for f, pt in enumerate(_BACK_RANK):
            self._grid[0][f] = Piece(Color.BLACK, pt)
            self._grid[1][f] = Piece(Color.BLACK, PieceType.PAWN)
            self._grid[6][f] = Piece(Color.WHITE, PieceType.PAWN)
            self._grid[7][f] = Piece(Color.WHITE, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls()

    @classmethod
    def empty(cls) -> Board:
        """Board with no pieces on it."""
        b = cls()
        b.clear()
        return b

    @classmethod
    def from_placement(cls, placement: dict[str, str]) -> Board:
        """Board holding only the given pieces, e.g. ``{"e1": "K", "b1": "N"}``."""
        b = cls.empty()
        for name, char in placement.items():
            b[parse_square(name)] = Piece.from_char(char)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self._grid):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{rank_digit(rank)} {' '.join(cells)}")
        rows.append("  " + " ".join(file_letter(f) for f in range(8)))
        return "\n".join(rows)
