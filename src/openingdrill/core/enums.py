"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def back_rank(self) -> int:
        """Grid rank index of this side's back rank (rank 0 is the eighth rank)."""
        return 7 if self == Color.WHITE else 0

    @property
    def pawn_start_rank(self) -> int:
        return 6 if self == Color.WHITE else 1

    @property
    def forward(self) -> int:
        """Rank-index delta of a pawn step: White climbs towards rank index 0."""
        return -1 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
