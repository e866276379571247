"""Resolved move value object."""

from __future__ import annotations

from dataclasses import dataclass

from openingdrill.core.enums import PieceType
from openingdrill.core.piece import SAN_LETTERS, Piece
from openingdrill.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class ResolvedMove:
    """Concrete origin/destination pair produced from move text."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    is_capture: bool = False
    is_castle_kingside: bool = False
    is_castle_queenside: bool = False
    promotion: PieceType | None = None
    is_en_passant: bool = False

    @property
    def is_castle(self) -> bool:
        return self.is_castle_kingside or self.is_castle_queenside

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += SAN_LETTERS.get(self.promotion, "").lower()
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
