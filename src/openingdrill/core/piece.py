"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from openingdrill.core.enums import Color, PieceType

# SAN letter ↔ piece type (pawns carry no letter in move text)
SAN_LETTERS: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
SAN_LETTERS_REV: dict[str, PieceType] = {v: k for k, v in SAN_LETTERS.items()}

_KIND_CHARS: dict[PieceType, str] = {PieceType.PAWN: "P", **SAN_LETTERS}
_KIND_CHARS_REV: dict[str, PieceType] = {v: k for k, v in _KIND_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        char = _KIND_CHARS[self.piece_type]
        return char if self.color == Color.WHITE else char.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        ptype = _KIND_CHARS_REV.get(char.upper()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, ptype)

    @property
    def san_letter(self) -> str:
        """Uppercase SAN letter, empty for pawns."""
        return SAN_LETTERS.get(self.piece_type, "")
