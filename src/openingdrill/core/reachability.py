"""Piece-geometry reachability.

Only movement shape is checked: there is no path-blocking test for sliders
and no check/pin awareness. Recorded games are trusted to be legal, so shape
plus the disambiguation hints in the move text are enough to find the origin.
"""

from __future__ import annotations

from openingdrill.core.board import Board
from openingdrill.core.enums import Color, PieceType
from openingdrill.core.piece import Piece
from openingdrill.core.types import Square, all_squares


def _pawn_reaches(color: Color, from_sq: Square, to_sq: Square, is_capture: bool) -> bool:
    rank_step = (to_sq.rank - from_sq.rank) * color.forward
    file_diff = abs(to_sq.file - from_sq.file)
    if is_capture:
        return rank_step == 1 and file_diff == 1
    if file_diff != 0:
        return False
    if rank_step == 1:
        return True
    return rank_step == 2 and from_sq.rank == color.pawn_start_rank


def can_reach(piece: Piece, from_sq: Square, to_sq: Square, is_capture: bool = False) -> bool:
    """Whether *piece* standing on *from_sq* could move to *to_sq* by shape alone."""
    dr = abs(to_sq.rank - from_sq.rank)
    df = abs(to_sq.file - from_sq.file)
    ptype = piece.piece_type

    if ptype == PieceType.PAWN:
        return _pawn_reaches(piece.color, from_sq, to_sq, is_capture)
    if ptype == PieceType.KNIGHT:
        return (dr, df) in ((1, 2), (2, 1))
    if ptype == PieceType.BISHOP:
        return dr == df and dr > 0
    if ptype == PieceType.ROOK:
        return (dr == 0) != (df == 0)
    if ptype == PieceType.QUEEN:
        return (dr == df or dr == 0 or df == 0) and (dr > 0 or df > 0)
    if ptype == PieceType.KING:
        return dr <= 1 and df <= 1 and (dr > 0 or df > 0)
    return False


def reachable_squares(board: Board, from_sq: Square) -> list[Square]:
    """Squares the piece on *from_sq* can reach, for move-hint highlighting.

    A destination counts as a capture when it is occupied. Squares held by
    the mover's own pieces are skipped; an empty origin yields no squares.
    """
    piece = board[from_sq]
    if piece is None:
        return []
    result: list[Square] = []
    for sq in all_squares():
        target = board[sq]
        if target is not None and target.color == piece.color:
            continue
        if can_reach(piece, from_sq, sq, is_capture=target is not None):
            result.append(sq)
    return result
