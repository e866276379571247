"""SAN (Standard Algebraic Notation) resolution and construction."""

from __future__ import annotations

import logging
import re

from openingdrill.core.board import Board
from openingdrill.core.enums import Color, PieceType
from openingdrill.core.errors import NoMatchingOriginError
from openingdrill.core.move import ResolvedMove
from openingdrill.core.piece import SAN_LETTERS, SAN_LETTERS_REV, Piece
from openingdrill.core.reachability import can_reach
from openingdrill.core.types import (
    FILES,
    Square,
    file_letter,
    parse_square,
    square_name,
)

_LOGGER = logging.getLogger(__name__)

CASTLE_KINGSIDE = "O-O"
CASTLE_QUEENSIDE = "O-O-O"

_ANNOTATION_RE = re.compile(r"[+#!?]")
_SQUARE_RE = re.compile(r"[a-h][1-8]")
_PAWN_CAPTURE_RE = re.compile(r"^([a-h])x")
_HINT_RE = re.compile(r"^([a-h])?([1-8])?x?[a-h][1-8]")
_PROMOTION_RE = re.compile(r"=([QRBN])")


def normalize_san(san: str) -> str:
    """Drop check/annotation marks and spell castling with letter O."""
    clean = _ANNOTATION_RE.sub("", san.strip())
    return clean.replace("0-0-0", CASTLE_QUEENSIDE).replace("0-0", CASTLE_KINGSIDE)


def destination_token(san: str) -> str | None:
    """Trailing square name of already-normalized move text, if any."""
    squares = _SQUARE_RE.findall(san)
    return squares[-1] if squares else None


def promotion_of(san: str) -> PieceType | None:
    """Promotion piece named by a ``=X`` suffix, if any."""
    match = _PROMOTION_RE.search(san)
    return SAN_LETTERS_REV[match.group(1)] if match else None


def _castle_move(color: Color, kingside: bool) -> ResolvedMove:
    rank = color.back_rank
    return ResolvedMove(
        from_sq=Square(rank, 4),
        to_sq=Square(rank, 6 if kingside else 2),
        piece=Piece(color, PieceType.KING),
        is_castle_kingside=kingside,
        is_castle_queenside=not kingside,
    )


def parse_san(board: Board, san: str, color: Color) -> ResolvedMove:
    """Resolve *san* played by *color* against *board*.

    The origin is the first square, scanning a8..h1 row by row, that holds a
    matching piece, satisfies any file/rank hint and can reach the
    destination by shape. Genuinely ambiguous text therefore resolves to the
    earliest square in that order rather than raising.
    """
    clean = normalize_san(san)

    if clean == CASTLE_KINGSIDE:
        return _castle_move(color, kingside=True)
    if clean == CASTLE_QUEENSIDE:
        return _castle_move(color, kingside=False)

    piece_type = PieceType.PAWN
    body = clean
    if body and body[0] in SAN_LETTERS_REV:
        piece_type = SAN_LETTERS_REV[body[0]]
        body = body[1:]

    dest = destination_token(body)
    if dest is None:
        raise NoMatchingOriginError(san, "no destination square")
    to_sq = parse_square(dest)

    # Disambiguation
    from_file: int | None = None
    from_rank: int | None = None
    pawn_capture = _PAWN_CAPTURE_RE.match(body) if piece_type == PieceType.PAWN else None
    if pawn_capture is not None:
        from_file = FILES.index(pawn_capture.group(1))
    else:
        hint = _HINT_RE.match(body)
        if hint is not None:
            if hint.group(1):
                from_file = FILES.index(hint.group(1))
            if hint.group(2):
                from_rank = 8 - int(hint.group(2))

    is_capture = "x" in body
    mover = Piece(color, piece_type)

    from_sq: Square | None = None
    for sq, piece in board.squares():
        if piece != mover:
            continue
        if from_file is not None and sq.file != from_file:
            continue
        if from_rank is not None and sq.rank != from_rank:
            continue
        if can_reach(mover, sq, to_sq, is_capture):
            from_sq = sq
            break

    if from_sq is None:
        raise NoMatchingOriginError(san)

    move = ResolvedMove(
        from_sq=from_sq,
        to_sq=to_sq,
        piece=mover,
        is_capture=is_capture,
        promotion=promotion_of(body),
        is_en_passant=(
            piece_type == PieceType.PAWN and is_capture and board[to_sq] is None
        ),
    )
    _LOGGER.debug("Resolved %s for %s as %s", san, color, move)
    return move


def move_from_squares(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
) -> ResolvedMove:
    """Build a :class:`ResolvedMove` from board coordinates (trainee input)."""
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(from_sq)}")

    file_diff = to_sq.file - from_sq.file
    if (
        piece.piece_type == PieceType.KING
        and from_sq.rank == to_sq.rank
        and abs(file_diff) == 2
    ):
        return _castle_move(piece.color, kingside=file_diff > 0)

    target = board[to_sq]
    en_passant = piece.piece_type == PieceType.PAWN and file_diff != 0 and target is None
    return ResolvedMove(
        from_sq=from_sq,
        to_sq=to_sq,
        piece=piece,
        is_capture=target is not None or en_passant,
        promotion=promotion if piece.piece_type == PieceType.PAWN else None,
        is_en_passant=en_passant,
    )


def move_to_san(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
) -> str:
    """Canonical move text for moving the piece on *from_sq* to *to_sq*.

    No disambiguation or check suffix is emitted; the result is meant for
    :func:`~openingdrill.core.notation.matching.moves_match`, which ignores
    both.
    """
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece on {square_name(from_sq)}")

    file_diff = to_sq.file - from_sq.file
    if (
        piece.piece_type == PieceType.KING
        and from_sq.rank == to_sq.rank
        and abs(file_diff) == 2
    ):
        return CASTLE_KINGSIDE if file_diff > 0 else CASTLE_QUEENSIDE

    is_capture = board[to_sq] is not None
    if piece.piece_type == PieceType.PAWN:
        san = ""
        if is_capture or file_diff != 0:
            san = file_letter(from_sq.file)
            # A file change onto an empty square is en passant.
            is_capture = True
    else:
        san = piece.san_letter

    if is_capture:
        san += "x"
    san += square_name(to_sq)

    if promotion is not None:
        san += "=" + SAN_LETTERS[promotion]
    return san
