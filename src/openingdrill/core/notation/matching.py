"""Equivalence of two move texts under notation normalization."""

from __future__ import annotations

import re

from openingdrill.core.notation.san import destination_token, normalize_san

_PIECE_RE = re.compile(r"^[KQRBN]")
_SOURCE_FILE_RE = re.compile(r"^[a-h]")


def moves_match(a: str, b: str) -> bool:
    """Whether move texts *a* and *b* denote the same move.

    Disambiguation hints, check marks and annotation glyphs are ignored, as
    are differences between ``O-O`` and ``0-0``. A piece move never matches
    a pawn move. Pawn moves agree when they share destination and capture
    flag, and for captures also the source file.
    """
    a = normalize_san(a)
    b = normalize_san(b)
    if a == b:
        return True

    dest_a = destination_token(a)
    dest_b = destination_token(b)
    if dest_a is None or dest_b is None or dest_a != dest_b:
        return False

    piece_a = _PIECE_RE.match(a)
    piece_b = _PIECE_RE.match(b)
    if piece_a and piece_b:
        return piece_a.group() == piece_b.group()
    if piece_a or piece_b:
        return False

    capture_a = "x" in a
    capture_b = "x" in b
    if capture_a != capture_b:
        return False
    if capture_a:
        file_a = _SOURCE_FILE_RE.match(a)
        file_b = _SOURCE_FILE_RE.match(b)
        return file_a is not None and file_b is not None and file_a.group() == file_b.group()
    return True
