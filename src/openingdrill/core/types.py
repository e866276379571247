"""Square type and coordinate helpers.

Grid layout (as stored, viewed from White's side)::

    rank 0 -> eighth rank:  a8=(0, 0) ... h8=(0, 7)
    ...
    rank 7 -> first rank:   a1=(7, 0) ... h1=(7, 7)
"""

from __future__ import annotations

from typing import NamedTuple

FILES = "abcdefgh"


class Square(NamedTuple):
    """Grid coordinate, ``rank`` 0–7 from the top, ``file`` 0–7 from a."""

    rank: int
    file: int

    def __str__(self) -> str:
        return square_name(self)


def make_square(rank: int, file: int) -> Square:
    """Create square from grid rank (0–7) and file (0–7)."""
    if not is_valid_square(rank, file):
        raise ValueError(f"Square out of range: ({rank}, {file})")
    return Square(rank, file)


def file_letter(file: int) -> str:
    return FILES[file]


def rank_digit(rank: int) -> str:
    """Chess rank number for a grid rank index, e.g. 0 → '8'."""
    return str(8 - rank)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (7, 0) → 'a1', (0, 7) → 'h8'."""
    return file_letter(sq.file) + rank_digit(sq.rank)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(rank=4, file=4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), FILES.index(name[0]))


def is_valid_square(rank: int, file: int) -> bool:
    """Check whether the coordinates fall on the board."""
    return 0 <= rank < 8 and 0 <= file < 8


def all_squares() -> list[Square]:
    """Every square in row-major scan order (a8, b8, ..., h1)."""
    return [Square(rank, file) for rank in range(8) for file in range(8)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, f) for f in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, f) for f in range(8))
