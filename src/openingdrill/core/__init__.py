"""Core domain layer: board, move resolution and PGN line extraction.

Quick start::

    from openingdrill.core import Board, Color, parse_pgn_game, parse_san

    game = parse_pgn_game("1. e4 e5 2. Nf3 (2. Nc3 Nc6) Nc6")
    board = Board.initial()
    for ply, san in enumerate(game.variations[1].moves):
        color = Color.WHITE if ply % 2 == 0 else Color.BLACK
        board.apply(parse_san(board, san, color))
"""

from openingdrill.core.board import Board
from openingdrill.core.enums import Color, PieceType
from openingdrill.core.errors import (
    AttemptMismatchError,
    MalformedPgnError,
    NoMatchingOriginError,
    OpeningDrillError,
)
from openingdrill.core.move import ResolvedMove
from openingdrill.core.notation import (
    ParsedGame,
    PgnImport,
    TrainingLine,
    Variation,
    move_from_squares,
    move_to_san,
    moves_match,
    parse_pgn,
    parse_pgn_game,
    parse_san,
)
from openingdrill.core.piece import Piece
from openingdrill.core.reachability import can_reach, reachable_squares
from openingdrill.core.types import Square, parse_square, square_name

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "ResolvedMove",
    "can_reach",
    "reachable_squares",
    # Errors
    "AttemptMismatchError",
    "MalformedPgnError",
    "NoMatchingOriginError",
    "OpeningDrillError",
    # Notation
    "ParsedGame",
    "PgnImport",
    "TrainingLine",
    "Variation",
    "move_from_squares",
    "move_to_san",
    "moves_match",
    "parse_pgn",
    "parse_pgn_game",
    "parse_san",
]
