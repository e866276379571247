"""Notation package: SAN resolution/matching and PGN line extraction."""

from openingdrill.core.notation.matching import moves_match
from openingdrill.core.notation.models import (
    BlockFailure,
    ParsedGame,
    PgnImport,
    TrainingLine,
    Variation,
)
from openingdrill.core.notation.pgn import (
    game_name,
    parse_pgn,
    parse_pgn_game,
    pgn_movetext_from_sans,
    split_games,
    variation_to_pgn,
)
from openingdrill.core.notation.san import (
    move_from_squares,
    move_to_san,
    normalize_san,
    parse_san,
)

__all__ = [
    "BlockFailure",
    "ParsedGame",
    "PgnImport",
    "TrainingLine",
    "Variation",
    "game_name",
    "move_from_squares",
    "move_to_san",
    "moves_match",
    "normalize_san",
    "parse_pgn",
    "parse_pgn_game",
    "parse_san",
    "pgn_movetext_from_sans",
    "split_games",
    "variation_to_pgn",
]
