"""Training layer: drill a parsed line move by move.

Quick start::

    from openingdrill.core import Color, parse_pgn_game, parse_square
    from openingdrill.trainer import TrainingSession

    game = parse_pgn_game("1. e4 e5 2. Nf3 Nc6")
    session = TrainingSession(game.main_line, Color.BLACK)
    session.start()                       # plays 1. e4 for White
    result = session.attempt(parse_square("e7"), parse_square("e5"))
"""

from openingdrill.trainer.interfaces import (
    AttemptOutcome,
    AttemptResult,
    BoardSnapshot,
    TrainingPhase,
)
from openingdrill.trainer.session import (
    SessionEvents,
    TrainingSession,
    choose_random_line,
)

__all__ = [
    # Interfaces
    "AttemptOutcome",
    "AttemptResult",
    "BoardSnapshot",
    "TrainingPhase",
    # Concrete
    "SessionEvents",
    "TrainingSession",
    "choose_random_line",
]
