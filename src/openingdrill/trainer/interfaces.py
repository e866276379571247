"""Enumerations and result types shared by the training layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum, auto

from openingdrill.core.piece import Piece

# ── Session phase FSM states ─────────────────────────────────────────────────


class TrainingPhase(IntEnum):
    """Finite-state-machine states for a training session."""

    NOT_STARTED = auto()
    OPPONENT_TO_MOVE = auto()
    AWAITING_TRAINEE = auto()
    COMPLETED = auto()


class AttemptOutcome(StrEnum):
    """How a trainee move attempt was judged."""

    CORRECT = "correct"
    MISMATCH = "mismatch"
    INVALID_ORIGIN = "invalid_origin"  # empty square or opponent piece
    NOT_YOUR_TURN = "not_your_turn"
    LINE_COMPLETE = "line_complete"


BoardSnapshot = tuple[tuple[Piece | None, ...], ...]


@dataclass(slots=True, frozen=True)
class AttemptResult:
    """Verdict on one trainee move plus the board after it."""

    outcome: AttemptOutcome
    attempted_san: str | None
    expected_san: str | None
    board: BoardSnapshot
    is_finished: bool

    @property
    def correct(self) -> bool:
        return self.outcome == AttemptOutcome.CORRECT
