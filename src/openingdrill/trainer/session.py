"""TrainingSession: replays a recorded line and judges the trainee's moves.

Coordinates: Board, move resolution (scripted plies) and move matching
(trainee plies). Emits events via simple callbacks so a UI / tests can
subscribe. Nothing here sleeps or schedules: a UI that wants to pace the
opponent's replies constructs the session with ``auto_reply=False`` and
calls :meth:`TrainingSession.play_opponent_move` on its own timer.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from openingdrill.core.board import Board
from openingdrill.core.enums import Color, PieceType
from openingdrill.core.errors import AttemptMismatchError
from openingdrill.core.move import ResolvedMove
from openingdrill.core.notation.matching import moves_match
from openingdrill.core.notation.models import TrainingLine, Variation
from openingdrill.core.notation.san import (
    CASTLE_KINGSIDE,
    CASTLE_QUEENSIDE,
    move_from_squares,
    move_to_san,
    normalize_san,
    parse_san,
    promotion_of,
)
from openingdrill.core.reachability import reachable_squares
from openingdrill.core.types import Square
from openingdrill.i18n import t
from openingdrill.settings import TrainerSettings
from openingdrill.trainer.interfaces import (
    AttemptOutcome,
    AttemptResult,
    TrainingPhase,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[ResolvedMove, str, "TrainingSession"], None]  # move, san, session
AttemptCallback = Callable[[AttemptResult], None]
PhaseCallback = Callable[[TrainingPhase], None]
LineCompleteCallback = Callable[["TrainingSession"], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_attempt: list[AttemptCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_line_complete: list[LineCompleteCallback] = field(default_factory=list)


def choose_random_line(
    lines: Sequence[TrainingLine], rng: random.Random | None = None
) -> TrainingLine:
    """Pick a line for random-drill mode."""
    if not lines:
        raise ValueError("No lines to choose from")
    return (rng or random.Random()).choice(lines)


def _moves_of(line: Variation | TrainingLine | Sequence[str]) -> tuple[str, ...]:
    if isinstance(line, (Variation, TrainingLine)):
        return tuple(line.moves)
    return tuple(line)


# ── Session ──────────────────────────────────────────────────────────────────


class TrainingSession:
    """Drives one pass through a single line.

    Plies of the trainee's color are expected from :meth:`attempt`; the
    other side's plies are resolved from the recorded move text and played
    automatically. The session owns its board exclusively.
    """

    __slots__ = (
        "_moves",
        "_trainee",
        "_board",
        "_ply",
        "_phase",
        "_auto_reply",
        "_rng",
        "events",
    )

    def __init__(
        self,
        line: Variation | TrainingLine | Sequence[str],
        trainee_color: Color | None = None,
        *,
        settings: TrainerSettings | None = None,
        board: Board | None = None,
        auto_reply: bool = True,
    ) -> None:
        self._moves: tuple[str, ...] = _moves_of(line)
        settings = settings or TrainerSettings()
        self._trainee = trainee_color if trainee_color is not None else settings.trainee_color
        self._board = board if board is not None else Board.initial()
        self._ply = 0
        self._phase = TrainingPhase.NOT_STARTED
        self._auto_reply = auto_reply
        self._rng = settings.make_rng()
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def moves(self) -> tuple[str, ...]:
        return self._moves

    @property
    def trainee_color(self) -> Color:
        return self._trainee

    @property
    def phase(self) -> TrainingPhase:
        return self._phase

    @property
    def ply_index(self) -> int:
        return self._ply

    @property
    def side_to_move(self) -> Color:
        return Color.WHITE if self._ply % 2 == 0 else Color.BLACK

    @property
    def move_number(self) -> int:
        return self._ply // 2 + 1

    @property
    def is_finished(self) -> bool:
        return self._ply >= len(self._moves)

    @property
    def is_trainee_turn(self) -> bool:
        return not self.is_finished and self.side_to_move == self._trainee

    @property
    def expected_san(self) -> str | None:
        """Recorded move text of the next ply, None once the line is done."""
        if self.is_finished:
            return None
        return self._moves[self._ply]

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> None:
        """Reset the board and play the opponent's opening plies, if any."""
        self._board.reset()
        self._ply = 0
        _LOGGER.debug(
            "Starting line of %d plies as %s", len(self._moves), self._trainee
        )
        self._after_ply()

    def restart(self, lines: Sequence[TrainingLine] | None = None) -> TrainingLine | None:
        """Start over, switching to a random pick from *lines* when given.

        Without *lines* the same line is replayed. Picks use the session's
        RNG, seeded from :attr:`TrainerSettings.random_seed`.
        """
        picked = None
        if lines is not None:
            picked = choose_random_line(lines, self._rng)
            self._moves = picked.moves
            _LOGGER.debug("Switched to random line %r", picked.title)
        self.start()
        return picked

    def play_opponent_move(self) -> ResolvedMove | None:
        """Play the next scripted ply if it belongs to the opponent.

        Raises :class:`~openingdrill.core.errors.NoMatchingOriginError` when
        the recorded move cannot be resolved on the current board.
        """
        if self._phase == TrainingPhase.NOT_STARTED:
            return None
        if self.is_finished or self.is_trainee_turn:
            return None
        san = self._moves[self._ply]
        move = parse_san(self._board, san, self.side_to_move)
        self._commit(move, san)
        return move

    # ── Trainee input ────────────────────────────────────────────────────

    def attempt(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> AttemptResult:
        """Judge a trainee move; commit it only when it matches the line."""
        expected = self.expected_san
        if self.is_finished:
            return self._result(AttemptOutcome.LINE_COMPLETE, None, expected)
        if self._phase == TrainingPhase.NOT_STARTED or not self.is_trainee_turn:
            return self._result(AttemptOutcome.NOT_YOUR_TURN, None, expected)
        assert expected is not None

        piece = self._board[from_sq]
        if piece is None or piece.color != self._trainee:
            return self._result(AttemptOutcome.INVALID_ORIGIN, None, expected)

        if promotion is None and piece.piece_type == PieceType.PAWN:
            promotion = promotion_of(normalize_san(expected))
        attempted = move_to_san(self._board, from_sq, to_sq, promotion)

        if not moves_match(attempted, expected):
            _LOGGER.debug("Rejected %s (expected %s)", attempted, expected)
            return self._result(AttemptOutcome.MISMATCH, attempted, expected)

        move = move_from_squares(self._board, from_sq, to_sq, promotion)
        self._commit(move, expected)
        return self._result(AttemptOutcome.CORRECT, attempted, expected)

    def attempt_or_raise(
        self,
        from_sq: Square,
        to_sq: Square,
        promotion: PieceType | None = None,
    ) -> AttemptResult:
        """Like :meth:`attempt` but raise :class:`AttemptMismatchError` on a wrong move."""
        result = self.attempt(from_sq, to_sq, promotion)
        if result.outcome == AttemptOutcome.MISMATCH:
            raise AttemptMismatchError(result.attempted_san or "", result.expected_san or "")
        return result

    # ── UI helpers ───────────────────────────────────────────────────────

    def hint(self) -> str | None:
        """The move the trainee is expected to play next."""
        return self.expected_san

    def highlight_squares(self, from_sq: Square) -> list[Square]:
        """Reachable squares for the piece on *from_sq*.

        When the king is selected and the line expects castling, the king's
        castling destination is included as well.
        """
        squares = reachable_squares(self._board, from_sq)
        piece = self._board[from_sq]
        expected = self.expected_san
        if piece is None or piece.piece_type != PieceType.KING or expected is None:
            return squares

        clean = normalize_san(expected)
        if clean == CASTLE_KINGSIDE:
            squares.append(Square(from_sq.rank, 6))
        elif clean == CASTLE_QUEENSIDE:
            squares.append(Square(from_sq.rank, 2))
        return squares

    def status_text(self) -> str:
        """Localised one-line status for the current phase."""
        s = t()
        if self._phase == TrainingPhase.NOT_STARTED:
            return s.status_not_started
        if self._phase == TrainingPhase.COMPLETED:
            return s.status_line_complete
        if self._phase == TrainingPhase.OPPONENT_TO_MOVE:
            return s.status_opponent_moving
        return f"{s.status_your_move} {s.move_label.format(number=self.move_number)}"

    def hint_text(self) -> str | None:
        """Localised hint for the expected move, None once the line is done."""
        expected = self.expected_san
        return None if expected is None else t().hint.format(san=expected)

    def feedback_text(self, result: AttemptResult) -> str:
        """Localised reaction to an attempt."""
        if result.outcome in (AttemptOutcome.MISMATCH, AttemptOutcome.INVALID_ORIGIN):
            return t().status_wrong_move
        return self.status_text()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, move: ResolvedMove, san: str) -> None:
        self._board.apply(move)
        self._ply += 1
        self._emit_move(move, san)
        self._after_ply()

    def _after_ply(self) -> None:
        """Settle the phase after the ply index changed."""
        if self.is_finished:
            self._set_phase(TrainingPhase.COMPLETED)
            for cb in self.events.on_line_complete:
                cb(self)
            return
        if self.is_trainee_turn:
            self._set_phase(TrainingPhase.AWAITING_TRAINEE)
            return
        self._set_phase(TrainingPhase.OPPONENT_TO_MOVE)
        if self._auto_reply:
            self.play_opponent_move()

    def _result(
        self,
        outcome: AttemptOutcome,
        attempted: str | None,
        expected: str | None,
    ) -> AttemptResult:
        result = AttemptResult(
            outcome=outcome,
            attempted_san=attempted,
            expected_san=expected,
            board=self._board.snapshot(),
            is_finished=self.is_finished,
        )
        for cb in self.events.on_attempt:
            cb(result)
        return result

    def _emit_move(self, move: ResolvedMove, san: str) -> None:
        for cb in self.events.on_move:
            cb(move, san, self)

    def _set_phase(self, phase: TrainingPhase) -> None:
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
