"""Internationalised labels for parsed games and training sessions.

Usage::

    from openingdrill.i18n import t, set_language

    set_language("French")
    print(t().main_line)          # "Ligne principale"
    print(t().hint.format(san="Nf3"))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Parsed games ─────────────────────────────────────────────────────
    main_line: str
    unnamed_game: str
    variation: str  # fallback when no move number / first move is known

    # ── Training session status ──────────────────────────────────────────
    status_not_started: str
    status_your_move: str
    status_opponent_moving: str
    status_line_complete: str
    status_wrong_move: str
    move_label: str  # "Move {number}"
    hint: str  # "Hint: {san}"


_EN = Strings(
    main_line="Main line",
    unnamed_game="Untitled game",
    variation="Variation",
    status_not_started="Choose a line to start training",
    status_your_move="Your move!",
    status_opponent_moving="Opponent is moving...",
    status_line_complete="Line complete! Well done!",
    status_wrong_move="Wrong move! Try again.",
    move_label="Move {number}",
    hint="Hint: {san}",
)

_FR = Strings(
    main_line="Ligne principale",
    unnamed_game="Partie sans nom",
    variation="Variante",
    status_not_started="Choisissez une variante pour commencer",
    status_your_move="À vous de jouer !",
    status_opponent_moving="L'ordinateur joue...",
    status_line_complete="Variante terminée ! Bravo !",
    status_wrong_move="Mauvais coup ! Réessayez.",
    move_label="Coup {number}",
    hint="Indice : {san}",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "French": _FR,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
