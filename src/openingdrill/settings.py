"""User-configurable trainer settings."""

from __future__ import annotations

import random
from dataclasses import dataclass

from openingdrill.core.enums import Color
from openingdrill.core.notation.pgn import DEFAULT_SEPARATOR
from openingdrill.i18n import set_language


@dataclass
class TrainerSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Parsing
    variation_separator: str = DEFAULT_SEPARATOR

    # Training
    trainee_color: Color = Color.WHITE
    random_seed: int | None = None

    def make_rng(self) -> random.Random:
        """Random source for random-drill mode; seeded runs are repeatable."""
        return random.Random(self.random_seed)

    def apply(self) -> None:
        """Push process-wide settings (the active locale) into effect."""
        set_language(self.language)
