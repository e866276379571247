"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from openingdrill.core.errors import MalformedPgnError


@dataclass(frozen=True, slots=True)
class Variation:
    """One independently replayable line of a game.

    ``moves`` always starts from the initial position, so nested variations
    repeat the moves of every ancestor line up to where they branch off.
    """

    name: str
    moves: tuple[str, ...]
    deviation_point: int | None = None

    @property
    def is_main_line(self) -> bool:
        return self.deviation_point is None

    def __len__(self) -> int:
        return len(self.moves)


@dataclass(frozen=True, slots=True)
class ParsedGame:
    """Headers plus every line of a single PGN game, main line first."""

    headers: dict[str, str]
    variations: tuple[Variation, ...]
    name: str

    @property
    def main_line(self) -> Variation:
        return self.variations[0]

    def title_for(self, variation: Variation) -> str:
        """Selection-list title, e.g. ``"Italian Game - 3.Bc4"``."""
        if len(self.variations) == 1:
            return self.name
        return f"{self.name} - {variation.name}"


@dataclass(frozen=True, slots=True)
class BlockFailure:
    """A game block that could not be parsed."""

    index: int
    error: MalformedPgnError


@dataclass(frozen=True, slots=True)
class TrainingLine:
    """A selectable line: a variation with the game it came from."""

    game: ParsedGame
    variation: Variation

    @property
    def title(self) -> str:
        return self.game.title_for(self.variation)

    @property
    def moves(self) -> tuple[str, ...]:
        return self.variation.moves


@dataclass(frozen=True, slots=True)
class PgnImport:
    """Result of parsing a (possibly multi-game) PGN text."""

    games: tuple[ParsedGame, ...]
    failures: tuple[BlockFailure, ...] = ()

    def lines(self) -> list[TrainingLine]:
        """Every variation of every game, in document order."""
        return [
            TrainingLine(game=game, variation=variation)
            for game in self.games
            for variation in game.variations
        ]

    def __len__(self) -> int:
        return len(self.games)
