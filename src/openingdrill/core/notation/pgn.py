"""PGN parsing into flat training lines, and PGN export of a single line."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from openingdrill.core.errors import MalformedPgnError
from openingdrill.core.notation.models import (
    BlockFailure,
    ParsedGame,
    PgnImport,
    Variation,
)
from openingdrill.i18n import t

if TYPE_CHECKING:
    from openingdrill.settings import TrainerSettings

_LOGGER = logging.getLogger(__name__)

DEFAULT_SEPARATOR = " > "

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')
_GAME_SPLIT_RE = re.compile(r"\n(?=[ \t]*\[Event\b)")
_BRACE_COMMENT_RE = re.compile(r"\{[^}]*\}")
_LINE_COMMENT_RE = re.compile(r";[^\n]*")
_MOVE_NUMBER_RE = re.compile(r"(\d+)\.+")
_NAG_RE = re.compile(r"^\$\d+$")
_GLYPH_RE = re.compile(r"^[!?]+$")
_FIRST_MOVE_RE = re.compile(
    r"(?:\d+\.+\s*)?([KQRBNP]?[a-h]?[1-8]?x?[a-h][1-8](?:=[QRBN])?[+#]?|O-O(?:-O)?|0-0(?:-0)?)"
)
_PGN_RESULT_TOKENS = {"1-0", "0-1", "1/2-1/2", "*"}


# ── Game naming ──────────────────────────────────────────────────────────────


def game_name(headers: dict[str, str]) -> str:
    """Human-readable game name derived from the most specific header."""
    if headers.get("ChapterName"):
        return headers["ChapterName"]
    if headers.get("Opening"):
        return headers["Opening"]

    white = headers.get("White")
    black = headers.get("Black")
    players = f"{white} vs {black}" if white and black else None
    event = headers.get("Event")
    if event:
        return f"{event}: {players}" if players else event
    if players:
        return players
    return t().unnamed_game


# ── Movetext scanning ────────────────────────────────────────────────────────


def _plies(chunk: str) -> list[str]:
    """Moves of a parenthesis-free chunk, numbers/results/NAGs removed."""
    plies: list[str] = []
    for token in _MOVE_NUMBER_RE.sub(" ", chunk).split():
        token = token.lstrip(".")
        if not token or token in _PGN_RESULT_TOKENS:
            continue
        if _NAG_RE.match(token) or _GLYPH_RE.match(token):
            continue
        plies.append(token)
    return plies


def _first_move(text: str) -> str | None:
    match = _FIRST_MOVE_RE.search(text.strip())
    return match.group(1) if match else None


def _split_lines(
    text: str,
    prefix: list[str],
    deviation_point: int | None,
    path: str,
    separator: str,
) -> tuple[list[str], list[Variation]]:
    """Split *text* into its own line plus every variation nested in it.

    *prefix* holds the moves leading up to *text*; it is copied into the
    returned line and into every variation so each one replays on its own.
    """
    current = list(prefix)
    variations: list[Variation] = []
    buffer: list[str] = []
    depth = 0
    start = 0
    last_number = deviation_point
    branch_prefix: list[str] = []
    branch_point: int | None = None

    for idx, ch in enumerate(text):
        if ch == "(":
            if depth == 0:
                chunk = "".join(buffer)
                buffer = []
                current.extend(_plies(chunk))
                numbers = _MOVE_NUMBER_RE.findall(chunk)
                if numbers:
                    last_number = int(numbers[-1])
                # The variation replaces the last move played so far.
                branch_prefix = current[:-1]
                branch_point = last_number
                if branch_point is None:
                    branch_point = len(branch_prefix) // 2 + 1
                start = idx + 1
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise MalformedPgnError(f"Unmatched ')' at offset {idx}")
            if depth == 0:
                inner = text[start:idx]
                first = _first_move(inner)
                label = f"{branch_point}.{first}" if first else t().variation
                name = f"{path}{separator}{label}" if path else label
                moves, nested = _split_lines(
                    inner, branch_prefix, branch_point, name, separator
                )
                variations.append(Variation(name, tuple(moves), branch_point))
                variations.extend(nested)
        elif depth == 0:
            buffer.append(ch)

    if depth != 0:
        raise MalformedPgnError(f"{depth} unmatched '(' in movetext")

    current.extend(_plies("".join(buffer)))
    return current, variations


def _clean_movetext(movetext: str) -> str:
    text = _BRACE_COMMENT_RE.sub(" ", movetext)
    return _LINE_COMMENT_RE.sub(" ", text)


# ── Parsing ──────────────────────────────────────────────────────────────────


def parse_pgn_game(
    pgn_text: str, *, settings: TrainerSettings | None = None
) -> ParsedGame:
    """Parse a single PGN game into its main line and every variation.

    Every bracketed line is a header wherever it appears in the block; only
    the remaining lines make up the movetext. Raises
    :class:`MalformedPgnError` for unbalanced parentheses, invalid header
    lines, or a game without moves.
    """
    separator = DEFAULT_SEPARATOR if settings is None else settings.variation_separator
    headers: dict[str, str] = {}
    move_lines: list[str] = []

    for raw_line in pgn_text.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        if line.startswith("["):
            match = _PGN_HEADER_RE.match(line)
            if match is None:
                raise MalformedPgnError(f"Invalid PGN header line: {line}")
            key, raw_value = match.groups()
            headers[key] = raw_value.replace('\\"', '"').replace("\\\\", "\\")
            continue

        if line.startswith("%"):
            continue
        move_lines.append(line)

    movetext = _clean_movetext("\n".join(move_lines))
    main_moves, variations = _split_lines(movetext, [], None, "", separator)
    if not main_moves:
        raise MalformedPgnError("PGN game contains no moves")

    main_line = Variation(t().main_line, tuple(main_moves), None)
    return ParsedGame(
        headers=headers,
        variations=(main_line, *variations),
        name=game_name(headers),
    )


def split_games(pgn_text: str) -> list[str]:
    """Split a PGN document into game blocks, one per `[Event` header line."""
    normalized = pgn_text.replace("\r\n", "\n").replace("\r", "\n")
    return [block for block in _GAME_SPLIT_RE.split(normalized) if block.strip()]


def parse_pgn(pgn_text: str, *, settings: TrainerSettings | None = None) -> PgnImport:
    """Parse every game of a PGN document.

    Blocks are independent: a malformed block is reported in
    :attr:`PgnImport.failures` and the remaining blocks are still parsed.
    """
    games: list[ParsedGame] = []
    failures: list[BlockFailure] = []
    for index, block in enumerate(split_games(pgn_text)):
        try:
            games.append(parse_pgn_game(block, settings=settings))
        except MalformedPgnError as exc:
            _LOGGER.warning("Skipping PGN game block %d: %s", index, exc)
            failures.append(BlockFailure(index=index, error=exc))
    return PgnImport(games=tuple(games), failures=tuple(failures))


# ── Serialisation ────────────────────────────────────────────────────────────


def pgn_movetext_from_sans(sans: list[str] | tuple[str, ...], result_token: str = "*") -> str:
    """Build numbered PGN movetext from SAN moves and a result token."""
    parts: list[str] = []
    for ply, san in enumerate(sans):
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        parts.append(san)
    parts.append(result_token)
    return " ".join(parts)


def variation_to_pgn(game: ParsedGame, variation: Variation, result_token: str = "*") -> str:
    """Export one line of *game* as a standalone single-game PGN document."""
    headers = {**game.headers, "Result": result_token}

    lines: list[str] = []
    for key, value in headers.items():
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    lines.append("")
    lines.append(pgn_movetext_from_sans(variation.moves, result_token))
    lines.append("")
    return "\n".join(lines)
