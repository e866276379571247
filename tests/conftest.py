"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from openingdrill.core.board import Board


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    from openingdrill.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture
def board() -> Board:
    """Fresh board in the starting position."""
    return Board.initial()
