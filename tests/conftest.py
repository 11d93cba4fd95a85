# Area: Test Support
"""Shared fixtures: small word lists and in-memory client streams."""

import io
import random

import pytest

from wordle_server._game.words import WordList, WordRepository
from wordle_server._shared.line_stream import LineStream
from wordle_server._stats.registry import StatsRegistry


ANSWERS = ["trace", "basis", "hello", "cat", "planet"]
GUESSES = ["trace", "crane", "basis", "sissy", "hello", "world", "cat", "dog",
           "planet", "abcde", "house"]


class ScriptedStream(LineStream):
    """LineStream whose peer typed fixed lines and then hung up."""

    def __init__(self, lines):
        text = "".join(line + "\n" for line in lines)
        super().__init__(io.StringIO(text), io.StringIO(), name="test")

    @property
    def output(self) -> str:
        return self._writer.getvalue()


@pytest.fixture
def scripted():
    """Factory: scripted("1", "crane") -> ScriptedStream."""
    def _make(*lines):
        return ScriptedStream(lines)
    return _make


@pytest.fixture
def words():
    return WordRepository(
        answers=WordList(ANSWERS, rng=random.Random(7)),
        guesses=WordList(GUESSES),
    )


@pytest.fixture
def stats():
    return StatsRegistry()
