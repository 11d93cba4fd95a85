# Area: Game
"""
wordle_server._game.words — Word lists and word validation
==========================================================

Loads the answers and guesses lists once at startup and serves
read-only lookups to every session. Nothing here mutates after
construction, so no locking is needed.
"""

from __future__ import annotations

import logging
import random
import string
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..errors import InvalidGuessError, WordListError

logger = logging.getLogger("wordle_server.words")

_LETTERS = frozenset(string.ascii_letters)


def is_letters(text: str) -> bool:
    """True if every character is an ASCII letter (vacuously true for '')."""
    return all(c in _LETTERS for c in text)


def validate_guess(text: str, word_length: int) -> str:
    """
    Normalise a line typed by the player into a guess.

    A single trailing line terminator is removed, then every character
    must be a letter and the result must have ``word_length`` letters.

    Args:
        text: Raw line from the player
        word_length: Required number of letters

    Returns:
        The guess in lowercase

    Raises:
        InvalidGuessError: With reason NON_LETTER or WRONG_LENGTH
    """
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    if not is_letters(text):
        raise InvalidGuessError(InvalidGuessError.NON_LETTER, word_length)
    if len(text) != word_length:
        raise InvalidGuessError(InvalidGuessError.WRONG_LENGTH, word_length)
    return text.lower()


class WordList:
    """
    An immutable list of lowercase words, indexed by length.

    Attributes:
        source: Where the words came from (file path or '<memory>')
    """

    def __init__(self, words: Iterable[str], source: str = "<memory>",
                 rng: Optional[random.Random] = None):
        self.source = source
        self._rng = rng or random.Random()
        self._words: List[str] = []
        for word in words:
            word = word.strip()
            if word and is_letters(word):
                self._words.append(word.lower())
        self._members = frozenset(self._words)
        self._by_length: Dict[int, List[str]] = {}
        for word in self._words:
            self._by_length.setdefault(len(word), []).append(word)

    @classmethod
    def from_file(cls, path: str, rng: Optional[random.Random] = None) -> "WordList":
        """
        Load a word list, one word per line.

        Lines that are not purely alphabetic are skipped.

        Raises:
            WordListError: If the file cannot be opened or read
        """
        try:
            with open(Path(path), encoding="latin-1") as f:
                lines = f.read().splitlines()
        except OSError as e:
            raise WordListError(path, e.strerror or str(e)) from e
        word_list = cls(lines, source=path, rng=rng)
        skipped = len(lines) - len(word_list)
        logger.info(
            "Loaded %d words from %s (%d lines skipped)",
            len(word_list), path, skipped,
        )
        return word_list

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word in self._members

    def contains(self, word: str) -> bool:
        return word in self._members

    def lengths(self) -> List[int]:
        """Word lengths present in the list, ascending."""
        return sorted(self._by_length)

    def random_word(self, length: int) -> Optional[str]:
        """Uniformly chosen word of exactly ``length`` letters, or None."""
        candidates = self._by_length.get(length)
        if not candidates:
            return None
        return self._rng.choice(candidates)


class WordRepository:
    """
    The two word lists a session needs.

    ``answers`` supplies random round answers; ``guesses`` is the
    dictionary a guess must appear in to earn a hint.
    """

    def __init__(self, answers: WordList, guesses: WordList):
        self.answers = answers
        self.guesses = guesses

    @classmethod
    def load(cls, answers_path: str, guesses_path: str,
             rng: Optional[random.Random] = None) -> "WordRepository":
        """Load both lists from disk. Raises WordListError on the first failure."""
        return cls(
            answers=WordList.from_file(answers_path, rng=rng),
            guesses=WordList.from_file(guesses_path),
        )

    def contains(self, word: str) -> bool:
        """True if ``word`` is an allowed guess."""
        return self.guesses.contains(word)

    def random_word(self, length: int) -> Optional[str]:
        """Random answer of exactly ``length`` letters, or None if there is none."""
        return self.answers.random_word(length)
