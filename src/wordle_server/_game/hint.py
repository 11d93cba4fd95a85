# Area: Game
"""
wordle_server._game.hint — Guess scoring
========================================

Classifies every letter of a guess against the answer as Correct,
Present or Absent.

Scoring runs in two passes:

1. Exact matches are marked Correct.
2. Remaining positions are scanned left to right. A letter is marked
   Present only while the number of positions already showing that
   letter (Correct or Present, anywhere in the result) is below the
   letter's count in the answer; otherwise it is Absent.

So a letter never shows up more often than it occurs in the answer, and
when the guess repeats a letter more often than the answer does, exact
matches win first and then the leftmost occurrences.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

# Wire character for a letter not in the answer
ABSENT_CHAR = "-"


class HintMark(Enum):
    """Classification of one guessed letter."""
    CORRECT = "correct"   # Right letter, right position
    PRESENT = "present"   # In the answer, elsewhere
    ABSENT = "absent"     # Not in the answer (or all occurrences spent)


@dataclass(frozen=True)
class HintResult:
    """
    Per-letter classification of one guess.

    Attributes:
        guess: The scored guess (lowercase)
        marks: One HintMark per guess position
    """

    guess: str
    marks: Tuple[HintMark, ...]

    def __len__(self) -> int:
        return len(self.marks)

    def __iter__(self) -> Iterator[HintMark]:
        return iter(self.marks)

    def __getitem__(self, index: int) -> HintMark:
        return self.marks[index]

    @property
    def solved(self) -> bool:
        return all(mark is HintMark.CORRECT for mark in self.marks)

    def render(self) -> str:
        """
        Wire form: Correct letters uppercase, Present lowercase, Absent '-'.

        >>> score("crane", "trace", 5).render()
        'cRA-E'
        """
        chars = []
        for letter, mark in zip(self.guess, self.marks):
            if mark is HintMark.CORRECT:
                chars.append(letter.upper())
            elif mark is HintMark.PRESENT:
                chars.append(letter)
            else:
                chars.append(ABSENT_CHAR)
        return "".join(chars)

    def __str__(self) -> str:
        return self.render()


def score(guess: str, answer: str, length: int) -> HintResult:
    """
    Score ``guess`` against ``answer``.

    Args:
        guess: Validated lowercase guess of exactly ``length`` letters
        answer: The round's answer; normally also ``length`` letters
        length: Number of positions to score

    Returns:
        HintResult with one mark per position

    Raises:
        ValueError: If the guess is not ``length`` characters long
    """
    if len(guess) != length:
        raise ValueError(f"guess must be {length} letters, got {len(guess)}")

    marks: List[Optional[HintMark]] = [None] * length

    # Pass 1: exact matches
    for i in range(min(length, len(answer))):
        if guess[i] == answer[i]:
            marks[i] = HintMark.CORRECT

    # Pass 2: spend remaining occurrences left to right
    for i in range(length):
        if marks[i] is not None:
            continue
        letter = guess[i]
        # Only the scored positions of an over-long pinned answer count
        letter_count = answer[:length].count(letter)
        displayed_count = sum(
            1 for j in range(length)
            if marks[j] in (HintMark.CORRECT, HintMark.PRESENT)
            and guess[j] == letter
        )
        if displayed_count < letter_count:
            marks[i] = HintMark.PRESENT
        else:
            marks[i] = HintMark.ABSENT

    return HintResult(guess=guess, marks=tuple(marks))
