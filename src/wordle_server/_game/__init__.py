# Area: Game
"""
Game rules that do not depend on a connection: guess scoring and the
word lists.
"""

from .hint import HintMark, HintResult, score, ABSENT_CHAR
from .words import WordList, WordRepository, validate_guess, is_letters

__all__ = [
    "HintMark",
    "HintResult",
    "score",
    "ABSENT_CHAR",
    "WordList",
    "WordRepository",
    "validate_guess",
    "is_letters",
]
