# Area: Session
"""
wordle_server._session.messages — Protocol text
===============================================

Every line the server sends to a client. Each message ends with a
newline; callers decide when to flush.
"""

from typing import Optional

WELCOME_BANNER = (
    "Welcome to...\n"
    " _    _               _ _      \n"
    "| |  | |             | | |     \n"
    "| |  | | ___  _ __ __| | | ___ \n"
    "| |/\\| |/ _ \\| '__/ _` | |/ _ \\\n"
    "\\  /\\  / (_) | | | (_| | |  __/\n"
    " \\/  \\/ \\___/|_|  \\__,_|_|\\___|\n"
    "\n"
)

HIDDEN_ANSWER = "?????"

WORD_LENGTH_PROMPT = "Enter the word length"
TRIES_PROMPT = "Enter the number of tries"
CHEAT_PROMPT = "Enter the answer word:\n"
GOODBYE = "Goodbye...\n"
CORRECT = "Correct!\n"
NOT_IN_DICTIONARY = "Word not found in the dictionary - try again.\n"
NON_LETTER = "Words must contain only letters - try again.\n"
FATAL_ERROR = "A fatal server error occurred :(. Try again later\n"


def menu(word_length: int, tries: int, pinned_answer: Optional[str]) -> str:
    answer = pinned_answer if pinned_answer is not None else HIDDEN_ANSWER
    return (
        "Select one of the following:\n"
        f"1. Play game (word length: {word_length}, tries: {tries}, answer: {answer})\n"
        "2. Change word length\n"
        "3. Change number of tries\n"
        "4. Cheat and set the answer\n"
        "5. Exit\n"
    )


def bounded_int_prompt(text: str, low: int, high: int) -> str:
    return f"{text} ({low} to {high}):\n"


def guess_prompt(word_length: int, tries_left: int) -> str:
    """Round prompt; empty once no tries are left."""
    if tries_left <= 0:
        return ""
    if tries_left == 1:
        return f"Enter a {word_length} letter word (last attempt):\n"
    return f"Enter a {word_length} letter word ({tries_left} attempts remaining):\n"


def wrong_length(word_length: int) -> str:
    return f"Words must be {word_length} letters long - try again.\n"


def reveal(answer: str) -> str:
    return f'Bad luck - the word is "{answer}".\n'


def win_streak(streak: int) -> str:
    return f"Win Streak: {streak}\n\n"


def no_answers(word_length: int) -> str:
    return f"No answers of length {word_length} are available.\n"
