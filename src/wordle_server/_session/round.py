# Area: Session
"""
wordle_server._session.round — One round of play
================================================

Runs a single round over a client stream: prompt, read a guess,
validate it, then either declare the win, score it, or ask again.
Invalid guesses and words missing from the dictionary never cost a
try. The answer is only revealed once the tries run out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .enums import RoundOutcome
from . import messages
from .._game.hint import HintResult, score
from .._game.words import WordRepository, validate_guess
from .._shared.line_stream import LineStream
from ..errors import InvalidGuessError

logger = logging.getLogger("wordle_server.session")


@dataclass
class Round:
    """
    State of the round in progress.

    Attributes:
        answer: Word to guess; never sent to the client before the round ends
        word_length: Required guess length
        tries_left: Scored guesses still allowed
        hints: Hints handed out so far, in order
    """

    answer: str
    word_length: int
    tries_left: int
    hints: List[HintResult] = field(default_factory=list)


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of a finished round.

    ``disconnected`` is set when the client went away mid-round; such a
    round is reported as LOST.
    """

    outcome: RoundOutcome
    tries_left: int
    disconnected: bool = False

    @property
    def won(self) -> bool:
        return self.outcome is RoundOutcome.WON


def play_round(stream: LineStream, words: WordRepository, game: Round,
               name: str = "session") -> RoundResult:
    """
    Play ``game`` to completion on ``stream``.

    Args:
        stream: Client connection
        words: Dictionary used to accept guesses
        game: Round state; ``tries_left`` is decremented in place
        name: Label for log messages

    Returns:
        RoundResult; WON only if the answer was guessed
    """
    stream.send(messages.guess_prompt(game.word_length, game.tries_left))

    while game.tries_left > 0:
        line = stream.read_line()
        if line is None:
            logger.info(f"[{name}] Client left mid-round, counted as a loss",
                        extra={"session_id": name})
            return RoundResult(RoundOutcome.LOST, game.tries_left, disconnected=True)

        try:
            guess = validate_guess(line, game.word_length)
        except InvalidGuessError as e:
            if e.reason == InvalidGuessError.NON_LETTER:
                stream.write(messages.NON_LETTER)
            else:
                stream.write(messages.wrong_length(e.word_length))
        else:
            if guess == game.answer:
                stream.send(messages.CORRECT)
                return RoundResult(RoundOutcome.WON, game.tries_left)

            if words.contains(guess):
                hint = score(guess, game.answer, game.word_length)
                game.hints.append(hint)
                stream.write(hint.render() + "\n")
                game.tries_left -= 1
            else:
                stream.write(messages.NOT_IN_DICTIONARY)

        stream.write(messages.guess_prompt(game.word_length, game.tries_left))
        stream.flush()

    stream.send(messages.reveal(game.answer))
    return RoundResult(RoundOutcome.LOST, 0)
