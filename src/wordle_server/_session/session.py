# Area: Session
"""
wordle_server._session.session — Per-connection menu protocol
=============================================================

A Session owns one client connection. It shows the banner once, then
loops on the menu until the client exits or disconnects:

1. Play a round (pinned answer if set, otherwise a random one)
2. Change the word length (3 to 9)
3. Change the number of tries (1 to 10)
4. Pin ("cheat") the answer, or clear it with an empty line
5. Exit

Lines that are not numbers, and numbers that are not options, just
redisplay the menu. A failed read at any point ends the session.
"""

from __future__ import annotations

import logging
import socket
from typing import Callable, Dict, Optional, Tuple

from .enums import MenuOption, SessionEvent, SessionState
from .prompts import parse_int, read_bounded_int
from .round import Round, RoundResult, play_round
from .state_machine import SessionStateMachine
from . import messages
from .._game.words import WordRepository
from .._server_config import (
    DEFAULT_TRIES, DEFAULT_WORD_LEN,
    MAX_TRIES, MAX_WORD_LEN, MIN_TRIES, MIN_WORD_LEN,
)
from .._shared.line_stream import LineStream
from .._stats.registry import StatsRegistry

logger = logging.getLogger("wordle_server.session")


class Session:
    """
    Menu-driven protocol for one connected client.

    Attributes:
        word_length: Letters per word for the next round
        tries: Scored guesses allowed per round
        streak: Consecutive rounds won
        pinned_answer: Answer for the next round, set via the cheat option
        rounds_played: Rounds finished in this session
    """

    def __init__(self, stream: LineStream, words: WordRepository,
                 stats: StatsRegistry, session_id: str = "session"):
        self.stream = stream
        self.words = words
        self.stats = stats
        self.session_id = session_id
        self.state_machine = SessionStateMachine(name=session_id)
        self._log_extra = {"session_id": session_id}

        self.word_length = DEFAULT_WORD_LEN
        self.tries = DEFAULT_TRIES
        self.streak = 0
        self.pinned_answer: Optional[str] = None
        self.rounds_played = 0

        self._handlers: Dict[MenuOption, Callable[[], bool]] = {
            MenuOption.PLAY: self._play,
            MenuOption.WORD_LENGTH: self._change_word_length,
            MenuOption.TRIES: self._change_tries,
            MenuOption.CHEAT: self._set_cheat_answer,
            MenuOption.EXIT: self._exit,
        }

    @property
    def state(self) -> SessionState:
        return self.state_machine.current_state

    # ── Main loop ─────────────────────────────────────────────

    def serve(self) -> SessionEvent:
        """
        Run the session until the client exits or disconnects.

        Returns:
            The event that closed the session (EXIT or DISCONNECT)
        """
        self.stream.send(messages.WELCOME_BANNER)

        while not self.state_machine.closed:
            self.stream.send(
                messages.menu(self.word_length, self.tries, self.pinned_answer)
            )
            line = self.stream.read_line()
            if line is None:
                self._disconnect()
                break

            option = self._parse_option(line)
            if option is None:
                continue

            if not self._handlers[option]():
                if not self.state_machine.closed:
                    self._disconnect()

        logger.info(
            f"[{self.session_id}] Session closed "
            f"({self.state_machine.last_event.value}, rounds={self.rounds_played})",
            extra=self._log_extra,
        )
        return self.state_machine.last_event

    @staticmethod
    def _parse_option(line: str) -> Optional[MenuOption]:
        number = parse_int(line)
        if number is None:
            return None
        try:
            return MenuOption(number)
        except ValueError:
            return None

    def _disconnect(self) -> None:
        self.state_machine.transition(SessionEvent.DISCONNECT)

    # ── Menu options ──────────────────────────────────────────
    # Each handler returns False when the stream has closed.

    def _play(self) -> bool:
        answer = self.pinned_answer
        if answer is None:
            answer = self.words.random_word(self.word_length)
            if answer is None:
                logger.warning(
                    f"[{self.session_id}] No answers of length {self.word_length}",
                    extra=self._log_extra,
                )
                self.stream.send(messages.no_answers(self.word_length))
                return True

        self.state_machine.transition(SessionEvent.ROUND_START)
        game = Round(answer=answer, word_length=self.word_length, tries_left=self.tries)
        result = play_round(self.stream, self.words, game, name=self.session_id)
        self._finish_round(result)

        if result.disconnected:
            self._disconnect()
            return False

        self.state_machine.transition(SessionEvent.ROUND_END)
        self.stream.send(messages.win_streak(self.streak))
        return True

    def _finish_round(self, result: RoundResult) -> None:
        self.pinned_answer = None
        self.rounds_played += 1
        self.stats.record_round(result.won)
        self.streak = self.streak + 1 if result.won else 0
        logger.info(
            f"[{self.session_id}] Round {result.outcome.value} "
            f"(tries left: {result.tries_left}, streak: {self.streak})",
            extra=self._log_extra,
        )

    def _change_word_length(self) -> bool:
        value = read_bounded_int(
            self.stream, messages.WORD_LENGTH_PROMPT, MIN_WORD_LEN, MAX_WORD_LEN,
        )
        if value is None:
            return False
        self.word_length = value
        return True

    def _change_tries(self) -> bool:
        value = read_bounded_int(
            self.stream, messages.TRIES_PROMPT, MIN_TRIES, MAX_TRIES,
        )
        if value is None:
            return False
        self.tries = value
        return True

    def _set_cheat_answer(self) -> bool:
        self.stream.send(messages.CHEAT_PROMPT)
        line = self.stream.read_line()
        if line is None:
            return False
        if line == "":
            self.pinned_answer = None
            self.word_length = DEFAULT_WORD_LEN
        else:
            # Taken verbatim: no letter check, no lowercasing
            self.pinned_answer = line
            self.word_length = len(line)
        return True

    def _exit(self) -> bool:
        self.stream.send(messages.GOODBYE)
        self.state_machine.transition(SessionEvent.EXIT)
        return True


def format_peer(address) -> str:
    """Readable label for a peer address tuple."""
    if isinstance(address, tuple) and len(address) >= 2:
        return f"{address[0]}:{address[1]}"
    return str(address)


def serve_connection(conn: socket.socket, address: Tuple, words: WordRepository,
                     stats: StatsRegistry) -> None:
    """
    Worker body for one accepted connection.

    Counts the client as connected, runs its Session, and always counts
    it as completed and closes the socket afterwards. Unexpected errors
    end only this connection.
    """
    session_id = format_peer(address)
    log_extra = {"session_id": session_id}
    stats.session_started()
    stream: Optional[LineStream] = None
    logger.info(f"[{session_id}] Client connected", extra=log_extra)
    try:
        stream = LineStream.from_socket(conn, name=session_id)
        Session(stream, words, stats, session_id=session_id).serve()
    except Exception as e:
        logger.error(f"[{session_id}] Session failed: {e}", exc_info=True, extra=log_extra)
    finally:
        if stream is not None:
            stream.close()
        else:
            conn.close()
        stats.session_finished()
