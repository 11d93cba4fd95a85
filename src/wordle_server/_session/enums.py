# Area: Session
"""
wordle_server._session.enums — Session State Machine Enums
==========================================================

Defines the states and events of one client session.
"""

from enum import Enum


class SessionState(Enum):
    """
    States of a client session.

    State transitions:
    MENU -> ROUND (on ROUND_START)
    ROUND -> MENU (on ROUND_END)
    MENU -> CLOSED (on EXIT or DISCONNECT)
    ROUND -> CLOSED (on DISCONNECT)
    """
    MENU = "MENU"
    ROUND = "ROUND"
    CLOSED = "CLOSED"


class SessionEvent(Enum):
    """
    Events that trigger session state transitions.

    - ROUND_START: player chose "Play game" and an answer was found
    - ROUND_END: the round was won or lost
    - EXIT: player chose "Exit"
    - DISCONNECT: a read failed (peer closed or stream error)
    """
    ROUND_START = "ROUND_START"
    ROUND_END = "ROUND_END"
    EXIT = "EXIT"
    DISCONNECT = "DISCONNECT"


class RoundOutcome(Enum):
    """How a round finished. Abandoned rounds count as LOST."""
    WON = "won"
    LOST = "lost"


class MenuOption(Enum):
    """Menu option numbers as typed by the player."""
    PLAY = 1
    WORD_LENGTH = 2
    TRIES = 3
    CHEAT = 4
    EXIT = 5
