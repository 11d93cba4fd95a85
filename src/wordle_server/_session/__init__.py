# Area: Session
"""
Per-connection protocol: the menu/round state machine, round execution
and the accept loop that starts one session per client.
"""

from .enums import MenuOption, RoundOutcome, SessionEvent, SessionState
from .state_machine import SessionStateMachine, TRANSITIONS
from .round import Round, RoundResult, play_round
from .session import Session, serve_connection, format_peer
from .listener import Listener, reject_connection

__all__ = [
    "MenuOption",
    "RoundOutcome",
    "SessionEvent",
    "SessionState",
    "SessionStateMachine",
    "TRANSITIONS",
    "Round",
    "RoundResult",
    "play_round",
    "Session",
    "serve_connection",
    "format_peer",
    "Listener",
    "reject_connection",
]
