# Area: Session
"""
wordle_server._session.state_machine — Session State Machine
============================================================

Tracks whether a session is at the menu, inside a round, or finished,
and rejects transitions the protocol does not allow.
"""

import logging
from typing import Optional

from .enums import SessionState, SessionEvent

logger = logging.getLogger("wordle_server.session")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    SessionState.MENU: {
        SessionEvent.ROUND_START: SessionState.ROUND,
        SessionEvent.EXIT: SessionState.CLOSED,
        SessionEvent.DISCONNECT: SessionState.CLOSED,
    },
    SessionState.ROUND: {
        SessionEvent.ROUND_END: SessionState.MENU,
        SessionEvent.DISCONNECT: SessionState.CLOSED,
    },
    SessionState.CLOSED: {},
}


class SessionStateMachine:
    """
    State machine for one client session.

    Attributes:
        current_state: The current state
        last_event: The event that produced the current state, if any
    """

    def __init__(self, name: str = "session"):
        """Initialize state machine in MENU."""
        self.name = name
        self.current_state = SessionState.MENU
        self.last_event: Optional[SessionEvent] = None

    @property
    def closed(self) -> bool:
        return self.current_state is SessionState.CLOSED

    def can_transition(self, event: SessionEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: SessionEvent) -> SessionState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )
        next_state = TRANSITIONS[self.current_state][event]
        logger.debug(
            f"[{self.name}] State: {self.current_state.value} → {next_state.value}",
            extra={"session_id": self.name},
        )
        self.current_state = next_state
        self.last_event = event
        return next_state
