# Area: Shared
"""
wordle_server._server_config — Server Configuration
====================================================

Game bounds, startup defaults, exit codes and the validated
``ServerConfig`` model consumed by ``WordleServer``.
"""

import logging
import signal
import socket
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import UsageError

logger = logging.getLogger("wordle_server")

# Round parameter bounds (inclusive)
MIN_WORD_LEN = 3
MAX_WORD_LEN = 9
DEFAULT_WORD_LEN = 5

MIN_TRIES = 1
MAX_TRIES = 10
DEFAULT_TRIES = 6

# Startup defaults
DEFAULT_ANSWERS_PATH = "default-answers.txt"
DEFAULT_GUESSES_PATH = "default-guesses.txt"
DEFAULT_HOSTNAME = None  # All interfaces
DEFAULT_PORT = "0"       # Ephemeral port

# Process exit codes
EXIT_OK = 0
EXIT_BAD_USAGE = 1
EXIT_FNF = 2
EXIT_LISTEN_FAIL = 3

# Environment variable → config key
ENV_MAPPINGS = {
    "WORDLE_ANSWERS": "answers_path",
    "WORDLE_GUESSES": "guesses_path",
    "WORDLE_HOSTNAME": "hostname",
    "WORDLE_PORT": "port",
    "WORDLE_LOG_FILE": "log_file",
    "WORDLE_LOG_LEVEL": "log_level",
}


class ServerConfig(BaseModel):
    """Validated startup configuration for one server process."""

    model_config = ConfigDict(frozen=True)

    answers_path: str = DEFAULT_ANSWERS_PATH
    guesses_path: str = DEFAULT_GUESSES_PATH
    hostname: Optional[str] = DEFAULT_HOSTNAME
    port: str = DEFAULT_PORT
    backlog: int = Field(default=socket.SOMAXCONN, ge=1)
    log_file: Optional[str] = None
    log_level: str = "INFO"
    stats_signal: Optional[int] = getattr(signal, "SIGHUP", None)

    @field_validator("port")
    @classmethod
    def _port_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("port must not be empty")
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def display_hostname(self) -> str:
        return self.hostname if self.hostname else "ALL"

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def validate_config(config: Dict[str, Any]) -> ServerConfig:
    """
    Build a ServerConfig from a plain dict.

    Args:
        config: Configuration dict (keys as in ServerConfig)

    Returns:
        The validated, immutable configuration

    Raises:
        UsageError: If any value is invalid
    """
    try:
        return ServerConfig(**config)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise UsageError(f"Invalid configuration: {problems}") from e
