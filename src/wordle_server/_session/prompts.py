# Area: Session
"""
wordle_server._session.prompts — Reading numbers from the player
================================================================
"""

from __future__ import annotations

import re
from typing import Optional

from .._shared.line_stream import LineStream
from . import messages


# C-style integer literal: leading whitespace, optional sign, then hex
# (0x...), octal (leading 0) or decimal digits and nothing after them
_INT_LITERAL = re.compile(
    r"[ \t\n\v\f\r]*(?P<sign>[+-]?)"
    r"(?:0[xX](?P<hex>[0-9a-fA-F]+)|(?P<oct>0[0-7]*)|(?P<dec>[1-9][0-9]*))"
)


def parse_int(text: Optional[str]) -> Optional[int]:
    """
    Parse a whole line as an integer.

    Accepts an optional sign and leading whitespace. ``0x`` marks a hex
    number and a leading ``0`` an octal one, so ``"010"`` is 8 and
    ``"08"`` is not a number. Anything after the digits (including
    trailing spaces or ``_`` separators) makes the line non-numeric.

    Returns:
        The integer, or None if the line is not a number
    """
    if not text:
        return None
    match = _INT_LITERAL.fullmatch(text)
    if match is None:
        return None
    if match.group("hex") is not None:
        value = int(match.group("hex"), 16)
    elif match.group("oct") is not None:
        value = int(match.group("oct"), 8)
    else:
        value = int(match.group("dec"), 10)
    return -value if match.group("sign") == "-" else value


def read_bounded_int(stream: LineStream, prompt: str, low: int, high: int) -> Optional[int]:
    """
    Prompt until the player enters an integer in ``[low, high]``.

    Returns:
        The accepted value, or None if the stream closed first
    """
    while True:
        stream.send(messages.bounded_int_prompt(prompt, low, high))
        line = stream.read_line()
        if line is None:
            return None
        value = parse_int(line)
        if value is not None and low <= value <= high:
            return value
