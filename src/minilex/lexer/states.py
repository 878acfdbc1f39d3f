"""Scanner states and the fixed grammar alphabets.

This module defines the finite state machine states for the scanner
and the constant sets used when a token scan reaches DONE.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """States of the per-token scan.

    Every token scan begins at START and ends at DONE:
    - START: No character of the lexeme has been read yet
    - LETTER: Inside an identifier or keyword
    - DIGIT: Inside a numeric literal, no decimal point seen
    - DIGDOT: Inside a numeric literal, decimal point seen
    - DOT: Seen a lone ``.`` and nothing else
    - PLUS: Seen a ``+`` and nothing else
    - MINUS: Seen a ``-`` and nothing else
    - STAR: Seen one of ``*``, ``/``, ``=`` and nothing else
    - DONE: Lexeme and category are final; never dispatched

    """

    START = auto()
    LETTER = auto()
    DIGIT = auto()
    DIGDOT = auto()
    DOT = auto()
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    DONE = auto()


# Exact, case-sensitive, whole-word matches only
KEYWORDS = frozenset({"begin", "end", "print"})

# Characters that open the shared STAR state; each may take a trailing "="
STAR_OPENERS = frozenset("*/=")

# Second characters completing a compound operator after + and -
PLUS_FOLLOWERS = frozenset("+=")
MINUS_FOLLOWERS = frozenset("-=")
