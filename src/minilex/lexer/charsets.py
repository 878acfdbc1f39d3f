"""Character classification for the scanner.

All predicates take a one-character string and return a bool. End of
input is represented by the empty string, for which every predicate is
False. Membership is checked against module-level frozensets:
- O(1) membership testing
- Immutability (thread-safe)
- No per-call allocation

Usage:
    from minilex.lexer.charsets import is_letter

    if is_letter(ch):
        ...
"""

import string

LETTERS: frozenset[str] = frozenset(string.ascii_letters)

DIGITS: frozenset[str] = frozenset(string.digits)

# Space, tab, newline, carriage return, form feed. Vertical tab is not
# included and therefore scans as Malformed.
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f")

# Space through tilde, 0x20-0x7E inclusive
PRINTABLE_ASCII: frozenset[str] = frozenset(chr(code) for code in range(0x20, 0x7F))


def is_letter(c: str) -> bool:
    """Check if character is an ASCII letter."""
    return c in LETTERS


def is_digit(c: str) -> bool:
    """Check if character is an ASCII decimal digit."""
    return c in DIGITS


def is_whitespace(c: str) -> bool:
    return c in WHITESPACE


def is_printable_ascii(c: str) -> bool:
    return c in PRINTABLE_ASCII


def is_illegal(c: str) -> bool:
    """Check if character can never start a legal lexeme.

    True for any actual character that is neither whitespace nor printable
    ASCII: control characters, DEL and every non-ASCII code point.

    """
    return len(c) == 1 and c not in WHITESPACE and c not in PRINTABLE_ASCII


__all__ = [
    "DIGITS",
    "LETTERS",
    "PRINTABLE_ASCII",
    "WHITESPACE",
    "is_digit",
    "is_illegal",
    "is_letter",
    "is_printable_ascii",
    "is_whitespace",
]
