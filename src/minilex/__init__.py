"""
minilex: a hand-written state-machine scanner

Turns the source text of a small begin/end/print language into a lazy
stream of classified tokens for a downstream parser. Zero runtime
dependencies.

Quick Start:
    >>> from minilex import lex
    >>> [str(t.category) for t in lex("begin x = 5 end")]
    ['Keyword', 'Identifier', 'Operator', 'NumericLiteral', 'Keyword']

    >>> from minilex import tokenize
    >>> [t.lexeme for t in tokenize("+.5 ++x")]
    ['+.5', '++', 'x']

Categories:
    Keyword, Identifier, NumericLiteral, Operator, Punctuation, Malformed.
    Bad input never raises; each illegal character becomes one Malformed
    token and scanning continues.
"""

from collections.abc import Iterator

from minilex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from minilex.errors import MinilexError, ScannerStateError, SerializationError
from minilex.lexer import KEYWORDS, Scanner, ScanState
from minilex.location import SourceLocation
from minilex.serialization import from_dict, from_json, to_dict, to_json
from minilex.tokens import Category, Token

__version__ = "0.1.0"


def lex(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> Iterator[Token]:
    """Lazily scan source text into tokens.

    Each call opens a fresh scan session, so scanning the same text twice
    yields identical streams.

    Args:
        source: Program text
        source_file: Optional source name carried into token locations
        config: Scan configuration (defaults to the context's config)

    Returns:
        Iterator of Token objects in input order

    Example:
        >>> [t.lexeme for t in lex(".5abc")]
        ['.5', 'abc']

    """
    return Scanner(source, source_file=source_file, config=config).tokenize()


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Scan source text eagerly and return every token as a list."""
    return list(lex(source, source_file=source_file, config=config))


__all__ = [
    # Main API
    "lex",
    "tokenize",
    "Scanner",
    "ScanState",
    "KEYWORDS",
    # Tokens
    "Category",
    "Token",
    "SourceLocation",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "MinilexError",
    "ScannerStateError",
    "SerializationError",
]
