"""Modular state-machine scanner for minilex.

The scanner skips whitespace and comments, runs one state-machine pass per
lexeme, and yields the resulting tokens lazily.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ScanState
├── core.py              # Scanner class (mixin composition + navigation)
├── states.py            # ScanState enum, keyword and operator sets
├── charsets.py          # Character classification predicates
├── skipper.py           # Whitespace and /* */ comment skipping
└── scanners/            # State handlers
    ├── start.py         # START
    ├── word.py          # LETTER
    ├── number.py        # DIGIT, DIGDOT, DOT
    └── operator.py      # PLUS, MINUS, STAR

Usage:
    >>> from minilex.lexer import Scanner
    >>> for token in Scanner("/* c */ print 3.14").tokenize():
    ...     print(token)
Token(Keyword, 'print', 1:9)
Token(NumericLiteral, '3.14', 1:15)

"""

from minilex.lexer.core import Scanner
from minilex.lexer.states import KEYWORDS, ScanState

__all__ = ["KEYWORDS", "ScanState", "Scanner"]
