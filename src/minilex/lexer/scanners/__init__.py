"""State handlers for the scanner.

Each module is a mixin providing the transition functions for one family
of states; the Scanner composes them and dispatches on its current state.
"""

from __future__ import annotations

from minilex.lexer.scanners.number import NumberScannerMixin
from minilex.lexer.scanners.operator import OperatorScannerMixin
from minilex.lexer.scanners.start import StartScannerMixin
from minilex.lexer.scanners.word import WordScannerMixin

__all__ = [
    "NumberScannerMixin",
    "OperatorScannerMixin",
    "StartScannerMixin",
    "WordScannerMixin",
]
