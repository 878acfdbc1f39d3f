"""Numeric literal scanner mixin (DIGIT, DIGDOT, DOT states)."""

from __future__ import annotations

from minilex.lexer.charsets import is_digit
from minilex.lexer.states import ScanState
from minilex.tokens import Category


class NumberScannerMixin:
    """Mixin scanning digits with at most one decimal point.

    A literal may start with a digit, or with ``.`` followed by a digit.
    A ``.`` followed by anything else is the one-character Operator.

    """

    # These will be set by the Scanner class
    _ch: str
    _state: ScanState

    def _add_one(self) -> None:
        """Consume current character. Implemented by Scanner."""
        raise NotImplementedError

    def _finish(self, category: Category) -> None:
        """Enter DONE with category. Implemented by Scanner."""
        raise NotImplementedError

    def _handle_digit(self) -> None:
        """Integer part: more digits, or a decimal point."""
        if is_digit(self._ch):
            self._add_one()
        elif self._ch == ".":
            self._add_one()
            self._state = ScanState.DIGDOT
        else:
            self._finish(Category.NUMERIC_LITERAL)

    def _handle_digdot(self) -> None:
        """Fraction part: digits only; a second dot ends the literal."""
        if is_digit(self._ch):
            self._add_one()
        else:
            self._finish(Category.NUMERIC_LITERAL)

    def _handle_dot(self) -> None:
        if is_digit(self._ch):
            self._add_one()
            self._state = ScanState.DIGDOT
        else:
            self._finish(Category.OPERATOR)
