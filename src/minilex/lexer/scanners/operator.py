"""Operator scanner mixin (PLUS, MINUS, STAR states)."""

from __future__ import annotations

from minilex.lexer.charsets import is_digit
from minilex.lexer.states import MINUS_FOLLOWERS, PLUS_FOLLOWERS, ScanState
from minilex.tokens import Category


class OperatorScannerMixin:
    """Mixin scanning operators and signed numeric literals.

    ``+`` and ``-`` absorb a following digit, or a ``.`` that is itself
    followed by a digit, into a NumericLiteral that keeps the sign:
    ``+5`` and ``-.5`` are single tokens. Otherwise they form ``++``,
    ``+=``, ``--``, ``-=`` or stand alone. ``*``, ``/`` and ``=`` take an
    optional trailing ``=``.

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

    def _peek_next(self) -> str:
        """Peek one character past the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _handle_plus(self) -> None:
        self._scan_sign(PLUS_FOLLOWERS)

    def _handle_minus(self) -> None:
        self._scan_sign(MINUS_FOLLOWERS)

    def _scan_sign(self, followers: frozenset[str]) -> None:
        """Shared transitions for PLUS and MINUS.

        Args:
            followers: Characters that complete a two-character operator
        """
        ch = self._ch
        if is_digit(ch):
            self._add_one()
            self._state = ScanState.DIGIT
        elif ch == ".":
            # Only a dot-then-digit joins the sign; the dot is left otherwise
            if is_digit(self._peek_next()):
                self._add_one()
                self._state = ScanState.DIGDOT
            else:
                self._finish(Category.OPERATOR)
        elif ch in followers:
            self._add_one()
            self._finish(Category.OPERATOR)
        else:
            self._finish(Category.OPERATOR)

    def _handle_star(self) -> None:
        if self._ch == "=":
            self._add_one()
        self._finish(Category.OPERATOR)
