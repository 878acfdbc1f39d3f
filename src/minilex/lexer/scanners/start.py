"""START state scanner mixin."""

from __future__ import annotations

from minilex.lexer.charsets import is_digit, is_illegal, is_letter
from minilex.lexer.states import STAR_OPENERS, ScanState
from minilex.tokens import Category


class StartScannerMixin:
    """Mixin choosing the token family from the first character.

    START always consumes exactly one character, so every token has a
    non-empty lexeme and the cursor always advances.

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

    def _handle_start(self) -> None:
        ch = self._ch
        self._add_one()
        if is_illegal(ch):
            self._finish(Category.MALFORMED)
        elif is_letter(ch) or ch == "_":
            self._state = ScanState.LETTER
        elif is_digit(ch):
            self._state = ScanState.DIGIT
        elif ch == ".":
            self._state = ScanState.DOT
        elif ch == "+":
            self._state = ScanState.PLUS
        elif ch == "-":
            self._state = ScanState.MINUS
        elif ch in STAR_OPENERS:
            self._state = ScanState.STAR
        else:
            self._finish(Category.PUNCTUATION)
