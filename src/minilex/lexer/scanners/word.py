"""LETTER state scanner mixin (identifiers and keywords)."""

from __future__ import annotations

from minilex.lexer.charsets import is_digit, is_letter
from minilex.lexer.states import KEYWORDS
from minilex.tokens import Category


class WordScannerMixin:
    """Mixin scanning identifier characters and resolving keywords."""

    # These will be set by the Scanner class
    _ch: str

    def _add_one(self) -> None:
        """Consume current character. Implemented by Scanner."""
        raise NotImplementedError

    def _finish(self, category: Category) -> None:
        """Enter DONE with category. Implemented by Scanner."""
        raise NotImplementedError

    def _current_lexeme(self) -> str:
        """Text accumulated so far. Implemented by Scanner."""
        raise NotImplementedError

    def _handle_letter(self) -> None:
        """Extend the word, or settle Keyword vs Identifier on the whole word."""
        ch = self._ch
        if is_letter(ch) or is_digit(ch) or ch == "_":
            self._add_one()
        elif self._current_lexeme() in KEYWORDS:
            self._finish(Category.KEYWORD)
        else:
            self._finish(Category.IDENTIFIER)
