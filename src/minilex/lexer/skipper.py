"""Whitespace and block comment skipper mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from minilex.config import ScanConfig
from minilex.lexer.charsets import is_whitespace
from minilex.utils.logger import get_logger

if TYPE_CHECKING:
    from minilex.location import SourceLocation

logger = get_logger(__name__)


class SkipperMixin:
    """Mixin advancing the cursor past text that carries no lexical value.

    Whitespace runs and ``/* ... */`` comments may alternate any number
    of times between two lexemes.

    """

    # These will be set by the Scanner class
    _pos: int
    _config: ScanConfig
    _unterminated_comment_at: SourceLocation | None

    def _peek(self) -> str:
        """Peek at current character. Implemented by Scanner."""
        raise NotImplementedError

    def _peek_next(self) -> str:
        """Peek one character past the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Drop the current character. Implemented by Scanner."""
        raise NotImplementedError

    def _location_here(self) -> SourceLocation:
        """Location of the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _skip_to_next_lexeme(self) -> None:
        """Move the cursor to the start of the next lexeme or to end of input.

        A comment that is still open at end of input leaves the cursor at
        end of input. Nothing is emitted for it; the session only records
        where the comment began.
        """
        while True:
            while is_whitespace(self._peek()):
                self._advance()

            if self._peek() != "/" or self._peek_next() != "*":
                return

            opened_at = self._location_here()
            self._advance()
            self._advance()
            while True:
                if self._peek() == "*" and self._peek_next() == "/":
                    self._advance()
                    self._advance()
                    break
                if self._peek() == "":
                    self._report_unterminated_comment(opened_at)
                    return
                self._advance()

    def _report_unterminated_comment(self, opened_at: SourceLocation) -> None:
        self._unterminated_comment_at = opened_at
        if self._config.warn_unterminated_comments:
            logger.warning(
                "Block comment opened at %s is not closed before end of input",
                opened_at,
            )
