"""State-machine scanner with guaranteed forward progress.

Every token scan starts at START, which always consumes one character,
and ends at DONE. Whitespace and block comments between tokens are
dropped by the skipper. Bad input never raises: an illegal character is
a one-character Malformed token and scanning carries on after it.

Thread Safety:
Scanner instances are single-use. Create one per program buffer.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from minilex.config import ScanConfig, get_scan_config
from minilex.errors import ScannerStateError
from minilex.lexer.scanners import (
    NumberScannerMixin,
    OperatorScannerMixin,
    StartScannerMixin,
    WordScannerMixin,
)
from minilex.lexer.skipper import SkipperMixin
from minilex.lexer.states import ScanState
from minilex.location import SourceLocation
from minilex.tokens import Category, Token
from minilex.utils.logger import get_logger

logger = get_logger(__name__)


class Scanner(
    SkipperMixin,
    # State handlers
    StartScannerMixin,
    WordScannerMixin,
    NumberScannerMixin,
    OperatorScannerMixin,
):
    """Deterministic finite-state scanner over one program buffer.

    Usage:
            >>> scanner = Scanner("begin x = 5 end")
            >>> [t.as_pair() for t in scanner.tokenize()]  # doctest: +NORMALIZE_WHITESPACE
            [('begin', <Category.KEYWORD: 'Keyword'>),
             ('x', <Category.IDENTIFIER: 'Identifier'>),
             ('=', <Category.OPERATOR: 'Operator'>),
             ('5', <Category.NUMERIC_LITERAL: 'NumericLiteral'>),
             ('end', <Category.KEYWORD: 'Keyword'>)]

    A session is not restartable: once the stream is exhausted,
    ``next_token()`` keeps returning None. Scan again with a new Scanner.

    Thread Safety:
        Scanner instances are single-use. Create one per program buffer.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_source_file",
        "_config",
        "_pos",
        "_lineno",
        "_col",
        # Per-token working state
        "_state",
        "_ch",
        "_lexeme",
        "_category",
        "_saved_pos",
        "_saved_lineno",
        "_saved_col",
        # Session bookkeeping
        "_started",
        "_token_count",
        "_malformed_count",
        "_unterminated_comment_at",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize scanner with a program buffer.

        Args:
            source: Program text
            source_file: Optional source name carried into token locations
            config: Scan configuration (defaults to the context's config)
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._config = config if config is not None else get_scan_config()
        self._pos = 0
        self._lineno = 1
        self._col = 1

        self._state = ScanState.DONE
        self._ch = ""
        self._lexeme: list[str] = []
        self._category: Category | None = None

        self._saved_pos = 0
        self._saved_lineno = 1
        self._saved_col = 1

        self._started = False
        self._token_count = 0
        self._malformed_count = 0
        self._unterminated_comment_at: SourceLocation | None = None

    @property
    def position(self) -> int:
        """Cursor: index of the next unread character."""
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= self._source_len

    @property
    def unterminated_comment(self) -> bool:
        """True once a block comment has run to end of input."""
        return self._unterminated_comment_at is not None

    @property
    def unterminated_comment_at(self) -> SourceLocation | None:
        """Location of the ``/*`` that was never closed, if any."""
        return self._unterminated_comment_at

    # =========================================================================
    # Token production
    # =========================================================================

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the program into a token stream.

        Yields:
            Token objects one at a time, in input order

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        while (token := self.next_token()) is not None:
            yield token

    def next_token(self) -> Token | None:
        """Produce the next token, or None when the program is exhausted.

        Skips to the next lexeme, scans it, then skips again so the cursor
        sits at the following lexeme (or end of input) when the token is
        handed out.
        """
        if not self._started:
            self._started = True
            logger.debug("Scanning %d characters from %s", self._source_len, self._describe_source())
            self._skip_to_next_lexeme()
            if self.at_end:
                self._log_finished()
                return None
        elif self.at_end:
            return None

        token = self._scan_token()
        self._skip_to_next_lexeme()
        if self.at_end:
            self._log_finished()
        return token

    def _scan_token(self) -> Token:
        """Run the state machine from START to DONE over one lexeme."""
        self._save_location()
        self._lexeme = []
        self._category = None
        self._state = ScanState.START
        while self._state is not ScanState.DONE:
            self._ch = self._peek()
            self._dispatch_state()

        # _finish is the only way into DONE and always sets a category
        category: Category = self._category  # type: ignore[assignment]
        token = Token(
            lexeme="".join(self._lexeme),
            category=category,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=self._saved_pos,
            _end_offset=self._pos,
            _source_file=self._source_file,
        )
        self._token_count += 1
        if category is Category.MALFORMED:
            self._malformed_count += 1
            if self._config.warn_on_malformed:
                logger.warning("Malformed character %r at %s", token.lexeme, token.location)
        return token

    def _dispatch_state(self) -> None:
        """Apply the transition function for the current state.

        Raises:
            ScannerStateError: If asked to handle DONE, which ends a scan
                and has no transitions.
        """
        state = self._state
        if state is ScanState.START:
            self._handle_start()
        elif state is ScanState.LETTER:
            self._handle_letter()
        elif state is ScanState.DIGIT:
            self._handle_digit()
        elif state is ScanState.DIGDOT:
            self._handle_digdot()
        elif state is ScanState.DOT:
            self._handle_dot()
        elif state is ScanState.PLUS:
            self._handle_plus()
        elif state is ScanState.MINUS:
            self._handle_minus()
        elif state is ScanState.STAR:
            self._handle_star()
        else:
            raise ScannerStateError(state, self._pos)

    def _finish(self, category: Category) -> None:
        """Enter DONE, assigning the token's category."""
        self._state = ScanState.DONE
        self._category = category

    def _current_lexeme(self) -> str:
        return "".join(self._lexeme)

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _peek_next(self) -> str:
        """Peek at the character after the current one.

        Returns:
            That character or empty string past end of input.
        """
        pos = self._pos + 1
        if pos >= self._source_len:
            return ""
        return self._source[pos]

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking.

        Returns:
            The dropped character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _add_one(self) -> None:
        """Append the current character to the lexeme and advance past it."""
        char = self._advance()
        if char:
            self._lexeme.append(char)

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location; call at the START of each token scan."""
        self._saved_pos = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _location_here(self) -> SourceLocation:
        return SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._pos,
            end_offset=self._pos,
            source_file=self._source_file,
        )

    def _describe_source(self) -> str:
        return self._source_file or "<string>"

    def _log_finished(self) -> None:
        logger.debug(
            "Finished %s: %d tokens, %d malformed",
            self._describe_source(),
            self._token_count,
            self._malformed_count,
        )
