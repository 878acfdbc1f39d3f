"""Token and Category definitions for the minilex scanner.

The scanner produces a stream of Token objects that a downstream parser
consumes. Each Token pairs the exact lexeme text with its Category and
remembers where it came from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
Category is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand,
so tokens whose location is never read cost no extra allocation.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minilex.location import SourceLocation


class Category(Enum):
    """Lexical categories assigned when a token scan reaches DONE.

    Values are the display names consumers print.

    """

    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    NUMERIC_LITERAL = "NumericLiteral"
    OPERATOR = "Operator"
    PUNCTUATION = "Punctuation"
    MALFORMED = "Malformed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        lexeme: The exact substring consumed for this token (signs, leading
            dots and compound operators included verbatim)
        category: The Category assigned at the transition into DONE
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start position in the program buffer
        _end_offset: Absolute end position (exclusive)
        _source_file: Optional source name, for messages only

    Equality compares the pair and its coordinates; use ``as_pair()`` to
    compare just what was recognized.

    """

    lexeme: str
    category: Category
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from minilex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._lineno,
            end_col_offset=self._col + len(self.lexeme),
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def as_pair(self) -> tuple[str, Category]:
        """Return the ``(lexeme, category)`` pair."""
        return (self.lexeme, self.category)

    @property
    def is_malformed(self) -> bool:
        return self.category is Category.MALFORMED

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.lexeme
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.category.value}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column (convenience accessor)."""
        return self._col
