"""Source location tracking for malformed-token reports and debugging.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a lexeme sits in the program buffer.

    Line and column are 1-indexed; offsets are 0-indexed positions into the
    buffer, with ``end_offset`` exclusive.

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=12, end_offset=15)
            >>> str(loc)
            '2:5'

            >>> str(SourceLocation(1, 1, source_file="prog.txt"))
            'prog.txt:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for log messages.

        Returns:
            Formatted string like "prog.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of characters covered."""
        return self.end_offset - self.offset
