"""Exception classes for minilex.

Bad input never raises: illegal characters become Malformed tokens and an
unterminated comment simply ends the stream. The exceptions here signal
defects in the scanner itself or misuse of the serialization helpers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minilex.lexer.states import ScanState


class MinilexError(Exception):
    """Base exception for all minilex errors.

    Subclass this for specific error categories.
    """

    pass


class ScannerStateError(MinilexError):
    """The state machine was asked to run a transition it must never run.

    Raised when a handler is dispatched for the terminal DONE state (or a
    state with no handler). This is a scanner bug, not an input error.
    """

    def __init__(self, state: ScanState | object, position: int) -> None:
        """Initialize with the offending state and cursor.

        Args:
            state: The state that was dispatched
            position: Cursor position at the time of dispatch
        """
        self.state = state
        self.position = position
        name = getattr(state, "name", repr(state))
        super().__init__(f"{name} state should not be handled (position {position})")


class SerializationError(MinilexError, ValueError):
    """Serialized token data is missing fields or names an unknown category."""

    pass
