"""Tests for scanner session state, dispatch and location tracking."""

from __future__ import annotations

import pytest

from minilex import Category, Scanner, ScannerStateError, ScanState


class TestSessionLifecycle:
    def test_tokens_are_lazy(self) -> None:
        scanner = Scanner("a b c")
        stream = scanner.tokenize()
        assert scanner.position == 0

        first = next(stream)
        assert first.lexeme == "a"
        # Cursor already sits on the next lexeme
        assert scanner.position == 2

    def test_next_token_signals_end(self) -> None:
        scanner = Scanner("x")
        token = scanner.next_token()
        assert token is not None
        assert token.as_pair() == ("x", Category.IDENTIFIER)
        assert scanner.next_token() is None
        assert scanner.next_token() is None

    def test_not_restartable(self) -> None:
        scanner = Scanner("begin end")
        assert len(list(scanner.tokenize())) == 2
        assert list(scanner.tokenize()) == []

    def test_empty_source_is_at_end(self) -> None:
        scanner = Scanner("")
        assert scanner.at_end
        assert scanner.next_token() is None

    def test_state_is_done_between_tokens(self) -> None:
        scanner = Scanner("x = 1")
        list(scanner.tokenize())
        assert scanner._state is ScanState.DONE

    def test_sessions_are_independent(self) -> None:
        source = "print -1.5 /* c */ end"
        first = Scanner(source)
        second = Scanner(source)

        a = first.next_token()
        b1 = second.next_token()
        b2 = second.next_token()

        assert a == b1
        assert first.position == 6
        assert b2 is not None
        assert b2.lexeme == "-1.5"


class TestDispatch:
    def test_done_state_is_never_handled(self) -> None:
        scanner = Scanner("x")
        scanner._state = ScanState.DONE
        with pytest.raises(ScannerStateError) as exc_info:
            scanner._dispatch_state()

        assert exc_info.value.state is ScanState.DONE
        assert exc_info.value.position == 0
        assert "DONE" in str(exc_info.value)

    @pytest.mark.parametrize("source", ["begin", "x1", "3.5", ".", "+.5", "--", "*=", ";", "\x01"])
    def test_done_always_carries_category(self, source: str) -> None:
        scanner = Scanner(source)
        token = scanner.next_token()
        assert token is not None
        assert scanner._state is ScanState.DONE
        assert scanner._category is token.category

    @pytest.mark.parametrize("state", [s for s in ScanState if s is not ScanState.DONE])
    def test_every_other_state_has_a_handler(self, state: ScanState) -> None:
        scanner = Scanner("1")
        scanner._state = state
        scanner._ch = scanner._peek()
        scanner._dispatch_state()


class TestLookahead:
    def test_peek_at_end_returns_sentinel(self) -> None:
        scanner = Scanner("a")
        assert scanner._peek() == "a"
        assert scanner._peek_next() == ""
        scanner._advance()
        assert scanner._peek() == ""
        assert scanner._advance() == ""
        assert scanner.position == 1

    def test_sign_dot_at_end_of_input(self) -> None:
        scanner = Scanner("-.")
        assert [t.lexeme for t in scanner.tokenize()] == ["-", "."]


class TestLocations:
    def test_line_and_column(self) -> None:
        tokens = list(Scanner("begin\n  x = 10\nend").tokenize())
        coords = [(t.lexeme, t.lineno, t.col) for t in tokens]
        assert coords == [
            ("begin", 1, 1),
            ("x", 2, 3),
            ("=", 2, 5),
            ("10", 2, 7),
            ("end", 3, 1),
        ]

    def test_offsets(self) -> None:
        token = list(Scanner("  +.5").tokenize())[0]
        assert token.location.offset == 2
        assert token.location.end_offset == 5
        assert token.location.length == 3

    def test_source_file_in_location(self) -> None:
        token = list(Scanner("x", source_file="prog.txt").tokenize())[0]
        assert str(token.location) == "prog.txt:1:1"

    def test_end_coordinates(self) -> None:
        tokens = list(Scanner("x\n  begin").tokenize())
        loc = tokens[1].location
        assert (loc.lineno, loc.col_offset) == (2, 3)
        assert (loc.end_lineno, loc.end_col_offset) == (2, 8)

    def test_location_is_cached(self) -> None:
        token = list(Scanner("x").tokenize())[0]
        assert token.location is token.location
