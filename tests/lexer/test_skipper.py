"""Tests for whitespace and block comment skipping."""

from __future__ import annotations

import logging

import pytest

from minilex import Category, ScanConfig, Scanner, tokenize


def lexemes(source: str) -> list[str]:
    return [t.lexeme for t in tokenize(source)]


class TestBlockComments:
    def test_comment_between_tokens(self) -> None:
        assert lexemes("a/*c*/b") == ["a", "b"]

    def test_alternating_comments_and_whitespace(self) -> None:
        assert lexemes(" /* a */\n\t/* b */  /**/ x") == ["x"]

    def test_empty_comment(self) -> None:
        assert lexemes("/**/x") == ["x"]

    def test_stars_inside_comment(self) -> None:
        assert lexemes("/* ** * */x") == ["x"]

    def test_comments_do_not_nest(self) -> None:
        assert lexemes("/* /* */ x */") == ["x", "*", "/"]

    def test_comment_spans_lines(self) -> None:
        tokens = tokenize("/* one\ntwo\n*/ x")
        assert [t.lexeme for t in tokens] == ["x"]
        assert tokens[0].lineno == 3

    def test_slash_alone_is_not_a_comment(self) -> None:
        tokens = tokenize("/ *")
        assert [t.as_pair() for t in tokens] == [("/", Category.OPERATOR), ("*", Category.OPERATOR)]


class TestUnterminatedComments:
    """A comment still open at end of input silently ends the stream."""

    @pytest.mark.parametrize("source", ["/*", "/* open", "/*/", "/* almost *", "/* x \n y"])
    def test_no_tokens_from_open_comment(self, source: str) -> None:
        assert lexemes(source) == []

    def test_tokens_before_comment_survive(self) -> None:
        assert lexemes("begin x /* trailing") == ["begin", "x"]

    def test_session_records_opening_location(self) -> None:
        scanner = Scanner("x\n  /* open")
        list(scanner.tokenize())

        assert scanner.unterminated_comment is True
        loc = scanner.unterminated_comment_at
        assert loc is not None
        assert (loc.lineno, loc.col_offset, loc.offset) == (2, 3, 4)
        assert scanner.position == len("x\n  /* open")

    def test_closed_comment_not_recorded(self) -> None:
        scanner = Scanner("/* closed */ x")
        list(scanner.tokenize())

        assert scanner.unterminated_comment is False
        assert scanner.unterminated_comment_at is None

    def test_warning_logged_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="minilex"):
            list(Scanner("x /* open", source_file="prog.txt").tokenize())

        messages = [r.getMessage() for r in caplog.records]
        assert any("prog.txt:1:3" in m and "not closed" in m for m in messages)

    def test_warning_can_be_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        config = ScanConfig(warn_unterminated_comments=False)
        with caplog.at_level(logging.WARNING, logger="minilex"):
            list(Scanner("x /* open", config=config).tokenize())

        assert caplog.records == []
