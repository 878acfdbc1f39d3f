"""Tests for the top-level lex()/tokenize() API and Token helpers."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from minilex import Category, Token, lex, tokenize
from minilex.utils import get_logger


class TestLex:
    def test_returns_lazy_iterator(self) -> None:
        stream = lex("begin end")
        assert isinstance(stream, Iterator)
        assert next(stream).as_pair() == ("begin", Category.KEYWORD)

    def test_consumer_may_stop_early(self) -> None:
        stream = lex("a b c d")
        assert [next(stream).lexeme, next(stream).lexeme] == ["a", "b"]

    def test_source_file_forwarded(self) -> None:
        token = next(lex("x", source_file="main.ml"))
        assert token.location.source_file == "main.ml"

    def test_tokenize_matches_lex(self) -> None:
        source = "begin print -3 end"
        assert tokenize(source) == list(lex(source))


class TestCategory:
    def test_display_names(self) -> None:
        assert [str(c) for c in Category] == [
            "Keyword",
            "Identifier",
            "NumericLiteral",
            "Operator",
            "Punctuation",
            "Malformed",
        ]


class TestToken:
    def test_frozen(self) -> None:
        token = Token("x", Category.IDENTIFIER)
        with pytest.raises(AttributeError):
            token.lexeme = "y"  # type: ignore[misc]

    def test_repr_truncates_long_lexemes(self) -> None:
        token = Token("a" * 30, Category.IDENTIFIER)
        assert repr(token) == f"Token(Identifier, '{'a' * 17}...', 1:1)"

    def test_is_malformed(self) -> None:
        assert tokenize("\x03")[0].is_malformed
        assert not tokenize("x")[0].is_malformed


class TestLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("scanner").name == "minilex.scanner"

    def test_package_names_kept(self) -> None:
        assert get_logger("minilex.lexer.core").name == "minilex.lexer.core"
        assert get_logger("minilex") is logging.getLogger("minilex")

    def test_library_installs_only_null_handler(self) -> None:
        handlers = logging.getLogger("minilex").handlers
        assert handlers
        assert all(isinstance(h, logging.NullHandler) for h in handlers)

    def test_debug_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="minilex"):
            tokenize("x \x01", source_file="prog.txt")
        assert "Finished prog.txt: 2 tokens, 1 malformed" in caplog.messages
