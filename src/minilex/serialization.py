"""Token serialization: JSON round-trip for scanned token streams.

Lets a consumer cache a token stream or hand it to another process
without rescanning. All output is deterministic (sorted keys).

Example:
    from minilex import tokenize
    from minilex.serialization import to_json, from_json

    tokens = tokenize("begin x = 5 end")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from minilex.errors import SerializationError
from minilex.tokens import Category, Token

_REQUIRED_FIELDS = ("lexeme", "category")

# Optional coordinates; each must be an int when present (null is rejected)
_COORDINATE_FIELDS = ("lineno", "col", "offset", "end_offset")


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    The category is stored by its display name ("Keyword", ...).

    """
    return {
        "lexeme": token.lexeme,
        "category": token.category.value,
        "lineno": token.lineno,
        "col": token.col,
        "offset": token.location.offset,
        "end_offset": token.location.end_offset,
        "source_file": token.location.source_file,
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by ``to_dict``.

    Coordinates are optional and default to the start of the buffer.

    Raises:
        SerializationError: If ``lexeme`` or ``category`` is missing, the
            category is not one of the known names, the lexeme is not a
            string, or a coordinate is not an integer.

    """
    for name in _REQUIRED_FIELDS:
        if name not in data:
            msg = f"Missing {name!r} field in serialized token"
            raise SerializationError(msg)

    try:
        category = Category(data["category"])
    except ValueError:
        msg = f"Unknown token category: {data['category']!r}"
        raise SerializationError(msg) from None

    lexeme = data["lexeme"]
    if not isinstance(lexeme, str):
        msg = f"Expected string lexeme, got {type(lexeme).__name__}"
        raise SerializationError(msg)

    for name in _COORDINATE_FIELDS:
        if name not in data:
            continue
        value = data[name]
        if not isinstance(value, int) or isinstance(value, bool):
            msg = f"Expected integer {name!r}, got {type(value).__name__}"
            raise SerializationError(msg)

    offset = data.get("offset", 0)
    return Token(
        lexeme=lexeme,
        category=category,
        _lineno=data.get("lineno", 1),
        _col=data.get("col", 1),
        _start_offset=offset,
        _end_offset=data.get("end_offset", offset + len(lexeme)),
        _source_file=data.get("source_file"),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array string.

    Args:
        tokens: Tokens to serialize (a live stream is consumed).
        indent: JSON indentation level (None for compact).

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token list from a JSON string.

    Raises:
        SerializationError: If the JSON is not an array of token objects.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of tokens, got {type(raw).__name__}"
        raise SerializationError(msg)
    tokens = []
    for item in raw:
        if not isinstance(item, dict):
            msg = f"Expected a token object, got {type(item).__name__}"
            raise SerializationError(msg)
        tokens.append(from_dict(item))
    return tokens
