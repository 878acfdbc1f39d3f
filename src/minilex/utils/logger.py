"""Logger namespacing for minilex.

Every module logs through a child of the ``minilex`` logger, so callers can
tune or silence the whole scanner with one name. The library attaches only
a NullHandler to that root; handlers and levels belong to the application.

Example:
    >>> import logging
    >>> logging.getLogger("minilex").setLevel(logging.WARNING)
    >>> get_logger("lexer.skipper").name
    'minilex.lexer.skipper'
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "minilex"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the ``minilex`` namespace.

    Names already inside the namespace (``__name__`` of any minilex module)
    are used as-is; anything else is nested below it.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
