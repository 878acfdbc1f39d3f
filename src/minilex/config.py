"""ContextVar-based scan configuration for minilex.

The grammar itself is fixed; configuration only controls what the scanner
reports through logging while it works.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from minilex.config import ScanConfig, scan_config_context
    from minilex.lexer import Scanner

    with scan_config_context(ScanConfig(warn_on_malformed=True)):
        tokens = list(Scanner(source).tokenize())

    # Or hand a config to one scanner directly
    scanner = Scanner(source, config=ScanConfig(warn_unterminated_comments=False))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        warn_unterminated_comments: Log a warning when a ``/*`` comment runs
            to end of input (scanning still stops silently)
        warn_on_malformed: Log a warning for every Malformed token

    """

    warn_unterminated_comments: bool = True
    warn_on_malformed: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "warn_on_malformed": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.warn_on_malformed
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the module-level default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(warn_on_malformed=True)):
        ...     tokens = tokenize("\\x01")
        >>> # Automatically reset to previous config

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
