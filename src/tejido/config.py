"""ContextVar-based parse configuration for Tejido.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markup instance and read by every parser in the
context, including the sub-parsers created for blockquotes and list items.

Usage:
    # In Markup class
    md = Markup(tables=False)
    text = md("| a | b |")  # Sets config internally via ContextVar

    # Direct parser usage (advanced)
    from tejido.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(tables_enabled=False))
    try:
        doc = Parser(source).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(task_lists_enabled=False)):
        doc = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Every feature is on by default; switching one off makes the
    corresponding syntax degrade to the next rule that still matches
    (usually a paragraph).

    Attributes:
        tables_enabled: Recognise pipe tables
        task_lists_enabled: Extract [x] / [ ] task markers from list items
        frontmatter_enabled: Extract a leading --- / +++ metadata block
        definitions_enabled: Run the reference/footnote definition pre-pass

    """

    tables_enabled: bool = True
    task_lists_enabled: bool = True
    frontmatter_enabled: bool = True
    definitions_enabled: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "tables_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.tables_enabled
            False

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (context-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(tables_enabled=False)):
        ...     doc = Parser("| a | b |\\n| c | d |").parse()
        >>> # Automatically reset to previous config

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
