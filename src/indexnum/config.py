"""ContextVar-based transform configuration for indexnum.

Provides context-local configuration using Python's ContextVars (PEP 567).
A host pipeline sets the config once per build; every transform in that
context reads it unless an explicit config is passed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from indexnum import build_index
    from indexnum.config import IndexConfig, index_config_context

    with index_config_context(IndexConfig(target_id_prefix="idx-")):
        new_doc = build_index(doc)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any, Literal

type Collation = Literal["natural", "codepoint"]

_COLLATION_NAMES = frozenset({"natural", "codepoint"})


@dataclass(frozen=True, slots=True)
class IndexConfig:
    """Immutable index transform configuration.

    Attributes:
        target_id_prefix: Prefix of generated anchor ids; a 1-based counter
            is appended ("index-num-1", "index-num-2", ...)
        empty_message: Paragraph text shown when a page has no entries
        separator: Text placed between a term and its heading link
        missing_number: Link text for entries above the first heading
        collation: Sort order of terms. "natural" ignores case and accents,
            "codepoint" compares raw strings

    """

    target_id_prefix: str = "index-num-"
    empty_message: str = "No index entries on this page."
    separator: str = " — "
    missing_number: str = "—"
    collation: Collation = "natural"

    def __post_init__(self) -> None:
        """Reject collation names the sorter does not know."""
        if self.collation not in _COLLATION_NAMES:
            available = ", ".join(sorted(_COLLATION_NAMES))
            raise ValueError(f"Unknown collation: {self.collation!r}. Available: {available}")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "IndexConfig":
        """Create IndexConfig from dictionary.

        Useful when the host pipeline reads plugin options from its own
        project file. Only keys that are IndexConfig fields are used;
        unknown keys are silently ignored.

        Raises:
            ValueError: If ``collation`` names an unknown sort order

        Example:
            >>> config = IndexConfig.from_dict({
            ...     "target_id_prefix": "idx-",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.target_id_prefix
            'idx-'

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: IndexConfig = IndexConfig()

_index_config: ContextVar[IndexConfig] = ContextVar(
    "index_config",
    default=_DEFAULT_CONFIG,
)


def get_index_config() -> IndexConfig:
    """Get the index configuration of the current context."""
    return _index_config.get()


def set_index_config(config: IndexConfig) -> None:
    """Set index configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _index_config.set(config)


def reset_index_config() -> None:
    """Reset to the default configuration."""
    _index_config.set(_DEFAULT_CONFIG)


@contextmanager
def index_config_context(config: IndexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with index_config_context(IndexConfig(separator=": ")):
        ...     new_doc = build_index(doc)

    """
    previous = _index_config.get()
    _index_config.set(config)
    try:
        yield
    finally:
        _index_config.set(previous)


__all__ = [
    "Collation",
    "IndexConfig",
    "get_index_config",
    "index_config_context",
    "reset_index_config",
    "set_index_config",
]
