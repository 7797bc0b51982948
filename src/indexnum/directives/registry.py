"""Directive registry for handler lookup and registration.

The registry maps directive names to their handlers so a host parser can
route ``index-num`` and ``show-index-num`` blocks to the right handler,
alongside any directives of its own.

Thread Safety:
DirectiveRegistry is immutable after creation. Safe to share.
Use DirectiveRegistryBuilder for mutable construction.

Example:
    >>> builder = DirectiveRegistryBuilder()
    >>> builder.register(IndexNumDirective())
    >>> builder.register(ShowIndexNumDirective())
    >>> registry = builder.build()
    >>> handler = registry.get("index-num")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from indexnum.errors import RegistrationError

if TYPE_CHECKING:
    from indexnum.directives.protocol import DirectiveHandler

_REQUIRED_ATTRIBUTES = ("names", "parse")


class DirectiveRegistry:
    """Immutable registry of directive handlers.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_handlers", "_by_name")

    def __init__(
        self,
        handlers: tuple[DirectiveHandler, ...],
        by_name: dict[str, DirectiveHandler],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use DirectiveRegistryBuilder to create instances.
        """
        self._handlers = handlers
        self._by_name = by_name

    def get(self, name: str) -> DirectiveHandler | None:
        """Get handler for directive name, or None if unregistered."""
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        """Check if directive name is registered."""
        return name in self._by_name

    @property
    def names(self) -> frozenset[str]:
        """Get all registered directive names."""
        return frozenset(self._by_name.keys())

    @property
    def handlers(self) -> tuple[DirectiveHandler, ...]:
        """Get all registered handlers."""
        return self._handlers

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __len__(self) -> int:
        """Number of registered directive names."""
        return len(self._by_name)


class DirectiveRegistryBuilder:
    """Mutable builder for DirectiveRegistry.

    Register handlers, then call build() to create an immutable registry.
    """

    __slots__ = ("_handlers", "_by_name")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._handlers: list[DirectiveHandler] = []
        self._by_name: dict[str, DirectiveHandler] = {}

    def register(self, handler: DirectiveHandler) -> DirectiveRegistryBuilder:
        """Register a directive handler.

        Args:
            handler: Handler implementing DirectiveHandler protocol

        Returns:
            Self for chaining

        Raises:
            RegistrationError: If the handler lacks a required attribute or
                a name conflicts with an existing registration
        """
        handler_name = type(handler).__name__
        for attr in _REQUIRED_ATTRIBUTES:
            if not hasattr(handler, attr):
                raise RegistrationError(handler_name, f"missing '{attr}' attribute")

        for name in handler.names:
            if name in self._by_name:
                existing = type(self._by_name[name]).__name__
                raise RegistrationError(handler_name, f"directive '{name}' already registered by {existing}")

        for name in handler.names:
            self._by_name[name] = handler
        self._handlers.append(handler)
        return self

    def register_all(self, handlers: list[DirectiveHandler]) -> DirectiveRegistryBuilder:
        """Register multiple handlers. Returns self for chaining."""
        for handler in handlers:
            self.register(handler)
        return self

    def build(self) -> DirectiveRegistry:
        """Build immutable registry from registered handlers."""
        return DirectiveRegistry(
            handlers=tuple(self._handlers),
            by_name=dict(self._by_name),
        )

    def __len__(self) -> int:
        """Number of registered handlers."""
        return len(self._handlers)


def create_registry_with_defaults() -> DirectiveRegistryBuilder:
    """Create a builder pre-populated with the marker directives.

    Use this to add the host's own directives next to the markers:

        >>> builder = create_registry_with_defaults()
        >>> builder.register(MyCustomDirective())
        >>> registry = builder.build()
    """
    from indexnum.directives.builtins import IndexNumDirective, ShowIndexNumDirective

    builder = DirectiveRegistryBuilder()
    builder.register(IndexNumDirective())
    builder.register(ShowIndexNumDirective())
    return builder


# Built on first use
_DEFAULT_REGISTRY: DirectiveRegistry | None = None


def create_default_registry() -> DirectiveRegistry:
    """Get the registry of marker directives (cached singleton).

    Returns:
        Registry with ``index-num`` and ``show-index-num``.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY
