"""DirectiveHandler protocol for marker directives.

A host parser that meets ``:::{name} argument`` blocks looks the name up in
a ``DirectiveRegistry`` and calls the handler's ``parse`` to build the AST
node. Marker directives emit no visible output of their own; the nodes they
return stay in the tree for the index transform to find.

Thread Safety:
Handlers must be stateless. All state should be in the AST node
or passed as arguments. Multiple threads may call the same handler
instance concurrently.

Example:
    >>> class AnchorDirective:
    ...     names = ("anchor",)
    ...     doc = "Invisible anchor."
    ...     takes_argument = True
    ...
    ...     def parse(self, name, title, content, location):
    ...         return IndexMarker(location, raw=title or content)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from indexnum.location import SourceLocation
    from indexnum.nodes import Block


@runtime_checkable
class DirectiveHandler(Protocol):
    """Protocol for directive implementations.

    Attributes:
        names: Tuple of directive names this handler responds to.
        doc: One-line description shown by host tooling.
        takes_argument: Whether text after the directive name is accepted.

    Thread Safety:
        Handlers must be stateless. Multiple threads may call the same
        handler instance concurrently.
    """

    names: ClassVar[tuple[str, ...]]
    """Directive names this handler responds to (e.g., ("index-num",))."""

    doc: ClassVar[str]
    """Short description of the directive."""

    takes_argument: ClassVar[bool]
    """If True, the host passes the text after the directive name as ``title``."""

    def parse(
        self,
        name: str,
        title: str | None,
        content: str,
        location: SourceLocation,
    ) -> Block:
        """Build the directive AST node.

        Args:
            name: The directive name used
            title: Argument text after the directive name, if any
            content: Raw directive body
            location: Source location of the directive

        Returns:
            The node to place in the AST
        """
        ...
