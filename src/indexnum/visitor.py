"""AST walker, visitor and transformer for indexnum.

Provides a pre-order ``walk`` function, a base visitor class with
match-based dispatch, and an immutable transform function for rewriting
frozen ASTs.

Example, collecting all headings:

    class HeadingCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.headings: list[Heading] = []

        def visit_heading(self, node: Heading) -> None:
            self.headings.append(node)

    collector = HeadingCollector()
    collector.visit(doc)

Example, dropping every index marker:

    def drop_markers(node: Node) -> Node | None:
        if isinstance(node, IndexMarker):
            return None
        return node

    new_doc = transform(doc, drop_markers)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable, Sequence

from indexnum.nodes import (
    Container,
    Document,
    Heading,
    IndexMarker,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    ShowIndexMarker,
    Strong,
    Text,
)

type TransformResult = Node | Sequence[Node] | None


def children_of(node: Node) -> tuple[Node, ...]:
    """Return the ordered child nodes of ``node``.

    Leaf nodes (text and markers) have no children.

    """
    match node:
        case List(items=items):
            return items
        case (
            Document(children=children)
            | Container(children=children)
            | Heading(children=children)
            | Paragraph(children=children)
            | ListItem(children=children)
            | Strong(children=children)
            | Link(children=children)
        ):
            return children
        case _:
            return ()


def walk(node: Node | None, visit: Callable[[Node], None]) -> None:
    """Visit ``node`` and all of its descendants in pre-order.

    Each node is passed to ``visit`` before its children, children in
    document order. Every node is visited exactly once. A ``None`` root is
    a no-op.

    """
    if node is None:
        return
    visit(node)
    for child in children_of(node):
        walk(child, visit)


class BaseVisitor[T]:
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call, so visit order is
    document pre-order.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        for child in children_of(node):
            self.visit(child)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method.

        Override this for catch-all behavior. Default returns None
        (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_container(self, node: Container) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_list(self, node: List) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    def visit_index_marker(self, node: IndexMarker) -> T:
        return self.visit_default(node)

    def visit_show_index_marker(self, node: ShowIndexMarker) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_strong(self, node: Strong) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Document():
                return self.visit_document(node)
            case Container():
                return self.visit_container(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case List():
                return self.visit_list(node)
            case ListItem():
                return self.visit_list_item(node)
            case IndexMarker():
                return self.visit_index_marker(node)
            case ShowIndexMarker():
                return self.visit_show_index_marker(node)
            case Text():
                return self.visit_text(node)
            case Strong():
                return self.visit_strong(node)
            case Link():
                return self.visit_link(node)
            case _:
                return self.visit_default(node)


def transform(doc: Document, fn: Callable[[Node], TransformResult]) -> Document:
    """Apply a function to every node in the AST, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children. This ensures ``fn``
    always receives nodes with already-transformed children.

    ``fn`` may return:
    - a node, which takes the place of the original
    - a sequence of nodes, spliced into the parent at the original position
    - ``None``, which removes the node from the tree

    Nodes returned by ``fn`` are not passed to ``fn`` again. The root
    Document cannot be removed or replaced by anything but a Document;
    doing so raises TypeError.

    Since all nodes are frozen dataclasses, this produces a new immutable tree.
    The original tree is untouched.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns its replacement(s).

    Returns:
        A new Document with the transformation applied.

    """
    result = fn(_transform_children(doc, fn))
    if not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_children(node: Node, fn: Callable[[Node], TransformResult]) -> Node:
    """Produce a new node with children transformed and splices applied."""

    def _expanded(children: tuple[Node, ...]) -> tuple[Node, ...]:
        out: list[Node] = []
        for child in children:
            result = fn(_transform_children(child, fn))
            if result is None:
                continue
            if isinstance(result, Node):
                out.append(result)
            else:
                out.extend(result)
        return tuple(out)

    match node:
        case List(items=items):
            new_items = _expanded(items)
            if new_items != items:
                return dataclasses.replace(node, items=new_items)
        case (
            Document(children=children)
            | Container(children=children)
            | Heading(children=children)
            | Paragraph(children=children)
            | ListItem(children=children)
            | Strong(children=children)
            | Link(children=children)
        ):
            new_children = _expanded(children)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case _:
            pass  # Leaf nodes: return as-is

    return node
