"""Typed AST nodes for indexnum.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads, no aliasing surprises
- Pattern matching: match statements dispatch on the node class

The node set is closed. Anything a host pipeline produces that is not one
of the kinds below travels through the transform as a ``Container`` that
keeps its original kind name.

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Container
│   ├── Heading
│   ├── Paragraph
│   ├── List
│   ├── ListItem
│   ├── IndexMarker
│   └── ShowIndexMarker
└── Inline (inline elements)
    ├── Text
    ├── Strong
    └── Link

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from indexnum.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for log messages and debugging.

    ``attrs`` holds fields a host tree carried that the node does not model
    (an image ``url``, a code block's ``lang``, a heading ``identifier``),
    as ``(key, value)`` pairs in their original order. Adapters write them
    back so nodes round-trip through the transform without losing data.

    """

    location: SourceLocation
    attrs: tuple[tuple[str, Any], ...] = field(default=(), kw_only=True)


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content."""

    content: str


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong (bold) text.

    Markdown: **text** or __text__

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](url "title")

    """

    url: str
    title: str | None
    children: tuple[Inline, ...]


# PEP 695 type alias for inline elements
type Inline = Text | Strong | Link


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Section heading.

    ``depth`` starts at 1 for top-level headings. The inline children are
    the heading text; the index transform only cares about the depth.

    """

    depth: int
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph of inline content."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item holding block content."""

    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markdown: - item or 1. item

    ``ordered`` is None when a host tree left it unset. Lists read from a
    host tree keep their children as given, so ``items`` may hold other
    block kinds next to ``ListItem``.

    """

    items: tuple[Block, ...]
    ordered: bool | None = False


@dataclass(frozen=True, slots=True)
class Container(Node):
    """Generic block container from the host tree.

    Covers sections, admonitions, unknown directives and any other host
    node kind that is not modelled explicitly. ``kind`` keeps the host's
    type name, ``name`` a directive name when there is one and ``value``
    any literal payload, so the node can be written back unchanged.

    """

    children: tuple[Block, ...]
    kind: str = "container"
    name: str | None = None
    value: str | None = None


@dataclass(frozen=True, slots=True)
class IndexMarker(Node):
    """An ``index-num`` marker.

    Markdown:
        :::{index-num} force; addition, decomposition
        :::

    ``raw`` holds the directive argument, or its body when no argument was
    given. ``target_id`` is None until the index transform assigns the
    anchor id that generated links point at. Never renders visible output.

    """

    raw: str = ""
    target_id: str | None = None


@dataclass(frozen=True, slots=True)
class ShowIndexMarker(Node):
    """A ``show-index-num`` marker, replaced by the generated page index."""


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node of a document."""

    children: tuple[Block, ...]


# PEP 695 type alias for block elements
type Block = (
    Document
    | Container
    | Heading
    | Paragraph
    | List
    | ListItem
    | IndexMarker
    | ShowIndexMarker
)
