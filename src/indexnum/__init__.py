"""
indexnum — Page-local numbered index for document ASTs

Collects ``index-num`` markers from a parsed document, records the number
of the nearest heading above each one ("2.1.3"), and replaces every
``show-index-num`` marker with a sorted list linking each term to its
section number.

Quick Start:
    >>> from indexnum import build_index, from_mdast, to_mdast
    >>> doc = from_mdast(tree)          # or build typed nodes directly
    >>> new_doc = build_index(doc)
    >>> new_tree = to_mdast(new_doc)

Host Pipelines:
    >>> from indexnum import IndexNumPlugin
    >>> plugin = IndexNumPlugin()
    >>> plugin.directives      # register with the parser
    >>> plugin.transforms      # run at the "document" stage

Installation:
    pip install indexnum              # zero runtime dependencies
"""

from indexnum.collector import IndexCollector, IndexEntry, collect_entries
from indexnum.config import (
    IndexConfig,
    get_index_config,
    index_config_context,
    reset_index_config,
    set_index_config,
)
from indexnum.directives import (
    DirectiveRegistry,
    DirectiveRegistryBuilder,
    IndexNumDirective,
    ShowIndexNumDirective,
    create_default_registry,
    create_registry_with_defaults,
)
from indexnum.errors import IndexNumError, RegistrationError
from indexnum.listing import render_index, sort_entries
from indexnum.location import SourceLocation
from indexnum.mdast import from_mdast, to_mdast
from indexnum.nodes import (
    Block,
    Container,
    Document,
    Heading,
    IndexMarker,
    Inline,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    ShowIndexMarker,
    Strong,
    Text,
)
from indexnum.numbering import HeadingCounter
from indexnum.plugin import DocumentTransform, IndexNumPlugin
from indexnum.terms import parse_terms
from indexnum.transform import IndexResult, apply_index, build_index
from indexnum.visitor import BaseVisitor, children_of, transform, walk

__version__ = "0.1.0"

__all__ = [
    # Transform
    "IndexResult",
    "apply_index",
    "build_index",
    # Components
    "HeadingCounter",
    "IndexCollector",
    "IndexEntry",
    "collect_entries",
    "parse_terms",
    "render_index",
    "sort_entries",
    # Configuration
    "IndexConfig",
    "get_index_config",
    "index_config_context",
    "reset_index_config",
    "set_index_config",
    # Directives and plugin
    "DirectiveRegistry",
    "DirectiveRegistryBuilder",
    "DocumentTransform",
    "IndexNumDirective",
    "IndexNumPlugin",
    "ShowIndexNumDirective",
    "create_default_registry",
    "create_registry_with_defaults",
    # AST
    "Block",
    "Container",
    "Document",
    "Heading",
    "IndexMarker",
    "Inline",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "ShowIndexMarker",
    "SourceLocation",
    "Strong",
    "Text",
    # Traversal
    "BaseVisitor",
    "children_of",
    "transform",
    "walk",
    # Host trees
    "from_mdast",
    "to_mdast",
    # Errors
    "IndexNumError",
    "RegistrationError",
    "__version__",
]
