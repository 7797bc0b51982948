"""Host pipeline plugin for page-local numbered indexes.

Bundles everything a document pipeline registers to support the markers:

1. Directives (``index-num``, ``show-index-num``):
   - Added to the host's directive registry
   - Called at parse time; emit marker nodes, no visible output

2. Transforms (``index-num-local-transform``):
   - Run once per document at the ``"document"`` stage, after parsing
     and before rendering
   - Collect entries and replace show-index markers with the page index

Usage:
    >>> plugin = IndexNumPlugin()
    >>> registry = plugin.register(DirectiveRegistryBuilder()).build()
    >>> for t in plugin.transforms:
    ...     doc = t(doc)

Thread Safety:
The plugin and its transforms are stateless. Per-document state lives in
the collector created by each call.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any

from indexnum.config import IndexConfig
from indexnum.directives.builtins import IndexNumDirective, ShowIndexNumDirective
from indexnum.directives.protocol import DirectiveHandler
from indexnum.directives.registry import DirectiveRegistryBuilder
from indexnum.mdast import from_mdast, to_mdast
from indexnum.nodes import Document
from indexnum.transform import build_index

__all__ = [
    "DocumentTransform",
    "IndexNumPlugin",
]


@dataclass(frozen=True, slots=True)
class DocumentTransform:
    """A named whole-document rewrite run by the host at ``stage``."""

    name: str
    doc: str
    stage: str
    apply: Callable[[Document], Document]

    def __call__(self, doc: Document) -> Document:
        return self.apply(doc)


class IndexNumPlugin:
    """Page-local numbered index: two directives and one transform.

    Args:
        config: Fixed transform configuration. When omitted, each run reads
            the context config (see ``indexnum.config``).

    """

    name = "Index Numbered (local)"

    def __init__(self, config: IndexConfig | None = None) -> None:
        self.config = config
        self.directives: tuple[DirectiveHandler, ...] = (
            IndexNumDirective(),
            ShowIndexNumDirective(),
        )
        self.transforms: tuple[DocumentTransform, ...] = (
            DocumentTransform(
                name="index-num-local-transform",
                doc="Collect index-num entries and replace show-index-num with a generated list.",
                stage="document",
                apply=partial(build_index, config=config),
            ),
        )

    def register(self, builder: DirectiveRegistryBuilder) -> DirectiveRegistryBuilder:
        """Add this plugin's directives to a host registry builder.

        Raises:
            RegistrationError: If the builder already has a marker directive
        """
        return builder.register_all(list(self.directives))

    def run(self, doc: Document) -> Document:
        """Apply every transform of the plugin, in order."""
        for t in self.transforms:
            doc = t(doc)
        return doc

    def run_mdast(self, tree: dict[str, Any]) -> dict[str, Any]:
        """Apply the plugin to an mdast dict tree, returning a new tree."""
        return to_mdast(self.run(from_mdast(tree)))
