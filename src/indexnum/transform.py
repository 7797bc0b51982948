"""The page index transform.

Two passes over one document:

1. ``IndexCollector`` walks the tree in pre-order, numbering headings,
   assigning target ids to index markers and collecting entries.
2. ``transform`` rebuilds the tree bottom-up. Each ``IndexMarker`` gets its
   target id; each ``ShowIndexMarker`` is replaced by a freshly rendered
   page index spliced in among its siblings.

The input tree is never modified. Generated index nodes contain no markers
and are not revisited, so running the transform on its own output collects
the same entries and inserts nothing new.

Example:
    >>> from indexnum import build_index
    >>> new_doc = build_index(doc)

"""

from __future__ import annotations

import dataclasses

from indexnum.collector import IndexCollector, IndexEntry
from indexnum.config import IndexConfig, get_index_config
from indexnum.listing import render_index
from indexnum.nodes import Document, IndexMarker, Node, ShowIndexMarker
from indexnum.utils.logger import get_logger
from indexnum.visitor import TransformResult, transform

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class IndexResult:
    """Outcome of one index transform.

    Attributes:
        document: The rewritten document
        entries: Entries collected from the input, in document order

    """

    document: Document
    entries: tuple[IndexEntry, ...]


def apply_index(doc: Document, config: IndexConfig | None = None) -> IndexResult:
    """Run the index transform and return the new tree with its entries.

    Args:
        doc: Document to index
        config: Transform configuration (defaults to the context config)

    Returns:
        IndexResult holding the rewritten document and collected entries.

    """
    config = config or get_index_config()

    collector = IndexCollector(config)
    collector.visit(doc)
    entries = tuple(collector.entries)

    # Markers are leaves, so the bottom-up rewrite meets them in the same
    # order the pre-order collector did.
    target_ids = iter(collector.target_ids)
    replaced = 0

    def rewrite(node: Node) -> TransformResult:
        nonlocal replaced
        match node:
            case IndexMarker():
                return dataclasses.replace(node, target_id=next(target_ids))
            case ShowIndexMarker(location=location):
                replaced += 1
                return render_index(entries, location, config)
            case _:
                return node

    new_doc = transform(doc, rewrite)
    logger.debug(
        "Indexed %d markers into %d entries; replaced %d show-index markers",
        len(collector.target_ids),
        len(entries),
        replaced,
    )
    return IndexResult(document=new_doc, entries=entries)


def build_index(doc: Document, config: IndexConfig | None = None) -> Document:
    """Return a copy of ``doc`` with its page index built in.

    Args:
        doc: Document to index
        config: Transform configuration (defaults to the context config)

    Returns:
        New Document with annotated markers and expanded show-index markers.

    """
    return apply_index(doc, config).document