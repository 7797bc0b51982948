"""Index entry collection.

Walks a document once in reading order, numbering headings and turning
every ``IndexMarker`` into index entries tagged with the heading number in
effect at the marker's position.

"Nearest heading above" is positional: a marker belongs to the last
heading that precedes it in pre-order, whatever containers either of them
sit in.

Example:
    >>> collector = IndexCollector()
    >>> collector.visit(doc)
    >>> [(e.term, e.heading_number) for e in collector.entries]
    [('force', '1.2'), ('mass', '2')]

"""

from __future__ import annotations

from dataclasses import dataclass

from indexnum.config import IndexConfig, get_index_config
from indexnum.nodes import Document, Heading, IndexMarker
from indexnum.numbering import HeadingCounter
from indexnum.terms import parse_terms
from indexnum.utils.logger import get_logger
from indexnum.visitor import BaseVisitor

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """One indexed term at one marker.

    Attributes:
        term: Non-empty, trimmed term text
        target_id: Anchor id assigned to the originating marker
        heading_number: Number of the nearest heading above the marker,
            empty when the marker precedes every heading

    """

    term: str
    target_id: str
    heading_number: str


class IndexCollector(BaseVisitor[None]):
    """Visitor that collects index entries in document order.

    Target ids are numbered per collector, starting at 1. Entries are not
    de-duplicated across markers: the same term under two markers yields
    two entries.

    Attributes:
        entries: Collected entries, by marker then by term order
        target_ids: Target id of each visited marker, in document order

    """

    def __init__(self, config: IndexConfig | None = None) -> None:
        self._config = config or get_index_config()
        self._headings = HeadingCounter()
        self._marker_count = 0
        self.entries: list[IndexEntry] = []
        self.target_ids: list[str] = []

    @property
    def heading_number(self) -> str:
        """Heading number at the current walk position."""
        return self._headings.number

    def visit_heading(self, node: Heading) -> None:
        self._headings.enter(node.depth)

    def visit_index_marker(self, node: IndexMarker) -> None:
        self._marker_count += 1
        target_id = f"{self._config.target_id_prefix}{self._marker_count}"
        self.target_ids.append(target_id)

        terms = parse_terms(node.raw)
        if not terms:
            logger.debug("index-num marker at %s declares no terms", node.location)
        number = self._headings.number
        self.entries.extend(IndexEntry(term, target_id, number) for term in terms)


def collect_entries(doc: Document, config: IndexConfig | None = None) -> list[IndexEntry]:
    """Collect the index entries of ``doc`` in document order."""
    collector = IndexCollector(config)
    collector.visit(doc)
    return collector.entries
