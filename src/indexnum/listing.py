"""Rendering collected entries as a replacement subtree.

The page index is an unordered list, one item per entry, sorted by term:

    - **force** — [1.2](#index-num-3)
    - **mass** — [—](#index-num-1)

The link text is the heading number of the entry, or a placeholder when
the marker sits above the first heading. A page without entries gets a
single informational paragraph instead of an empty list.

Collation is fixed and locale-independent so output is reproducible:

- ``"natural"``: compatibility-decomposed, accents dropped, casefolded
- ``"codepoint"``: plain ``str`` ordering

Sorting is stable with no secondary key, so entries whose terms collate
equal keep their document order.

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable

from indexnum.collector import IndexEntry
from indexnum.config import Collation, IndexConfig, get_index_config
from indexnum.location import SourceLocation
from indexnum.nodes import Block, Link, List, ListItem, Paragraph, Strong, Text


def natural_key(term: str) -> str:
    """Sort key that ignores case and accents."""
    decomposed = unicodedata.normalize("NFKD", term)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def codepoint_key(term: str) -> str:
    return term


_COLLATIONS: dict[str, Callable[[str], str]] = {
    "natural": natural_key,
    "codepoint": codepoint_key,
}


def sort_entries(entries: Iterable[IndexEntry], collation: Collation = "natural") -> list[IndexEntry]:
    """Return a new list of entries stably sorted by term.

    Raises:
        KeyError: If the collation name is not recognized

    """
    if collation not in _COLLATIONS:
        available = ", ".join(sorted(_COLLATIONS))
        raise KeyError(f"Unknown collation: {collation!r}. Available: {available}")
    key = _COLLATIONS[collation]
    return sorted(entries, key=lambda entry: key(entry.term))


def render_index(
    entries: Iterable[IndexEntry],
    location: SourceLocation | None = None,
    config: IndexConfig | None = None,
) -> tuple[Block, ...]:
    """Build the page index subtree for ``entries``.

    Every call builds new nodes, so each insertion point gets its own copy.

    Args:
        entries: Collected entries, in any order
        location: Location stamped on generated nodes (the marker being
            replaced); unknown when omitted
        config: Transform configuration (defaults to the context config)

    Returns:
        A one-element tuple: the list, or the empty-page paragraph.

    """
    config = config or get_index_config()
    loc = location or SourceLocation.unknown()

    ordered = sort_entries(entries, config.collation)
    if not ordered:
        return (Paragraph(location=loc, children=(Text(location=loc, content=config.empty_message),)),)

    items = tuple(_render_item(entry, loc, config) for entry in ordered)
    return (List(location=loc, items=items, ordered=False),)


def _render_item(entry: IndexEntry, loc: SourceLocation, config: IndexConfig) -> ListItem:
    """Render one entry: bold term, separator, heading-number link."""
    link = Link(
        location=loc,
        url=f"#{entry.target_id}",
        title=None,
        children=(Text(location=loc, content=entry.heading_number or config.missing_number),),
    )
    paragraph = Paragraph(
        location=loc,
        children=(
            Strong(location=loc, children=(Text(location=loc, content=entry.term),)),
            Text(location=loc, content=config.separator),
            link,
        ),
    )
    return ListItem(location=loc, children=(paragraph,))
