"""Tests for index entry collection."""

from indexnum.collector import IndexCollector, IndexEntry, collect_entries
from indexnum.config import IndexConfig
from indexnum.location import SourceLocation
from indexnum.nodes import Container, Document, Heading, IndexMarker, Paragraph, Text

LOC = SourceLocation(lineno=1, col_offset=1)


def _doc(*blocks) -> Document:  # type: ignore[no-untyped-def]
    return Document(location=LOC, children=tuple(blocks))


def _heading(depth: int, text: str = "h") -> Heading:
    return Heading(location=LOC, depth=depth, children=(Text(location=LOC, content=text),))


def _marker(raw: str) -> IndexMarker:
    return IndexMarker(location=LOC, raw=raw)


class TestHeadingNumbers:
    """Entries carry the heading number in effect at their marker."""

    def test_marker_before_any_heading(self) -> None:
        entries = collect_entries(_doc(_marker("early"), _heading(1)))
        assert entries == [IndexEntry("early", "index-num-1", "")]

    def test_depths_1_2_1_3(self) -> None:
        doc = _doc(
            _heading(1),
            _marker("a"),
            _heading(2),
            _marker("b"),
            _heading(1),
            _marker("c"),
            _heading(3),
            _marker("d"),
        )
        numbers = [e.heading_number for e in collect_entries(doc)]
        assert numbers == ["1", "1.1", "2", "2.0.1"]

    def test_nearest_heading_by_position_not_containment(self) -> None:
        # The heading inside the container still governs the marker after it
        doc = _doc(
            _heading(1),
            Container(location=LOC, children=(_heading(2),)),
            _marker("after-container"),
        )
        assert collect_entries(doc)[0].heading_number == "1.1"

    def test_marker_nested_in_containers(self) -> None:
        doc = _doc(
            _heading(1),
            _heading(2),
            Container(location=LOC, children=(Container(location=LOC, children=(_marker("deep"),)),)),
        )
        assert collect_entries(doc)[0].heading_number == "1.1"

    def test_heading_after_marker_does_not_apply(self) -> None:
        doc = _doc(_heading(1), _marker("x"), _heading(1))
        assert collect_entries(doc)[0].heading_number == "1"


class TestTargetIds:
    """One target id per marker, numbered from 1."""

    def test_sequential_ids(self) -> None:
        collector = IndexCollector()
        collector.visit(_doc(_marker("a"), _marker("b"), _marker("c")))
        assert collector.target_ids == ["index-num-1", "index-num-2", "index-num-3"]

    def test_terms_of_one_marker_share_id(self) -> None:
        entries = collect_entries(_doc(_marker("a, b")))
        assert {e.target_id for e in entries} == {"index-num-1"}

    def test_empty_marker_still_gets_id(self) -> None:
        collector = IndexCollector()
        collector.visit(_doc(_marker(""), _marker("x")))
        assert collector.target_ids == ["index-num-1", "index-num-2"]
        assert collector.entries == [IndexEntry("x", "index-num-2", "")]

    def test_custom_prefix(self) -> None:
        entries = collect_entries(_doc(_marker("x")), IndexConfig(target_id_prefix="idx-"))
        assert entries[0].target_id == "idx-1"

    def test_counter_is_per_collector(self) -> None:
        doc = _doc(_marker("x"))
        assert collect_entries(doc)[0].target_id == "index-num-1"
        assert collect_entries(doc)[0].target_id == "index-num-1"


class TestEntryOrder:
    """Document order, then term-parse order, no cross-marker de-duplication."""

    def test_document_then_term_order(self) -> None:
        entries = collect_entries(_doc(_marker("z, y"), _marker("a")))
        assert [e.term for e in entries] == ["z", "y", "a"]

    def test_same_term_under_two_headings(self) -> None:
        doc = _doc(_heading(1), _marker("force"), _heading(1), _marker("force"))
        entries = collect_entries(doc)
        assert entries == [
            IndexEntry("force", "index-num-1", "1"),
            IndexEntry("force", "index-num-2", "2"),
        ]

    def test_duplicate_terms_within_marker_collapsed(self) -> None:
        assert len(collect_entries(_doc(_marker("a, a, a")))) == 1

    def test_non_marker_text_ignored(self) -> None:
        doc = _doc(Paragraph(location=LOC, children=(Text(location=LOC, content="single: x"),)))
        assert collect_entries(doc) == []

    def test_heading_number_property(self) -> None:
        collector = IndexCollector()
        collector.visit(_doc(_heading(1), _heading(2)))
        assert collector.heading_number == "1.1"
