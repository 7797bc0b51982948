"""Tests for the host pipeline plugin."""

import pytest

from indexnum.config import IndexConfig, index_config_context
from indexnum.directives import DirectiveRegistryBuilder, create_registry_with_defaults
from indexnum.errors import RegistrationError
from indexnum.location import SourceLocation
from indexnum.nodes import Document, Heading, IndexMarker, List, ShowIndexMarker
from indexnum.plugin import DocumentTransform, IndexNumPlugin

LOC = SourceLocation(lineno=1, col_offset=1)


def _page() -> Document:
    return Document(
        location=LOC,
        children=(
            Heading(location=LOC, depth=1, children=()),
            IndexMarker(location=LOC, raw="x"),
            ShowIndexMarker(location=LOC),
        ),
    )


class TestIndexNumPlugin:
    def test_name(self) -> None:
        assert IndexNumPlugin.name == "Index Numbered (local)"

    def test_directives(self) -> None:
        names = [name for d in IndexNumPlugin().directives for name in d.names]
        assert names == ["index-num", "show-index-num"]

    def test_transform_descriptor(self) -> None:
        (t,) = IndexNumPlugin().transforms
        assert isinstance(t, DocumentTransform)
        assert t.name == "index-num-local-transform"
        assert t.stage == "document"
        assert t.doc

    def test_transform_callable(self) -> None:
        (t,) = IndexNumPlugin().transforms
        result = t(_page())
        assert isinstance(result.children[-1], List)

    def test_register_into_empty_builder(self) -> None:
        registry = IndexNumPlugin().register(DirectiveRegistryBuilder()).build()
        assert registry.names == frozenset({"index-num", "show-index-num"})

    def test_register_twice_rejected(self) -> None:
        with pytest.raises(RegistrationError):
            IndexNumPlugin().register(create_registry_with_defaults())

    def test_run(self) -> None:
        result = IndexNumPlugin().run(_page())
        assert result.children[1].target_id == "index-num-1"

    def test_fixed_config(self) -> None:
        plugin = IndexNumPlugin(IndexConfig(target_id_prefix="p-"))
        with index_config_context(IndexConfig(target_id_prefix="ctx-")):
            result = plugin.run(_page())
        assert result.children[1].target_id == "p-1"

    def test_context_config_when_unset(self) -> None:
        plugin = IndexNumPlugin()
        with index_config_context(IndexConfig(target_id_prefix="ctx-")):
            result = plugin.run(_page())
        assert result.children[1].target_id == "ctx-1"

    def test_run_mdast(self) -> None:
        tree = {
            "type": "root",
            "children": [
                {"type": "mystDirective", "name": "show-index-num"},
                {"type": "mystDirective", "name": "index-num", "value": "single: b\na"},
            ],
        }
        out = IndexNumPlugin().run_mdast(tree)
        index, marker = out["children"]
        assert marker["identifier"] == "index-num-1"
        terms = [item["children"][0]["children"][0]["children"][0]["value"] for item in index["children"]]
        assert terms == ["a", "b"]
        assert tree["children"][1].get("identifier") is None
