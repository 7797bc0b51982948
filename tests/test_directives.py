"""Tests for the marker directives and registry."""

from typing import ClassVar

import pytest

from indexnum.directives import (
    DirectiveHandler,
    DirectiveRegistryBuilder,
    IndexNumDirective,
    ShowIndexNumDirective,
    create_default_registry,
    create_registry_with_defaults,
)
from indexnum.errors import IndexNumError, RegistrationError
from indexnum.location import SourceLocation
from indexnum.nodes import IndexMarker, Paragraph, ShowIndexMarker

LOC = SourceLocation(lineno=5, col_offset=1)


class NoteDirective:
    names: ClassVar[tuple[str, ...]] = ("note",)
    doc: ClassVar[str] = "A note."
    takes_argument: ClassVar[bool] = False

    def parse(self, name, title, content, location):  # type: ignore[no-untyped-def]
        return Paragraph(location=location, children=())


class TestMarkerDirectives:
    """Handlers build marker nodes."""

    def test_index_num_argument(self) -> None:
        node = IndexNumDirective().parse("index-num", "force; addition", "", LOC)
        assert node == IndexMarker(location=LOC, raw="force; addition")

    def test_index_num_body(self) -> None:
        node = IndexNumDirective().parse("index-num", None, "single: a\nb", LOC)
        assert node.raw == "single: a\nb"

    def test_index_num_argument_wins_over_body(self) -> None:
        node = IndexNumDirective().parse("index-num", "arg", "body", LOC)
        assert node.raw == "arg"

    def test_index_num_empty(self) -> None:
        node = IndexNumDirective().parse("index-num", None, "", LOC)
        assert node.raw == ""
        assert node.target_id is None

    def test_show_index_num_ignores_input(self) -> None:
        node = ShowIndexNumDirective().parse("show-index-num", "ignored", "ignored", LOC)
        assert node == ShowIndexMarker(location=LOC)

    def test_metadata(self) -> None:
        assert IndexNumDirective.takes_argument is True
        assert ShowIndexNumDirective.takes_argument is False
        assert IndexNumDirective.doc
        assert ShowIndexNumDirective.doc

    def test_protocol_conformance(self) -> None:
        assert isinstance(IndexNumDirective(), DirectiveHandler)
        assert isinstance(ShowIndexNumDirective(), DirectiveHandler)


class TestDirectiveRegistry:
    """Tests for directive registry."""

    def test_default_registry(self) -> None:
        registry = create_default_registry()
        assert registry.has("index-num")
        assert "show-index-num" in registry
        assert len(registry) == 2
        assert registry.names == frozenset({"index-num", "show-index-num"})

    def test_default_registry_cached(self) -> None:
        assert create_default_registry() is create_default_registry()

    def test_lookup(self) -> None:
        registry = create_default_registry()
        assert isinstance(registry.get("index-num"), IndexNumDirective)
        assert isinstance(registry.get("show-index-num"), ShowIndexNumDirective)
        assert registry.get("note") is None

    def test_extend_defaults(self) -> None:
        registry = create_registry_with_defaults().register(NoteDirective()).build()
        assert registry.has("note")
        assert len(registry.handlers) == 3

    def test_duplicate_name_rejected(self) -> None:
        builder = create_registry_with_defaults()
        with pytest.raises(RegistrationError, match="already registered"):
            builder.register(IndexNumDirective())

    def test_missing_attribute_rejected(self) -> None:
        class Broken:
            names = ("broken",)

        with pytest.raises(RegistrationError, match="'parse'"):
            DirectiveRegistryBuilder().register(Broken())  # type: ignore[arg-type]

    def test_registration_error_hierarchy(self) -> None:
        err = RegistrationError("Broken", "missing 'parse' attribute")
        assert isinstance(err, IndexNumError)
        assert isinstance(err, ValueError)
        assert err.handler_name == "Broken"
        assert str(err) == "Handler 'Broken': missing 'parse' attribute"

    def test_built_registry_is_snapshot(self) -> None:
        builder = DirectiveRegistryBuilder()
        builder.register(IndexNumDirective())
        registry = builder.build()
        builder.register(NoteDirective())
        assert not registry.has("note")
        assert len(builder) == 2
