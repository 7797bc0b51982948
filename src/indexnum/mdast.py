"""Adapter between mdast-style dict trees and the typed AST.

MyST and other unified-based pipelines hand plugins plain dict trees:
``{"type": "heading", "depth": 2, "children": [...]}``. This module reads
such trees into typed nodes and writes them back, so the index transform
can run inside those pipelines.

Reading is permissive:
- missing ``children`` means no children
- missing or non-integer ``depth`` means 1
- ``mystDirective`` nodes named ``index-num`` / ``show-index-num`` become
  markers; the marker text is ``args``, falling back to ``value``
- any other node kind becomes a ``Container`` keeping its kind, directive
  name, literal value and children
- list children are kept as they are, even when they are not ``listItem``
  nodes
- every field a node does not model is kept in ``attrs``, so writing a
  tree back reproduces the host's fields

Writing emits each marker's target id as ``identifier`` so the host can
render an anchor that ``#<target_id>`` links resolve to.

Example:
    >>> tree = {"type": "root", "children": [
    ...     {"type": "heading", "depth": 1, "children": []},
    ...     {"type": "mystDirective", "name": "index-num", "args": "force"},
    ... ]}
    >>> doc = from_mdast(tree)
    >>> to_mdast(build_index(doc))["children"][1]["identifier"]
    'index-num-1'

"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from indexnum.location import SourceLocation
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
from indexnum.utils.logger import get_logger

logger = get_logger(__name__)

INDEX_DIRECTIVE = "index-num"
SHOW_INDEX_DIRECTIVE = "show-index-num"
_DIRECTIVE_TYPE = "mystDirective"


# =============================================================================
# Reading
# =============================================================================

# Keys every reader consumes; any other key is kept in ``attrs``
_STRUCTURAL_KEYS = frozenset({"type", "children", "position"})


def from_mdast(data: Mapping[str, Any]) -> Document:
    """Read an mdast tree into a Document.

    A root that is not of type ``root`` is wrapped in a Document.

    """
    node = _read(data)
    if isinstance(node, Document):
        return node
    return Document(location=node.location, children=(node,))


def _read(data: Mapping[str, Any]) -> Node:
    kind = data.get("type")
    if not isinstance(kind, str) or not kind:
        kind = "container"
    loc = _read_position(data.get("position"))

    match kind:
        case "root":
            return Document(location=loc, children=_read_children(data), attrs=_attrs(data))
        case "heading":
            return Heading(
                location=loc,
                depth=_read_depth(data.get("depth")),
                children=_read_children(data),
                attrs=_attrs(data, "depth"),
            )
        case "paragraph":
            return Paragraph(location=loc, children=_read_children(data), attrs=_attrs(data))
        case "text":
            return Text(location=loc, content=_read_str(data.get("value")), attrs=_attrs(data, "value"))
        case "strong":
            return Strong(location=loc, children=_read_children(data), attrs=_attrs(data))
        case "link":
            return Link(
                location=loc,
                url=_read_str(data.get("url")),
                title=data.get("title"),
                children=_read_children(data),
                attrs=_attrs(data, "url", "title"),
            )
        case "list":
            ordered = data.get("ordered")
            return List(
                location=loc,
                items=_read_children(data),
                ordered=ordered if isinstance(ordered, bool) else None,
                attrs=_attrs(data, "ordered"),
            )
        case "listItem":
            return ListItem(location=loc, children=_read_children(data), attrs=_attrs(data))
        case _ if kind == _DIRECTIVE_TYPE and data.get("name") == INDEX_DIRECTIVE:
            # Marker text fields and children stay in attrs untouched
            return IndexMarker(
                location=loc,
                raw=_read_str(data.get("args") or data.get("value")),
                target_id=data.get("identifier"),
                attrs=_opaque_attrs(data, "name", "identifier"),
            )
        case _ if kind == _DIRECTIVE_TYPE and data.get("name") == SHOW_INDEX_DIRECTIVE:
            return ShowIndexMarker(location=loc, attrs=_opaque_attrs(data, "name"))
        case _:
            if kind != _DIRECTIVE_TYPE:
                logger.debug("Wrapping mdast node kind %r as Container", kind)
            name = data.get("name")
            value = data.get("value")
            consumed = [key for key, item in (("name", name), ("value", value)) if isinstance(item, str)]
            return Container(
                location=loc,
                children=_read_children(data),
                kind=kind,
                name=name if isinstance(name, str) else None,
                value=value if isinstance(value, str) else None,
                attrs=_attrs(data, *consumed),
            )


def _attrs(data: Mapping[str, Any], *consumed: str) -> tuple[tuple[str, Any], ...]:
    """Host fields not modelled by the node, in their original order."""
    return tuple(
        (key, value) for key, value in data.items() if key not in _STRUCTURAL_KEYS and key not in consumed
    )


def _opaque_attrs(data: Mapping[str, Any], *consumed: str) -> tuple[tuple[str, Any], ...]:
    """Like ``_attrs`` for leaf nodes, keeping ``children`` untouched."""
    return tuple(
        (key, value)
        for key, value in data.items()
        if key not in ("type", "position") and key not in consumed
    )


def _read_children(data: Mapping[str, Any]) -> tuple[Any, ...]:
    children = data.get("children") or ()
    return tuple(_read(child) for child in children if isinstance(child, Mapping))


def _read_depth(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 1:
        return value
    return 1


def _read_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _read_position(position: Any) -> SourceLocation:
    if not isinstance(position, Mapping):
        return SourceLocation.unknown()
    start = position.get("start")
    end = position.get("end")
    if not isinstance(start, Mapping):
        start = {}
    if not isinstance(end, Mapping):
        end = {}
    return SourceLocation(
        lineno=_read_int(start.get("line"), 0),
        col_offset=_read_int(start.get("column"), 0),
        offset=_read_int(start.get("offset"), 0),
        end_offset=_read_int(end.get("offset"), 0),
        end_lineno=_read_int(end.get("line"), None),
        end_col_offset=_read_int(end.get("column"), None),
    )


def _read_int[T](value: Any, default: T) -> int | T:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default


# =============================================================================
# Writing
# =============================================================================


def to_mdast(node: Node) -> dict[str, Any]:
    """Write a typed node (usually a Document) as an mdast dict.

    Modelled fields are written first; host fields kept in ``attrs`` fill
    in every key the node does not set itself.

    """
    out: dict[str, Any]
    match node:
        case Document(children=children):
            out = {"type": "root", "children": _write_all(children)}
        case Heading(depth=depth, children=children):
            out = {"type": "heading", "depth": depth, "children": _write_all(children)}
        case Paragraph(children=children):
            out = {"type": "paragraph", "children": _write_all(children)}
        case Text(content=content):
            out = {"type": "text", "value": content}
        case Strong(children=children):
            out = {"type": "strong", "children": _write_all(children)}
        case Link(url=url, title=title, children=children):
            out = {"type": "link", "url": url, "children": _write_all(children)}
            if title is not None:
                out["title"] = title
        case List(items=items, ordered=ordered):
            out = {"type": "list", "children": _write_all(items)}
            if ordered is not None:
                out["ordered"] = ordered
        case ListItem(children=children):
            out = {"type": "listItem", "children": _write_all(children)}
        case IndexMarker(raw=raw, target_id=target_id, attrs=attrs):
            out = {"type": _DIRECTIVE_TYPE, "name": INDEX_DIRECTIVE}
            keys = {key for key, _ in attrs}
            if "args" not in keys and "value" not in keys:
                out["args"] = raw
            if target_id is not None:
                out["identifier"] = target_id
        case ShowIndexMarker():
            out = {"type": _DIRECTIVE_TYPE, "name": SHOW_INDEX_DIRECTIVE}
        case Container(children=children, kind=kind, name=name, value=value):
            out = {"type": kind}
            if name is not None:
                out["name"] = name
            if value is not None:
                out["value"] = value
            if children:
                out["children"] = _write_all(children)
        case _:
            msg = f"Cannot write {type(node).__name__} as mdast"
            raise TypeError(msg)

    for key, value in node.attrs:
        if key not in out:
            out[key] = copy.deepcopy(value)
    if node.location.is_known:
        out["position"] = _write_position(node.location)
    return out


def _write_all(nodes: tuple[Node, ...]) -> list[dict[str, Any]]:
    return [to_mdast(child) for child in nodes]


def _write_position(loc: SourceLocation) -> dict[str, Any]:
    start = {"line": loc.lineno, "column": loc.col_offset, "offset": loc.offset}
    end: dict[str, Any] = {"offset": loc.end_offset}
    if loc.end_lineno is not None:
        end["line"] = loc.end_lineno
    if loc.end_col_offset is not None:
        end["column"] = loc.end_col_offset
    return {"start": start, "end": end}
