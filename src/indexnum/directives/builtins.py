"""Built-in marker directives.

- ``index-num``: records index terms at its position, no visible output
- ``show-index-num``: placeholder replaced by the page index

Example:
    :::{index-num} force; addition, decomposition
    :::

    :::{index-num}
    single: mass
    pair: force; gravity
    :::

    :::{show-index-num}
    :::

Thread Safety:
Stateless handlers. Safe for concurrent use across threads.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from indexnum.nodes import IndexMarker, ShowIndexMarker

if TYPE_CHECKING:
    from indexnum.location import SourceLocation


class IndexNumDirective:
    """Handler for ``index-num``.

    Terms come from the argument when one is given, otherwise from the
    body, so both the one-line and the multi-line Sphinx-style forms work.

    """

    names: ClassVar[tuple[str, ...]] = ("index-num",)
    doc: ClassVar[str] = "Like {index}, but collected for {show-index-num} (page-local)."
    takes_argument: ClassVar[bool] = True

    def parse(
        self,
        name: str,
        title: str | None,
        content: str,
        location: SourceLocation,
    ) -> IndexMarker:
        return IndexMarker(location=location, raw=title or content or "")


class ShowIndexNumDirective:
    """Handler for ``show-index-num``. Argument and body are ignored."""

    names: ClassVar[tuple[str, ...]] = ("show-index-num",)
    doc: ClassVar[str] = (
        "Show a page-local index; each link text is the nearest heading number above the entry."
    )
    takes_argument: ClassVar[bool] = False

    def parse(
        self,
        name: str,
        title: str | None,
        content: str,
        location: SourceLocation,
    ) -> ShowIndexMarker:
        return ShowIndexMarker(location=location)
