"""Build a page index from typed nodes and print it."""

from indexnum import (
    Document,
    Heading,
    IndexMarker,
    List,
    ShowIndexMarker,
    SourceLocation,
    Text,
    build_index,
)

loc = SourceLocation.unknown()


def heading(depth: int, text: str) -> Heading:
    return Heading(location=loc, depth=depth, children=(Text(location=loc, content=text),))


doc = Document(
    location=loc,
    children=(
        heading(1, "Mechanics"),
        heading(2, "Forces"),
        IndexMarker(location=loc, raw="single: force; addition, decomposition"),
        heading(2, "Mass"),
        IndexMarker(location=loc, raw="mass, inertia"),
        heading(1, "Index"),
        ShowIndexMarker(location=loc),
    ),
)

index = build_index(doc).children[-1]
assert isinstance(index, List)
for item in index.items:
    strong, separator, link = item.children[0].children
    print(f"{strong.children[0].content}{separator.content}{link.children[0].content} ({link.url})")
