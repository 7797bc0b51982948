"""Index term parsing.

Turns the raw argument or body of an ``index-num`` marker into the ordered
set of terms it declares.

Grammar (one entry group per non-blank line):
    a, b, c                 three terms
    parent; child           one term, semicolons are kept verbatim
    single: x               classifier prefix, dropped
    pair: a; b              classifier prefix, dropped

The classifiers ``single``, ``pair``, ``triple``, ``see`` and ``seealso``
follow the common Sphinx index convention. They carry no meaning here and
are accepted only so existing sources parse unchanged.

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import re

_CLASSIFIER_RE = re.compile(r"^(?:single|pair|triple|see|seealso)\s*:\s*(.*)$", re.IGNORECASE)


def parse_terms(raw: str | None) -> tuple[str, ...]:
    """Parse a marker argument into distinct, trimmed terms.

    Args:
        raw: Marker argument or body. None is treated as empty.

    Returns:
        Terms in first-occurrence order, without duplicates.

    Example:
        >>> parse_terms("single: force; addition, decomposition")
        ('force; addition', 'decomposition')

    """
    text = (raw or "").strip()
    if not text:
        return ()

    terms: dict[str, None] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        for term in _split_payload(_strip_classifier(line)):
            terms.setdefault(term, None)
    return tuple(terms)


def _strip_classifier(line: str) -> str:
    """Return the payload of a line, dropping a leading ``kind:`` classifier."""
    match = _CLASSIFIER_RE.match(line)
    return match.group(1) if match else line


def _split_payload(payload: str) -> list[str]:
    """Split a payload on commas into non-empty trimmed terms."""
    return [term for part in payload.split(",") if (term := part.strip())]
