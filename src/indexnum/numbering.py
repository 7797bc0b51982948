"""Hierarchical heading numbers.

Tracks one counter per open heading depth while a document is walked in
reading order, producing section numbers like ``"2.1.3"``.

Rules for a heading at depth ``d``:
1. Counters deeper than ``d`` are discarded.
2. Missing counters up to ``d`` are filled with zeros.
3. The counter at ``d`` is incremented.

Skipping a level therefore leaves a zero in the number: depth 1 followed
directly by depth 3 numbers as ``"1.0.1"``.

Example:
    >>> counter = HeadingCounter()
    >>> counter.enter(1), counter.enter(2), counter.enter(1), counter.enter(3)
    ('1', '1.1', '2', '2.0.1')

"""

from __future__ import annotations


class HeadingCounter:
    """Per-depth heading counter stack.

    Not thread-safe; create one per walk.

    """

    __slots__ = ("_counts", "_number")

    def __init__(self) -> None:
        self._counts: list[int] = []
        self._number = ""

    @property
    def number(self) -> str:
        """Current heading number; empty before the first heading."""
        return self._number

    @property
    def counts(self) -> tuple[int, ...]:
        """Snapshot of the counter stack, one entry per open depth."""
        return tuple(self._counts)

    def enter(self, depth: int) -> str:
        """Record a heading at ``depth`` and return its number.

        Depths below 1 are treated as 1.

        """
        depth = max(depth, 1)
        del self._counts[depth:]
        self._counts.extend([0] * (depth - len(self._counts)))
        self._counts[depth - 1] += 1
        self._number = ".".join(str(count) for count in self._counts)
        return self._number
