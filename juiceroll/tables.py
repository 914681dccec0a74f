"""Range-based lookup tables.

A table is an ordered list of inclusive ``min..max`` ranges, each mapped to a
result. Lookup returns the first entry whose range contains the key, or the
caller's default when nothing matches. Lookup never raises and never clamps:
callers clamp modified totals into ``min_key..max_key`` before looking up.

Ranges are checked once, when the table is built. Overlaps and gaps are data
errors and raise ``TableError`` at import time.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class TableError(ValueError):
    """Raised when a table's ranges overlap or leave a gap."""


@dataclass(frozen=True)
class TableEntry(Generic[T]):
    min_value: int
    max_value: int
    result: T

    def contains(self, key: int) -> bool:
        return self.min_value <= key <= self.max_value


class LookupTable(Generic[T]):
    """An immutable, validated range table."""

    def __init__(self, name: str, entries: Sequence[TableEntry[T]]) -> None:
        if not entries:
            raise TableError(f"Table {name!r} has no entries")
        self.name = name
        self._entries: tuple[TableEntry[T], ...] = tuple(entries)
        self._validate()

    @classmethod
    def from_ranges(cls, name: str, ranges: Sequence[tuple[int, int, T]]) -> LookupTable[T]:
        """Build a table from ``(min, max, result)`` triples."""
        return cls(name, [TableEntry(lo, hi, result) for lo, hi, result in ranges])

    @classmethod
    def from_sequence(cls, name: str, items: Sequence[T], start: int = 1) -> LookupTable[T]:
        """Build a word-list table: one single-key entry per item, keyed from ``start``."""
        return cls(
            name,
            [TableEntry(start + i, start + i, item) for i, item in enumerate(items)],
        )

    def _validate(self) -> None:
        for entry in self._entries:
            if entry.min_value > entry.max_value:
                raise TableError(
                    f"Table {self.name!r} has an inverted range "
                    f"{entry.min_value}..{entry.max_value}"
                )
        ordered = sorted(self._entries, key=lambda e: e.min_value)
        for prev, curr in zip(ordered, ordered[1:]):
            if curr.min_value <= prev.max_value:
                raise TableError(
                    f"Table {self.name!r} has overlapping ranges "
                    f"{prev.min_value}..{prev.max_value} and {curr.min_value}..{curr.max_value}"
                )
            if curr.min_value > prev.max_value + 1:
                raise TableError(
                    f"Table {self.name!r} has a gap between {prev.max_value} and {curr.min_value}"
                )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def min_key(self) -> int:
        return min(e.min_value for e in self._entries)

    @property
    def max_key(self) -> int:
        return max(e.max_value for e in self._entries)

    def lookup(self, key: int, default: T | None = None) -> T | None:
        """Return the result of the first entry containing ``key``.

        Args:
            key: The (already clamped) total to look up.
            default: Returned when no entry contains ``key``.

        Returns:
            The matching result, or ``default``.
        """
        for entry in self._entries:
            if entry.contains(key):
                return entry.result
        return default

    def clamp(self, key: int) -> int:
        """Clamp ``key`` into the table's covered domain."""
        return max(self.min_key, min(self.max_key, key))

    def results(self) -> list[T]:
        return [e.result for e in self._entries]

    def __iter__(self) -> Iterator[TableEntry[T]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LookupTable({self.name!r}, {self.min_key}..{self.max_key})"


def normalize_d10(roll: int) -> int:
    """Map a d10 face onto the 1-9, 0 convention used by the printed tables."""
    return 0 if roll == 10 else roll
