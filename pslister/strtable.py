"""A set of strings that lists itself in sorted order."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO


class StringTable:
    """A collection of unique strings."""

    def __init__(self) -> None:
        self._items: set[str] = set()

    def add(self, key: str) -> None:
        """Add KEY unless it is already present."""
        self._items.add(key)

    def get(self, key: str) -> str | None:
        """Return KEY if it is in the table, None otherwise."""
        return key if key in self._items else None

    def dump_sorted(self) -> list[str]:
        """Return the strings in alphabetical order."""
        return sorted(self._items)

    def self_print(self, stream: TextIO) -> None:
        """Write the sorted strings, one per line, then a blank line."""
        for entry in self.dump_sorted():
            stream.write(f"{entry}\n")
        stream.write("\n")

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.dump_sorted())