"""Append-only record container shared by all replay iterators of a cache."""

from typing import Generic, Iterator, List, Optional, TypeVar

E = TypeVar('E')  # Entry type: Record, or a future resolving to one


class RecordSequence(Generic[E]):
    """Ordered, append-only sequence of pull results.

    Existing entries are never replaced or removed.
    """

    __slots__ = ("_entries",)

    def __init__(self):
        self._entries: List[E] = []

    def append(self, entry: E) -> int:
        """Append an entry.

        Args:
            entry: Record or pending pull to store

        Returns:
            Position the entry was stored at
        """
        self._entries.append(entry)
        return len(self._entries) - 1

    @property
    def last(self) -> Optional[E]:
        """Most recently appended entry, or None when empty."""
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> E:
        return self._entries[index]

    def __iter__(self) -> Iterator[E]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"RecordSequence({self._entries!r})"
