"""Core model classes and types for replaycache.

This module contains the record type produced by every pull from a source,
and the tagged handle that wraps the source's iterator.
"""

from collections.abc import AsyncIterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..utils.errors import InvalidSourceError


class SourceKind(str, Enum):
    """Kinds of pull-based source."""

    SYNC = "sync"
    ASYNC = "async"


@dataclass(frozen=True)
class Record:
    """Outcome of one pull from a source.

    `value` is None when `done` is true.
    """
    value: Any = None
    done: bool = False


TERMINAL = Record(done=True)


@dataclass(frozen=True)
class SourceHandle:
    """Iterator obtained once from a source, tagged with its kind."""
    kind: SourceKind
    iterator: Any

    @classmethod
    def resolve(cls, source: Any, allow_async: bool = False) -> "SourceHandle":
        """Obtain the source's iterator.

        Args:
            source: Object to iterate
            allow_async: Whether asynchronous iterables are accepted

        Returns:
            Handle over the source's iterator

        Raises:
            InvalidSourceError: If the source is not iterable
        """
        if allow_async and isinstance(source, AsyncIterable):
            return cls(SourceKind.ASYNC, source.__aiter__())
        try:
            iterator = iter(source)
        except TypeError:
            raise InvalidSourceError(source) from None
        return cls(SourceKind.SYNC, iterator)

    def pull(self) -> Record:
        """Pull the next record from a synchronous iterator."""
        try:
            return Record(next(self.iterator))
        except StopIteration:
            return TERMINAL

    async def apull(self) -> Record:
        """Pull the next record from either kind of iterator."""
        if self.kind is SourceKind.SYNC:
            return self.pull()
        try:
            return Record(await self.iterator.__anext__())
        except StopAsyncIteration:
            return TERMINAL


def is_terminal(record: Optional[Record]) -> bool:
    """Check whether a record ends its sequence."""
    return record is not None and record.done
