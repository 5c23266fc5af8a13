"""Base class for caching iterables.

A cache wraps one pull-based source and records every pull result in a
`RecordSequence`, so the source can be replayed from the start any number
of times without being re-driven.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar

from ..models.core import SourceHandle
from .records import RecordSequence

C = TypeVar('C', bound='CachedIterable')


class CachedIterable(ABC):
    """Base class for all caching iterables.

    Subclasses decide which source kinds they accept and how records are
    filled. The record sequence can be inspected freely; inspection never
    pulls from the source.
    """

    accepts_async = False

    def __init__(self, source: Any):
        """Initialize the cache.

        Args:
            source: Iterable to cache

        Raises:
            InvalidSourceError: If the source does not implement the
                iteration protocol
        """
        self._source = SourceHandle.resolve(source, allow_async=self.accepts_async)
        self._records: RecordSequence = RecordSequence()

        # Statistics
        self.total_pulls = 0
        self.total_replayed = 0
        self.total_iterators = 0

    @classmethod
    def from_source(cls: type[C], source: Any) -> C:
        """Create a cache from an iterable.

        If `source` is already an instance of this class it is returned
        without any modifications.

        Args:
            source: Iterable or existing cache

        Returns:
            Cache over the source
        """
        if isinstance(source, cls):
            return source
        return cls(source)

    @property
    def records(self) -> RecordSequence:
        """Records cached so far."""
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    @property
    @abstractmethod
    def exhausted(self) -> bool:
        """Whether a terminal record has been cached."""
        pass

    @abstractmethod
    def touch_next(self, count: Optional[int] = None):
        """Consume up to `count` more elements from the source into the cache.

        Args:
            count: Number of elements to consume, defaults to the configured
                `cache.touch_count`

        Returns:
            The most recently cached record
        """
        pass

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        return {
            "size": len(self._records),
            "source_kind": self._source.kind.value,
            "pulls": self.total_pulls,
            "replayed": self.total_replayed,
            "iterators": self.total_iterators,
            "exhausted": self.exhausted,
        }

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(size={len(self._records)}, "
                f"source_kind={self._source.kind.value!r})")
