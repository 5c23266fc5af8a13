"""CachedSyncIterable implementation.

CachedSyncIterable caches the elements yielded by a synchronous iterable so
it can be iterated over many times without depleting the iterable.
"""

from typing import Any, Iterator, Optional
from loguru import logger

from ..models.core import Record, is_terminal
from ..utils.config import get_touch_count
from ..utils.error_handling import log_source_errors
from .base import CachedIterable


class ReplayIterator(Iterator[Any]):
    """Cursor over a CachedSyncIterable, independent of other cursors."""

    def __init__(self, cache: "CachedSyncIterable"):
        self._cache = cache
        self._cursor = 0

    def next_record(self) -> Record:
        """Return the record at the cursor, pulling it if not yet cached."""
        record = self._cache._record_at(self._cursor)
        if not record.done:
            self._cursor += 1
        return record

    def __next__(self) -> Any:
        record = self.next_record()
        if record.done:
            raise StopIteration
        return record.value


class CachedSyncIterable(CachedIterable):
    """Replays a synchronous iterable, pulling each element at most once."""

    def __iter__(self) -> ReplayIterator:
        self.total_iterators += 1
        return ReplayIterator(self)

    @property
    def exhausted(self) -> bool:
        return is_terminal(self._records.last)

    @log_source_errors("pull from synchronous source")
    def _pull(self) -> Record:
        """Pull one record from the source and append it."""
        record = self._source.pull()
        position = self._records.append(record)
        self.total_pulls += 1
        if record.done:
            logger.debug(f"CachedSyncIterable: Source exhausted at position {position}")
        else:
            logger.debug(f"CachedSyncIterable: Cached position {position}")
        return record

    def _record_at(self, position: int) -> Record:
        """Get the record at `position`, pulling it if it is the next one."""
        if position < len(self._records):
            self.total_replayed += 1
            return self._records[position]
        if self.exhausted:
            return self._records.last
        return self._pull()

    def touch_next(self, count: Optional[int] = None) -> Optional[Record]:
        """Consume the next `count` elements from the source into the cache.

        Stops at the terminal record. On an empty cache at least one pull
        happens, even if the source is empty.

        Args:
            count: Number of elements to consume

        Returns:
            The last cached record, so the caller can decide whether to
            call touch_next again
        """
        if count is None:
            count = get_touch_count()
        for _ in range(count):
            if self.exhausted:
                break
            self._pull()
        return self._records.last
