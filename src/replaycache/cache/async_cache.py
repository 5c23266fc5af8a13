"""CachedAsyncIterable implementation.

CachedAsyncIterable caches the elements yielded by an async (or sync)
iterable so it can be iterated over many times without depleting it.

Each pull is stored in the record sequence as a pending future *before* it
is awaited. Any later request for the same position, whether from another
replay iterator or from `touch_next`, finds the future already in place and
awaits it instead of pulling again. Reordering the store and the await
reintroduces duplicate pulls.
"""

import asyncio
from typing import Any, AsyncIterator, Optional
from loguru import logger

from ..models.core import Record
from ..utils.config import get_touch_count
from ..utils.error_handling import log_source_errors
from .base import CachedIterable


class AsyncReplayIterator(AsyncIterator[Any]):
    """Cursor over a CachedAsyncIterable, independent of other cursors."""

    def __init__(self, cache: "CachedAsyncIterable"):
        self._cache = cache
        self._cursor = 0

    async def next_record(self) -> Record:
        """Return the record at the cursor, pulling it if not yet cached."""
        position = self._cursor
        pending = self._cache._entry_at(position)
        self._cursor += 1
        record = await asyncio.shield(pending)
        if record.done:
            # Stay on the terminal record
            self._cursor = min(self._cursor, position)
        return record

    async def __anext__(self) -> Any:
        record = await self.next_record()
        if record.done:
            raise StopAsyncIteration
        return record.value


class CachedAsyncIterable(CachedIterable):
    """Replays an async or sync iterable, pulling each element at most once.

    Concurrent requests for a position that is still being pulled share the
    one in-flight pull.
    """

    accepts_async = True

    def __aiter__(self) -> AsyncReplayIterator:
        self.total_iterators += 1
        return AsyncReplayIterator(self)

    @property
    def exhausted(self) -> bool:
        last = self._records.last
        if last is None or not last.done() or last.cancelled():
            return False
        return last.exception() is None and last.result().done

    def _pull(self) -> "asyncio.Future[Record]":
        """Schedule one pull and append it to the records while pending."""
        previous = self._records.last
        pending = asyncio.ensure_future(self._advance(previous, len(self._records)))
        position = self._records.append(pending)
        self.total_pulls += 1
        logger.debug(f"CachedAsyncIterable: Issued pull for position {position}")
        return pending

    async def _advance(self, previous: Optional["asyncio.Future[Record]"], position: int) -> Record:
        """Pull the record for `position` once the previous pull has settled.

        Pulls run one after another so the source is never re-entered. No
        pull reaches the source after a terminal record. A failed previous
        pull fails this one with the same exception.
        """
        if previous is not None:
            record = await previous
            if record.done:
                return record
        record = await self._pull_source()
        if record.done:
            logger.debug(f"CachedAsyncIterable: Source exhausted at position {position}")
        return record

    @log_source_errors("pull from asynchronous source")
    async def _pull_source(self) -> Record:
        return await self._source.apull()

    def _entry_at(self, position: int) -> "asyncio.Future[Record]":
        """Get the entry at `position`, pulling it if it is the next one.

        Must not suspend between looking up and storing the entry.
        """
        if position < len(self._records):
            self.total_replayed += 1
            return self._records[position]
        if self.exhausted:
            return self._records.last
        return self._pull()

    async def touch_next(self, count: Optional[int] = None) -> Optional[Record]:
        """Consume the next `count` elements from the source into the cache.

        Each pull is awaited before deciding on the next one. Stops at the
        terminal record. On an empty cache at least one pull happens, even
        if the source is empty.

        Args:
            count: Number of elements to consume

        Returns:
            The last cached record, so the caller can decide whether to
            call touch_next again
        """
        if count is None:
            count = get_touch_count()
        for _ in range(count):
            last = self._records.last
            if last is not None and (await asyncio.shield(last)).done:
                break
            self._pull()
        last = self._records.last
        if last is None:
            return None
        return await asyncio.shield(last)
