"""Caching iterables for replaycache.

1. CachedSyncIterable:
   Replays a synchronous iterable, pulling each element at most once
2. CachedAsyncIterable:
   Replays an async or sync iterable; concurrent requests for an element
   that is still being pulled share one pull
"""

from .records import RecordSequence
from .base import CachedIterable
from .sync_cache import CachedSyncIterable, ReplayIterator
from .async_cache import CachedAsyncIterable, AsyncReplayIterator

__all__ = [
    "RecordSequence",
    "CachedIterable",
    "CachedSyncIterable",
    "ReplayIterator",
    "CachedAsyncIterable",
    "AsyncReplayIterator",
]
