"""replaycache: replay a sync or async iterable any number of times.

Elements are pulled from the wrapped source on demand, at most once per
position, and kept for the lifetime of the cache.
"""

from .models import Record, SourceKind, SourceHandle
from .cache import (
    RecordSequence,
    CachedIterable,
    CachedSyncIterable,
    ReplayIterator,
    CachedAsyncIterable,
    AsyncReplayIterator,
)
from .utils import InvalidSourceError, config_manager
from .services import get_logging_service

__version__ = "0.1.0"

__all__ = [
    "Record",
    "SourceKind",
    "SourceHandle",
    "RecordSequence",
    "CachedIterable",
    "CachedSyncIterable",
    "ReplayIterator",
    "CachedAsyncIterable",
    "AsyncReplayIterator",
    "InvalidSourceError",
    "config_manager",
    "get_logging_service",
]
