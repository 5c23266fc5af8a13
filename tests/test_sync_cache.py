"""
Tests for CachedSyncIterable.

Tests cover:
- Constructor errors
- from_source() factory
- Replaying eager and lazy iterables
- touch_next() prefetching
- Source failures
"""

import pytest

from replaycache import CachedSyncIterable, InvalidSourceError, Record
from replaycache.utils.config import config_manager


class CountingIterable:
    """Iterable that counts how many elements were pulled from it."""

    def __init__(self, items):
        self.items = list(items)
        self.pulls = 0

    def __iter__(self):
        for item in self.items:
            self.pulls += 1
            yield item


class TestConstructorErrors:

    @pytest.mark.parametrize("source", [None, 1, True, 1.5])
    def test_non_iterable_argument(self, source):
        with pytest.raises(InvalidSourceError, match="iteration protocol"):
            CachedSyncIterable(source)

    def test_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            CachedSyncIterable(None)

    def test_async_only_source_rejected(self):
        async def generate():
            yield 1

        with pytest.raises(InvalidSourceError):
            CachedSyncIterable(generate())


class TestFromSource:

    def test_pass_any_iterable(self):
        iterable = CachedSyncIterable.from_source([1, 2])
        assert list(iterable) == [1, 2]

    def test_pass_another_cached_iterable(self):
        iterable1 = CachedSyncIterable([1, 2])
        iterable2 = CachedSyncIterable.from_source(iterable1)
        assert iterable1 is iterable2


class TestSyncIteration:

    def test_eager_iterable(self, o1, o2):
        iterable = CachedSyncIterable([o1, o2])
        assert list(iterable) == [o1, o2]

    def test_eager_iterable_works_more_than_once(self, o1, o2):
        iterable = CachedSyncIterable([o1, o2])
        assert list(iterable) == [o1, o2]
        assert list(iterable) == [o1, o2]

    def test_lazy_iterable(self, o1, o2):
        def generate():
            yield from [o1, o2]

        iterable = CachedSyncIterable(generate())
        assert list(iterable) == [o1, o2]

    def test_lazy_iterable_works_more_than_once(self):
        def generate():
            for _ in range(3):
                yield object()

        iterable = CachedSyncIterable(generate())
        first = list(iterable)
        assert len(first) == 3
        assert list(iterable) == first

    def test_source_pulled_once_per_position(self):
        source = CountingIterable("abc")
        iterable = CachedSyncIterable(source)
        for _ in range(5):
            assert "".join(iterable) == "abc"
        assert source.pulls == 3
        assert len(iterable) == 4

    def test_iterators_keep_independent_cursors(self):
        source = CountingIterable([1, 2, 3])
        iterable = CachedSyncIterable(source)
        first, second = iter(iterable), iter(iterable)

        assert next(first) == 1
        assert next(first) == 2
        assert next(second) == 1
        assert source.pulls == 2
        assert list(first) == [3]
        assert list(second) == [2, 3]
        assert source.pulls == 3

    def test_exhausted_iterator_stays_exhausted(self):
        source = CountingIterable([1])
        iterator = iter(CachedSyncIterable(source))
        assert list(iterator) == [1]
        terminal = iterator.next_record()
        assert terminal == Record(None, True)
        assert iterator.next_record() is terminal

    def test_inspection_does_not_pull(self):
        source = CountingIterable([1, 2])
        iterable = CachedSyncIterable(source)
        assert len(iterable) == 0
        assert len(iterable.records) == 0
        assert iterable.records.last is None
        assert source.pulls == 0


class TestTouchNext:

    def test_consumes_an_element_into_the_cache(self, o1, o2):
        iterable = CachedSyncIterable([o1, o2])
        assert len(iterable.records) == 0
        iterable.touch_next()
        assert len(iterable.records) == 1

    def test_allows_to_consume_multiple_elements_into_the_cache(self, o1, o2):
        iterable = CachedSyncIterable([o1, o2])
        iterable.touch_next()
        iterable.touch_next()
        assert len(iterable.records) == 2

    def test_allows_to_consume_multiple_elements_at_once(self, o1, o2):
        iterable = CachedSyncIterable([o1, o2])
        iterable.touch_next(2)
        assert len(iterable.records) == 2

    def test_stops_at_the_last_element(self, o1, o2):
        iterable = CachedSyncIterable([o1, o2])
        iterable.touch_next()
        iterable.touch_next()
        iterable.touch_next()
        assert len(iterable.records) == 3

        iterable.touch_next()
        assert len(iterable.records) == 3

    def test_works_on_an_empty_iterable(self):
        source = CountingIterable([])
        iterable = CachedSyncIterable(source)
        iterable.touch_next()
        iterable.touch_next()
        iterable.touch_next()
        assert len(iterable.records) == 1
        assert iterable.records[0] == Record(None, True)

    def test_iteration_for_such_cache_works(self, o1, o2):
        iterable = CachedSyncIterable([o1, o2])
        iterable.touch_next()
        iterable.touch_next()
        iterable.touch_next()
        assert list(iterable) == [o1, o2]
        assert len(iterable) == 3

    def test_returns_the_most_recent_record(self, o1, o2):
        iterable = CachedSyncIterable([o1, o2])
        assert iterable.touch_next() == Record(o1, False)
        assert iterable.touch_next() == Record(o2, False)
        assert iterable.touch_next() == Record(None, True)
        assert iterable.touch_next() == Record(None, True)

    def test_repeated_calls_after_exhaustion_return_same_record(self):
        iterable = CachedSyncIterable([1])
        terminal = iterable.touch_next(10)
        assert terminal.done
        assert iterable.touch_next() is terminal
        assert iterable.touch_next(3) is terminal

    def test_zero_count_on_empty_cache(self):
        source = CountingIterable([1])
        iterable = CachedSyncIterable(source)
        assert iterable.touch_next(0) is None
        assert source.pulls == 0

    def test_default_count_from_config(self):
        config_manager.set_config({"cache": {"touch_count": 2}})
        iterable = CachedSyncIterable([1, 2, 3])
        assert iterable.touch_next() == Record(2, False)
        assert len(iterable) == 2


class TestSourceErrors:

    def test_failure_propagates(self):
        def generate():
            yield 1
            raise ValueError("boom")

        iterable = CachedSyncIterable(generate())
        iterator = iter(iterable)
        assert next(iterator) == 1
        with pytest.raises(ValueError, match="boom"):
            next(iterator)

    def test_failure_propagates_from_touch_next(self):
        def generate():
            raise RuntimeError("broken source")
            yield

        iterable = CachedSyncIterable(generate())
        with pytest.raises(RuntimeError, match="broken source"):
            iterable.touch_next()
        assert len(iterable) == 0


class TestStats:

    def test_stats_track_pulls_and_replays(self):
        iterable = CachedSyncIterable([1, 2])
        list(iterable)
        list(iterable)
        stats = iterable.get_stats()
        assert stats["size"] == 3
        assert stats["pulls"] == 3
        assert stats["replayed"] == 3
        assert stats["iterators"] == 2
        assert stats["exhausted"] is True
        assert stats["source_kind"] == "sync"
