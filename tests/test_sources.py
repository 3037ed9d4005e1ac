"""Tests for the pull-based source adapter."""

from collections.abc import Iterator

import babysteps as bs
from babysteps._sources import Source


class _CountingIterator(Iterator[int]):
    def __init__(self, *values: int) -> None:
        self._values = list(values)
        self.calls = 0

    def __next__(self) -> int:
        self.calls += 1
        if not self._values:
            raise StopIteration
        return self._values.pop(0)


def test_pull_wraps_values() -> None:  # noqa: D103
    source = Source([None, 1])
    assert source.pull() == bs.Some(None)
    assert source.pull() == bs.Some(1)
    assert source.pull() == bs.NONE


def test_iterator_untouched_after_exhaustion() -> None:
    """Once `NONE` has been returned, the underlying iterator is never advanced again."""
    it = _CountingIterator(1)
    source = Source(it)
    source.pull()
    source.pull()
    assert it.calls == 2
    assert source.pull() == bs.NONE
    assert it.calls == 2


def test_drain_then_pull() -> None:  # noqa: D103
    it = _CountingIterator(1, 2, 3)
    source = Source(it)
    assert source.pull() == bs.Some(1)
    source.drain()
    calls = it.calls
    assert source.pull() == bs.NONE
    source.drain()
    assert it.calls == calls


def test_skip_stops_at_exhaustion() -> None:  # noqa: D103
    it = _CountingIterator(1, 2)
    source = Source(it)
    source.skip(10)
    assert it.calls == 3
    assert source.pull() == bs.NONE
