"""Lazy, single-pass operators backing the `Iter` methods.

Each operator owns its upstream `Source` and one small piece of mutable state (a buffer, a seen-set, a flag), advanced only by `__next__`.

Nothing is pulled from upstream at construction time, and argument checks happen at construction time.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator

from ._core import require_not_none, require_positive
from ._errors import OutOfElementsError
from ._results import NONE, Err, Ok, Option, Result, catch
from ._sources import Source
from ._tuples import Tuple2


class Chunked[T](Iterator[tuple[T, ...]]):
    __slots__ = ("_size", "_source")

    def __init__(self, data: Iterable[T], size: int) -> None:
        self._source = Source(data)
        self._size = require_positive(size, "size")

    def __next__(self) -> tuple[T, ...]:
        chunk: list[T] = []
        while len(chunk) < self._size:
            item = self._source.pull()
            if item.is_none():
                break
            chunk.append(item.unwrap())
        if not chunk:
            raise OutOfElementsError("chunked: no elements left")
        return tuple(chunk)


class Windowed[T](Iterator[tuple[T, ...]]):
    __slots__ = ("_buffer", "_partial", "_size", "_source", "_step")

    def __init__(
        self, data: Iterable[T], size: int, step: int = 1, *, partial: bool = False
    ) -> None:
        self._source = Source(data)
        self._size = require_positive(size, "size")
        self._step = require_positive(step, "step")
        self._partial = partial
        self._buffer: deque[T] = deque()

    def _fill(self) -> None:
        while len(self._buffer) < self._size:
            item = self._source.pull()
            if item.is_none():
                return
            self._buffer.append(item.unwrap())

    def _has_window(self) -> bool:
        self._fill()
        if not self._buffer:
            return False
        if len(self._buffer) == self._size:
            return True
        # a short buffer after `_fill` means the source is exhausted
        return self._partial

    def __next__(self) -> tuple[T, ...]:
        if not self._has_window():
            raise OutOfElementsError("windowed: no window left")
        window = tuple(self._buffer)
        dropped = min(self._step, len(self._buffer))
        for _ in range(dropped):
            self._buffer.popleft()
        # step > size: the elements between two windows are never buffered
        self._source.skip(self._step - dropped)
        self._fill()
        return window


class TakeWhileInclusive[T](Iterator[T]):
    __slots__ = ("_predicate", "_source", "_stopped")

    def __init__(self, data: Iterable[T], predicate: Callable[[T], bool]) -> None:
        self._source = Source(data)
        self._predicate = require_not_none(predicate, "predicate")
        self._stopped = False

    def __next__(self) -> T:
        if self._stopped:
            raise OutOfElementsError("take_while_inclusive: stopped")
        item = self._source.pull()
        if item.is_none():
            self._stopped = True
            raise OutOfElementsError("take_while_inclusive: no elements left")
        value = item.unwrap()
        if not self._predicate(value):
            self._stopped = True
        return value


class DropWhileInclusive[T](Iterator[T]):
    __slots__ = ("_dropping", "_predicate", "_source")

    def __init__(self, data: Iterable[T], predicate: Callable[[T], bool]) -> None:
        self._source = Source(data)
        self._predicate = require_not_none(predicate, "predicate")
        self._dropping = True

    def _drop_through_boundary(self) -> None:
        while (item := self._source.pull()).is_some():
            if not self._predicate(item.unwrap()):
                break
        self._dropping = False

    def __next__(self) -> T:
        if self._dropping:
            self._drop_through_boundary()
        item = self._source.pull()
        if item.is_none():
            raise OutOfElementsError("drop_while_inclusive: no elements left")
        return item.unwrap()


class DistinctBy[T, K: Hashable](Iterator[T]):
    __slots__ = ("_key", "_seen", "_source")

    def __init__(self, data: Iterable[T], key: Callable[[T], K]) -> None:
        self._source = Source(data)
        self._key = require_not_none(key, "key")
        self._seen: set[K] = set()

    def __next__(self) -> T:
        while (item := self._source.pull()).is_some():
            value = item.unwrap()
            key = self._key(value)
            if key not in self._seen:
                self._seen.add(key)
                return value
        raise OutOfElementsError("distinct_by: no elements left")


class MapCatching[T, R](Iterator[Result[R, Exception]]):
    __slots__ = ("_func", "_source")

    def __init__(self, data: Iterable[T], func: Callable[[T], R]) -> None:
        self._source = Source(data)
        self._func = require_not_none(func, "func")

    def __next__(self) -> Result[R, Exception]:
        item = self._source.pull()
        if item.is_none():
            raise OutOfElementsError("map_catching: no elements left")
        value = item.unwrap()
        return catch(lambda: self._func(value))


class FilterCatching[T](Iterator[Result[T, Exception]]):
    __slots__ = ("_predicate", "_source")

    def __init__(self, data: Iterable[T], predicate: Callable[[T], bool]) -> None:
        self._source = Source(data)
        self._predicate = require_not_none(predicate, "predicate")

    def __next__(self) -> Result[T, Exception]:
        while (item := self._source.pull()).is_some():
            value = item.unwrap()
            match catch(lambda: self._predicate(value)):
                case Err(error):
                    return Err(error)
                case Ok(keep) if keep:
                    return Ok(value)
        raise OutOfElementsError("filter_catching: no elements left")


class Indexed[T](Iterator[Tuple2[int, T]]):
    __slots__ = ("_index", "_source")

    def __init__(self, data: Iterable[T]) -> None:
        self._source = Source(data)
        self._index = 0

    def __next__(self) -> Tuple2[int, T]:
        item = self._source.pull()
        if item.is_none():
            raise OutOfElementsError("indexed: no elements left")
        pair = Tuple2(self._index, item.unwrap())
        self._index += 1
        return pair


def first[T](data: Iterable[T]) -> Option[T]:
    return Source(data).pull()


def last[T](data: Iterable[T]) -> Option[T]:
    source = Source(data)
    result: Option[T] = NONE
    while (item := source.pull()).is_some():
        result = item
    return result


def single[T](data: Iterable[T]) -> Option[T]:
    source = Source(data)
    result = source.pull()
    if result.is_none():
        return NONE
    if source.pull().is_some():
        source.drain()
        return NONE
    return result
