from __future__ import annotations

import itertools
from collections.abc import Callable, Hashable, Iterable, Iterator
from functools import partial
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz

from . import _operators as ops
from ._core import require_non_negative, require_not_none, require_positive
from ._iter import CommonMethods, convert_data
from ._results import NONE, Option, Result, Some
from .consumers import tap

if TYPE_CHECKING:
    from ._eager import Seq
    from ._tuples import Tuple2


class Iter[T](CommonMethods[T], Iterator[T]):
    """A chainable wrapper around a single-pass, ordered, possibly infinite `Iterator`.

    - Every transformation is lazy: nothing is pulled from the source until a terminal method (`collect`, `first`, `last`, `single`, `for_each`...) or a `for` loop asks for it.
    - Once an element has been pulled, it cannot be pulled again. An `Iter` is exhausted after one pass.
    - Each transformation takes ownership of the iterator it wraps: keep chaining from the returned `Iter`, not from the original one.

    If you need to reuse the data, collect it into a `Seq` first with `.collect()`, and call `Seq.iter()` as often as needed.

    Args:
        data (Iterable[T]): The source. `iter()` is called on it once, and the `Iter` takes it over.

    Example:
    ```python
    >>> import babysteps as bs
    >>> (
    ...     bs.Iter.from_count(1)
    ...     .take_while_inclusive(lambda x: x < 6)
    ...     .windowed(2, 2, partial=True)
    ...     .collect()
    ... )
    Seq((1, 2), (3, 4), (5, 6))

    ```
    """

    _inner: Iterator[T]

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(require_not_none(data, "data"))  # pyright: ignore[reportIncompatibleVariableOverride]

    def __next__(self) -> T:
        return next(self._inner)

    def next(self) -> Option[T]:
        """Return the next element in the iterator, wrapped in an `Option`.

        Note:
            `next(it)` follows the Python `Iterator` protocol and raises once exhausted.

            `Iter.next()` returns `NONE` instead, and `Some(None)` when the next element is `None`.

        Returns:
            Option[T]: `Some` of the next element, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import babysteps as bs
        >>> it = bs.Iter([None, 2])
        >>> it.next()
        Some(None)
        >>> it.next()
        Some(2)
        >>> it.next()
        NONE

        ```
        """
        try:
            return Some(next(self._inner))
        except StopIteration:
            return NONE

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iter` of evenly spaced values.

        Args:
            start (int): First value. Defaults to 0.
            step (int): Added to each value to get the next one. Defaults to 1.

        Returns:
            Iter[int]: A never-ending counter.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter.from_count(10, 2).take(3).collect()
        Seq(10, 12, 14)

        ```
        """
        return Iter(itertools.count(start, step))

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Build an `Iter` from one iterable, or from several loose values.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(convert_data(data, *more_data))

    def collect(self) -> Seq[T]:
        """Pull every element into an immutable `Seq`.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter(range(3)).collect()
        Seq(0, 1, 2)
        >>> bs.Iter(()).collect()
        Seq()

        ```
        """
        from ._eager import Seq

        return Seq(tuple(self._inner))

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Consume the iterator by applying **func** to each element.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1, 2]).for_each(print)
        1
        2

        ```
        """
        func = require_not_none(func, "func")
        for value in self._inner:
            func(value)

    # general transformations -------------------------------------------------
    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply **func** to each element.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1, 2]).map(lambda x: x * 10).collect()
        Seq(10, 20)

        ```
        """
        return self._iter(partial(map, require_not_none(func, "func")))

    def filter(self, func: Callable[[T], bool]) -> Iter[T]:
        """Keep the elements for which **func** returns true.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1, 2, 3]).filter(lambda x: x > 1).collect()
        Seq(2, 3)

        ```
        """
        return self._iter(partial(filter, require_not_none(func, "func")))

    def tap(self, func: Callable[[T], Any]) -> Iter[T]:
        """Call **func** on each element as it passes through, without altering it.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1, 2, 3]).tap(print).first()
        1
        Some(1)

        ```
        """
        return self.map(tap(func))

    def take(self, n: int) -> Iter[T]:
        """Yield the first **n** elements, or fewer if the iterator ends sooner.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1, 2, 3]).take(5).collect()
        Seq(1, 2, 3)

        ```
        """
        return self._iter(partial(cz.itertoolz.take, require_non_negative(n, "n")))

    def skip(self, n: int) -> Iter[T]:
        """Drop the first **n** elements.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter((1, 2, 3)).skip(1).collect()
        Seq(2, 3)

        ```
        """
        return self._iter(partial(cz.itertoolz.drop, require_non_negative(n, "n")))

    def take_while(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Take items while **predicate** holds, excluding the first failing element.

        See `take_while_inclusive` to keep the boundary element.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter((1, 2, 0, 3)).take_while(lambda x: x > 0).collect()
        Seq(1, 2)

        ```
        """
        return self._iter(
            partial(itertools.takewhile, require_not_none(predicate, "predicate"))
        )

    def skip_while(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Drop items while **predicate** holds, keeping the first failing element.

        See `drop_while_inclusive` to drop the boundary element too.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter((1, 2, 0, 3)).skip_while(lambda x: x > 0).collect()
        Seq(0, 3)

        ```
        """
        return self._iter(
            partial(itertools.dropwhile, require_not_none(predicate, "predicate"))
        )

    def unique(self) -> Iter[T]:
        """Yield each distinct element once, in order of first appearance.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1, 2, 1, 3]).unique().collect()
        Seq(1, 2, 3)

        ```
        """
        return self._iter(cz.itertoolz.unique)

    def chain(self, *others: Iterable[T]) -> Iter[T]:
        """Yield the elements of **self**, then those of each of **others**.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1]).chain([2], (3, 4)).collect()
        Seq(1, 2, 3, 4)

        ```
        """
        return self._iter(itertools.chain, *others)

    def flatten[U](self: Iter[Iterable[U]]) -> Iter[U]:
        """Flatten one level of nesting.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1, 2, 3, 4, 5]).chunked(2).flatten().collect()
        Seq(1, 2, 3, 4, 5)

        ```
        """
        return self._iter(cz.itertoolz.concat)

    # grouping -----------------------------------------------------------------
    def chunked(self, size: int) -> Iter[tuple[T, ...]]:
        """Split the iterator into consecutive tuples of **size** elements.

        Each chunk is filled greedily. The last chunk holds fewer elements when the data does not divide evenly.

        Empty chunks are never yielded.

        Args:
            size (int): Number of elements in each chunk. Must be positive.

        Returns:
            Iter[tuple[T, ...]]: An iterator of chunks.

        Raises:
            InvalidArgumentError: If **size** is not a positive integer, immediately.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1, 2, 3, 4, 5]).chunked(2).collect()
        Seq((1, 2), (3, 4), (5,))
        >>> bs.Iter(()).chunked(2).collect()
        Seq()
        >>> bs.Iter([1]).chunked(0)
        Traceback (most recent call last):
            ...
        babysteps._errors.InvalidArgumentError: size must be positive, got 0

        ```
        """
        return self._iter(ops.Chunked, size)

    def windowed(
        self, size: int, step: int = 1, partial: bool = False
    ) -> Iter[tuple[T, ...]]:
        """Yield sliding windows of **size** elements, each starting **step** elements after the previous one.

        When **step** is greater than **size**, the elements between two windows are pulled and discarded.

        By default, only full windows are yielded.

        With **partial**, the trailing windows shorter than **size** are yielded too.

        Args:
            size (int): Number of elements in each window. Must be positive.
            step (int): Distance between the starts of two consecutive windows. Must be positive. Defaults to 1.
            partial (bool): Whether to yield trailing partial windows. Defaults to False.

        Returns:
            Iter[tuple[T, ...]]: An iterator of windows.

        Raises:
            InvalidArgumentError: If **size** or **step** is not a positive integer, immediately.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1, 2, 3, 4, 5]).windowed(3, 2).collect()
        Seq((1, 2, 3), (3, 4, 5))
        >>> bs.Iter([1, 2, 3]).windowed(2, 2, partial=True).collect()
        Seq((1, 2), (3,))
        >>> bs.Iter([1, 2, 3, 4, 5, 6]).windowed(2, 3).collect()
        Seq((1, 2), (4, 5))
        >>> bs.Iter([1, 2]).windowed(3).collect()
        Seq()

        ```
        """
        return self._iter(ops.Windowed, size, step, partial=partial)

    # boundaries ---------------------------------------------------------------
    def take_while_inclusive(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Take items while **predicate** holds, including the first element for which it fails.

        Once that element has been yielded, the source is never pulled again.

        Args:
            predicate (Callable[[T], bool]): Tested on each pulled element, in order.

        Returns:
            Iter[T]: An iterator ending with the first failing element.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1, 2, 3, 4]).take_while_inclusive(lambda x: x < 3).collect()
        Seq(1, 2, 3)
        >>> bs.Iter([5, 1]).take_while_inclusive(lambda x: x < 3).collect()
        Seq(5,)

        ```
        """
        return self._iter(ops.TakeWhileInclusive, predicate)

    def drop_while_inclusive(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Drop items while **predicate** holds, and the first element for which it fails.

        Args:
            predicate (Callable[[T], bool]): Tested on each pulled element, in order.

        Returns:
            Iter[T]: An iterator of the elements after the first failing one.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([1, 2, 3, 4]).drop_while_inclusive(lambda x: x < 3).collect()
        Seq(4,)
        >>> bs.Iter([1, 2]).drop_while_inclusive(lambda x: x < 3).collect()
        Seq()

        ```
        """
        return self._iter(ops.DropWhileInclusive, predicate)

    # deduplication ------------------------------------------------------------
    def distinct_by[K: Hashable](self, key: Callable[[T], K]) -> Iter[T]:
        """Yield only the first element for each distinct **key**, in order.

        **key** is evaluated once per element, in source order. `None` is a valid key.

        Args:
            key (Callable[[T], K]): Function deriving the key of each element. Keys must be hashable.

        Returns:
            Iter[T]: An iterator of the first element seen for each key.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter(["a", "aa", "b", "bb"]).distinct_by(len).collect()
        Seq('a', 'aa')
        >>> bs.Iter([{"id": None}, {"id": 1}, {}]).distinct_by(lambda d: d.get("id")).length()
        2

        ```
        """
        return self._iter(ops.DistinctBy, key)

    # fault capture ------------------------------------------------------------
    def map_catching[R](self, func: Callable[[T], R]) -> Iter[Result[R, Exception]]:
        """Apply **func** to each element, capturing raised exceptions as values.

        Yields `Ok(func(x))` for each element, or `Err(exc)` when **func** raised, and keeps going.

        Args:
            func (Callable[[T], R]): Called once per element.

        Returns:
            Iter[Result[R, Exception]]: One result per input element, in order.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter(["1", "x", "3"]).map_catching(int).collect()
        Seq(Ok(1), Err(ValueError("invalid literal for int() with base 10: 'x'")), Ok(3))

        ```
        """
        return self._iter(ops.MapCatching, func)

    def filter_catching(
        self, predicate: Callable[[T], bool]
    ) -> Iter[Result[T, Exception]]:
        """Keep the elements for which **predicate** is true, capturing raised exceptions as values.

        Yields `Ok(x)` when **predicate** is true, nothing when it is false, and `Err(exc)` when it raised.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            Iter[Result[T, Exception]]: At most one result per input element, in order.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter(["1", "x", "30"]).filter_catching(lambda s: int(s) > 2).collect()
        Seq(Err(ValueError("invalid literal for int() with base 10: 'x'")), Ok('30'))

        ```
        """
        return self._iter(ops.FilterCatching, predicate)

    def indexed(self) -> Iter[Tuple2[int, T]]:
        """Pair each element with its zero-based index.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter("ab").indexed().collect()
        Seq(Tuple2(first=0, second='a'), Tuple2(first=1, second='b'))

        ```
        """
        return self._iter(ops.Indexed)

    def step_by(self, step: int) -> Iter[T]:
        """Yield every **step**-th element, starting with the first one.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter(range(6)).step_by(2).collect()
        Seq(0, 2, 4)

        ```
        """
        return self._iter(partial(cz.itertoolz.take_nth, require_positive(step, "step")))
