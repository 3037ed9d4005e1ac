from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Concatenate, Self

import cytoolz as cz

from . import _operators as ops
from ._core import CommonBase, get_config, require_not_none

if TYPE_CHECKING:
    from ._lazy import Iter
    from ._results import Option


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class CommonMethods[T](CommonBase[Iterable[T]]):
    _inner: Iterable[T]

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def _iter[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        from ._lazy import Iter

        return Iter(factory(self._inner, *args, **kwargs))

    def eq(self, other: Self) -> bool:
        """Compare the elements of two wrappers, in order.

        Note:
            This will consume any `Iter` instances involved in the comparison.

        Args:
            other (Self): Another `Iter[T]` or `Seq[T]` to compare against.

        Returns:
            bool: True when both hold the same elements in the same order.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter((1, 2, 3)).eq(bs.Seq((1, 2, 3)))
        True
        >>> bs.Iter((1, 2, 3)).eq(bs.Iter((1, 2)))
        False

        ```
        """
        return tuple(self._inner) == tuple(other._inner)

    def join(self: CommonMethods[str], sep: str) -> str:
        """Join all elements into a single `string`, with a specified separator.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Seq(("a", "b", "c")).join("-")
        'a-b-c'

        ```
        """
        return sep.join(self._inner)

    def reduce(self, func: Callable[[T, T], T]) -> T:
        """Fold the elements pairwise from left to right.

        Args:
            func (Callable[[T, T], T]): Function to apply cumulatively.

        Returns:
            T: The accumulated value. Raises `TypeError` on empty data, like `functools.reduce`.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Seq((1, 2, 3)).reduce(lambda a, b: a + b)
        6

        ```
        """
        return functools.reduce(require_not_none(func, "func"), self._inner)

    def length(self) -> int:
        """Return the number of elements, consuming any lazy iterator.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter(range(10)).chunked(3).length()
        4

        ```
        """
        return cz.itertoolz.count(self._inner)

    def first(self) -> Option[T]:
        """Return the first element, pulling at most one element.

        Returns:
            Option[T]: `Some` of the first element, or `NONE` if there is none.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter.from_count().first()
        Some(0)
        >>> bs.Iter([None, 1]).first()
        Some(None)
        >>> bs.Iter(()).first()
        NONE

        ```
        """
        return ops.first(self._inner)

    def last(self) -> Option[T]:
        """Return the last element, pulling every element.

        Returns:
            Option[T]: `Some` of the last element, or `NONE` if there is none.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter("abc").last()
        Some('c')
        >>> bs.Iter(()).last()
        NONE

        ```
        """
        return ops.last(self._inner)

    def single(self) -> Option[T]:
        """Return the only element, if there is exactly one.

        The data is always drained, even when a second element makes the answer `NONE`.

        Returns:
            Option[T]: `Some` of the only element, or `NONE` if there are zero or several elements.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Iter([None]).single()
        Some(None)
        >>> it = bs.Iter([1, 2, 3])
        >>> it.single()
        NONE
        >>> it.next()
        NONE

        ```
        """
        return ops.single(self._inner)
