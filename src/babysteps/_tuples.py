"""Fixed-size, hashable, value-compared tuples with per-slot mapping helpers.

Every `map_*` method returns a new tuple and leaves the original untouched.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple


class Tuple2[A, B](NamedTuple):
    """A pair of values.

    Example:
    ```python
    >>> import babysteps as bs
    >>> pair = bs.Tuple2("a", 1)
    >>> pair.map_second(lambda n: n + 1)
    Tuple2(first='a', second=2)
    >>> pair.bimap(str.upper, str)
    Tuple2(first='A', second='1')

    ```
    """

    first: A
    second: B

    def map_first[C](self, mapper: Callable[[A], C]) -> Tuple2[C, B]:
        return Tuple2(mapper(self.first), self.second)

    def map_second[C](self, mapper: Callable[[B], C]) -> Tuple2[A, C]:
        return Tuple2(self.first, mapper(self.second))

    def bimap[C, D](
        self, first_mapper: Callable[[A], C], second_mapper: Callable[[B], D]
    ) -> Tuple2[C, D]:
        return Tuple2(first_mapper(self.first), second_mapper(self.second))


class Tuple3[A, B, C](NamedTuple):
    """A triple of values."""

    first: A
    second: B
    third: C

    def map_first[D](self, mapper: Callable[[A], D]) -> Tuple3[D, B, C]:
        return Tuple3(mapper(self.first), self.second, self.third)

    def map_second[D](self, mapper: Callable[[B], D]) -> Tuple3[A, D, C]:
        return Tuple3(self.first, mapper(self.second), self.third)

    def map_third[D](self, mapper: Callable[[C], D]) -> Tuple3[A, B, D]:
        return Tuple3(self.first, self.second, mapper(self.third))

    def bimap[D, E](
        self, first_mapper: Callable[[A], D], second_mapper: Callable[[B], E]
    ) -> Tuple3[D, E, C]:
        """Map the first two slots, keeping the third."""
        return Tuple3(first_mapper(self.first), second_mapper(self.second), self.third)

    def trimap[D, E, F](
        self,
        first_mapper: Callable[[A], D],
        second_mapper: Callable[[B], E],
        third_mapper: Callable[[C], F],
    ) -> Tuple3[D, E, F]:
        return Tuple3(
            first_mapper(self.first),
            second_mapper(self.second),
            third_mapper(self.third),
        )


class Tuple4[A, B, C, D](NamedTuple):
    """A 4-tuple of values.

    Example:
    ```python
    >>> import babysteps as bs
    >>> bs.Tuple4(1, 2, 3, 4).trimap(str, float, lambda x: -x)
    Tuple4(first='1', second=2.0, third=-3, fourth=4)

    ```
    """

    first: A
    second: B
    third: C
    fourth: D

    def map_first[E](self, mapper: Callable[[A], E]) -> Tuple4[E, B, C, D]:
        return Tuple4(mapper(self.first), self.second, self.third, self.fourth)

    def map_second[E](self, mapper: Callable[[B], E]) -> Tuple4[A, E, C, D]:
        return Tuple4(self.first, mapper(self.second), self.third, self.fourth)

    def map_third[E](self, mapper: Callable[[C], E]) -> Tuple4[A, B, E, D]:
        return Tuple4(self.first, self.second, mapper(self.third), self.fourth)

    def map_fourth[E](self, mapper: Callable[[D], E]) -> Tuple4[A, B, C, E]:
        return Tuple4(self.first, self.second, self.third, mapper(self.fourth))

    def bimap[E, F](
        self, first_mapper: Callable[[A], E], second_mapper: Callable[[B], F]
    ) -> Tuple4[E, F, C, D]:
        return Tuple4(
            first_mapper(self.first), second_mapper(self.second), self.third, self.fourth
        )

    def trimap[E, F, G](
        self,
        first_mapper: Callable[[A], E],
        second_mapper: Callable[[B], F],
        third_mapper: Callable[[C], G],
    ) -> Tuple4[E, F, G, D]:
        return Tuple4(
            first_mapper(self.first),
            second_mapper(self.second),
            third_mapper(self.third),
            self.fourth,
        )

    def quadmap[E, F, G, H](
        self,
        first_mapper: Callable[[A], E],
        second_mapper: Callable[[B], F],
        third_mapper: Callable[[C], G],
        fourth_mapper: Callable[[D], H],
    ) -> Tuple4[E, F, G, H]:
        return Tuple4(
            first_mapper(self.first),
            second_mapper(self.second),
            third_mapper(self.third),
            fourth_mapper(self.fourth),
        )


class Tuple5[A, B, C, D, E](NamedTuple):
    """A 5-tuple of values."""

    first: A
    second: B
    third: C
    fourth: D
    fifth: E

    def map_first[F](self, mapper: Callable[[A], F]) -> Tuple5[F, B, C, D, E]:
        return self._replace(first=mapper(self.first))  # type: ignore[return-value]

    def map_second[F](self, mapper: Callable[[B], F]) -> Tuple5[A, F, C, D, E]:
        return self._replace(second=mapper(self.second))  # type: ignore[return-value]

    def map_third[F](self, mapper: Callable[[C], F]) -> Tuple5[A, B, F, D, E]:
        return self._replace(third=mapper(self.third))  # type: ignore[return-value]

    def map_fourth[F](self, mapper: Callable[[D], F]) -> Tuple5[A, B, C, F, E]:
        return self._replace(fourth=mapper(self.fourth))  # type: ignore[return-value]

    def map_fifth[F](self, mapper: Callable[[E], F]) -> Tuple5[A, B, C, D, F]:
        return self._replace(fifth=mapper(self.fifth))  # type: ignore[return-value]

    def bimap[F, G](
        self, first_mapper: Callable[[A], F], second_mapper: Callable[[B], G]
    ) -> Tuple5[F, G, C, D, E]:
        return self.map_first(first_mapper).map_second(second_mapper)

    def trimap[F, G, H](
        self,
        first_mapper: Callable[[A], F],
        second_mapper: Callable[[B], G],
        third_mapper: Callable[[C], H],
    ) -> Tuple5[F, G, H, D, E]:
        return self.bimap(first_mapper, second_mapper).map_third(third_mapper)

    def quintmap[F, G, H, I, J](
        self,
        first_mapper: Callable[[A], F],
        second_mapper: Callable[[B], G],
        third_mapper: Callable[[C], H],
        fourth_mapper: Callable[[D], I],
        fifth_mapper: Callable[[E], J],
    ) -> Tuple5[F, G, H, I, J]:
        """Map all five slots at once.

        Example:
        ```python
        >>> import babysteps as bs
        >>> t = bs.Tuple5(1, "b", 3.0, None, [5])
        >>> t.quintmap(str, len, int, lambda v: v is None, sum)
        Tuple5(first='1', second=1, third=3, fourth=True, fifth=5)

        ```
        """
        return Tuple5(
            first_mapper(self.first),
            second_mapper(self.second),
            third_mapper(self.third),
            fourth_mapper(self.fourth),
            fifth_mapper(self.fifth),
        )
