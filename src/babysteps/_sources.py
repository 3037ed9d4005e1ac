from collections.abc import Iterable, Iterator

import more_itertools as mit

from ._core import require_not_none
from ._results import NONE, Option, Some


class Source[T]:
    """Uniform pull access to any single-pass, ordered producer of values.

    `pull()` returns `Some(value)` for the next element, or `NONE` once the producer is exhausted.

    After the first `NONE`, the underlying iterator is never advanced again.

    Args:
        data (Iterable[T]): The upstream producer. Ownership is transferred to the `Source`.
    """

    __slots__ = ("_exhausted", "_iterator")

    def __init__(self, data: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(require_not_none(data, "source"))
        self._exhausted = False

    def pull(self) -> Option[T]:
        if self._exhausted:
            return NONE
        try:
            value = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return NONE
        return Some(value)

    def skip(self, n: int) -> None:
        """Pull and discard up to **n** elements."""
        for _ in range(n):
            if self.pull().is_none():
                return

    def drain(self) -> None:
        """Pull every remaining element, discarding them."""
        if not self._exhausted:
            mit.consume(self._iterator)
            self._exhausted = True
