from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz

from ._iter import CommonMethods, convert_data

if TYPE_CHECKING:
    from ._lazy import Iter


class Seq[T](CommonMethods[T], Sequence[T]):
    """An immutable, in-memory collection backed by a tuple.

    A `Seq` is what `Iter.collect()` produces. Unlike an `Iter`, it can be read any number of times: call `Seq.iter()` for each new lazy pass.

    It is a `collections.abc.Sequence`, so `len`, `in`, indexing and slicing all work.

    Args:
        data (tuple[T, ...]): The elements. The tuple is stored as is, without copying or checks.
    """

    _inner: tuple[T, ...]

    __slots__ = ()

    def __init__(self, data: tuple[T, ...]) -> None:
        self._inner = data  # pyright: ignore[reportIncompatibleVariableOverride]

    def __len__(self) -> int:
        return len(self._inner)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice[Any, Any, Any]) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Seq):
            return self._inner == other._inner  # pyright: ignore[reportUnknownMemberType]
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._inner)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Build a `Seq` from one iterable, or from several loose values.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)
        >>> bs.Seq.from_([4, 5])
        Seq(4, 5)

        ```
        """
        converted = convert_data(data, *more_data)
        return Seq(converted if isinstance(converted, tuple) else tuple(converted))

    def iter(self) -> Iter[T]:
        """Start a new lazy pass over the data.

        Example:
        ```python
        >>> import babysteps as bs
        >>> data = bs.Seq((1, 2, 3, 4))
        >>> data.iter().chunked(3).collect()
        Seq((1, 2, 3), (4,))
        >>> data.iter().windowed(3).collect()
        Seq((1, 2, 3), (2, 3, 4))

        ```
        """
        from ._lazy import Iter

        return Iter(self._inner)

    def is_distinct(self) -> bool:
        """True when no element occurs twice. Elements must be hashable.

        ```python
        >>> import babysteps as bs
        >>> bs.Seq((1, 2)).is_distinct()
        True

        ```
        """
        return cz.itertoolz.isdistinct(self._inner)
