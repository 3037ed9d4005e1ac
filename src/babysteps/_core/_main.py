from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Hand the whole wrapper to **func** and return what it returns.

        `x.into(f, *args)` reads left to right where `f(x, *args)` would not.

        Args:
            func (Callable[Concatenate[Self, P], R]): Receives the wrapper as its first argument.
            *args (P.args): Extra positional arguments for **func**.
            **kwargs (P.kwargs): Extra keyword arguments for **func**.

        Returns:
            R: The return value of **func**.

        Example:
        ```python
        >>> import babysteps as bs
        >>> def widest(windows: bs.Iter[tuple[int, ...]]) -> int:
        ...     return max(max(w) - min(w) for w in windows)
        >>>
        >>> bs.Iter([1, 5, 2, 9]).windowed(2).into(widest)
        7

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call **func** on the wrapper for a side effect, and keep chaining from the same wrapper.

        The return value of **func** is ignored.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Seq((1, 2, 3)).inspect(print).last()
        Seq(1, 2, 3)
        Some(3)

        ```
        """
        func(self, *args, **kwargs)
        return self


class CommonBase[T](ABC, Pipeable):
    """Holds the wrapped data of `Iter` and `Seq` in a single slot.

    Args:
        data (T): The wrapped data.
    """

    _inner: T

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data

    def inner(self) -> T:
        """Unwrap the data, leaving the chain.

        For an `Iter`, this is the live iterator: pulling from it advances the `Iter` too.
        """
        return self._inner
