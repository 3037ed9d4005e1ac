from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeIs, cast

from .._errors import ResultUnwrapError
from ._option import NONE, Option, Some


class Result[T, E](ABC):
    """Either a success (`Ok`) or a typed failure (`Err`).

    The fault-capturing operators of `Iter` use `Result[T, Exception]` to turn a raised exception into a plain value of the output sequence.

    Both variants support structural pattern matching.

    Example:
    ```python
    >>> import babysteps as bs
    >>> def describe(res: bs.Result[int, Exception]) -> str:
    ...     match res:
    ...         case bs.Ok(value):
    ...             return f"got {value}"
    ...         case bs.Err(error):
    ...             return f"failed with {error!r}"
    ...     return "unreachable"
    >>> describe(bs.Ok(3))
    'got 3'
    >>> describe(bs.Err(KeyError("k")))
    "failed with KeyError('k')"

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """True for `Ok`."""
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """True for `Err`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Ok` value, or raises `ResultUnwrapError` if the result is `Err`."""
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained `Err` value, or raises `ResultUnwrapError` if the result is `Ok`."""
        ...

    def map_or_else[U](self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """
        Calls **ok** with the value if `Ok`, or **err** with the error if `Err`.

        Args:
            ok: Callable to handle the `Ok` value.
            err: Callable to handle the `Err` value.

        Returns:
            Whatever the selected callable returns.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Err(ValueError("bad")).map_or_else(str.upper, lambda e: str(e))
        'bad'

        ```
        """
        if self.is_ok():
            return ok(self.unwrap())
        return err(self.unwrap_err())

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Ok` value, or raises `ResultUnwrapError` with **msg** and the error.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Err("boom").expect("parsing failed")
        Traceback (most recent call last):
            ...
        babysteps._errors.ResultUnwrapError: parsing failed: boom

        ```
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def expect_err(self, msg: str) -> E:
        """Returns the contained `Err` value, or raises `ResultUnwrapError` with **msg** if the result is `Ok`."""
        if self.is_err():
            return self.unwrap_err()
        raise ResultUnwrapError(f"{msg}: expected Err, got Ok({self.unwrap()!r})")

    def unwrap_or(self, default: T) -> T:
        """The `Ok` value, or **default** for an `Err`."""
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """The `Ok` value, or **f** applied to the error."""
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Applies **f** to a contained `Ok` value, leaving `Err` untouched.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Ok(2).map(lambda x: x * 10)
        Ok(20)
        >>> bs.Err("nope").map(lambda x: x * 10)
        Err('nope')

        ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Applies **f** to a contained `Err` value, leaving `Ok` untouched.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Err(ZeroDivisionError("division by zero")).map_err(str)
        Err('division by zero')

        ```
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Calls **f** with the value if `Ok`, otherwise returns the `Err` unchanged."""
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E], self)

    def or_else(self, f: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """Calls **f** with the error if `Err`, otherwise returns the `Ok` unchanged."""
        return self if self.is_ok() else f(self.unwrap_err())

    def ok(self) -> Option[T]:
        """
        Converts the result into an `Option`, discarding the error.

        Example:
        ```python
        >>> import babysteps as bs
        >>> bs.Ok(None).ok()
        Some(None)
        >>> bs.Err("e").ok()
        NONE

        ```
        """
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """Converts the result into an `Option` of its error, discarding the value."""
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE


@dataclass(slots=True)
class Ok[T, E](Result[T, E]):
    """The success variant."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError("called `unwrap_err` on Ok")


@dataclass(slots=True)
class Err[T, E](Result[T, E]):
    """The failure variant, carrying the error unchanged (for captured faults, the original exception object)."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error


def catch[T](func: Callable[[], T]) -> Result[T, Exception]:
    """Call **func**, capturing any raised `Exception` into an `Err`.

    `BaseException` subclasses that are not `Exception` (`KeyboardInterrupt`, `SystemExit`...) are not captured.
    """
    try:
        return Ok(func())
    except Exception as exc:  # noqa: BLE001
        return Err(exc)
