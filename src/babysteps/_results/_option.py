from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs

from .._errors import OptionUnwrapError


class Option[T](ABC):
    """A value that is either present (`Some`) or absent (`NONE`).

    `Some(None)` is a present value whose payload happens to be `None`, and is never equal to `NONE`.

    Example:
    ```python
    >>> import babysteps as bs
    >>> bs.Some(None).is_some()
    True
    >>> bs.Some(None) == bs.NONE
    False

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        True for `Some`, including `Some(None)`.

        Example:
            ```python
            >>> import babysteps as bs
            >>> bs.Some(2).is_some()
            True
            >>> bs.NONE.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        True only for `NONE`.

        Example:
            ```python
            >>> import babysteps as bs
            >>> bs.Some(2).is_none()
            False
            >>> bs.NONE.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Extract the payload of a `Some`.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> import babysteps as bs
            >>> bs.Some("car").unwrap()
            'car'
            >>> bs.NONE.unwrap()
            Traceback (most recent call last):
                ...
            babysteps._errors.OptionUnwrapError: called `unwrap` on a `NONE`

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Like `unwrap`, with **msg** leading the error message.

        Args:
            msg: Explains what was expected to be present.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> import babysteps as bs
            >>> bs.NONE.expect("window must exist")
            Traceback (most recent call last):
                ...
            babysteps._errors.OptionUnwrapError: window must exist (called `expect` on a `NONE`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `NONE`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Payload of a `Some`, or **default** for `NONE`. A `Some(None)` yields `None`, not the default.

        Example:
            ```python
            >>> import babysteps as bs
            >>> bs.Some(None).unwrap_or(0) is None
            True
            >>> bs.NONE.unwrap_or(0)
            0

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Payload of a `Some`, or the result of calling **f** for `NONE`. **f** is not called otherwise."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying **f** to a contained value, leaving `NONE` untouched.

        Example:
            ```python
            >>> import babysteps as bs
            >>> bs.Some("hello").map(len)
            Some(5)
            >>> bs.NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Calls **f** with the contained value if `Some`, otherwise returns `NONE`."""
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it is `Some`, otherwise the result of **f**."""
        return self if self.is_some() else f()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """
        Returns `NONE` if the option is `NONE` or if **predicate** is false for the contained value.

        Example:
            ```python
            >>> import babysteps as bs
            >>> bs.Some(4).filter(lambda x: x % 2 == 0)
            Some(4)
            >>> bs.Some(3).filter(lambda x: x % 2 == 0)
            NONE

            ```
        """
        if self.is_some() and predicate(self.unwrap()):
            return self
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant holding a value, which may itself be `None`."""

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """The empty variant. Use the `NONE` singleton rather than building new instances."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `NONE`")


NONE: Option[Any] = NoneOption()
"""The shared empty `Option`."""
