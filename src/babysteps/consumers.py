"""Combinators for consumers, the single-argument callables run for their side effects."""

from collections.abc import Callable
from typing import Any

from ._core import deprecated, require_not_none

__all__ = ["compose", "noop", "tap", "tee", "tee_all"]


def tee[T](first: Callable[[T], Any], second: Callable[[T], Any]) -> Callable[[T], None]:
    """Build a consumer that calls **first**, then **second**, with the same value.

    Example:
    ```python
    >>> from babysteps import consumers
    >>> seen: list[str] = []
    >>> both = consumers.tee(seen.append, lambda v: seen.append(v.upper()))
    >>> both("a")
    >>> seen
    ['a', 'A']

    ```
    """
    require_not_none(first, "first")
    require_not_none(second, "second")

    def _tee(value: T) -> None:
        first(value)
        second(value)

    return _tee


@deprecated("consumers.tee")
def compose[T](
    first: Callable[[T], Any], second: Callable[[T], Any]
) -> Callable[[T], None]:
    return tee(first, second)


def tee_all[T](
    first: Callable[[T], Any],
    second: Callable[[T], Any],
    *rest: Callable[[T], Any],
) -> Callable[[T], None]:
    """Build a consumer that calls every given consumer in order with the same value.

    Entries of **rest** are checked when the consumer runs.
    """
    require_not_none(first, "first")
    require_not_none(second, "second")

    def _tee_all(value: T) -> None:
        first(value)
        second(value)
        for consumer in rest:
            require_not_none(consumer, "consumer")(value)

    return _tee_all


def noop[T]() -> Callable[[T], None]:
    def _noop(value: T) -> None:  # noqa: ARG001
        return None

    return _noop


def tap[T](action: Callable[[T], Any]) -> Callable[[T], T]:
    """Turn a consumer into a function that runs it and returns its input unchanged.

    Example:
    ```python
    >>> from babysteps import consumers
    >>> double_and_print = consumers.tap(print)
    >>> double_and_print(21) * 2
    21
    42

    ```
    """
    require_not_none(action, "action")

    def _tap(value: T) -> T:
        action(value)
        return value

    return _tap
