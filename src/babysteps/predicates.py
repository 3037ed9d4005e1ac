"""Combinators building predicates, the single-argument callables returning a `bool`.

Example:
```python
>>> from babysteps import predicates as p
>>> small_even = p.and_(lambda x: x % 2 == 0, p.not_in({8, 10}))
>>> [x for x in range(12) if small_even(x)]
[0, 2, 4, 6]

```
"""

from collections.abc import Callable, Container
from typing import Any

from ._core import require_not_none

__all__ = [
    "all_of",
    "always_false",
    "always_true",
    "and_",
    "any_of",
    "in_",
    "is_equal",
    "is_none",
    "is_not_none",
    "not_",
    "not_in",
    "or_",
]

type Predicate[T] = Callable[[T], bool]


def and_[T](left: Predicate[T], right: Predicate[T]) -> Predicate[T]:
    """Short-circuiting conjunction: **right** is not called when **left** is false."""
    require_not_none(left, "left")
    require_not_none(right, "right")
    return lambda value: left(value) and right(value)


def or_[T](left: Predicate[T], right: Predicate[T]) -> Predicate[T]:
    """Short-circuiting disjunction: **right** is not called when **left** is true."""
    require_not_none(left, "left")
    require_not_none(right, "right")
    return lambda value: left(value) or right(value)


def not_[T](predicate: Predicate[T]) -> Predicate[T]:
    require_not_none(predicate, "predicate")
    return lambda value: not predicate(value)


def all_of[T](*predicates: Predicate[T]) -> Predicate[T]:
    """True when every predicate holds, checked in order. True for no predicates."""
    checked = tuple(require_not_none(p, "predicate") for p in predicates)
    return lambda value: all(p(value) for p in checked)


def any_of[T](*predicates: Predicate[T]) -> Predicate[T]:
    """True when at least one predicate holds, checked in order. False for no predicates."""
    checked = tuple(require_not_none(p, "predicate") for p in predicates)
    return lambda value: any(p(value) for p in checked)


def is_none() -> Predicate[Any]:
    return lambda value: value is None


def is_not_none() -> Predicate[Any]:
    return lambda value: value is not None


def is_equal[T](expected: T) -> Predicate[T]:
    """Equality with **expected**, which may be `None`."""
    return lambda value: value == expected


def always_true() -> Predicate[Any]:
    return lambda _: True


def always_false() -> Predicate[Any]:
    return lambda _: False


def in_[T](values: Container[T]) -> Predicate[T]:
    require_not_none(values, "values")
    return lambda value: value in values


def not_in[T](values: Container[T]) -> Predicate[T]:
    require_not_none(values, "values")
    return lambda value: value not in values
