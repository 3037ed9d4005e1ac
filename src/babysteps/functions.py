"""Combinators for plain functions, memoization, and exception capture.

Every callable argument is checked for `None` when the combinator is built, not when the result is called.

Example:
```python
>>> from babysteps import functions as fn
>>> parse_then_double = fn.compose(lambda x: x * 2, int)
>>> parse_then_double("21")
42
>>> fn.try_function(int)("x").is_err()
True

```
"""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable, Hashable
from typing import Any

from ._core import require_not_none
from ._results import NONE, Option, Result, Some, catch
from ._tuples import Tuple2

__all__ = [
    "Memoized",
    "Memoized2",
    "compose",
    "curry",
    "flip",
    "identity",
    "memoize",
    "memoize2",
    "partial",
    "pipe",
    "result_consumer",
    "result_function",
    "result_of",
    "try_consumer",
    "try_function",
    "try_of",
    "tupled",
    "untupled",
]


def identity[T](value: T) -> T:
    return value


def compose[T, U, R](after: Callable[[U], R], before: Callable[[T], U]) -> Callable[[T], R]:
    """Return `x -> after(before(x))`."""
    require_not_none(after, "after")
    require_not_none(before, "before")
    return lambda value: after(before(value))


def pipe[T, U, R](before: Callable[[T], U], after: Callable[[U], R]) -> Callable[[T], R]:
    """Return `x -> after(before(x))`, with the functions given in call order.

    Example:
    ```python
    >>> from babysteps import functions as fn
    >>> fn.pipe(str.strip, str.upper)("  hi ")
    'HI'

    ```
    """
    return compose(after, before)


def curry[A, B, R](func: Callable[[A, B], R]) -> Callable[[A], Callable[[B], R]]:
    """Turn a two-argument function into a chain of one-argument functions.

    Example:
    ```python
    >>> from babysteps import functions as fn
    >>> add = fn.curry(lambda a, b: a + b)
    >>> add(1)(2)
    3

    ```
    """
    require_not_none(func, "func")
    return lambda first: lambda second: func(first, second)


def tupled[A, B, R](func: Callable[[A, B], R]) -> Callable[[Tuple2[A, B]], R]:
    """Turn a two-argument function into one taking a `Tuple2`.

    Example:
    ```python
    >>> import babysteps as bs
    >>> from babysteps import functions as fn
    >>> bs.Iter("ab").indexed().map(fn.tupled(lambda i, c: c * (i + 1))).collect()
    Seq('a', 'bb')

    ```
    """
    require_not_none(func, "func")
    return lambda pair: func(pair.first, pair.second)


def untupled[A, B, R](func: Callable[[Tuple2[A, B]], R]) -> Callable[[A, B], R]:
    require_not_none(func, "func")
    return lambda first, second: func(Tuple2(first, second))


def flip[A, B, R](func: Callable[[A, B], R]) -> Callable[[B, A], R]:
    require_not_none(func, "func")
    return lambda second, first: func(first, second)


def partial[A, B, R](func: Callable[[A, B], R], value: A) -> Callable[[B], R]:
    """Fix the first argument of a two-argument function."""
    return functools.partial(require_not_none(func, "func"), value)


class _Cell[R]:
    """A cache entry: `NONE` until computed, then `Some(result)`, which may be `Some(None)`."""

    __slots__ = ("lock", "value")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.value: Option[R] = NONE


class _MemoBase[K: Hashable, R]:
    """Thread-safe compute-once cache shared by `Memoized` and `Memoized2`.

    A single lock guards the key to cell mapping and is never held while computing.
    Each cell carries its own lock, held while its key is computed, so that callers waiting on one key do not block other keys.
    """

    def __init__(self, func: Callable[..., R]) -> None:
        self._func = func
        self._lock = threading.Lock()
        self._cells: dict[K, _Cell[R]] = {}
        functools.update_wrapper(self, func)

    def _cell(self, key: K) -> _Cell[R]:
        with self._lock:
            cell = self._cells.get(key)
            if cell is None:
                cell = self._cells[key] = _Cell()
            return cell

    def _evict(self, key: K, cell: _Cell[R]) -> None:
        with self._lock:
            if self._cells.get(key) is cell:
                del self._cells[key]

    def _get(self, key: K, compute: Callable[[], R]) -> R:
        while True:
            cell = self._cell(key)
            with cell.lock:
                if cell.value.is_some():
                    return cell.value.unwrap()
                with self._lock:
                    registered = self._cells.get(key) is cell
                if not registered:
                    # evicted by a failed compute while this call was waiting
                    continue
                try:
                    cell.value = Some(compute())
                except BaseException:
                    self._evict(key, cell)
                    raise
                return cell.value.unwrap()

    def cache_size(self) -> int:
        """Number of keys whose result has been computed and stored."""
        with self._lock:
            cells = tuple(self._cells.values())
        return sum(1 for cell in cells if cell.value.is_some())

    def cache_clear(self) -> None:
        """Forget every stored result.

        Keys being computed during the call are kept, and their result is stored once done.
        """
        with self._lock:
            self._cells = {
                key: cell for key, cell in self._cells.items() if cell.value.is_none()
            }


class Memoized[K: Hashable, R](_MemoBase[K, R]):
    """A one-argument function wrapped by `memoize`."""

    def __call__(self, arg: K) -> R:
        return self._get(arg, lambda: self._func(arg))


class Memoized2[A: Hashable, B: Hashable, R](_MemoBase[Tuple2[A, B], R]):
    """A two-argument function wrapped by `memoize2`, keyed by `Tuple2(first, second)`."""

    def __call__(self, first: A, second: B) -> R:
        return self._get(Tuple2(first, second), lambda: self._func(first, second))


def memoize[K: Hashable, R](func: Callable[[K], R]) -> Memoized[K, R]:
    """Cache the results of a one-argument function, evaluating it at most once per argument.

    `None` results are cached like any other value.
    If **func** raises, nothing is stored and the exception propagates.

    Safe to call from several threads: concurrent calls with the same argument run **func** once, while calls with different arguments do not wait on each other.

    Arguments are keyed by hash equality, as in a `dict`: `1`, `1.0` and `True` share a single entry.

    Args:
        func (Callable[[K], R]): The function to cache. Its argument must be hashable.

    Returns:
        Memoized[K, R]: A callable exposing `cache_size()` and `cache_clear()`.

    Example:
    ```python
    >>> from babysteps import functions as fn
    >>> calls: list[int] = []
    >>> @fn.memoize
    ... def lookup(key: int) -> str | None:
    ...     calls.append(key)
    ...     return None if key < 0 else str(key)
    >>> lookup(-1), lookup(-1), lookup(2)
    (None, None, '2')
    >>> calls
    [-1, 2]
    >>> lookup.cache_size()
    2

    ```
    """
    return Memoized(require_not_none(func, "func"))


def memoize2[A: Hashable, B: Hashable, R](func: Callable[[A, B], R]) -> Memoized2[A, B, R]:
    """Cache the results of a two-argument function, evaluating it at most once per pair of arguments.

    Same guarantees as `memoize`, including keying by hash equality.

    Example:
    ```python
    >>> from babysteps import functions as fn
    >>> power = fn.memoize2(pow)
    >>> power(2, 10), power(2, 10), power(10, 2)
    (1024, 1024, 100)
    >>> power.cache_size()
    2

    ```
    """
    return Memoized2(require_not_none(func, "func"))


def try_of[T](supplier: Callable[[], T]) -> Result[T, Exception]:
    """Call **supplier** now, returning `Ok(value)` or `Err(exception)`."""
    return catch(require_not_none(supplier, "supplier"))


def try_function[T, R](func: Callable[[T], R]) -> Callable[[T], Result[R, Exception]]:
    require_not_none(func, "func")
    return lambda value: catch(lambda: func(value))


def try_consumer[T](consumer: Callable[[T], Any]) -> Callable[[T], Result[None, Exception]]:
    """Lift a consumer so that it returns `Ok(None)` on success and `Err(exception)` on failure.

    Example:
    ```python
    >>> from babysteps import functions as fn
    >>> seen: list[int] = []
    >>> record = fn.try_consumer(seen.append)
    >>> record(1)
    Ok(None)
    >>> fn.try_consumer(seen.remove)(5).is_err()
    True

    ```
    """
    require_not_none(consumer, "consumer")

    def _run(value: T) -> None:
        consumer(value)

    return lambda value: catch(lambda: _run(value))


def result_of[T, E](
    supplier: Callable[[], T], error_mapper: Callable[[Exception], E]
) -> Result[T, E]:
    """Call **supplier** now, mapping a raised exception through **error_mapper**.

    Example:
    ```python
    >>> from babysteps import functions as fn
    >>> fn.result_of(lambda: int("x"), lambda exc: type(exc).__name__)
    Err('ValueError')

    ```
    """
    require_not_none(supplier, "supplier")
    require_not_none(error_mapper, "error_mapper")
    return catch(supplier).map_err(error_mapper)


def result_function[T, R, E](
    func: Callable[[T], R], error_mapper: Callable[[Exception], E]
) -> Callable[[T], Result[R, E]]:
    require_not_none(func, "func")
    require_not_none(error_mapper, "error_mapper")
    return lambda value: catch(lambda: func(value)).map_err(error_mapper)


def result_consumer[T, E](
    consumer: Callable[[T], Any], error_mapper: Callable[[Exception], E]
) -> Callable[[T], Result[None, E]]:
    require_not_none(error_mapper, "error_mapper")
    lifted = try_consumer(consumer)
    return lambda value: lifted(value).map_err(error_mapper)
