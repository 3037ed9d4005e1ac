"""Tests for the consumer combinators."""

import warnings

import pytest

import babysteps as bs
from babysteps import consumers


def test_tee_calls_in_order() -> None:  # noqa: D103
    calls: list[str] = []
    both = consumers.tee(lambda v: calls.append(f"a{v}"), lambda v: calls.append(f"b{v}"))
    assert both(1) is None
    assert calls == ["a1", "b1"]


def test_tee_stops_when_first_raises() -> None:  # noqa: D103
    calls: list[int] = []

    def _fail(_: int) -> None:
        msg = "first failed"
        raise RuntimeError(msg)

    with pytest.raises(RuntimeError):
        consumers.tee(_fail, calls.append)(1)
    assert calls == []


def test_compose_is_deprecated_alias() -> None:
    """`compose` still works but warns."""
    calls: list[int] = []
    with pytest.warns(DeprecationWarning, match="`compose` is deprecated, use `consumers.tee` instead"):
        both = consumers.compose(calls.append, calls.append)
    both(3)
    assert calls == [3, 3]


def test_tee_does_not_warn() -> None:  # noqa: D103
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        consumers.tee(consumers.noop(), consumers.noop())(1)


def test_tee_all() -> None:  # noqa: D103
    calls: list[tuple[str, int]] = []
    every = consumers.tee_all(
        lambda v: calls.append(("a", v)),
        lambda v: calls.append(("b", v)),
        lambda v: calls.append(("c", v)),
        lambda v: calls.append(("d", v)),
    )
    every(7)
    assert calls == [("a", 7), ("b", 7), ("c", 7), ("d", 7)]


def test_tee_all_checks_rest_when_invoked() -> None:
    """A `None` among the extra consumers is only detected when the consumer runs."""
    calls: list[int] = []
    every = consumers.tee_all(calls.append, calls.append, None)  # type: ignore[arg-type]
    with pytest.raises(bs.NullArgumentError, match="consumer must not be None"):
        every(1)
    assert calls == [1, 1]


def test_tee_all_checks_first_two_eagerly() -> None:  # noqa: D103
    with pytest.raises(bs.NullArgumentError, match="second"):
        consumers.tee_all(consumers.noop(), None)  # type: ignore[arg-type]


def test_noop() -> None:  # noqa: D103
    assert consumers.noop()("anything") is None


def test_tap_returns_input() -> None:  # noqa: D103
    seen: list[int] = []
    passthrough = consumers.tap(seen.append)
    assert passthrough(5) == 5
    assert seen == [5]


def test_tap_in_a_chain() -> None:  # noqa: D103
    seen: list[int] = []
    result = bs.Iter([1, 2, 3]).tap(seen.append).map(lambda x: x * 2).take(2).collect()
    assert result == bs.Seq((2, 4))
    assert seen == [1, 2]
