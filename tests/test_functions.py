"""Tests for the function combinators and exception-capturing lifts."""

import pytest

import babysteps as bs
from babysteps import functions as fn


def test_identity() -> None:  # noqa: D103
    marker = object()
    assert fn.identity(marker) is marker


def test_compose_and_pipe_agree() -> None:
    """`compose(after, before)` and `pipe(before, after)` build the same function."""
    add_one = lambda x: x + 1  # noqa: E731
    double = lambda x: x * 2  # noqa: E731
    assert fn.compose(double, add_one)(3) == 8
    assert fn.pipe(add_one, double)(3) == 8
    assert fn.compose(add_one, double)(3) == 7


def test_curry_flip_partial() -> None:  # noqa: D103
    def _sub(a: int, b: int) -> int:
        return a - b

    assert fn.curry(_sub)(10)(3) == 7
    assert fn.flip(_sub)(10, 3) == -7
    assert fn.partial(_sub, 10)(4) == 6


def test_tupled_and_untupled() -> None:  # noqa: D103
    def _join(a: str, b: int) -> str:
        return a * b

    assert fn.tupled(_join)(bs.Tuple2("ab", 2)) == "abab"
    assert fn.untupled(lambda pair: pair.second)("x", 9) == 9
    assert fn.tupled(fn.untupled(lambda pair: pair))(bs.Tuple2(1, 2)) == bs.Tuple2(1, 2)


@pytest.mark.parametrize(
    "build",
    [
        lambda: fn.compose(None, str),
        lambda: fn.pipe(str, None),
        lambda: fn.curry(None),
        lambda: fn.tupled(None),
        lambda: fn.untupled(None),
        lambda: fn.flip(None),
        lambda: fn.partial(None, 1),
        lambda: fn.memoize(None),
        lambda: fn.memoize2(None),
        lambda: fn.try_of(None),
        lambda: fn.try_function(None),
        lambda: fn.try_consumer(None),
        lambda: fn.result_of(None, str),
        lambda: fn.result_of(lambda: 1, None),
        lambda: fn.result_function(str, None),
        lambda: fn.result_consumer(None, str),
    ],
)
def test_none_callables_rejected_eagerly(build) -> None:  # noqa: ANN001
    """A `None` callable fails when the combinator is built."""
    with pytest.raises(bs.NullArgumentError, match="must not be None"):
        build()


class TestTryLifts:
    def test_try_of(self) -> None:
        assert fn.try_of(lambda: 3) == bs.Ok(3)
        result = fn.try_of(lambda: {}["missing"])
        assert isinstance(result.unwrap_err(), KeyError)

    def test_try_function(self) -> None:
        parse = fn.try_function(int)
        assert parse("12") == bs.Ok(12)
        assert isinstance(parse("twelve").unwrap_err(), ValueError)

    def test_try_consumer(self) -> None:
        seen: list[int] = []
        record = fn.try_consumer(seen.append)
        assert record(1) == bs.Ok(None)
        assert seen == [1]
        assert fn.try_consumer(seen.remove)(2).is_err()

    def test_base_exceptions_propagate(self) -> None:
        def _exit() -> None:
            raise SystemExit(1)

        with pytest.raises(SystemExit):
            fn.try_of(_exit)


class TestResultLifts:
    def test_result_of(self) -> None:
        assert fn.result_of(lambda: 1, str) == bs.Ok(1)
        assert fn.result_of(lambda: int("x"), lambda e: type(e).__name__) == bs.Err(
            "ValueError"
        )

    def test_result_function(self) -> None:
        parse = fn.result_function(int, lambda _: "not a number")
        assert parse("3") == bs.Ok(3)
        assert parse("three") == bs.Err("not a number")

    def test_result_consumer(self) -> None:
        def _reject_negative(x: int) -> None:
            if x < 0:
                msg = f"negative: {x}"
                raise ValueError(msg)

        check = fn.result_consumer(_reject_negative, str)
        assert check(1) == bs.Ok(None)
        assert check(-1) == bs.Err("negative: -1")

    def test_error_mapper_not_called_on_success(self) -> None:
        calls: list[Exception] = []
        fn.result_function(str, calls.append)(1)
        assert calls == []


def test_combinators_chain_with_iter() -> None:  # noqa: D103
    result = (
        bs.Iter(["1", "2", "x"])
        .map(fn.try_function(int))
        .filter(lambda r: r.is_ok())
        .map(lambda r: r.unwrap())
        .collect()
    )
    assert result == bs.Seq((1, 2))
