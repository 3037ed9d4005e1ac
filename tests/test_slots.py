"""Tests for slot usage in babysteps classes."""

import babysteps as bs
from babysteps import _operators as ops
from babysteps._sources import Source


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(bs.Iter(()))
    assert _check_slots(bs.Seq(()))
    assert _check_slots(bs.Some(42))
    assert _check_slots(bs.NoneOption())
    assert _check_slots(bs.Err[int, object](42))
    assert _check_slots(bs.Ok[int, object](42))
    assert _check_slots(bs.Tuple2(1, 2))
    assert _check_slots(Source(()))


def test_operator_slots() -> None:  # noqa: D103
    assert _check_slots(ops.Chunked((), 1))
    assert _check_slots(ops.Windowed((), 1))
    assert _check_slots(ops.TakeWhileInclusive((), bool))
    assert _check_slots(ops.DropWhileInclusive((), bool))
    assert _check_slots(ops.DistinctBy((), id))
    assert _check_slots(ops.MapCatching((), id))
    assert _check_slots(ops.FilterCatching((), bool))
    assert _check_slots(ops.Indexed(()))
