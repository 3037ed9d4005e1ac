"""Tests for the terminal reducers first, last and single."""

from collections.abc import Iterator

import pytest

import babysteps as bs


def _counting(pulled: list[int], *values: int) -> Iterator[int]:
    for value in values:
        pulled.append(value)
        yield value


@pytest.mark.parametrize("method", ["first", "last", "single"])
def test_empty_gives_none(method: str) -> None:
    """Every terminal reducer answers `NONE` on an empty source."""
    assert getattr(bs.Iter(()), method)() == bs.NONE
    assert getattr(bs.Seq(()), method)() == bs.NONE


def test_first_pulls_one_element() -> None:
    pulled: list[int] = []
    assert bs.Iter(_counting(pulled, 1, 2, 3)).first() == bs.Some(1)
    assert pulled == [1]


def test_first_on_infinite_source() -> None:
    assert bs.Iter.from_count(5).first() == bs.Some(5)


def test_first_none_element() -> None:
    """A `None` element is `Some(None)`, never `NONE`."""
    result = bs.Iter([None, 1]).first()
    assert result.is_some()
    assert result.unwrap() is None


def test_last_pulls_everything() -> None:
    pulled: list[int] = []
    assert bs.Iter(_counting(pulled, 1, 2, 3)).last() == bs.Some(3)
    assert pulled == [1, 2, 3]


def test_last_none_element() -> None:
    assert bs.Iter([1, None]).last() == bs.Some(None)


def test_single_with_one_element() -> None:
    assert bs.Iter(["only"]).single() == bs.Some("only")
    assert bs.Iter([None]).single() == bs.Some(None)


def test_single_with_several_elements_drains_source() -> None:
    pulled: list[int] = []
    assert bs.Iter(_counting(pulled, 1, 2, 3, 4)).single() == bs.NONE
    assert pulled == [1, 2, 3, 4]


def test_seq_terminals_do_not_consume() -> None:
    data = bs.Seq((1, 2, 3))
    assert data.first() == bs.Some(1)
    assert data.last() == bs.Some(3)
    assert data.first() == bs.Some(1)
    assert data.single() == bs.NONE


def test_terminals_after_operators() -> None:
    assert bs.Iter(range(10)).chunked(4).last() == bs.Some((8, 9))
    assert bs.Iter(range(10)).windowed(10).single() == bs.Some(tuple(range(10)))
