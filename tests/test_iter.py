"""Tests for the general Iter and Seq helpers, the repr configuration and argument errors."""

import pytest

import babysteps as bs


class TestIterBasics:
    def test_rejects_none(self) -> None:
        with pytest.raises(bs.NullArgumentError, match="data must not be None"):
            bs.Iter(None)  # type: ignore[arg-type]

    def test_next_returns_option(self) -> None:
        it = bs.Iter([None])
        assert it.next() == bs.Some(None)
        assert it.next() == bs.NONE

    def test_iterator_protocol(self) -> None:
        it = bs.Iter("ab")
        assert list(it) == ["a", "b"]
        assert list(it) == []

    def test_from_unpacked_or_iterable(self) -> None:
        assert bs.Iter.from_(1, 2).collect() == bs.Seq((1, 2))
        assert bs.Iter.from_([1, 2]).collect() == bs.Seq((1, 2))
        assert bs.Seq.from_("x") == bs.Seq(("x",))

    def test_general_transformations(self) -> None:
        result = (
            bs.Iter.from_count(1)
            .filter(lambda x: x % 2 == 1)
            .map(lambda x: x * x)
            .skip(1)
            .take_while(lambda x: x < 100)
            .collect()
        )
        assert result == bs.Seq((9, 25, 49, 81))

    def test_chain_flatten_unique(self) -> None:
        assert bs.Iter([[1, 2], [2, 3]]).flatten().unique().collect() == bs.Seq((1, 2, 3))
        assert bs.Iter([1]).chain([2]).skip_while(lambda x: x < 2).collect() == bs.Seq((2,))

    def test_step_by(self) -> None:
        assert bs.Iter(range(7)).step_by(3).collect() == bs.Seq((0, 3, 6))
        with pytest.raises(bs.InvalidArgumentError):
            bs.Iter(range(7)).step_by(0)

    def test_take_and_skip_reject_negative_counts(self) -> None:
        with pytest.raises(bs.InvalidArgumentError, match="n must not be negative, got -1"):
            bs.Iter([1, 2]).take(-1)
        with pytest.raises(bs.InvalidArgumentError, match="n must not be negative, got -2"):
            bs.Iter([1, 2]).skip(-2)
        with pytest.raises(bs.InvalidArgumentError, match="non-negative integer"):
            bs.Iter([1, 2]).take(1.0)  # type: ignore[arg-type]

    def test_take_and_skip_accept_zero(self) -> None:
        assert bs.Iter([1, 2]).take(0).collect() == bs.Seq(())
        assert bs.Iter([1, 2]).skip(0).collect() == bs.Seq((1, 2))

    def test_reducers(self) -> None:
        assert bs.Iter([1, 2, 3]).reduce(max) == 3
        assert bs.Iter("abc").join("") == "abc"
        assert bs.Iter(range(5)).length() == 5
        assert bs.Iter([1, 2]).eq(bs.Seq((1, 2)))

    def test_for_each(self) -> None:
        seen: list[int] = []
        bs.Iter([3, 4]).for_each(seen.append)
        assert seen == [3, 4]


class TestSeq:
    def test_sequence_protocol(self) -> None:
        data = bs.Seq((1, 2, 3))
        assert len(data) == 3
        assert 2 in data
        assert data[0] == 1
        assert data[1:] == (2, 3)
        assert list(reversed(data)) == [3, 2, 1]

    def test_reusable(self) -> None:
        data = bs.Seq((1, 2, 3))
        assert data.iter().map(str).collect() == bs.Seq(("1", "2", "3"))
        assert data.iter().last() == bs.Some(3)

    def test_equality_and_hash(self) -> None:
        assert bs.Seq((1, 2)) == bs.Seq((1, 2))
        assert bs.Seq((1, 2)) != bs.Seq((2, 1))
        assert hash(bs.Seq((1, 2))) == hash(bs.Seq((1, 2)))
        assert bs.Seq((1,)) != (1,)

    def test_is_distinct(self) -> None:
        assert bs.Seq((1, 2)).is_distinct()
        assert not bs.Seq((1, 1)).is_distinct()


class TestPipeable:
    def test_into(self) -> None:
        assert bs.Seq((1, 2, 3)).into(sum) == 6
        assert bs.Iter([1, 2]).windowed(2).into(list) == [(1, 2)]

    def test_inspect_returns_self(self) -> None:
        seen: list[int] = []
        data = bs.Seq((4, 5))
        assert data.inspect(lambda s: seen.append(len(s))) is data
        assert seen == [2]


class TestRepr:
    def test_seq_repr(self) -> None:
        assert repr(bs.Seq((1, "a"))) == "Seq(1, 'a')"
        assert repr(bs.Seq((1,))) == "Seq(1,)"
        assert repr(bs.Seq(())) == "Seq()"

    def test_iter_repr_does_not_consume(self) -> None:
        it = bs.Iter([1, 2])
        assert repr(it) == "Iter(<list_iterator>)"
        assert it.collect() == bs.Seq((1, 2))

    def test_max_items(self) -> None:
        try:
            bs.set_config(max_items=3)
            assert bs.get_config().max_items == 3
            assert repr(bs.Seq(tuple(range(10)))) == "Seq(0, 1, 2, ...)"
        finally:
            bs.set_config(max_items=20)

    def test_max_items_validated(self) -> None:
        with pytest.raises(bs.InvalidArgumentError):
            bs.set_config(max_items=0)


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(bs.NullArgumentError, bs.BabystepsError)
        assert issubclass(bs.NullArgumentError, TypeError)
        assert issubclass(bs.InvalidArgumentError, bs.BabystepsError)
        assert issubclass(bs.InvalidArgumentError, ValueError)
        assert issubclass(bs.OutOfElementsError, StopIteration)
        assert issubclass(bs.OptionUnwrapError, RuntimeError)
        assert issubclass(bs.ResultUnwrapError, RuntimeError)

    def test_message_names_the_value(self) -> None:
        with pytest.raises(bs.InvalidArgumentError, match="size must be positive, got 0"):
            bs.Iter([1]).chunked(0)
        with pytest.raises(bs.InvalidArgumentError, match="step must be a positive integer, got 1.5"):
            bs.Iter([1]).windowed(2, 1.5)  # type: ignore[arg-type]
