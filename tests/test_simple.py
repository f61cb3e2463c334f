"""Tests for the single-state adapters: chain, map, filter, take, drop and friends."""

from collections.abc import Callable, Iterator

import pytest

import streamchain as sc


class TestChain:
    """Tests for chain."""

    def test_chain_empty_iterables(self) -> None:
        """Test chain yields nothing when given empty iterables."""
        assert list(sc.chain([])) == []
        assert list(sc.chain([], [])) == []
        assert list(sc.chain([], [], [])) == []
        assert list(sc.chain()) == []

    def test_chain_padded_with_empty(self, alph: Callable[[int], Iterator[str]]) -> None:
        """Test chain skips over empty iterables."""
        assert list(sc.chain([], alph(3))) == ["a", "b", "c"]
        assert list(sc.chain(alph(3), [])) == ["a", "b", "c"]
        assert list(sc.chain([], alph(3), [])) == ["a", "b", "c"]

    def test_chain_multiple(
        self, alph: Callable[[int], Iterator[str]], num: Callable[[int], Iterator[int]]
    ) -> None:
        """Test chain concatenates several iterables in order."""
        result = list(sc.chain(alph(3), num(3), ["foo", "bar", "baz"]))
        assert result == ["a", "b", "c", 0, 1, 2, "foo", "bar", "baz"]

    def test_chain_is_lazy(
        self, alph: Callable[[int], Iterator[str]], num: Callable[[int], Iterator[int]]
    ) -> None:
        """Test chain only pulls the next source once the previous one is exhausted."""
        it1 = alph(3)
        it2 = num(3)
        next(sc.chain(it1, it2))
        assert next(it1) == "b"
        next(sc.chain(it1, it2))
        next(sc.chain(it1, it2))
        assert next(it2) == 1


class TestMap:
    """Tests for map."""

    def test_map_empty(self, bang: Callable[..., object]) -> None:
        """Test mapping an empty iterable never calls the function."""
        assert list(sc.map([], bang)) == []

    def test_map_values(self) -> None:
        """Test map applies the function to every element."""
        assert list(sc.map([1, 2, 3], lambda x: x * 2)) == [2, 4, 6]

    def test_map_takes_index(self, alph: Callable[[int], Iterator[str]]) -> None:
        """Test map passes the index when the function accepts it."""
        assert list(sc.map(alph(3), lambda e, i: f"{e}{i}")) == ["a0", "b1", "c2"]

    def test_map_is_lazy(self, counted: Callable[..., Iterator[int]]) -> None:
        """Test map pulls one source element per output element."""
        source = counted([1, 2, 3])
        it = sc.map(source, lambda x: x + 1)
        assert source.pulls == 0  # type: ignore[attr-defined]
        assert next(it) == 2
        assert source.pulls == 1  # type: ignore[attr-defined]

    def test_map_propagates_errors(self) -> None:
        """Test errors raised by the mapping reach the caller unchanged."""
        it = sc.map([1, 0], lambda x: 1 / x)
        assert next(it) == 1
        with pytest.raises(ZeroDivisionError):
            next(it)


class TestFilter:
    """Tests for filter."""

    def test_filter_empty(self, bang: Callable[..., object]) -> None:
        """Test filtering an empty iterable yields nothing."""
        assert list(sc.filter([], bang)) == []

    def test_filter_contradiction(self) -> None:
        """Test a predicate always false yields nothing."""
        assert list(sc.filter(range(5), lambda _: False)) == []

    def test_filter_tautology(self) -> None:
        """Test a predicate always true yields the whole source."""
        assert list(sc.filter(range(5), lambda _: True)) == [0, 1, 2, 3, 4]

    def test_filter_values(self) -> None:
        """Test filter keeps only matching elements."""
        assert list(sc.filter(range(10), lambda x: x % 3 == 0)) == [0, 3, 6, 9]

    def test_filter_takes_index(self, alph: Callable[[int], Iterator[str]]) -> None:
        """Test the index is the position of the element in the source."""
        assert list(sc.filter(alph(6), lambda _, i: i % 2 == 1)) == ["b", "d", "f"]

    def test_filter_then_map_is_lazy(self, counted: Callable[..., Iterator[int]]) -> None:
        """Test pulling once pulls only up to the first passing element."""
        source = counted([1, 3, 5, 6, 7, 8])
        it = sc.map(sc.filter(source, lambda x: x % 2 == 0), lambda x: x * 10)
        assert next(it) == 60
        assert source.pulls == 4  # type: ignore[attr-defined]


class TestTake:
    """Tests for take."""

    def test_take_from_empty(self) -> None:
        """Test take on an empty iterable yields nothing."""
        assert list(sc.take([], 3)) == []

    def test_take_zero(self, counted: Callable[..., Iterator[int]]) -> None:
        """Test take with a limit of 0 yields nothing and pulls nothing."""
        source = counted([1, 2])
        assert list(sc.take(source, 0)) == []
        assert source.pulls == 0  # type: ignore[attr-defined]

    def test_take_out_of_bounds(self) -> None:
        """Test take with a limit above the length yields the whole source."""
        assert list(sc.take("abc", 10)) == ["a", "b", "c"]

    def test_take_values(self, alph: Callable[[int], Iterator[str]]) -> None:
        """Test take yields the first elements."""
        assert list(sc.take(alph(5), 1)) == ["a"]
        assert list(sc.take(alph(5), 3)) == ["a", "b", "c"]

    def test_take_is_lazy(self, alph: Callable[[int], Iterator[str]]) -> None:
        """Test take does not pull past what was requested."""
        it = alph(3)
        next(sc.take(it, 2))
        assert next(it) == "b"

    def test_take_infinite(self) -> None:
        """Test take bounds an infinite source."""
        assert list(sc.take(sc.count(), 4)) == [0, 1, 2, 3]

    def test_take_negative_raises(self) -> None:
        """Test a negative limit raises immediately."""
        with pytest.raises(sc.InvalidArgumentError, match=r"Cannot take < 0 items \(got -1\)"):
            sc.take([1, 2], -1)

    @pytest.mark.parametrize("n", [0, 1, 3, 5])
    def test_take_then_rest_reconstructs(self, n: int) -> None:
        """Test take followed by the remaining elements gives back the source."""
        data = [5, 4, 3, 2, 1]
        it = iter(data)
        head = list(sc.take(it, n))
        assert len(head) == n
        assert head + list(it) == data


class TestDrop:
    """Tests for drop."""

    def test_drop_empty(self) -> None:
        """Test drop on an empty iterable yields nothing."""
        assert list(sc.drop([], 2)) == []

    def test_drop_zero(self) -> None:
        """Test drop with a limit of 0 yields everything."""
        assert list(sc.drop("abc", 0)) == ["a", "b", "c"]

    def test_drop_values(self) -> None:
        """Test drop skips the first elements."""
        assert list(sc.drop("abcde", 2)) == ["c", "d", "e"]

    def test_drop_entire_iterable(self) -> None:
        """Test drop with a limit equal to or above the length yields nothing."""
        assert list(sc.drop("abc", 3)) == []
        assert list(sc.drop("abc", 4)) == []

    def test_drop_is_lazy(self, counted: Callable[..., Iterator[int]]) -> None:
        """Test drop does not pull anything before the first request."""
        source = counted(range(5))
        it = sc.drop(source, 2)
        assert source.pulls == 0  # type: ignore[attr-defined]
        assert next(it) == 2
        assert source.pulls == 3  # type: ignore[attr-defined]

    def test_drop_does_not_run_upstream_callbacks(self) -> None:
        """Test building drop over a peek source leaves the consumer untouched."""
        seen: list[int] = []
        it = sc.drop(sc.peek(range(5), seen.append), 2)
        assert seen == []
        assert next(it) == 2
        assert seen == [0, 1, 2]

    def test_drop_negative_raises(self) -> None:
        """Test a negative limit raises immediately."""
        with pytest.raises(sc.InvalidArgumentError, match="Cannot drop < 0 items"):
            sc.drop([1, 2], -1)

    @pytest.mark.parametrize("n", [0, 2, 4])
    def test_take_and_drop_reconstruct(self, n: int) -> None:
        """Test take and drop at the same limit split the source in two."""
        data = (1, 2, 3, 4)
        assert (*sc.take(data, n), *sc.drop(data, n)) == data


class TestTakeWhileDropWhile:
    """Tests for take_while and drop_while."""

    def test_take_while_empty(self, bang: Callable[..., object]) -> None:
        """Test take_while on an empty iterable yields nothing."""
        assert list(sc.take_while([], bang)) == []

    def test_take_while_contradiction(self) -> None:
        """Test take_while with a predicate always false yields nothing."""
        assert list(sc.take_while("abc", lambda _: False)) == []

    def test_take_while_tautology(self) -> None:
        """Test take_while with a predicate always true yields everything."""
        assert list(sc.take_while("abc", lambda _: True)) == ["a", "b", "c"]

    def test_take_while_stops_for_good(self) -> None:
        """Test take_while never resumes after the first failing element."""
        assert list(sc.take_while([1, 2, 0, 3, 4], lambda x: x > 0)) == [1, 2]

    def test_take_while_is_lazy(self, alph: Callable[[int], Iterator[str]]) -> None:
        """Test take_while pulls one element per output element."""
        it = alph(3)
        next(sc.take_while(it, lambda _: True))
        assert next(it) == "b"

    def test_take_while_takes_index(self) -> None:
        """Test take_while passes the index when the predicate accepts it."""
        assert list(sc.take_while("abcdef", lambda _, i: i < 3)) == ["a", "b", "c"]

    def test_drop_while_empty(self, bang: Callable[..., object]) -> None:
        """Test drop_while on an empty iterable yields nothing."""
        assert list(sc.drop_while([], bang)) == []

    def test_drop_while_tautology(self) -> None:
        """Test drop_while with a predicate always true yields nothing."""
        assert list(sc.drop_while("abc", lambda _: True)) == []

    def test_drop_while_contradiction(self) -> None:
        """Test drop_while with a predicate always false yields everything."""
        assert list(sc.drop_while("abc", lambda _: False)) == ["a", "b", "c"]

    def test_drop_while_values(self) -> None:
        """Test drop_while yields the rest unconditionally once the predicate fails."""
        assert list(sc.drop_while([1, 2, 0, 3, 4], lambda x: x > 0)) == [0, 3, 4]

    def test_drop_while_stops_calling_predicate(self) -> None:
        """Test the predicate is not called after the first failing element."""
        calls: list[int] = []

        def _predicate(x: int) -> bool:
            calls.append(x)
            return x < 2

        assert list(sc.drop_while([0, 1, 2, 0, 1], _predicate)) == [2, 0, 1]
        assert calls == [0, 1, 2]

    def test_drop_while_is_lazy(self, alph: Callable[[int], Iterator[str]]) -> None:
        """Test drop_while only pulls up to the first yielded element."""
        it = alph(4)
        assert next(sc.drop_while(it, lambda e: e == "a")) == "b"
        assert next(it) == "c"

    def test_drop_while_takes_index(self) -> None:
        """Test drop_while passes the index when the predicate accepts it."""
        assert list(sc.drop_while("abcdef", lambda _, i: i < 4)) == ["e", "f"]


class TestFlatMap:
    """Tests for flat_map."""

    def test_flat_map_empty(self, bang: Callable[..., object]) -> None:
        """Test flat mapping an empty iterable yields nothing."""
        assert list(sc.flat_map([], bang)) == []

    def test_flat_map_to_empty(self) -> None:
        """Test mapping every element to an empty iterable yields nothing."""
        assert list(sc.flat_map("abc", lambda _: [])) == []

    def test_flat_map_values(self) -> None:
        """Test flat_map flattens exactly one level."""
        assert list(sc.flat_map([1, 2], lambda x: [[x], [x]])) == [[1], [1], [2], [2]]

    def test_flat_map_takes_index(self) -> None:
        """Test flat_map passes the index when the mapping accepts it."""
        assert list(sc.flat_map("ab", lambda e, i: e * (i + 1))) == ["a", "b", "b"]

    def test_flat_map_is_lazy(self, alph: Callable[[int], Iterator[str]]) -> None:
        """Test flat_map drains an inner iterable before pulling the next element."""
        it = alph(3)
        stream = sc.flat_map(it, lambda e: [e, e])
        assert next(stream) == "a"
        assert next(stream) == "a"
        assert next(it) == "b"


class TestPeek:
    """Tests for peek."""

    def test_peek_empty(self, bang: Callable[..., object]) -> None:
        """Test peek consumes nothing on an empty iterable."""
        assert list(sc.peek([], bang)) == []

    def test_peek_consumes_elements(self) -> None:
        """Test peek calls the consumer on each element and yields it unchanged."""
        seen: list[str] = []
        assert list(sc.peek("abc", seen.append)) == ["a", "b", "c"]
        assert seen == ["a", "b", "c"]

    def test_peek_takes_index(self) -> None:
        """Test peek passes the index when the consumer accepts it."""
        seen: list[tuple[str, int]] = []
        list(sc.peek("ab", lambda e, i: seen.append((e, i))))
        assert seen == [("a", 0), ("b", 1)]

    def test_peek_is_lazy(self) -> None:
        """Test the consumer is only called when an element is pulled."""
        seen: list[int] = []
        it = sc.peek([1, 2, 3], seen.append)
        assert seen == []
        next(it)
        assert seen == [1]


class TestGenerators:
    """Tests for repeat, iterate, count and enumerate."""

    def test_repeat_indefinitely(self) -> None:
        """Test repeat without times never ends on its own."""
        assert list(sc.take(sc.repeat("x"), 5)) == ["x"] * 5

    def test_repeat_n_times(self) -> None:
        """Test repeat with times yields exactly that many values."""
        assert list(sc.repeat("x", 3)) == ["x", "x", "x"]

    def test_repeat_zero_times(self) -> None:
        """Test repeat with times of 0 yields nothing."""
        assert list(sc.repeat("x", 0)) == []

    def test_repeat_negative_raises(self) -> None:
        """Test a negative times raises immediately."""
        with pytest.raises(sc.InvalidArgumentError):
            sc.repeat("x", -1)

    def test_iterate_values(self) -> None:
        """Test iterate yields the seed and then successive updates."""
        assert list(sc.take(sc.iterate(1, lambda x: x * 2), 5)) == [1, 2, 4, 8, 16]

    def test_iterate_takes_index(self) -> None:
        """Test the update function receives indices starting at 0."""
        result = list(sc.take(sc.iterate("", lambda s, i: s + str(i)), 4))
        assert result == ["", "0", "01", "012"]

    def test_count(self) -> None:
        """Test count yields an arithmetic progression."""
        assert list(sc.take(sc.count(5, -2), 4)) == [5, 3, 1, -1]

    def test_enumerate(self) -> None:
        """Test enumerate pairs elements with named indices."""
        pairs = list(sc.enumerate("ab", start=1))
        assert pairs == [(1, "a"), (2, "b")]
        assert pairs[1].idx == 2
        assert pairs[1].value == "b"
