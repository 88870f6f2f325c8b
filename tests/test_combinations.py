"""Tests for the combinations module."""

import math

import pytest

from combinatorial.combinations import Combinations, CombinationsWithReplacement


class TestCombinationsConstruction:
    """Tests for the two constructors and domain normalisation."""

    def test_all(self):
        combos = Combinations.all([2, 4, 3, 1, 2, 2, 1])
        assert combos.domain == (1, 2, 3, 4)
        assert combos.positions == ()
        assert combos.all_sizes is True
        assert combos.done is False

    def test_of_size(self):
        combos = Combinations.of_size([2, 4, 3, 1, 2, 2, 1], 3)
        assert combos.domain == (1, 2, 3, 4)
        assert combos.positions == (0, 1, 2)
        assert combos.all_sizes is False
        assert combos.done is False

    def test_of_size_larger_than_domain_is_done(self):
        combos = Combinations.of_size(["foo", "bar", "baz"], 4)
        assert combos.positions == (0, 1, 2, 3)
        assert combos.done is True

    def test_negative_size_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            Combinations.of_size([1, 2], -1)

    def test_float_size_raises(self):
        with pytest.raises(TypeError):
            Combinations.of_size([1, 2], 1.0)

    def test_accepts_generators(self):
        combos = Combinations.of_size((x for x in "cab"), 2)
        assert combos.domain == ("a", "b", "c")


class TestCombinationsSuccessor:
    """Tests for the strictly-increasing successor rule."""

    def test_empty_domain_cannot_advance(self):
        combos = Combinations.of_size([], 0)
        assert combos._move_to_next_position() is False

    def test_single_element(self):
        combos = Combinations.of_size([1], 1)
        assert combos._move_to_next_position() is False

    def test_pairs_of_four(self):
        combos = Combinations.of_size([1, 2, 3, 4], 2)
        seen = [combos.positions]
        while combos._move_to_next_position():
            seen.append(combos.positions)
        assert seen == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]

    def test_triples_of_four(self):
        combos = Combinations.of_size([1, 2, 3, 4], 3)
        seen = [combos.positions]
        while combos._move_to_next_position():
            seen.append(combos.positions)
        assert seen == [(0, 1, 2), (0, 1, 3), (0, 2, 3), (1, 2, 3)]

    def test_resets_tail_to_consecutive_run(self):
        combos = Combinations.of_size(range(6), 4)
        combos._positions = [0, 3, 4, 5]
        assert combos._move_to_next_position() is True
        assert combos.positions == (1, 2, 3, 4)


class TestCombinationsSizeGrowth:
    """Tests for the all-sizes growth rule."""

    def test_empty_domain(self):
        combos = Combinations.all([])
        assert combos._move_to_next_size() is False

    def test_single_element(self):
        combos = Combinations.all([1])
        assert combos._move_to_next_size() is True
        assert combos.positions == (0,)
        assert combos._move_to_next_size() is False

    def test_resets_regardless_of_current_positions(self):
        combos = Combinations.all([1, 2, 3, 4])
        assert combos._move_to_next_size() is True
        assert combos.positions == (0,)
        combos._positions[0] = 3
        assert combos._move_to_next_size() is True
        assert combos.positions == (0, 1)
        combos._positions[:] = [2, 3]
        assert combos._move_to_next_size() is True
        assert combos.positions == (0, 1, 2)
        assert combos._move_to_next_size() is True
        assert combos.positions == (0, 1, 2, 3)
        assert combos._move_to_next_size() is False


class TestCombinationsNext:
    """End-to-end iteration tests."""

    def test_abc_pairs(self):
        combos = Combinations.of_size(["a", "b", "c"], 2)
        assert next(combos) == ["a", "b"]
        assert next(combos) == ["a", "c"]
        assert next(combos) == ["b", "c"]
        with pytest.raises(StopIteration):
            next(combos)

    def test_all_of_two(self):
        assert list(Combinations.all([0, 1])) == [[], [0], [1], [0, 1]]

    def test_all_normalises_input(self):
        assert list(Combinations.all([1, 1, 2, 3, 5])) == [
            [],
            [1],
            [2],
            [3],
            [5],
            [1, 2],
            [1, 3],
            [1, 5],
            [2, 3],
            [2, 5],
            [3, 5],
            [1, 2, 3],
            [1, 2, 5],
            [1, 3, 5],
            [2, 3, 5],
            [1, 2, 3, 5],
        ]

    def test_duplicates_and_order_ignored(self):
        assert list(Combinations.all([2, 1, 2, 1, 3])) == list(
            Combinations.all([1, 2, 3])
        )

    def test_size_zero_yields_one_empty(self):
        assert list(Combinations.of_size([1, 2, 3], 0)) == [[]]

    def test_empty_domain_size_zero(self):
        combos = Combinations.of_size([], 0)
        assert next(combos) == []
        with pytest.raises(StopIteration):
            next(combos)

    def test_empty_domain_all(self):
        assert list(Combinations.all([])) == [[]]

    def test_size_too_large_yields_nothing(self):
        assert list(Combinations.of_size(["foo", "bar", "baz"], 4)) == []

    def test_termination_is_idempotent(self):
        combos = Combinations.of_size([1, 2], 2)
        assert list(combos) == [[1, 2]]
        for _ in range(3):
            with pytest.raises(StopIteration):
                next(combos)
        assert combos.done is True

    def test_results_are_fresh_lists(self):
        combos = Combinations.of_size([1, 2, 3], 1)
        first = next(combos)
        first.append(99)
        assert next(combos) == [2]
        assert combos.domain == (1, 2, 3)

    def test_unhashable_elements(self):
        assert list(Combinations.of_size([[2], [1], [2]], 2)) == [[[1], [2]]]

    @pytest.mark.parametrize("n", range(7))
    def test_all_yields_power_set_in_order(self, n):
        results = list(Combinations.all(range(n)))
        assert len(results) == 2**n
        keys = [(len(r), r) for r in results]
        assert all(a < b for a, b in zip(keys, keys[1:]))

    @pytest.mark.parametrize("n, k", [(n, k) for n in range(7) for k in range(n + 2)])
    def test_count_and_order_for_fixed_size(self, n, k):
        results = list(Combinations.of_size(range(n), k))
        assert len(results) == math.comb(n, k)
        assert all(a < b for a, b in zip(results, results[1:]))
        assert all(list(r) == sorted(set(r)) for r in results)


class TestCombinationsWithReplacement:
    """Tests for combinations with replacement."""

    def test_all(self):
        combos = CombinationsWithReplacement.all([2, 4, 3, 1, 2, 2, 1])
        assert combos.domain == (1, 2, 3, 4)
        assert combos.positions == ()
        assert combos.all_sizes is True
        assert combos.done is False

    def test_of_size_starts_at_zeros(self):
        combos = CombinationsWithReplacement.of_size([2, 4, 3, 1, 2, 2, 1], 3)
        assert combos.positions == (0, 0, 0)
        assert combos.all_sizes is False

    def test_successor_sets_tail_to_same_value(self):
        combos = CombinationsWithReplacement.of_size(range(4), 3)
        combos._positions = [0, 2, 3]
        assert combos._move_to_next_position() is True
        assert combos.positions == (0, 3, 3)
        assert combos._move_to_next_position() is True
        assert combos.positions == (1, 1, 1)

    def test_size_growth_resets_to_zeros(self):
        combos = CombinationsWithReplacement.all([1, 2])
        assert combos._move_to_next_size() is True
        assert combos.positions == (0,)
        combos._positions[0] = 1
        assert combos._move_to_next_size() is True
        assert combos.positions == (0, 0)
        assert combos._move_to_next_size() is False

    def test_abc_pairs(self):
        assert list(CombinationsWithReplacement.of_size(["a", "b", "c"], 2)) == [
            ["a", "a"],
            ["a", "b"],
            ["a", "c"],
            ["b", "b"],
            ["b", "c"],
            ["c", "c"],
        ]

    def test_all_of_two(self):
        assert list(CombinationsWithReplacement.all(range(2))) == [
            [],
            [0],
            [1],
            [0, 0],
            [0, 1],
            [1, 1],
        ]

    def test_all_of_words(self):
        joined = [" ".join(c) for c in CombinationsWithReplacement.all(["hello", "world"])]
        assert joined == ["", "hello", "world", "hello hello", "hello world", "world world"]

    def test_size_zero_yields_one_empty(self):
        assert list(CombinationsWithReplacement.of_size("abcdefg", 0)) == [[]]
        assert list(CombinationsWithReplacement.all([])) == [[]]

    def test_size_too_large_yields_nothing(self):
        combos = CombinationsWithReplacement.of_size(["foo", "bar", "baz"], 4)
        assert combos.done is True
        assert list(combos) == []

    @pytest.mark.parametrize("n, k", [(n, k) for n in range(1, 6) for k in range(n + 1)])
    def test_count_and_order_for_fixed_size(self, n, k):
        results = list(CombinationsWithReplacement.of_size(range(n), k))
        assert len(results) == math.comb(n + k - 1, k)
        assert all(a < b for a, b in zip(results, results[1:]))
        assert all(list(r) == sorted(r) for r in results)


def test_repr_shows_state():
    combos = Combinations.of_size([3, 1], 1)
    assert repr(combos) == (
        "Combinations(domain=[1, 3], positions=[0], all_sizes=False, done=False)"
    )
