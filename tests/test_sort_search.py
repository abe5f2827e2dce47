"""
Selection sort, binary search and the sortedness check.
"""
import random

import pytest

from sort_search import (
    selection_sort, binary_search, binary_search_window,
    is_sorted,
)


# ── selection_sort ────────────────────────────────────────────────────────────

class TestSelectionSort:
    def test_empty(self):
        a = []
        assert selection_sort(a) is None
        assert a == []

    def test_single(self):
        a = [42]
        selection_sort(a)
        assert a == [42]

    def test_sorts_in_place(self):
        a = [5, 3, 5, 1, 2]
        alias = a
        selection_sort(a)
        assert alias is a
        assert a == [1, 2, 3, 5, 5]

    def test_reverse(self):
        a = list(range(50, 0, -1))
        selection_sort(a)
        assert a == list(range(1, 51))

    def test_negatives_and_duplicates(self):
        a = [0, -2, 5, -8, 3, 0, 1, -2]
        selection_sort(a)
        assert a == [-8, -2, -2, 0, 0, 1, 3, 5]

    def test_all_equal(self):
        a = [7] * 20
        selection_sort(a)
        assert a == [7] * 20

    @pytest.mark.parametrize("seed", range(10))
    def test_random_is_ordered_permutation(self, seed):
        rng = random.Random(seed)
        original = [rng.randrange(1000) for _ in range(rng.randrange(0, 200))]
        a = original[:]
        selection_sort(a)
        assert is_sorted(a)
        assert a == sorted(original)


# ── binary_search ─────────────────────────────────────────────────────────────

class TestBinarySearch:
    def test_empty(self):
        assert binary_search([], 3) is False

    def test_single_hit_and_miss(self):
        assert binary_search([4], 4) is True
        assert binary_search([4], 5) is False

    def test_ends(self):
        a = [1, 2, 3, 5, 5]
        assert binary_search(a, 1)
        assert binary_search(a, 5)

    def test_gaps_and_outside(self):
        a = [1, 2, 3, 5, 5]
        assert not binary_search(a, 4)
        assert not binary_search(a, 0)
        assert not binary_search(a, 6)

    @pytest.mark.parametrize("seed", range(10))
    def test_agrees_with_linear_scan(self, seed):
        rng = random.Random(seed)
        a = sorted(rng.randrange(100) for _ in range(rng.randrange(0, 80)))
        for key in range(-5, 105):
            assert binary_search(a, key) == (key in a)

    def test_window_bounds(self):
        a = [1, 3, 5, 7, 9]
        assert binary_search_window(a, 7, 2, 4)
        assert not binary_search_window(a, 1, 2, 4)
        # empty window
        assert not binary_search_window(a, 5, 3, 2)

    def test_unsorted_does_not_raise(self):
        assert binary_search([9, 1, 8, 2], 2) in (True, False)


# ── is_sorted ─────────────────────────────────────────────────────────────────

class TestIsSorted:
    def test_short(self):
        assert is_sorted([])
        assert is_sorted([1])

    def test_ordered(self):
        assert is_sorted([1, 1, 2])

    def test_inversion(self):
        assert not is_sorted([2, 1])
        assert not is_sorted([1, 3, 2, 4])
