import itertools
import random

import pytest

from pushswap.operations import PushSwap
from pushswap.sorting import radix_sort, solve, sort_five, sort_three


def replay(values, operations):
    state = PushSwap(values)
    for op in operations:
        getattr(state, op)()
    return state


def assert_sorted_by(values, operations):
    state = replay(values, operations)
    assert state.a.values() == sorted(values)
    assert len(state.b) == 0


@pytest.mark.parametrize("perm", list(itertools.permutations([10, 20, 30])))
def test_sort_three_all_permutations(perm):
    state = PushSwap(perm)
    sort_three(state)
    assert state.a.values() == [10, 20, 30]
    assert state.instruction_count() <= 2


def test_sort_three_two_elements_swaps():
    state = PushSwap([2, 1])
    sort_three(state)
    assert state.operations == ["sa"]
    assert state.a.values() == [1, 2]


def test_sort_three_sorted_two_does_nothing():
    state = PushSwap([1, 2])
    sort_three(state)
    assert state.operations == []


def test_sort_three_single_element_does_nothing():
    state = PushSwap([5])
    sort_three(state)
    assert state.operations == []
    assert state.a.values() == [5]


def test_sort_three_reverse_order_moves():
    state = PushSwap([3, 2, 1])
    sort_three(state)
    assert state.operations == ["sa", "rra"]


def test_sort_three_middle_high_moves():
    state = PushSwap([1, 3, 2])
    sort_three(state)
    assert state.operations == ["rra", "sa"]


@pytest.mark.parametrize("perm", list(itertools.permutations([-4, 0, 7, 12, 99])))
def test_sort_five_all_permutations(perm):
    state = PushSwap(perm)
    sort_five(state)
    assert state.a.values() == [-4, 0, 7, 12, 99]
    assert len(state.b) == 0
    assert_sorted_by(perm, state.operations)


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3, 4])))
def test_sort_five_four_elements(perm):
    state = PushSwap(perm)
    sort_five(state)
    assert state.a.values() == [1, 2, 3, 4]
    assert len(state.b) == 0


@pytest.mark.parametrize("size", [6, 7, 16, 33, 100])
def test_radix_sort_random(size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    state = PushSwap(values)
    radix_sort(state)
    assert state.a.values() == sorted(values)
    assert len(state.b) == 0
    assert set(state.operations) <= {"pa", "pb", "ra"}
    assert_sorted_by(values, state.operations)


def test_radix_sort_keeps_sorted_input_sorted():
    values = list(range(8))
    state = PushSwap(values)
    radix_sort(state)
    assert state.a.values() == values


def test_radix_sort_small_uses_sort_three():
    state = PushSwap([2, 1, 3])
    radix_sort(state)
    assert state.operations == ["sa"]


def test_solve_sorted_input_needs_no_moves():
    assert solve([1, 2, 3, 4, 5, 6, 7]) == []


def test_solve_empty_and_single():
    assert solve([]) == []
    assert solve([42]) == []


@pytest.mark.parametrize(
    "values",
    [
        [5, 4, 3, 2, 1, 0],
        [2147483647, -2147483648, 0, 1, -1, 100],
        [9, 1, 8, 2, 7, 3, 6, 4, 5],
    ],
)
def test_solve_result_sorts(values):
    assert_sorted_by(values, solve(values))