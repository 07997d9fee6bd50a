import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.searching import binary_search, bogo_max, maximum

SOURCE_VECTOR = [1, 3, 4, 6, 7, 8, 12, 15, 20, 22, 23]


@pytest.mark.parametrize("target", [4, 12, 23])
def test_binary_search_finds_present(target):
    assert binary_search(SOURCE_VECTOR, target) is True


def test_binary_search_misses_absent():
    assert binary_search(SOURCE_VECTOR, 110) is False


def test_binary_search_empty():
    assert binary_search([], 1) is False


@given(st.lists(st.integers(-100, 100)), st.integers(-100, 100))
def test_binary_search_agrees_with_membership(values, target):
    assert binary_search(sorted(values), target) == (target in values)


@given(st.lists(st.integers(), min_size=1))
def test_maximum_matches_builtin(values):
    assert maximum(values) == max(values)


def test_maximum_empty_raises():
    with pytest.raises(ValueError):
        maximum([])


@given(st.lists(st.integers(0, 9), min_size=1, max_size=8), st.integers(0, 1000))
def test_bogo_max_matches_builtin(values, seed):
    assert bogo_max(values, random.Random(seed)) == max(values)


def test_bogo_max_leaves_input_untouched():
    values = [1, 5, 3, 9, 2]
    assert bogo_max(values, random.Random(1)) == 9
    assert values == [1, 5, 3, 9, 2]


def test_bogo_max_single_element():
    assert bogo_max([7]) == 7


def test_bogo_max_empty_raises():
    with pytest.raises(ValueError):
        bogo_max([], random.Random(0))