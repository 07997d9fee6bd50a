import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.hash_table import is_prime
from algolab.mathematics import (
    bin_pow_iterative,
    bin_pow_recursive,
    gcd,
    get_primes,
    lcm,
    matrix_mul,
)

bases = st.integers(min_value=-50, max_value=50)
exponents = st.integers(min_value=0, max_value=40)


@given(bases, exponents)
def test_recursive_power_matches_builtin(number, n):
    assert bin_pow_recursive(number, n) == number**n


@given(bases, exponents)
def test_iterative_power_matches_builtin(number, n):
    assert bin_pow_iterative(number, n) == number**n


def test_zero_exponent_is_one():
    assert bin_pow_recursive(7, 0) == 1
    assert bin_pow_iterative(7, 0) == 1


@pytest.mark.parametrize("func", [bin_pow_recursive, bin_pow_iterative])
def test_negative_exponent_rejected(func):
    with pytest.raises(ValueError):
        func(2, -1)


@given(st.integers(min_value=0, max_value=10**6), st.integers(min_value=0, max_value=10**6))
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@given(st.integers(min_value=-10**6, max_value=10**6), st.integers(min_value=-10**6, max_value=10**6))
def test_gcd_magnitude_for_any_sign(a, b):
    assert abs(gcd(a, b)) == math.gcd(a, b)


@given(st.integers(min_value=1, max_value=10**4), st.integers(min_value=1, max_value=10**4))
def test_lcm_matches_math(a, b):
    assert lcm(a, b) == math.lcm(a, b)
    assert lcm(a, b) * gcd(a, b) == a * b


def test_lcm_of_zeros_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)


def test_matrix_mul_source_example():
    a = [[1, 2, 3], [3, 1, 2]]
    b = [[1, 2], [3, 2], [1, 2]]
    assert matrix_mul(a, b) == [[10, 12], [8, 12]]


@given(
    st.integers(min_value=1, max_value=5).flatmap(
        lambda n: st.lists(
            st.lists(st.integers(-20, 20), min_size=n, max_size=n), min_size=1, max_size=5
        )
    )
)
def test_identity_is_neutral(a):
    size = len(a[0])
    identity = [[int(i == j) for j in range(size)] for i in range(size)]
    assert matrix_mul(a, identity) == a


def test_matrix_mul_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_mul([[1, 2]], [[1, 2]])


def test_matrix_mul_empty_rejected():
    with pytest.raises(ValueError):
        matrix_mul([], [[1]])


@pytest.mark.parametrize("n", [3, 10, 25, 100, 500])
def test_primes_match_primality_test(n):
    assert get_primes(n) == [p for p in range(n) if is_prime(p)]


def test_small_limit_still_lists_two():
    assert get_primes(2) == [2]