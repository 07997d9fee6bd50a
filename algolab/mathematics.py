"""Integer arithmetic routines: powers, divisors, matrices and primes."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def bin_pow_recursive(number: int, n: int) -> int:
    """Raise ``number`` to the non-negative power ``n`` by recursive squaring."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    if n == 0:
        return 1
    if n % 2:
        return bin_pow_recursive(number, n - 1) * number
    half = bin_pow_recursive(number, n // 2)
    return half * half


def bin_pow_iterative(number: int, n: int) -> int:
    """Raise ``number`` to the non-negative power ``n`` by iterative squaring."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    while n:
        if n & 1:
            result *= number
        n >>= 1
        number *= number
    return result


def _truncated_remainder(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm.

    Remainders truncate toward zero, so negative inputs may give a negative
    divisor.
    """
    while b:
        a, b = b, _truncated_remainder(a, b)
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple, computed as ``a * b / gcd(a, b)``."""
    return a * b // gcd(a, b)


def matrix_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply two matrices given as lists of rows."""
    if not a or not b or len(a[0]) != len(b):
        raise ValueError("Matrices cannot be multiplied")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def get_primes(n: int) -> list[int]:
    """Return 2 followed by every odd prime below ``n`` (sieve of Eratosthenes)."""
    flags = [True] * max(n, 0)
    i = 3
    while i * i <= n:
        if flags[i]:
            for j in range(i * i, n, i):
                flags[j] = False
        i += 2
    return [2] + [i for i in range(3, n, 2) if flags[i]]