"""Closed-form result counts.

Each ``count_*`` function returns exactly the number of results the
matching generator yields, including its boundary conventions: a
fixed size larger than the domain counts zero, and ``k=None`` sums over
every size from 0 to *n* (all-sizes mode).

    count_combinations(n, k)                  C(n, k)
    count_combinations_with_replacement(n, k) C(n + k - 1, k),  k <= n
    count_permutations(n, k)                  n! / (n - k)!
"""

from __future__ import annotations

import math

from ._domain import check_size


def factorial(n: int) -> int:
    """Return ``n!``, the product ``1 * 2 * ... * n`` (``0! == 1``)."""
    return math.factorial(check_size(n, "n"))


def triangle_number(n: int) -> int:
    """Return the *n*-th triangular number ``n * (n + 1) / 2``."""
    n = check_size(n, "n")
    return n * (n + 1) // 2


def count_combinations(n: int, k: int | None = None) -> int:
    """Number of combinations of *k* out of *n* (all sizes if ``None``)."""
    n = check_size(n, "n")
    if k is None:
        return 2**n
    return math.comb(n, check_size(k, "k"))


def _multichoose(n: int, k: int) -> int:
    if k == 0:
        return 1
    if k > n:
        return 0
    return math.comb(n + k - 1, k)


def count_combinations_with_replacement(n: int, k: int | None = None) -> int:
    """Number of size-*k* multisets over *n* elements, with ``k <= n``.

    Sizes above *n* count zero, matching
    :class:`~combinatorial.combinations.CombinationsWithReplacement`.
    """
    n = check_size(n, "n")
    if k is None:
        return sum(_multichoose(n, size) for size in range(n + 1))
    return _multichoose(n, check_size(k, "k"))


def count_permutations(n: int, k: int | None = None) -> int:
    """Number of *k*-permutations of *n* (all lengths if ``None``)."""
    n = check_size(n, "n")
    if k is None:
        return sum(math.perm(n, length) for length in range(n + 1))
    return math.perm(n, check_size(k, "k"))
