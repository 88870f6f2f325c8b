"""Index matrices built from the lazy generators.

Each function enumerates over ``range(n)`` so that every result *is*
an index vector, and stacks the results into one ``intp`` array with a
row per result, in lexicographic order.  The row count is known in
closed form (:mod:`combinatorial.counting`), so the output is
allocated once and filled as the generator is pulled.

``max_rows`` caps the output.  Because the generators are lazy, a
capped call does no work past the last row it keeps.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator
from itertools import islice

import numpy as np

from ._domain import check_size
from ._typing import IndexArray
from .combinations import Combinations, CombinationsWithReplacement
from .counting import (
    count_combinations,
    count_combinations_with_replacement,
    count_permutations,
)
from .permutations import Permutations


def _fill(
    rows: Iterator[list[int]],
    n_rows: int,
    width: int,
    max_rows: int | None,
) -> IndexArray:
    """Drain up to *n_rows* (capped by *max_rows*) rows into an array."""
    if max_rows is not None:
        max_rows = check_size(max_rows, "max_rows")
        if n_rows > max_rows:
            warnings.warn(
                f"{n_rows} index rows are available but max_rows={max_rows}.  "
                f"Returning the first {max_rows}.",
                UserWarning,
                stacklevel=3,
            )
            n_rows = max_rows

    result = np.empty((n_rows, width), dtype=np.intp)
    for i, row in enumerate(islice(rows, n_rows)):
        result[i] = row
    return result


def combination_indices(
    n: int,
    k: int,
    *,
    replacement: bool = False,
    max_rows: int | None = None,
) -> IndexArray:
    """Return every size-*k* combination of ``range(n)`` as an array.

    Args:
        n: Number of indices to choose from.
        k: Size of each combination.
        replacement: If ``True``, indices may repeat (multisets).
        max_rows: Optional cap on the number of rows returned.

    Returns:
        Array of shape ``(count, k)`` whose rows are strictly (or, with
        replacement, weakly) increasing index vectors in lexicographic
        order.

    Raises:
        ValueError: If *n*, *k* or *max_rows* is negative.

    Warns:
        UserWarning: If the number of combinations exceeds *max_rows*.
    """
    n = check_size(n, "n")
    k = check_size(k, "k")
    if replacement:
        generator = CombinationsWithReplacement.of_size(range(n), k)
        n_rows = count_combinations_with_replacement(n, k)
    else:
        generator = Combinations.of_size(range(n), k)
        n_rows = count_combinations(n, k)
    return _fill(generator, n_rows, k, max_rows)


def permutation_indices(
    n: int,
    k: int | None = None,
    *,
    max_rows: int | None = None,
) -> IndexArray:
    """Return every length-*k* permutation of ``range(n)`` as an array.

    Row 0 is the identity prefix ``[0, 1, ..., k-1]``; the last row is
    ``[n-1, n-2, ..., n-k]``.

    Args:
        n: Number of indices to permute.
        k: Permutation length; defaults to *n*.
        max_rows: Optional cap on the number of rows returned.

    Returns:
        Array of shape ``(count, k)`` of permutation index vectors in
        lexicographic order.

    Raises:
        ValueError: If *n*, *k* or *max_rows* is negative.

    Warns:
        UserWarning: If the number of permutations exceeds *max_rows*.
    """
    n = check_size(n, "n")
    k = n if k is None else check_size(k, "k")
    generator = Permutations.of_size(range(n), k)
    return _fill(generator, count_permutations(n, k), k, max_rows)
