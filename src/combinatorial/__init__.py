"""combinatorial — Lazy combinations and lexicographic permutations.

Three pull-based generators that never materialise their full result
set: combinations without replacement, combinations with replacement,
and permutations in lexicographic order.  Combination generators work
over the sorted, duplicate-free elements of their input; permutation
generators work over the input exactly as given.

Public API:
    .. autosummary::
        combinations_all
        combinations_of_size
        combinations_with_replacement_all
        combinations_with_replacement_of_size
        permutations_all
        permutations_of_size
        permutations_full
        powerset
        factorial
        triangle_number
        count_combinations
        count_combinations_with_replacement
        count_permutations
        combination_indices
        permutation_indices
        get_invariant_checks
        set_invariant_checks
        Combinations
        CombinationsWithReplacement
        Permutations
"""

from __future__ import annotations

from collections.abc import Iterable

from ._config import get_invariant_checks, set_invariant_checks
from ._typing import OrderedT, T
from .arrays import combination_indices, permutation_indices
from .combinations import Combinations, CombinationsWithReplacement
from .counting import (
    count_combinations,
    count_combinations_with_replacement,
    count_permutations,
    factorial,
    triangle_number,
)
from .permutations import Permutations


def combinations_all(elements: Iterable[OrderedT]) -> Combinations[OrderedT]:
    """All combinations of every size, smallest size first."""
    return Combinations.all(elements)


def combinations_of_size(
    elements: Iterable[OrderedT], size: int
) -> Combinations[OrderedT]:
    """All combinations of exactly *size* distinct elements."""
    return Combinations.of_size(elements, size)


def combinations_with_replacement_all(
    elements: Iterable[OrderedT],
) -> CombinationsWithReplacement[OrderedT]:
    """All multisets of every size up to the number of distinct elements."""
    return CombinationsWithReplacement.all(elements)


def combinations_with_replacement_of_size(
    elements: Iterable[OrderedT], size: int
) -> CombinationsWithReplacement[OrderedT]:
    """All multisets of exactly *size* elements."""
    return CombinationsWithReplacement.of_size(elements, size)


def permutations_all(elements: Iterable[T]) -> Permutations[T]:
    """All permutations of every length, shortest first."""
    return Permutations.all(elements)


def permutations_of_size(elements: Iterable[T], size: int) -> Permutations[T]:
    """All permutations of exactly *size* elements."""
    return Permutations.of_size(elements, size)


def permutations_full(elements: Iterable[T]) -> Permutations[T]:
    """All orderings of every element."""
    return Permutations.full(elements)


# The power set is the set of all combinations.
powerset = combinations_all

__all__ = [
    "combinations_all",
    "combinations_of_size",
    "combinations_with_replacement_all",
    "combinations_with_replacement_of_size",
    "permutations_all",
    "permutations_of_size",
    "permutations_full",
    "powerset",
    "factorial",
    "triangle_number",
    "count_combinations",
    "count_combinations_with_replacement",
    "count_permutations",
    "combination_indices",
    "permutation_indices",
    "get_invariant_checks",
    "set_invariant_checks",
    "Combinations",
    "CombinationsWithReplacement",
    "Permutations",
]

__version__ = "0.3.0"
