"""Element domains backing the generators.

Combination generators index into a *sorted* domain: one element of
each equal run, ascending.  Permutation generators index into the
caller's sequence exactly as given, so repeated values stay distinct
by position.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable

from ._typing import OrderedT, T


def sorted_domain(elements: Iterable[OrderedT]) -> list[OrderedT]:
    """Return the ascending, duplicate-free domain of *elements*.

    Two elements are duplicates when neither is less than the other, so
    only ``<`` is required (elements need not be hashable).  The first
    element of each equal run in sorted order is kept.
    """
    domain: list[OrderedT] = []
    for element in sorted(elements):
        if not domain or domain[-1] < element:
            domain.append(element)
    return domain


def ordered_domain(elements: Iterable[T]) -> list[T]:
    """Return *elements* as a new list, order and repeats preserved."""
    return list(elements)


def check_size(size: int, name: str = "size") -> int:
    """Validate a requested output size and return it as an ``int``.

    Raises:
        TypeError: If *size* is not an integer.
        ValueError: If *size* is negative.
    """
    size = operator.index(size)
    if size < 0:
        raise ValueError(f"'{name}' must be non-negative, got {size}.")
    return size
