"""Lazy combination generators over a sorted element domain.

Both generators enumerate *position vectors*: lists of indices into
the sorted, duplicate-free domain of the input.  Mapping a position
vector through the domain gives one combination.  Results are pulled
one at a time; the full result set is never materialised.

Two successor rules are used, one per generator:

1. **Without replacement** (:class:`Combinations`) — positions are
   strictly increasing.  Scanning right to left, the first position
   with room to grow (below ``N - 1`` and at least two below its right
   neighbour) is incremented, and every position after it is reset to
   the consecutive run that follows.

2. **With replacement** (:class:`CombinationsWithReplacement`) —
   positions are non-decreasing.  Scanning right to left, the first
   position below ``N - 1`` is incremented and every position after it
   is set to the *same* new value.

In *all-sizes* mode an exhausted size grows by one, starting again
from the smallest vector of the new size, until size ``N`` is done.
The output is therefore ordered by size, then lexicographically.

Requesting a fixed size larger than the domain is not an error: the
generator is simply empty.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic

from typing_extensions import Self

from ._domain import check_size, sorted_domain
from ._typing import OrderedT

logger = logging.getLogger(__name__)


class _PositionIterator(Generic[OrderedT]):
    """Shared driver for the position-vector generators.

    Subclasses supply the smallest vector of a given size and the
    successor rule within one size; this class handles capture,
    size growth and termination.
    """

    def __init__(
        self,
        elements: Iterable[OrderedT],
        positions: list[int],
        all_sizes: bool,
    ) -> None:
        self._elements: list[OrderedT] = sorted_domain(elements)
        self._positions: list[int] = positions
        self._all_sizes = all_sizes
        self._done = len(positions) > len(self._elements)
        if self._done:
            logger.debug(
                "%s of size %d over %d elements is empty",
                type(self).__name__,
                len(positions),
                len(self._elements),
            )

    @classmethod
    def all(cls, elements: Iterable[OrderedT]) -> Self:
        """Create a generator over every size from 0 to the domain size."""
        return cls(elements, [], all_sizes=True)

    @classmethod
    def of_size(cls, elements: Iterable[OrderedT], size: int) -> Self:
        """Create a generator over results of exactly *size* elements.

        Raises:
            TypeError: If *size* is not an integer.
            ValueError: If *size* is negative.
        """
        size = check_size(size)
        return cls(elements, cls._first_positions(size), all_sizes=False)

    @staticmethod
    def _first_positions(size: int) -> list[int]:
        raise NotImplementedError

    def _move_to_next_position(self) -> bool:
        raise NotImplementedError

    def _move_to_next_size(self) -> bool:
        """Grow the position vector by one and reset it to the smallest
        vector of that size.  Returns ``False`` once size ``N`` is done.
        """
        size = len(self._positions)
        if size >= len(self._elements):
            return False
        self._positions = self._first_positions(size + 1)
        logger.debug("%s advancing to size %d", type(self).__name__, size + 1)
        return True

    @property
    def domain(self) -> tuple[OrderedT, ...]:
        """The sorted, duplicate-free elements indexed by positions."""
        return tuple(self._elements)

    @property
    def positions(self) -> tuple[int, ...]:
        """Positions of the result the next pull returns."""
        return tuple(self._positions)

    @property
    def all_sizes(self) -> bool:
        return self._all_sizes

    @property
    def done(self) -> bool:
        return self._done

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> list[OrderedT]:
        if self._done:
            raise StopIteration
        combo = [self._elements[p] for p in self._positions]
        if not self._move_to_next_position():
            if not (self._all_sizes and self._move_to_next_size()):
                self._done = True
        return combo

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(domain={self._elements!r}, "
            f"positions={self._positions!r}, all_sizes={self._all_sizes}, "
            f"done={self._done})"
        )


class Combinations(_PositionIterator[OrderedT]):
    """Combinations without replacement, in lexicographic order.

    Examples:
        >>> list(Combinations.of_size(["a", "b", "c"], 2))
        [['a', 'b'], ['a', 'c'], ['b', 'c']]
        >>> list(Combinations.all([1, 0]))
        [[], [0], [1], [0, 1]]
    """

    @staticmethod
    def _first_positions(size: int) -> list[int]:
        return list(range(size))

    def _move_to_next_position(self) -> bool:
        positions = self._positions
        n = len(self._elements)
        last = len(positions) - 1
        for index in range(last, -1, -1):
            current = positions[index]
            if current >= n - 1:
                continue
            # Strict: leave a gap before the right neighbour.
            if index == last or current < positions[index + 1] - 1:
                positions[index:] = range(current + 1, current + 2 + last - index)
                return True
        return False


class CombinationsWithReplacement(_PositionIterator[OrderedT]):
    """Combinations with replacement (multisets), in lexicographic order.

    Sizes larger than the domain yield nothing, in both fixed and
    all-sizes mode.

    Examples:
        >>> list(CombinationsWithReplacement.of_size([0, 1], 2))
        [[0, 0], [0, 1], [1, 1]]
    """

    @staticmethod
    def _first_positions(size: int) -> list[int]:
        return [0] * size

    def _move_to_next_position(self) -> bool:
        positions = self._positions
        n = len(self._elements)
        for index in range(len(positions) - 1, -1, -1):
            if positions[index] < n - 1:
                positions[index:] = [positions[index] + 1] * (len(positions) - index)
                return True
        return False
