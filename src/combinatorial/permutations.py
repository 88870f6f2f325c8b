"""Lazy lexicographic permutations over a positional element domain.

Swap-based generators (Heap's algorithm, Steinhaus–Johnson–Trotter)
need only one transposition per step but do not produce lexicographic
order.  This module instead keeps two structures side by side:

1. **Available list** — a doubly linked free list of the domain
   indices not yet placed in the current permutation, kept in
   ascending order.  Its head is always the smallest unused index.

2. **Backtracking stack** — the indices of the current permutation,
   in order.

Advancing pops the last index and asks the list to put it back and
hand over the next larger free index in a single step.  If there is
none, that stack depth is exhausted and the index before it is popped
instead.  Once a larger index is found, the remainder of the
permutation is refilled from the head of the list, which is the
smallest possible completion.

Linked list with stale links
----------------------------
Removing node *i* relinks its neighbours to each other but leaves
*i*'s own ``prev``/``next`` untouched.  Re-adding *i* later points
its neighbours back at it, which is only correct while the list looks
exactly as it did right after *i* was removed.  Restores must
therefore happen in the reverse order of removals.  The stack's LIFO
discipline guarantees this; nothing else touches the list.

Identity is positional: the domain is the caller's sequence as given,
neither sorted nor deduplicated, so repeated values produce
permutations that compare equal but differ by position.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Generic

from typing_extensions import Self

from ._config import get_invariant_checks
from ._domain import check_size, ordered_domain
from ._typing import T

logger = logging.getLogger(__name__)

# "No link" marker for list termini.
NIL = -1


# ------------------------------------------------------------------ #
# Available list
# ------------------------------------------------------------------ #
#
# An arena of N + 1 nodes stored as two flat integer lists.  Node 0 is
# a header that is never removed, so unlinking the first real node is
# no different from unlinking any other.  Node i (1..N) stands for
# domain index i - 1.
#
#   start:           0 <-> 1 <-> 2 <-> 3
#   remove(2):       0 <-> 1 <-------> 3      (2 still points at 1, 3)
#   add(2):          0 <-> 1 <-> 2 <-> 3


class AvailableList:
    """Doubly linked free list over node indices ``1..n``."""

    __slots__ = ("_prev", "_next", "_checked")

    def __init__(self, n: int, checked: bool = False) -> None:
        self._prev: list[int] = list(range(-1, n))
        self._next: list[int] = list(range(1, n + 1)) + [NIL]
        self._checked = checked

    def __len__(self) -> int:
        """Number of nodes, present or removed (excluding the header)."""
        return len(self._next) - 1

    def __iter__(self) -> Iterator[int]:
        """Iterate over the nodes currently present, in order."""
        i = self._next[0]
        while i != NIL:
            yield i
            i = self._next[i]

    def __repr__(self) -> str:
        return f"AvailableList({list(self)!r})"

    def _check_node(self, i: int) -> None:
        if not 0 < i < len(self._next):
            raise RuntimeError(
                f"Available list node {i} out of range 1..{len(self._next) - 1}."
            )

    def remove_first(self) -> int | None:
        """Unlink the smallest present node and return it, or ``None``."""
        i = self._next[0]
        if i == NIL:
            return None
        self.remove(i)
        return i

    def remove(self, i: int) -> None:
        """Unlink node *i*, keeping *i*'s own links for a later :meth:`add`."""
        if self._checked:
            self._check_node(i)
        prev = self._prev[i]
        nxt = self._next[i]
        if prev != NIL:
            self._next[prev] = nxt
        if nxt != NIL:
            self._prev[nxt] = prev

    def add(self, i: int) -> None:
        """Relink node *i* between its stored neighbours.

        Must be called in the reverse order of removals.  With checks
        enabled, a restore that would corrupt the list raises
        ``RuntimeError`` instead.
        """
        prev = self._prev[i]
        nxt = self._next[i]
        if self._checked:
            self._check_node(i)
            if self._next[prev] != nxt or (nxt != NIL and self._prev[nxt] != prev):
                raise RuntimeError(
                    f"Available list restore of node {i} out of order: "
                    f"expected {prev} -> {nxt}, list holds "
                    f"{prev} -> {self._next[prev]}."
                )
        if prev != NIL:
            self._next[prev] = i
        if nxt != NIL:
            self._prev[nxt] = i

    def swap_for_next(self, i: int) -> int | None:
        """Restore node *i* and unlink the node after it.

        The list must look exactly as it did when *i* was removed.

        Returns:
            The unlinked successor of *i*, or ``None`` if *i* is last.
        """
        nxt = self._next[i]
        self.add(i)
        if nxt == NIL:
            return None
        self.remove(nxt)
        return nxt


# ------------------------------------------------------------------ #
# Permutations
# ------------------------------------------------------------------ #


class Permutations(Generic[T]):
    """An iterator over permutations in lexicographic order.

    Order is relative to the positions of the elements in the input,
    not to their values.

    Examples:
        >>> list(Permutations.full("xyz"))  # doctest: +NORMALIZE_WHITESPACE
        [['x', 'y', 'z'], ['x', 'z', 'y'], ['y', 'x', 'z'],
         ['y', 'z', 'x'], ['z', 'x', 'y'], ['z', 'y', 'x']]
        >>> list(Permutations.of_size(["Alice", "Eve", "Bob"], 1))
        [['Alice'], ['Eve'], ['Bob']]
        >>> list(Permutations.full([]))
        [[]]
    """

    def __init__(
        self,
        elements: Iterable[T],
        length: int,
        all_sizes: bool,
    ) -> None:
        self._elements: list[T] = ordered_domain(elements)
        self._available = AvailableList(
            len(self._elements), checked=get_invariant_checks()
        )
        self._stack: list[int] = []
        self._length = length
        self._all_sizes = all_sizes
        self._done = False
        if not self._fill_remaining():
            logger.debug(
                "Permutations of length %d over %d elements is empty",
                length,
                len(self._elements),
            )

    @classmethod
    def full(cls, elements: Iterable[T]) -> Self:
        """Permutations of every element of *elements*."""
        elements = ordered_domain(elements)
        return cls(elements, len(elements), all_sizes=False)

    @classmethod
    def of_size(cls, elements: Iterable[T], size: int) -> Self:
        """Permutations of exactly *size* elements.

        Raises:
            TypeError: If *size* is not an integer.
            ValueError: If *size* is negative.
        """
        return cls(elements, check_size(size), all_sizes=False)

    @classmethod
    def all(cls, elements: Iterable[T]) -> Self:
        """Permutations of every length from 0 to ``len(elements)``."""
        return cls(elements, 0, all_sizes=True)

    @property
    def domain(self) -> tuple[T, ...]:
        return tuple(self._elements)

    @property
    def length(self) -> int:
        """Length of the permutation the next pull returns."""
        return self._length

    @property
    def all_sizes(self) -> bool:
        return self._all_sizes

    @property
    def done(self) -> bool:
        return self._done

    def _fill_remaining(self) -> bool:
        """Complete the stack with the smallest free indices.

        Returns ``False`` and marks the iterator done if the target
        length exceeds the domain.
        """
        if self._length > len(self._elements):
            self._done = True
            return False
        while len(self._stack) < self._length:
            i = self._available.remove_first()
            if i is None:
                raise RuntimeError(
                    f"Available list exhausted while filling: "
                    f"list={self._available!r}, stack={self._stack!r}"
                )
            self._stack.append(i)
        return True

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> list[T]:
        if self._done:
            raise StopIteration
        # Node i holds domain index i - 1; node 0 is the list header.
        perm = [self._elements[i - 1] for i in self._stack]

        stack = self._stack
        available = self._available
        while True:
            if not stack:
                # Every depth is exhausted: this length is done.
                if not self._all_sizes:
                    self._done = True
                    break
                self._length += 1
                if self._fill_remaining():
                    logger.debug("Permutations advancing to length %d", self._length)
                break
            last = stack.pop()
            nxt = available.swap_for_next(last)
            if nxt is None:
                continue
            stack.append(nxt)
            if self._fill_remaining():
                break
            # Unreachable while the list is consistent; back out anyway.
            stack.pop()
            available.add(nxt)
        return perm

    def __repr__(self) -> str:
        return (
            f"Permutations(domain={self._elements!r}, stack={self._stack!r}, "
            f"length={self._length}, all_sizes={self._all_sizes}, "
            f"done={self._done})"
        )
