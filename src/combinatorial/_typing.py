"""Shared type aliases for the combinatorial package."""

from typing import Any, Protocol, TypeVar

import numpy as np
import numpy.typing as npt


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


# Elements of a sorted (combination) domain.
OrderedT = TypeVar("OrderedT", bound=SupportsLessThan)

# Elements of a positional (permutation) domain.
T = TypeVar("T")

# Row-per-result index matrices produced by ``combinatorial.arrays``.
IndexArray = npt.NDArray[np.intp]
