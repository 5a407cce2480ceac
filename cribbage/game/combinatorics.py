"""
Subset and combination enumeration.

Both generators walk index combinations of the input in a fixed order and
yield tuples of the selected items, so repeated calls with the same input
produce the same sequence.
"""

from collections.abc import Iterator, Sequence
from itertools import combinations
from typing import TypeVar

T = TypeVar("T")


def non_empty_subsets(items: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """
    Yield every non-empty subset of `items` (2^n - 1 of them).

    Subsets are produced smallest first; within a size, in index order.

    Examples:
        >>> list(non_empty_subsets("ab"))
        [('a',), ('b',), ('a', 'b')]
    """
    for size in range(1, len(items) + 1):
        yield from choose_k(items, size)


def choose_k(items: Sequence[T], k: int) -> Iterator[tuple[T, ...]]:
    """
    Yield every size-k subset of `items` (C(n, k) of them) in index order.

    Args:
        items: Items to choose from
        k: Subset size

    Returns:
        Iterator over tuples of length k
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    for indices in combinations(range(len(items)), k):
        yield tuple(items[i] for i in indices)
