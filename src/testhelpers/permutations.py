"""
Permutation Engine

Enumerates the orderings of a sequence by backtracking over index slots.

Candidates are visited in original index order, so the output is stable:
    [a, b, c] -> abc, acb, bac, bca, cab, cba

Elements only need to support ==. They do not have to be hashable
or orderable, which lets fixtures hold lists, dicts or dataclasses.
"""

from __future__ import annotations

import math
import warnings
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")

# Sequences longer than this produce more than 40320 orderings.
LARGE_SEQUENCE_WARNING_LENGTH = 8


def _canonical_indices(items: Sequence[T]) -> Tuple[int, ...]:
    """Map every position to the first position holding an equal element."""
    canonical: List[int] = []
    for i, item in enumerate(items):
        for j in range(i):
            if items[j] == item:
                canonical.append(canonical[j])
                break
        else:
            canonical.append(i)
    return tuple(canonical)


def count_orderings(items: Sequence[T]) -> int:
    """
    Number of distinct orderings of `items`.

    Equal elements are interchangeable, so this is the multinomial
    coefficient n! / (k1! * k2! * ...). An empty sequence has none.
    """
    if len(items) == 0:
        return 0

    group_sizes: dict = {}
    for key in _canonical_indices(items):
        group_sizes[key] = group_sizes.get(key, 0) + 1

    total = math.factorial(len(items))
    for size in group_sizes.values():
        total //= math.factorial(size)
    return total


def permutate_sequence(items: Sequence[T], include_original: bool = False) -> List[List[T]]:
    """
    Generate every distinct ordering of `items`.

    Args:
        items: Elements to reorder
        include_original: Keep the ordering equal to `items` itself

    Returns:
        Fresh lists, one per ordering, in backtracking order.
        An empty input gives an empty result.

    Orderings that repeat an earlier one (possible when `items` holds
    equal elements) are emitted once, at their first occurrence.
    """
    size = len(items)
    if size == 0:
        return []

    if size > LARGE_SEQUENCE_WARNING_LENGTH:
        warnings.warn(
            f"Permuting a sequence of {size} elements yields up to "
            f"{math.factorial(size)} orderings",
            UserWarning,
            stacklevel=2,
        )

    canonical = _canonical_indices(items)
    slots: List[int] = [0] * size
    in_use = [False] * size
    seen = set()
    result: List[List[T]] = []

    def fill(slot: int) -> None:
        if slot == size:
            key = tuple(canonical[i] for i in slots)
            if key in seen:
                return
            seen.add(key)
            if include_original or key != canonical:
                result.append([items[i] for i in slots])
            return
        for i in range(size):
            if not in_use[i]:
                in_use[i] = True
                slots[slot] = i
                fill(slot + 1)
                in_use[i] = False

    fill(0)
    return result
