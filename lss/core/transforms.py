# lss/core/transforms.py
"""
Vector transformations for building row- or column-oriented sparsity
patterns.

Each elementary operation takes (vector, pivot) and mutates the list in
place. A TransformChain applies its steps in the order they are listed, so
pipelines are composed by listing the same operations in a different order.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, MutableSequence, Tuple

Transform = Callable[[MutableSequence[int], int], None]


def sort_unique(v: MutableSequence[int], pivot: int = 0) -> None:
    """Sort ascending and drop duplicates (pivot is ignored)."""
    v[:] = sorted(set(v))


def push_front(v: MutableSequence[int], pivot: int) -> None:
    v.insert(0, pivot)


def push_back(v: MutableSequence[int], pivot: int) -> None:
    v.append(pivot)


def remove(v: MutableSequence[int], pivot: int) -> None:
    """Delete every occurrence of the pivot."""
    v[:] = [e for e in v if e != pivot]


def offset_shift(v: MutableSequence[int], delta: int) -> None:
    """Add a signed delta to every element (index base conversion)."""
    v[:] = [e + delta for e in v]


@dataclass(frozen=True)
class TransformChain:
    name: str
    steps: Tuple[Transform, ...]

    def apply(self, v: MutableSequence[int], pivot: int) -> MutableSequence[int]:
        for step in self.steps:
            step(v, pivot)
        return v

    __call__ = apply


# Sorted indices vector (CSR-style patterns)
VECTOR_SORTED = TransformChain("sorted", (push_back, sort_unique))

# Sorted indices vector with the pivot (diagonal) placed first
VECTOR_SORTED_DIAGONAL_FIRST = TransformChain(
    "sorted-diagonal-first", (remove, sort_unique, push_front))


def sorted_indices(v: List[int], pivot: int) -> List[int]:
    """Return a new list: `v` plus `pivot`, sorted and unique."""
    return list(VECTOR_SORTED.apply(list(v), pivot))


def sorted_diagonal_first(v: List[int], pivot: int) -> List[int]:
    """Return a new list: `pivot` first, the rest of `v` sorted and unique."""
    return list(VECTOR_SORTED_DIAGONAL_FIRST.apply(list(v), pivot))
