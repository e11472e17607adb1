"""Disjoint-set helpers over persistent parent maps.

The parent map sends every label to its parent; a root is its own parent.
``union`` points one root directly at the other without rank or size
balancing, so chains can grow long; :func:`find` chases parents iteratively.

Example:

>>> parents = make_sets([(0, 0), (1, 0), (2, 0)])
>>> parents = union(parents, find(parents, (0, 0)), find(parents, (1, 0)))
>>> find(parents, (0, 0))
(1, 0)
"""

from typing import Hashable, Iterable, TypeVar

from pyrsistent import pmap
from pyrsistent.typing import PMap

T = TypeVar("T", bound=Hashable)


def make_sets(labels: Iterable[T]) -> PMap[T, T]:
    """One singleton set per label."""
    return pmap({label: label for label in labels})


def find(parents: PMap[T, T], label: T) -> T:
    """Return the root of ``label``'s set (no path compression).

    Raises:
        KeyError: If ``label`` was never added to ``parents``.
    """
    current = label
    parent = parents[current]
    while parent != current:
        current = parent
        parent = parents[current]
    return current


def union(parents: PMap[T, T], root_a: T, root_b: T) -> PMap[T, T]:
    """Merge two sets by making ``root_a``'s parent ``root_b``."""
    return parents.set(root_a, root_b)


def more_than_one_component(parents: PMap[T, T]) -> bool:
    """True iff the labels do not all resolve to the same root."""
    roots = {find(parents, label) for label in parents}
    return len(roots) > 1
