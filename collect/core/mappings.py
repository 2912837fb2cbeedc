"""Materialize the keys or values of a mapping into a list.

Unlike dict.keys()/dict.values(), the result is a new, independent list rather
than a live view. No ordering is promised: callers should compare results as
sets (keys) or multisets (values).
"""

from typing import List, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def keys(mapping: Mapping[K, V]) -> List[K]:
    """Return every key of mapping exactly once, in no particular order."""
    return list(mapping.keys())


def values(mapping: Mapping[K, V]) -> List[V]:
    """Return one value per key of mapping, in no particular order.

    Equal values stored under different keys each appear in the result.
    """
    return list(mapping.values())
