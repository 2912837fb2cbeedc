"""Transforms over ordered sequences.

Every function here consumes its input once, in order, and returns a new list.
The input is never modified. Exceptions raised by a caller-supplied callback
propagate unchanged and no partial result is returned.

Example:
    >>> apply(["a", "bb", "ccc"], len)
    [1, 2, 3]
    >>> select([1, 2, 3, 4], lambda x: x > 2)
    [3, 4]
    >>> reject([1, 2, 3, 4], lambda x: x > 2)
    [1, 2]
    >>> unique([1, 2, 2, 3, 1, 4])
    [1, 2, 3, 4]
"""

from typing import Any, Callable, Iterable, List, Set, TypeVar

T = TypeVar("T")
V = TypeVar("V")


def apply(items: Iterable[T], fn: Callable[[T], V]) -> List[V]:
    """Collect the result of calling fn on each element.

    Args:
        items: Elements to transform
        fn: Transform called exactly once per element, in order

    Returns:
        New list where element i is fn(items[i]); same length as items
    """
    return [fn(item) for item in items]


def select(items: Iterable[T], include: Callable[[T], Any]) -> List[T]:
    """Collect the elements for which include returns a truthy value.

    Args:
        items: Elements to filter
        include: Predicate called exactly once per element, in order

    Returns:
        New list of the kept elements in their original relative order
    """
    return [item for item in items if include(item)]


def reject(items: Iterable[T], exclude: Callable[[T], Any]) -> List[T]:
    """Collect the elements for which exclude returns a falsy value.

    This is the complement of select(): for the same predicate, the two
    results together hold every input element exactly once.

    Args:
        items: Elements to filter
        exclude: Predicate called exactly once per element, in order

    Returns:
        New list of the kept elements in their original relative order
    """
    return [item for item in items if not exclude(item)]


def unique(items: Iterable[T]) -> List[T]:
    """Drop repeated elements, keeping the first occurrence of each.

    Hashable elements are tracked in a set, so the common case is linear.
    Unhashable elements (lists, dicts, sets) are compared with == against
    everything emitted so far, and once any have been emitted, hashable
    elements are also compared against them. That way a set and an equal
    frozenset collapse in either order.

    Args:
        items: Elements to deduplicate; must support ==

    Returns:
        New list with each distinct element once, in first-occurrence order
    """
    seen: Set[Any] = set()
    seen_unhashable: List[Any] = []
    out: List[T] = []
    for item in items:
        try:
            hash(item)
        except TypeError:
            if item in out:
                continue
            seen_unhashable.append(item)
            out.append(item)
            continue
        if item in seen or (seen_unhashable and item in seen_unhashable):
            continue
        seen.add(item)
        out.append(item)
    return out
