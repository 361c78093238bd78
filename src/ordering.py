"""Three-way comparators for BinaryHeap.

A comparator takes two elements and returns an Ordering (or any int following
the cmp sign convention). The heap only looks at the sign of the result.
"""

from enum import IntEnum
from typing import Any, Callable, Optional, TypeVar

T = TypeVar('T')
K = TypeVar('K')


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: int) -> 'Ordering':
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> 'Ordering':
        return Ordering(-self.value)


Comparator = Callable[[T, T], Ordering]


def natural_order(a: Any, b: Any) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def reverse_order(a: Any, b: Any) -> Ordering:
    return natural_order(b, a)


def reversed_comparator(compare: Comparator) -> Comparator:
    def compare_reversed(a, b):
        return compare(b, a)

    return compare_reversed


def from_less_than(less_than: Callable[[T, T], bool]) -> Comparator:
    """Derive a three-way comparator from a strictly-less predicate.

    The predicate is called at most twice per comparison. Two elements are
    EQUAL when neither is less than the other.
    """
    def compare(a, b):
        if less_than(a, b):
            return Ordering.LESS
        if less_than(b, a):
            return Ordering.GREATER
        return Ordering.EQUAL

    return compare


def from_key(key: Callable[[T], K]) -> Comparator:
    def compare(a, b):
        return natural_order(key(a), key(b))

    return compare


def resolve_comparator(comparator: Optional[Comparator] = None, ascending: bool = True) -> Comparator:
    if comparator is None:
        return natural_order if ascending else reverse_order
    if not callable(comparator):
        raise TypeError(f"comparator must be callable, got {type(comparator).__name__}")
    if ascending:
        return comparator
    return reversed_comparator(comparator)
