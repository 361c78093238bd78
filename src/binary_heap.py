from typing import TypeVar, Generic, List, Iterable, Iterator, Optional, Callable

from ordering import Comparator, from_less_than, resolve_comparator

T = TypeVar('T')

_MISSING = object()


class BinaryHeap(Generic[T]):
    """Array-backed binary heap ordered by a three-way comparator.

    With no comparator the elements' natural order is used. ``ascending=False``
    turns the heap into a max-heap, and inverts a custom comparator as well.
    """

    def __init__(self, comparator: Optional[Comparator] = None, ascending: bool = True) -> None:
        self._compare: Comparator = resolve_comparator(comparator, ascending)
        self._data: List[T] = []

    @classmethod
    def with_less_than(cls, less_than: Callable[[T, T], bool], ascending: bool = True) -> 'BinaryHeap[T]':
        return cls(from_less_than(less_than), ascending)

    @classmethod
    def from_heap(cls, other: 'BinaryHeap[T]') -> 'BinaryHeap[T]':
        return other.copy()

    @classmethod
    def from_array(cls, arr: Iterable[T], comparator: Optional[Comparator] = None,
                   ascending: bool = True) -> 'BinaryHeap[T]':
        """Build a heap from an iterable in O(n).

        Note: Creates a shallow copy of the input.
        """
        heap: BinaryHeap[T] = cls(comparator, ascending)
        heap._data = list(arr)
        for i in range(len(heap._data) // 2 - 1, -1, -1):
            heap._sift_down(i)
        return heap

    def push(self, value: T) -> None:
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop(self, default=None):
        if not self._data:
            return default
        if len(self._data) == 1:
            return self._data.pop()
        result = self._data[0]
        self._data[0] = self._data.pop()
        self._sift_down(0)
        return result

    def peek(self, default=None):
        if not self._data:
            return default
        return self._data[0]

    def size(self) -> int:
        return len(self._data)

    def count(self, value=_MISSING) -> int:
        """Number of elements, or of elements equivalent to ``value``.

        Equivalence is decided by the heap's comparator, not by ``==``.
        """
        if value is _MISSING:
            return len(self._data)
        compare = self._compare
        return sum(1 for item in self._data if compare(item, value) == 0)

    def contains(self, value: T) -> bool:
        compare = self._compare
        return any(compare(item, value) == 0 for item in self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()

    remove_all = clear

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap.__new__(type(self))
        clone._compare = self._compare
        clone._data = self._data.copy()
        return clone

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(data[parent], data[index]) > 0:
                data[index], data[parent] = data[parent], data[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            smallest = index
            left = 2 * index + 1
            right = 2 * index + 2
            if left < size and self._compare(data[left], data[smallest]) < 0:
                smallest = left
            if right < size and self._compare(data[right], data[smallest]) < 0:
                smallest = right
            if smallest == index:
                break
            data[index], data[smallest] = data[smallest], data[index]
            index = smallest

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __contains__(self, value) -> bool:
        return self.contains(value)

    def __copy__(self) -> 'BinaryHeap[T]':
        return self.copy()

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data})"

    def __str__(self) -> str:
        return f"BinaryHeap(size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.pop()
