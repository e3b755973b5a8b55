"""FIFO queue over a growable circular buffer.

Reads that come up empty (``dequeue``, ``peek``, ``get_item``) return ``None``
or the ``default`` they are given instead of raising. Bulk removals clamp
their counts to what the queue holds.
"""

import logging
from typing import (
    Any, Callable, Iterable, Iterator, List, Optional, Protocol, TypeVar,
    Union, runtime_checkable,
)

from aggregate import Aggregate
from queue_iterator import QueueIterator

logger = logging.getLogger(__name__)

T = TypeVar('T')

_INITIAL_CAPACITY = 4


@runtime_checkable
class Cloneable(Protocol):
    def clone(self) -> Any:
        ...


@runtime_checkable
class DistinctCloneable(Protocol):
    def clone_distinct(self) -> Any:
        ...


def _equals(element: Any, item: Any) -> bool:
    return element is item or element == item


# Classes defining clone() satisfy the protocols too; only instances are copied.
def _can_clone(value: Any) -> bool:
    return not isinstance(value, type) and isinstance(value, Cloneable)


def _can_clone_distinct(value: Any) -> bool:
    return not isinstance(value, type) and isinstance(value, DistinctCloneable)


class Queue(Aggregate[T]):
    """FIFO container; unhashable, since it is mutable and defines ``__eq__``."""

    def __init__(self, *items: T) -> None:
        self._data: List[Optional[T]] = [None] * _INITIAL_CAPACITY
        self._head = 0
        self._size = 0
        self._capacity = _INITIAL_CAPACITY
        self.multi_enqueue(items)

    def get_iterator(self) -> QueueIterator[T]:
        return QueueIterator(self)

    def enqueue(self, item: T) -> None:
        if self._size == self._capacity:
            self._grow()
        self._data[self._slot(self._size)] = item
        self._size += 1

    def multi_enqueue(self, items: Iterable[T]) -> None:
        for item in items:
            self.enqueue(item)

    def dequeue(self, default: Any = None) -> Union[T, Any]:
        if self._size == 0:
            return default
        value = self._data[self._head]
        self._data[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._size -= 1
        return value

    def multi_dequeue(self, times: int) -> List[T]:
        if times <= 0:
            return []
        if times > self._size:
            logger.debug("multi_dequeue(%d) clamped to %d items", times, self._size)
        return [self.dequeue() for _ in range(min(times, self._size))]

    def remove(self, index: int, length: int = 1) -> None:
        """Remove ``length`` items starting at ``index``.

        An index outside ``[0, len)`` or a non-positive length leaves the
        queue untouched; ``remove(i, 0)`` removes nothing rather than falling
        back to a single item. A length running past the tail removes up to
        the tail.
        """
        if index < 0 or index >= self._size or length <= 0:
            logger.debug("remove(%d, %d) ignored on queue of %d items",
                         index, length, self._size)
            return
        count = min(length, self._size - index)
        for i in range(index, self._size - count):
            self._data[self._slot(i)] = self._data[self._slot(i + count)]
        for i in range(self._size - count, self._size):
            self._data[self._slot(i)] = None
        self._size -= count

    def get_item(self, index: int, default: Any = None) -> Union[T, Any]:
        if index < 0 or index >= self._size:
            return default
        return self._data[self._slot(index)]

    def peek(self, default: Any = None) -> Union[T, Any]:
        if self._size == 0:
            return default
        return self._data[self._head]

    def clear(self) -> None:
        self._data = [None] * _INITIAL_CAPACITY
        self._head = 0
        self._size = 0
        self._capacity = _INITIAL_CAPACITY

    def contains(self, item: Any,
                 predicate: Optional[Callable[[T], bool]] = None) -> bool:
        return self.index_of(item, predicate) != -1

    def execute(self, transform: Callable[[T], T]) -> None:
        """Replace every item with ``transform(item)``, head to tail.

        The queue is modified in place; a transform that should leave an
        item alone must return it unchanged.
        """
        for i in range(self._size):
            slot = self._slot(i)
            self._data[slot] = transform(self._data[slot])

    def get_length(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [value for value in self if predicate(value)]

    def index_of(self, item: Any,
                 predicate: Optional[Callable[[T], bool]] = None) -> int:
        matches = self._matcher(item, predicate)
        for i in range(self._size):
            if matches(self._data[self._slot(i)]):
                return i
        return -1

    def last_index_of(self, item: Any,
                      predicate: Optional[Callable[[T], bool]] = None) -> int:
        matches = self._matcher(item, predicate)
        for i in range(self._size - 1, -1, -1):
            if matches(self._data[self._slot(i)]):
                return i
        return -1

    def all_indexes_of(self, item: Any,
                       predicate: Optional[Callable[[T], bool]] = None) -> List[int]:
        matches = self._matcher(item, predicate)
        return [i for i in range(self._size) if matches(self._data[self._slot(i)])]

    def clone(self) -> 'Queue[T]':
        """Return a new queue holding the same items in the same order.

        Items exposing ``clone()`` are cloned; other items are shared.
        """
        clone: Queue[T] = Queue()
        for value in self:
            if _can_clone(value):
                clone.enqueue(value.clone())
            else:
                clone.enqueue(value)
        return clone

    def clone_distinct(self) -> 'Queue[T]':
        """Like ``clone()``, keeping only the first of any equal items.

        Kept items are copied with ``clone_distinct()`` when they have it,
        else ``clone()``, else shared.
        """
        clone: Queue[T] = Queue()
        kept: List[T] = []
        for value in self:
            if any(_equals(seen, value) for seen in kept):
                continue
            kept.append(value)
            if _can_clone_distinct(value):
                clone.enqueue(value.clone_distinct())
            elif _can_clone(value):
                clone.enqueue(value.clone())
            else:
                clone.enqueue(value)
        return clone

    def _matcher(self, item: Any,
                 predicate: Optional[Callable[[T], bool]]) -> Callable[[T], bool]:
        if predicate is not None:
            return predicate
        return lambda element: _equals(element, item)

    def _slot(self, index: int) -> int:
        return (self._head + index) % self._capacity

    def _grow(self) -> None:
        new_capacity = self._capacity * 2
        new_data: List[Optional[T]] = [None] * new_capacity
        for i in range(self._size):
            new_data[i] = self._data[self._slot(i)]
        self._data = new_data
        self._head = 0
        self._capacity = new_capacity

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._data[self._slot(i)]

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return self._size == other._size and all(
            _equals(a, b) for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"
