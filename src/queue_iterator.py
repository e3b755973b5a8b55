from typing import TypeVar, List, Optional, Iterable

from aggregate import AggregateIterator

T = TypeVar('T')


class QueueIterator(AggregateIterator[T]):
    """Cursor over a snapshot of a queue taken at creation.

    Mutating the queue afterwards does not affect the cursor.
    """

    def __init__(self, queue: Iterable[T]) -> None:
        self._items: List[T] = list(queue)
        self._pointer = 0

    def first(self) -> None:
        self._pointer = 0

    def has_next(self) -> bool:
        return self._pointer < len(self._items)

    def next(self) -> Optional[T]:
        if self._pointer >= len(self._items):
            return None
        value = self._items[self._pointer]
        self._pointer += 1
        return value

    def current(self) -> Optional[T]:
        if self._pointer == 0:
            return None
        return self._items[self._pointer - 1]
