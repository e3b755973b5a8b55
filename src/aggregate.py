from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional

T = TypeVar('T')


class AggregateIterator(ABC, Generic[T]):
    """Forward cursor over the elements of an aggregate.

    Subclasses provide the explicit cursor calls; iterating the cursor with a
    ``for`` loop consumes it through the same calls.
    """

    @abstractmethod
    def first(self) -> None:
        ...

    @abstractmethod
    def has_next(self) -> bool:
        ...

    @abstractmethod
    def next(self) -> Optional[T]:
        ...

    @abstractmethod
    def current(self) -> Optional[T]:
        ...

    def __iter__(self) -> 'AggregateIterator[T]':
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()


class Aggregate(ABC, Generic[T]):
    @abstractmethod
    def get_iterator(self) -> AggregateIterator[T]:
        ...
