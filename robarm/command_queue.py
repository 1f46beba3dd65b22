"""Bounded first-in first-out queue of pending commands."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueFull(OverflowError):
    """Raised when pushing onto a full queue."""


class QueueEmpty(IndexError):
    """Raised when popping from an empty queue."""


class CommandQueue(Generic[T]):
    """A FIFO queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: deque[T] = deque()

    def push(self, item: T) -> None:
        if self.is_full():
            raise QueueFull(f"queue holds at most {self._capacity} items")
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise QueueEmpty("queue is empty")
        return self._items.popleft()

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def free_space(self) -> int:
        return self._capacity - len(self._items)

    def max_length(self) -> int:
        return self._capacity

    def used_space(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)