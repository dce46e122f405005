"""A FIFO of integers that also records whether more work is still to come."""

from __future__ import annotations

from collections import deque


class WorkQueue:
    """Integers in arrival order, plus a flag cleared once the producer is done."""

    def __init__(self, reject_zero: bool = False) -> None:
        self.reject_zero = reject_zero
        self._items: deque[int] = deque()
        self._work_left = True

    def enqueue(self, value: int) -> None:
        if self.reject_zero and value == 0:
            raise ValueError("zero may not be enqueued")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the oldest value."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def has_work_left(self) -> bool:
        """True while items remain or the producer has not finished adding."""
        return not self.is_empty() or self._work_left

    def done_adding(self) -> None:
        self._work_left = False

    def __len__(self) -> int:
        return len(self._items)