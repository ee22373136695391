"""Growable ring buffer used as a FIFO queue."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _next_power_of_two(value: int) -> int:
    return 1 << (value - 1).bit_length()


class RingBufferQueue:
    """A FIFO queue stored in a circular array.

    Capacity is rounded up to a power of two so indices wrap with a mask.
    Unlike a fixed ring buffer it never overwrites: when full, the storage
    doubles and the contents are unwrapped into the new array.

    Args:
        capacity: Initial capacity, rounded up to a power of two.
        items: Optional initial items, enqueued in order.

    Raises:
        ValueError: If capacity is not positive.
    """

    __slots__ = ("_buffer", "_mask", "_left", "_size")

    def __init__(self, capacity: int = 16, items: Iterable[str] | None = None) -> None:
        if capacity <= 0:
            raise ValueError(f"Invalid capacity; expected >0 but got {capacity}")
        capacity = _next_power_of_two(capacity)
        self._buffer: list[str | None] = [None] * capacity
        self._mask = capacity - 1
        self._left = 0
        self._size = 0
        for item in items or ():
            self.enqueue(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        for offset in range(self._size):
            yield self._buffer[(self._left + offset) & self._mask]

    def __contains__(self, value: object) -> bool:
        return self.index(value) >= 0

    def __getitem__(self, item: int) -> str:
        if item < 0:
            item += self._size
        if not 0 <= item < self._size:
            raise IndexError(f"Index out of range; expected <{self._size} but got {item}")
        return self._buffer[(self._left + item) & self._mask]

    def __repr__(self) -> str:
        return f"RingBufferQueue(capacity={self.capacity}, data={self.unwrapped()})"

    @property
    def capacity(self) -> int:
        """Current storage capacity."""
        return self._mask + 1

    def is_empty(self) -> bool:
        """Check if the queue holds no items."""
        return self._size == 0

    def is_full(self) -> bool:
        """Check if the next enqueue will grow the storage."""
        return self._size == self.capacity

    def unwrapped(self) -> list[str]:
        """Copy the contents into a list, oldest first."""
        return list(self)

    def _grow(self) -> None:
        items = self.unwrapped()
        capacity = self.capacity * 2
        self._buffer = items + [None] * (capacity - len(items))
        self._mask = capacity - 1
        self._left = 0

    def enqueue(self, value: str) -> None:
        """Add an item at the back of the queue."""
        if self.is_full():
            self._grow()
        self._buffer[(self._left + self._size) & self._mask] = value
        self._size += 1

    def dequeue(self) -> str:
        """Remove and return the item at the front of the queue.

        Raises:
            IndexError: If the queue is empty.
        """
        if self._size == 0:
            raise IndexError("Cannot dequeue from an empty RingBufferQueue")
        value = self._buffer[self._left]
        self._buffer[self._left] = None
        self._left = (self._left + 1) & self._mask
        self._size -= 1
        return value

    def peekleft(self) -> str:
        """Return the front item without removing it."""
        return self[0]

    def peekright(self) -> str:
        """Return the back item without removing it."""
        return self[-1]

    def index(self, value: object) -> int:
        """Position of the first item equal to `value`, or -1."""
        for offset in range(self._size):
            if self._buffer[(self._left + offset) & self._mask] == value:
                return offset
        return -1

    def remove(self, value: str) -> bool:
        """Remove the first item equal to `value`, keeping FIFO order.

        Items behind the removed one shift forward by one slot.

        Returns:
            True if an item was removed, False if none matched.
        """
        position = self.index(value)
        if position < 0:
            return False
        for offset in range(position, self._size - 1):
            self._buffer[(self._left + offset) & self._mask] = self._buffer[
                (self._left + offset + 1) & self._mask
            ]
        self._buffer[(self._left + self._size - 1) & self._mask] = None
        self._size -= 1
        return True

    def clear(self) -> None:
        """Drop every item, keeping the current capacity."""
        self._buffer = [None] * self.capacity
        self._left = 0
        self._size = 0
