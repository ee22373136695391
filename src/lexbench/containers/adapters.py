"""Adapters for the built-in container kinds."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from lexbench.containers.base import ContainerAdapter, DuplicatePolicy
from lexbench.containers.linked_list import DoublyLinkedList
from lexbench.containers.ringbuffer import RingBufferQueue


class LinkedListAdapter(ContainerAdapter):
    """Doubly linked list: append at the tail, linear search and unlink."""

    kind = "LINKED_LIST"

    def __init__(self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.ALLOW) -> None:
        super().__init__(duplicate_policy)
        self._list = DoublyLinkedList()

    def _push(self, token: str) -> None:
        self._list.append(token)

    def contains(self, token: str) -> bool:
        return token in self._list

    def remove(self, token: str) -> bool:
        return self._list.remove(token)

    def __iter__(self) -> Iterator[str]:
        return iter(self._list)

    def __len__(self) -> int:
        return len(self._list)

    def clear(self) -> None:
        self._list.clear()


class DequeAdapter(ContainerAdapter):
    """Double-ended queue backed by `collections.deque`."""

    kind = "DEQUE"

    def __init__(self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.ALLOW) -> None:
        super().__init__(duplicate_policy)
        self._deque: deque[str] = deque()

    def _push(self, token: str) -> None:
        self._deque.append(token)

    def contains(self, token: str) -> bool:
        return token in self._deque

    def remove(self, token: str) -> bool:
        try:
            self._deque.remove(token)
        except ValueError:
            return False
        return True

    def __iter__(self) -> Iterator[str]:
        return iter(self._deque)

    def __len__(self) -> int:
        return len(self._deque)

    def clear(self) -> None:
        self._deque.clear()


class QueueAdapter(ContainerAdapter):
    """FIFO queue backed by a growable ring buffer.

    Removal by value is not a queue operation; it is supported so the
    queue can run the same workload as the other containers.
    """

    kind = "QUEUE"

    def __init__(
        self,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.SKIP,
        capacity: int = 16,
    ) -> None:
        super().__init__(duplicate_policy)
        self._queue = RingBufferQueue(capacity)

    def _push(self, token: str) -> None:
        self._queue.enqueue(token)

    def contains(self, token: str) -> bool:
        return token in self._queue

    def remove(self, token: str) -> bool:
        return self._queue.remove(token)

    def __iter__(self) -> Iterator[str]:
        return iter(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def clear(self) -> None:
        self._queue.clear()


class StackAdapter(ContainerAdapter):
    """LIFO stack on a Python list: push is `append`, iteration is bottom to top.

    Removal by value is not a stack operation; it is supported so the
    stack can run the same workload as the other containers.
    """

    kind = "STACK"

    def __init__(self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.SKIP) -> None:
        super().__init__(duplicate_policy)
        self._stack: list[str] = []

    def _push(self, token: str) -> None:
        self._stack.append(token)

    def pop(self) -> str:
        """Pop the top of the stack."""
        return self._stack.pop()

    def peek(self) -> str:
        """Return the top of the stack without removing it."""
        return self._stack[-1]

    def contains(self, token: str) -> bool:
        return token in self._stack

    def remove(self, token: str) -> bool:
        try:
            self._stack.remove(token)
        except ValueError:
            return False
        return True

    def __iter__(self) -> Iterator[str]:
        return iter(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def clear(self) -> None:
        self._stack.clear()


class HashSetAdapter(ContainerAdapter):
    """Insertion-ordered hash set on `dict` keys. Only the SKIP policy applies."""

    kind = "HASH_SET"
    supported_policies = frozenset({DuplicatePolicy.SKIP})

    def __init__(self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.SKIP) -> None:
        super().__init__(duplicate_policy)
        self._items: dict[str, None] = {}

    def _push(self, token: str) -> None:
        self._items[token] = None

    def contains(self, token: str) -> bool:
        return token in self._items

    def remove(self, token: str) -> bool:
        return self._items.pop(token, _MISSING) is not _MISSING

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()


_MISSING = object()
