"""Node-based doubly linked list of strings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: str) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class DoublyLinkedList:
    """A doubly linked list with O(1) append/pop at both ends.

    Membership and removal by value walk the list from the head, which is
    the cost profile the benchmark compares against the other containers.

    Args:
        items: Optional initial items, appended in order.
    """

    __slots__ = ("_head", "_tail", "_size")

    def __init__(self, items: Iterable[str] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items or ():
            self.append(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[str]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __contains__(self, value: object) -> bool:
        return self._find(value) is not None

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)})"

    def _find(self, value: object) -> _Node | None:
        node = self._head
        while node is not None:
            if node.value == value:
                return node
            node = node.next
        return None

    def _unlink(self, node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1

    def is_empty(self) -> bool:
        """Check if the list holds no items."""
        return self._size == 0

    def append(self, value: str) -> None:
        """Append an item at the tail."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def appendleft(self, value: str) -> None:
        """Prepend an item at the head."""
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def pop(self) -> str:
        """Remove and return the tail item.

        Raises:
            IndexError: If the list is empty.
        """
        if self._tail is None:
            raise IndexError("pop from an empty DoublyLinkedList")
        node = self._tail
        self._unlink(node)
        return node.value

    def popleft(self) -> str:
        """Remove and return the head item.

        Raises:
            IndexError: If the list is empty.
        """
        if self._head is None:
            raise IndexError("pop from an empty DoublyLinkedList")
        node = self._head
        self._unlink(node)
        return node.value

    def remove(self, value: str) -> bool:
        """Unlink the first item equal to `value`.

        Returns:
            True if an item was removed, False if none matched.
        """
        node = self._find(value)
        if node is None:
            return False
        self._unlink(node)
        return True

    def clear(self) -> None:
        """Drop every item."""
        node = self._head
        while node is not None:
            nxt = node.next
            node.prev = node.next = None
            node = nxt
        self._head = self._tail = None
        self._size = 0
