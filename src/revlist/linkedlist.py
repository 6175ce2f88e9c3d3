"""Doubly-linked list with O(1) append and in-place reversal."""

import logging
from collections.abc import Iterable, Iterator
from typing import Generic

from revlist.errors import CorruptChainError
from revlist.types import ReleaseHook, T

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """A node in the doubly-linked list."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None


class LinkedList(Generic[T]):
    """
    Doubly-linked list owning a chain of nodes from head to tail.

    Appends are O(1) through the cached tail, lookups walk forward from the
    head, and reversal rewrites both links of every node in a single pass.
    Nodes are never handed out; callers only see the stored values.
    """

    def __init__(
        self,
        items: Iterable[T] | None = None,
        *,
        on_release: ReleaseHook[T] | None = None,
    ) -> None:
        """
        Initialize the list.

        Args:
            items: Optional iterable whose values are appended in order.
            on_release: Called with each payload, head to tail, when the list
                releases its nodes in clear() or on leaving a with-block.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._length = 0
        self._on_release = on_release

        if items is not None:
            for item in items:
                self.add(item)

    def add(self, value: T) -> None:
        """Append value to the end of the list. O(1)."""
        node = Node(value)
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def get(self, index: int) -> T | None:
        """
        Return the value at a zero-based position, walking from the head.

        Returns None when index is negative or not less than the length.
        """
        if index < 0 or index >= self._length:
            return None
        node = self._head
        while index > 0 and node is not None:
            node = node.next
            index -= 1
        return node.value if node is not None else None

    def reverse(self) -> None:
        """Reverse the traversal order in place. O(n) time, O(1) space."""
        if self._length <= 1:
            return

        previous: Node[T] | None = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            current.prev = following
            previous = current
            current = following

        self._head, self._tail = self._tail, self._head
        logger.debug("Reversed list of %d nodes", self._length)

    def clear(self) -> None:
        """
        Release every node, head to tail, leaving the list empty.

        Each node is unlinked and its payload passed to the release hook
        exactly once. If the hook raises, the exception propagates and the
        nodes not yet visited remain in the list.
        """
        released = 0
        node = self._head
        while node is not None:
            following = node.next
            if following is not None:
                following.prev = None
            node.next = None
            node.prev = None

            self._head = following
            if following is None:
                self._tail = None
            self._length -= 1
            released += 1

            if self._on_release is not None:
                self._on_release(node.value)
            node = following

        if released:
            logger.debug("Released %d nodes", released)

    def check_integrity(self) -> None:
        """
        Verify head, tail, length and every link pair agree.

        Raises:
            CorruptChainError: If the chain is not a simple path of exactly
                `length` nodes with mirrored prev/next links.
        """
        if (self._head is None) != (self._tail is None) or (
            (self._head is None) != (self._length == 0)
        ):
            raise CorruptChainError(
                f"Empty-state mismatch: head={self._head is not None}, "
                f"tail={self._tail is not None}, length={self._length}"
            )
        count = 0
        previous: Node[T] | None = None
        node: Node[T] | None = self._head
        while node is not None:
            count += 1
            if count > self._length:
                raise CorruptChainError(
                    f"Chain is longer than length {self._length} (cycle?)"
                )
            if node.prev is not previous:
                raise CorruptChainError(f"Backward link broken at position {count - 1}")
            previous = node
            node = node.next

        if count < self._length:
            raise CorruptChainError(
                f"Chain ends after {count} nodes, expected {self._length}"
            )
        if previous is not self._tail:
            raise CorruptChainError("Last node in chain is not the tail")

    def to_list(self) -> list[T]:
        """Return the values in traversal order as a Python list."""
        return list(self)

    @property
    def length(self) -> int:
        """Number of nodes in the list."""
        return self._length

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._length > 0

    def __iter__(self) -> Iterator[T]:
        """Yield values from head to tail."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        """Yield values from tail to head along the backward links."""
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        return ", ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(value) for value in self)}])"

    def __enter__(self) -> "LinkedList[T]":
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit; releases every node."""
        self.clear()
