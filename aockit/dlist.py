"""Circular doubly linked list."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class DListNode:
    """A node of a circular doubly linked list; any node may act as the head."""

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: Optional[DListNode] = self
        self.next: Optional[DListNode] = self

    def _require_linked(self) -> None:
        if self.prev is None or self.next is None:
            raise ValueError("node has been removed from its list")

    @staticmethod
    def _insert(before: DListNode, node: DListNode, after: DListNode) -> None:
        before.next = node
        node.prev = before
        node.next = after
        after.prev = node

    def append(self, node: DListNode) -> None:
        """Insert ``node`` directly after this node."""
        self._require_linked()
        self._insert(self, node, self.next)

    def prepend(self, node: DListNode) -> None:
        """Insert ``node`` directly before this node."""
        self._require_linked()
        self._insert(self.prev, node, self)

    def remove(self) -> None:
        """Unlink this node from its list."""
        self._require_linked()
        before, after = self.prev, self.next
        before.next = after
        after.prev = before
        self.prev = None
        self.next = None

    def is_linked(self) -> bool:
        """True when this node shares a list with at least one other node."""
        return self.next is not None and self.next is not self

    def __iter__(self) -> Iterator[Any]:
        """Yield the values of the other nodes, starting after this one."""
        node = self.next
        while node is not None and node is not self:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"DListNode({self.value!r})"