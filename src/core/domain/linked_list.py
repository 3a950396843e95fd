"""Head-insertion singly linked list.

Why a hand-made list (and not `list`/`deque`):
- The point is the traversal logic (get by index, containment, ordered
  export) over a generic element type.

Notes:
- Every mutation keeps `size` equal to the number of reachable nodes.
- `clear` only drops the head reference; unreachable nodes are collected.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from core.domain.node import Node
from core.interfaces.linked_list import LinkedListProtocol, T

logger = logging.getLogger(__name__)


class LinkedList(LinkedListProtocol[T]):
    """Singly linked list where new values become the head."""

    def __init__(self, *, default_factory: Callable[[], T] | None = None) -> None:
        self._head: Node[T] | None = None
        self._size = 0
        self._default_factory = default_factory

    @property
    def head(self) -> Node[T] | None:
        return self._head

    @property
    def size(self) -> int:
        return self._size

    def add(self, value: T | None) -> None:
        # Node construction validates first so a failed add leaves the list untouched.
        self._head = Node(value, self._head, default_factory=self._default_factory)
        self._size += 1
        logger.debug("Added %r (size=%d)", self._head.value, self._size)

    def clear(self) -> None:
        self._head = None
        self._size = 0
        logger.debug("List cleared")

    def get_head(self) -> Node[T] | None:
        return self._head

    def get(self, index: int) -> Node[T] | None:
        if index < 0 or index >= self._size:
            return None

        node = self._head
        count = 0
        while node is not None and count < index:
            node = node.next
            count += 1
        return node

    def contains(self, value: T) -> bool:
        for node in self._iter_nodes():
            if node.value == value:
                return True
        return False

    def to_array(self) -> list[T]:
        return [node.value for node in self._iter_nodes()]

    def _iter_nodes(self) -> Iterator[Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        for node in self._iter_nodes():
            yield node.value

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"LinkedList({self.to_array()!r})"
