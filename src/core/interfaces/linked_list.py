"""Linked list contract.

Why Protocol:
- Describes the capability set of a linked list (structural duck typing)
  without tying callers to one concrete implementation.
- Element comparison is part of the contract: `contains` needs `==`, so the
  element type is bound to `SupportsEquality` instead of assuming it.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from core.domain.node import Node


class SupportsEquality(Protocol):
    """Anything that can be compared with `==`."""

    def __eq__(self, other: object, /) -> bool: ...


T = TypeVar("T", bound=SupportsEquality)


@runtime_checkable
class LinkedListProtocol(Protocol[T]):
    """Minimal contract for a head-insertion singly linked list.

    Design rules:
    - Index lookups fail soft: out-of-range returns `None`, never raises.
    - `to_array` always returns a list, empty when there are no elements.
    """

    @property
    def head(self) -> Node[T] | None: ...

    @property
    def size(self) -> int: ...

    def add(self, value: T | None) -> None:
        """Prepend `value`; the new node becomes the head."""

        ...

    def clear(self) -> None:
        """Drop every node."""

        ...

    def get_head(self) -> Node[T] | None:
        """Return the head node, or `None` when empty."""

        ...

    def get(self, index: int) -> Node[T] | None:
        """Return the node at zero-based `index`, or `None` when out of range."""

        ...

    def contains(self, value: T) -> bool:
        """Return True when some node holds a value equal to `value`."""

        ...

    def to_array(self) -> list[T]:
        """Return the values head-to-tail."""

        ...
