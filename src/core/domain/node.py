"""Single cell of a singly linked list."""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from core.domain.errors import InvalidValueError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Node(Generic[T]):
    """Holds one value and a link to the next node.

    Rules:
    - `value` is fixed at construction; only `next` is relinked by the owning list.
    - A node must not be empty: when `value` is missing, `default_factory`
      provides one, otherwise construction fails with `InvalidValueError`.
    """

    __slots__ = ("_value", "next")

    def __init__(
        self,
        value: T | None = None,
        next: Node[T] | None = None,
        *,
        default_factory: Callable[[], T] | None = None,
    ) -> None:
        if value is None:
            if default_factory is None:
                raise InvalidValueError(
                    "Node value is required and no default is available",
                    details={"next": repr(next)},
                )
            value = default_factory()
            if value is None:
                raise InvalidValueError("Default factory returned no value")
            logger.debug("Node built with default value %r", value)
        self._value: T = value
        self.next = next

    @property
    def value(self) -> T:
        return self._value

    def __repr__(self) -> str:
        # Never walk the chain here.
        return f"Node(value={self._value!r})"
