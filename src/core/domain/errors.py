"""Domain error hierarchy.

Base class ``PlaygroundError``. The CLI maps it to a red message and a
non-zero exit code at the command boundary.
"""

from __future__ import annotations


class PlaygroundError(Exception):
    """
    Base exception for every domain error.

    Attributes:
        message (str):  Human readable description.
        code (str):     Stable string code, useful in tests and logs.
        details (dict): Extra context (field, type, etc.).
    """

    def __init__(
        self,
        message: str,
        code: str = "PLAYGROUND_ERROR",
        details: dict | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidValueError(PlaygroundError):
    """A node was built with no value and no default to fall back on."""

    def __init__(self, message: str = "Node value is required", details: dict | None = None):
        super().__init__(message, code="INVALID_VALUE", details=details)


__all__ = [
    "PlaygroundError",
    "InvalidValueError",
]
