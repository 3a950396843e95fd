"""Personal ID contracts.

Why Protocol:
- Defines the capability set every ID card shares (names, expiration,
  address, move, describe) without a rigid base class.
- `move` and `describe` carry default bodies: a type that subclasses the
  protocol explicitly inherits them, and its own definition wins when present.
- `runtime_checkable` keeps structural checks (`isinstance`) available for
  types that conform without subclassing.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IdentityRecord(Protocol):
    """Contract for a personal ID record."""

    first_name: str
    last_name: str
    expiration_date: str
    address: str

    def move(self, new_address: str) -> None:
        """Change the address on record."""

        self.address = new_address

    def describe(self) -> str:
        """One-line human readable summary of the four core fields."""

        return (
            f"Name: {self.first_name} {self.last_name}, "
            f"Date: {self.expiration_date}, "
            f"Address: {self.address}"
        )


@runtime_checkable
class Identifiable(Protocol):
    """Anything with a stable `id`."""

    id: str
