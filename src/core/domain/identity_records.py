"""Concrete personal ID records (pydantic dataclasses).

Why pydantic dataclasses instead of `BaseModel`:
- `BaseModel`'s metaclass cannot be combined with `Protocol`'s, and the
  records must subclass `IdentityRecord` to inherit its default methods.
- Pydantic dataclasses keep strict validation (`Field` constraints, validated
  assignment) on a plain class hierarchy.

Note:
- Names, expiration and ids are frozen fields; the only mutations are
  `move` and the variant-specific operations below.
"""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import ConfigDict, Field
from pydantic.dataclasses import dataclass

from core.interfaces.identity import Identifiable, IdentityRecord

logger = logging.getLogger(__name__)

NonEmptyStr = Annotated[str, Field(min_length=1, max_length=256)]
# Set once at construction; reassignment raises a `frozen_field` error.
FixedStr = Annotated[str, Field(min_length=1, max_length=256, frozen=True)]

_RECORD_CONFIG = ConfigDict(validate_assignment=True, str_strip_whitespace=True)


@dataclass(config=_RECORD_CONFIG, kw_only=True)
class DriversLicense(IdentityRecord, Identifiable):
    """Driver's license: uses the protocol's default `move` and `describe`."""

    first_name: FixedStr
    last_name: FixedStr
    expiration_date: FixedStr
    address: NonEmptyStr

    organ_donor: bool = False
    under_21: bool = False
    license_class: Annotated[str, Field(min_length=1, max_length=8)] = "C"
    id: FixedStr

    def set_organ_donor_status(self, status: bool) -> None:
        logger.debug("License %s organ donor: %s -> %s", self.id, self.organ_donor, status)
        self.organ_donor = status


@dataclass(config=_RECORD_CONFIG, kw_only=True)
class CampusCard(IdentityRecord):
    """Campus card: hashable on `numeric_id`, with its own `describe`."""

    first_name: FixedStr
    last_name: FixedStr
    expiration_date: FixedStr
    address: NonEmptyStr

    numeric_id: Annotated[int, Field(ge=0, frozen=True)]
    is_student: bool = True
    color: NonEmptyStr = "gold"

    def mark_graduated(self) -> None:
        logger.debug("Card %d graduated", self.numeric_id)
        self.is_student = False

    def describe(self) -> str:
        status = "student" if self.is_student else "alumni"
        return (
            f"{IdentityRecord.describe(self)}, "
            f"ID: {self.numeric_id}, Status: {status}, Color: {self.color}"
        )

    # Equal cards share numeric_id, so they hash equal.
    def __hash__(self) -> int:
        return hash(self.numeric_id)


__all__ = [
    "CampusCard",
    "DriversLicense",
]
