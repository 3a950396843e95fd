"""Demo orchestration utilities.

The CLI delegates all exercising of the domain types to these helpers and
only renders the returned results. This keeps side-effects (printing,
tables) out of the core logic and makes every demo testable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, Sequence, TypeVar

from core.domain.identity_records import CampusCard, DriversLicense
from core.domain.linked_list import LinkedList

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class LinkedListDemoResult(Generic[T]):
    """Snapshot of a linked list after the demo operations."""

    added: list[T | None]
    array: list[T]
    size: int
    head_value: T | None
    lookups: list[tuple[int, T | None]] = field(default_factory=list)
    membership: list[tuple[T, bool]] = field(default_factory=list)
    cleared_array: list[T] = field(default_factory=list)
    cleared_size: int = 0
    cleared_head_is_none: bool = True


@dataclass
class RecordSnapshot:
    """A labelled `describe()` output."""

    label: str
    text: str


@dataclass
class IdentityDemoResult:
    """Output of the personal ID walkthrough."""

    drivers_license: DriversLicense
    card: CampusCard
    snapshots: list[RecordSnapshot] = field(default_factory=list)


def _absent_probe(values: Sequence[str]) -> str:
    """Return a string guaranteed not to be in `values`."""

    candidate = "z"
    while candidate in values:
        candidate += "z"
    return candidate


def _exercise(
    ll: LinkedList[Any],
    added: Sequence[Any],
    probes: Sequence[Any],
) -> LinkedListDemoResult[Any]:
    for value in added:
        ll.add(value)

    head = ll.get_head()
    result: LinkedListDemoResult[Any] = LinkedListDemoResult(
        added=list(added),
        array=ll.to_array(),
        size=ll.size,
        head_value=head.value if head is not None else None,
    )

    # Every valid index, then one past the end and one negative.
    for index in [*range(ll.size), ll.size, -1]:
        node = ll.get(index)
        result.lookups.append((index, node.value if node is not None else None))

    for probe in probes:
        result.membership.append((probe, ll.contains(probe)))

    ll.clear()
    result.cleared_array = ll.to_array()
    result.cleared_size = ll.size
    result.cleared_head_is_none = ll.get_head() is None
    return result


def run_linked_list_demo(
    values: Sequence[str],
    *,
    default_value: str = "(empty)",
) -> LinkedListDemoResult[str]:
    """Build a `LinkedList[str]` from `values` and query it.

    Blank entries are added as missing values, so the list's default
    substitutes `default_value` for them.
    """

    ll: LinkedList[str] = LinkedList(default_factory=lambda: default_value)
    added = [v if v.strip() else None for v in values]
    stored = [v if v is not None else default_value for v in added]
    probes = [*dict.fromkeys(stored), _absent_probe(stored)]

    logger.info("Linked list demo with %d value(s)", len(added))
    return _exercise(ll, added, probes)


def build_sample_license() -> DriversLicense:
    return DriversLicense(
        first_name="Jordan",
        last_name="Rivera",
        expiration_date="1-1-30",
        address="North Pole",
        organ_donor=True,
        under_21=True,
        license_class="C",
        id="1110",
    )


def build_sample_cards() -> list[CampusCard]:
    return [
        CampusCard(
            first_name="George",
            last_name="Burdell",
            expiration_date="5-1-27",
            address="North Avenue",
            numeric_id=903000001,
            color="gold",
        ),
        CampusCard(
            first_name="Ada",
            last_name="Lovelace",
            expiration_date="5-1-28",
            address="Tech Square",
            numeric_id=903000002,
            color="navy",
        ),
        CampusCard(
            first_name="Alan",
            last_name="Turing",
            expiration_date="5-1-29",
            address="West Campus",
            numeric_id=903000003,
            is_student=False,
            color="white",
        ),
    ]


def run_identity_demo() -> IdentityDemoResult:
    """Walk through the ID records: describe, move, variant operations."""

    drivers_license = build_sample_license()
    card = build_sample_cards()[0]
    result = IdentityDemoResult(drivers_license=drivers_license, card=card)

    result.snapshots.append(RecordSnapshot("License", drivers_license.describe()))
    drivers_license.move("South Pole")
    drivers_license.set_organ_donor_status(False)
    result.snapshots.append(RecordSnapshot("License after move", drivers_license.describe()))

    result.snapshots.append(RecordSnapshot("Campus card", card.describe()))
    card.mark_graduated()
    result.snapshots.append(RecordSnapshot("Campus card after graduation", card.describe()))

    logger.info("Identity demo produced %d snapshot(s)", len(result.snapshots))
    return result


def run_campus_card_list_demo() -> LinkedListDemoResult[CampusCard]:
    """Same list operations, with campus cards as the element type."""

    cards = build_sample_cards()
    stranger = CampusCard(
        first_name="Not",
        last_name="Enrolled",
        expiration_date="1-1-20",
        address="Elsewhere",
        numeric_id=1,
    )
    ll: LinkedList[CampusCard] = LinkedList()

    logger.info("Campus card list demo with %d card(s)", len(cards))
    return _exercise(ll, cards, [cards[0], stranger])
