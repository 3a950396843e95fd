from __future__ import annotations

from cli.ui_components import format_value, membership_label
from core.services.demo_pipeline import build_sample_cards, build_sample_license


class PlainRecord:
    """Conforms to IdentityRecord structurally, without subclassing."""

    first_name = "Plain"
    last_name = "Record"
    expiration_date = "never"
    address = "Nowhere"

    def move(self, new_address: str) -> None:
        self.address = new_address

    def describe(self) -> str:
        return "plain record"


class Describable:
    """Has `describe` but not the rest of the record contract."""

    def describe(self) -> str:
        return "not a record"


def test_format_value_uses_describe_for_records():
    assert format_value(build_sample_license()).startswith("Name: Jordan Rivera")
    assert format_value(PlainRecord()) == "plain record"


def test_format_value_falls_back_to_repr():
    assert format_value("a") == "'a'"
    assert format_value(None) == "[dim]None[/dim]"
    assert format_value(Describable()).startswith("<")


def test_membership_label():
    assert membership_label(build_sample_cards()[0]) == "id=903000001"
    assert membership_label("z") == "'z'"
    assert membership_label(build_sample_license()).startswith("DriversLicense(")
