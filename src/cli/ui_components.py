"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels can be reused across commands.
"""

from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.identity_records import CampusCard
from core.interfaces.identity import IdentityRecord
from core.services.demo_pipeline import LinkedListDemoResult, RecordSnapshot


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Can be switched off for non-interactive runs (`--no-banner`).
    """

    title = Text("PROTOCOL PLAYGROUND", style="bold cyan")
    subtitle = Text("Generics • Linked lists • Protocols", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def format_value(value: Any) -> str:
    """Render a list value; ID records use their `describe()`."""

    if value is None:
        return "[dim]None[/dim]"
    if isinstance(value, IdentityRecord):
        return value.describe()
    return repr(value)


def membership_label(value: Any) -> str:
    # Cards are long; the id is enough to tell them apart.
    if isinstance(value, CampusCard):
        return f"id={value.numeric_id}"
    return repr(value)


def build_list_table(result: LinkedListDemoResult[Any], *, title: str) -> Table:
    """Values head-to-tail, one row per index."""

    table = Table(title=Text(title))
    table.add_column("Index", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for index, value in enumerate(result.array):
        table.add_row(str(index), format_value(value))
    table.caption = f"size={result.size}, head={format_value(result.head_value)}"
    return table


def build_checks_table(result: LinkedListDemoResult[Any]) -> Table:
    """Lookups, membership probes and the state after `clear()`."""

    table = Table(title="Checks")
    table.add_column("Call", style="cyan")
    table.add_column("Result", style="green")

    for index, value in result.lookups:
        table.add_row(f"get({index})", format_value(value))
    for probe, found in result.membership:
        table.add_row(f"contains({membership_label(probe)})", str(found))
    table.add_row("clear() -> to_array()", repr(result.cleared_array))
    table.add_row("clear() -> size", str(result.cleared_size))
    table.add_row("clear() -> get_head() is None", str(result.cleared_head_is_none))
    return table


def build_record_panel(snapshot: RecordSnapshot) -> Panel:
    """Panel for one `describe()` output."""

    title = Text(snapshot.label, style="bold yellow")
    return Panel(Text(snapshot.text), title=title, border_style="yellow")
