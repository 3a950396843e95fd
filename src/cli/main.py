"""Command line driver.

Each command runs one demo from `core.services.demo_pipeline` and renders
its result with Rich. No logic lives here beyond wiring and error mapping.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cli.ui_components import (
    build_checks_table,
    build_list_table,
    build_record_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.errors import PlaygroundError
from core.services.demo_pipeline import (
    run_campus_card_list_demo,
    run_identity_demo,
    run_linked_list_demo,
)

app = typer.Typer(no_args_is_help=True, help="Generics and protocols playground.")

_console = Console()

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Route the root logger through Rich, replacing any previous handler."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _config_error(exc: ValidationError) -> typer.Exit:
    """Print one line per invalid setting, named by its environment variable."""

    prefix = AppSettings.model_config.get("env_prefix", "")
    _console.print("[red]Invalid configuration:[/red]")
    for error in exc.errors():
        name = f"{prefix}{error['loc'][0]}".upper() if error["loc"] else prefix.rstrip("_")
        _console.print(f"  {escape(name)}: {escape(error['msg'])}")
    return typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise _config_error(exc) from exc

    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings

    if settings.show_banner and not no_banner:
        print_banner(_console)


def _linked_list(settings: AppSettings, values: list[str] | None) -> None:
    result = run_linked_list_demo(
        values or settings.sample_values,
        default_value=settings.node_default_value,
    )
    _console.print(build_list_table(result, title="LinkedList[str]"))
    _console.print(build_checks_table(result))


def _records() -> None:
    result = run_identity_demo()
    for snapshot in result.snapshots:
        _console.print(build_record_panel(snapshot))


def _cards() -> None:
    result = run_campus_card_list_demo()
    _console.print(build_list_table(result, title="LinkedList[CampusCard]"))
    _console.print(build_checks_table(result))


def _fail(exc: PlaygroundError) -> typer.Exit:
    logger.debug("Command failed: %s %s", exc.code, exc.details)
    _console.print(f"[red]Error ({exc.code}):[/red] {exc.message}")
    return typer.Exit(code=1)


@app.command(name="linked-list")
def linked_list(
    ctx: typer.Context,
    values: Optional[List[str]] = typer.Argument(
        None,
        help="Values to add (in order). Defaults to PROTOPLAY_SAMPLE_VALUES.",
    ),
) -> None:
    """Build a string linked list and query it."""

    try:
        _linked_list(ctx.obj, values)
    except PlaygroundError as exc:
        raise _fail(exc) from exc


@app.command()
def records() -> None:
    """Describe, move and update the sample ID records."""

    try:
        _records()
    except PlaygroundError as exc:
        raise _fail(exc) from exc


@app.command()
def cards() -> None:
    """Linked list with campus cards as the element type."""

    try:
        _cards()
    except PlaygroundError as exc:
        raise _fail(exc) from exc


@app.command()
def demo(ctx: typer.Context) -> None:
    """Run every demo in sequence."""

    try:
        _linked_list(ctx.obj, None)
        _records()
        _cards()
    except PlaygroundError as exc:
        raise _fail(exc) from exc


def run() -> None:
    app()
