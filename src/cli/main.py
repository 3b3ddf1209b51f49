"""CLI entry-point (Typer).

Commands:
- `list`: fetch, reconcile and print the (optionally filtered) client list.
- `show`: print the detail panel for one client.
- `doctor ...`: configuration and connectivity diagnostics.
"""

from __future__ import annotations

import asyncio
import json
from typing import Optional

import typer
from rich.console import Console

from adapters.client_api import ClientApiFetcher
from cli import doctor
from cli.ui_components import (
    build_client_panel,
    build_clients_table,
    build_error_panel,
    print_banner,
)
from core.config import AppSettings
from core.domain.filter_mode import FilterMode
from core.logging_config import configure_logging
from core.services.client_roster import ClientRoster, RosterHooks

app = typer.Typer(no_args_is_help=True, help="Browse the remote client list from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


def _load_roster(*, url: str | None, mode: FilterMode) -> ClientRoster:
    """Run one refresh; exits with code 1 after printing the error panel."""

    settings = AppSettings()
    errors: list[str] = []
    roster = ClientRoster(
        ClientApiFetcher(settings, url=url),
        hooks=RosterHooks(error=errors.append),
        mode=mode,
    )

    async def _refresh() -> bool:
        try:
            return await roster.refresh()
        finally:
            await roster.close()

    if not asyncio.run(_refresh()):
        _console.print(build_error_panel(errors[-1] if errors else "Unknown error"))
        raise typer.Exit(code=1)
    return roster


@app.command(name="list")
def list_clients(
    filter_mode: FilterMode = typer.Option(
        FilterMode.ALL,
        "--filter",
        "-f",
        case_sensitive=False,
        help="Which clients to show.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    url: Optional[str] = typer.Option(None, "--url", help="Override the configured endpoint."),
) -> None:
    """List clients, optionally only managers or non-managers."""

    roster = _load_roster(url=url, mode=filter_mode)
    visible = roster.visible

    if as_json:
        payload = [profile.model_dump(mode="json", by_alias=True) for profile in visible]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    print_banner(_console)
    _console.print(build_clients_table(visible, roster.mode))
    _console.print(f"[dim]{len(visible)} of {len(roster.profiles)} clients[/dim]")


@app.command()
def show(
    client_id: int = typer.Argument(..., help="Client id as returned by the API."),
    url: Optional[str] = typer.Option(None, "--url", help="Override the configured endpoint."),
) -> None:
    """Show name, address and points for one client."""

    roster = _load_roster(url=url, mode=FilterMode.ALL)
    profile = roster.find(client_id)
    if profile is None:
        _console.print(f"[red]No client with id {client_id}.[/red]")
        raise typer.Exit(code=1)
    _console.print(build_client_panel(profile))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
