"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La tabla hace de "lista de filas" y el panel de "popup de detalle".
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.filter_mode import FilterMode
from core.domain.models import ClientProfile


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (se omite en modo JSON)."""

    title = Text("client-roster", style="bold cyan")
    subtitle = Text("Clients • Managers • Points", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_clients_table(profiles: Sequence[ClientProfile], mode: FilterMode) -> Table:
    """Una fila por cliente: etiqueta, puntos y flag de manager."""

    table = Table(title=f"Clients ({mode.label()})")
    table.add_column("ID", style="dim", justify="right", no_wrap=True)
    table.add_column("Label", style="cyan")
    table.add_column("Points", style="green", justify="right")
    table.add_column("Manager", style="magenta")
    for profile in profiles:
        table.add_row(
            str(profile.id),
            profile.label,
            str(profile.points),
            "yes" if profile.is_manager else "no",
        )
    return table


def build_client_panel(profile: ClientProfile) -> Panel:
    """Panel de detalle para un cliente."""

    body = Text()
    body.append(f"Name: {profile.name}\n")
    body.append(f"Address: {profile.address}\n")
    body.append(f"Points: {profile.points}")
    title = Text(profile.label or f"Client {profile.id}", style="bold yellow")
    return Panel(body, title=title, border_style="yellow")


def build_error_panel(message: str) -> Panel:
    return Panel(Text(message), title=Text("Failed to load clients", style="bold red"), border_style="red")
