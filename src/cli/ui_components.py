"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles entre `fetch` y `doctor`.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import BatchResult, ResolutionFailure


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar con `--no-banner` en modos no interactivos.
    """

    title = Text("flutter-icons", style="bold cyan")
    subtitle = Text("CupertinoIcons • code points • JSON", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_failures_table(failures: Iterable[ResolutionFailure]) -> Table:
    table = Table(title="Failed icons")
    table.add_column("Icon", style="cyan", no_wrap=True)
    table.add_column("URL", style="magenta")
    table.add_column("Reason", style="red")
    for failure in failures:
        table.add_row(failure.name or "-", failure.url or "-", failure.reason)
    return table


def build_summary_panel(batch: BatchResult) -> Panel:
    """Panel con el recuento resuelto/fallido del lote."""

    body = Text()
    body.append(f"Resolved: {len(batch.icons)}\n", style="green")
    body.append(f"Failed:   {len(batch.failures)}\n", style="red" if batch.failures else "dim")
    body.append(f"Total:    {batch.total}", style="bold")
    return Panel(body, title=Text("Summary", style="bold yellow"), border_style="yellow")
