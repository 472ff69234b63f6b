"""CLI principal (Typer).

Comandos:
- `fetch`: descarga índice + detalles y escribe el JSON de iconos.
- `doctor`: diagnósticos de entorno (ver `cli.doctor`).

La CLI solo presenta; toda la agregación vive en `core.services.icon_pipeline`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn

from adapters.json_exporter import export_icons_json
from cli import doctor
from cli.ui_components import build_failures_table, build_summary_panel, print_banner
from core.config import AppSettings
from core.domain.models import BatchResult
from core.errors import ExportError, IconScraperError
from core.log import configure_logging
from core.services.icon_pipeline import PipelineHooks, fetch_icons

app = typer.Typer(no_args_is_help=True, help="Scrape CupertinoIcons code points into a JSON file.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _collect(settings: AppSettings, progress: Progress) -> BatchResult:
    task_id = progress.add_task("Resolving icons", total=None)

    def on_candidates(total: int) -> None:
        progress.update(task_id, total=total)

    def on_done(_: object) -> None:
        progress.advance(task_id)

    hooks = PipelineHooks(
        candidates_found=on_candidates,
        icon_resolved=on_done,
        icon_failed=on_done,
    )
    return asyncio.run(fetch_icons(settings, hooks=hooks))


@app.command()
def fetch(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output JSON file."),
    index_url: Optional[str] = typer.Option(None, "--index-url", help="Override the index page URL."),
    max_concurrency: Optional[int] = typer.Option(
        None,
        "--max-concurrency",
        "-c",
        min=1,
        max=500,
        help="Detail pages fetched in parallel.",
    ),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.001, help="Per-request timeout (seconds)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the banner."),
    show_failures: bool = typer.Option(False, "--show-failures", help="Print a table of failed icons."),
) -> None:
    """Fetch every CupertinoIcons constant and write `icon_name`/`icon_code` pairs."""

    overrides = {
        "output_path": output,
        "index_url": index_url,
        "max_concurrency": max_concurrency,
        "http_timeout_seconds": timeout,
    }
    try:
        settings = AppSettings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc
    configure_logging("DEBUG" if verbose else settings.log_level)

    if not no_banner:
        print_banner(_console)

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            console=_err_console,
            transient=True,
        ) as progress:
            batch = _collect(settings, progress)
    except IconScraperError as exc:
        _err_console.print(f"[red]Error fetching icons:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc

    if show_failures and batch.failures:
        _err_console.print(build_failures_table(batch.failures))
    _console.print(build_summary_panel(batch))

    try:
        count = export_icons_json(icons=batch.icons, output_path=settings.output_path)
    except ExportError as exc:
        _err_console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        raise typer.Exit(code=1) from exc

    _console.print(f"Successfully wrote icons to {escape(str(settings.output_path))}, size: {count}", soft_wrap=True)


def run() -> None:
    app()
