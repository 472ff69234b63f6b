"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.http_client import build_async_client, fetch_page
from core.config import AppSettings, get_user_env_file
from core.errors import FetchError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            body = await fetch_page(client, settings.index_url)
        return True, f"{len(body)} chars"
    except FetchError as exc:
        return False, str(exc)


def _check_output_dir(output_path: Path) -> tuple[bool, str]:
    """The output file's directory must exist (or be creatable) and be writable."""

    directory = output_path.resolve().parent
    existing = directory
    while not existing.exists():
        existing = existing.parent
    if not os.access(existing, os.W_OK):
        return False, f"{existing} is not writable"
    if existing != directory:
        return True, f"{directory} will be created"
    return True, str(directory)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc

    table = Table(title="flutter-icons Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Index URL", "OK", settings.index_url)
    table.add_row("Detail base URL", "OK", settings.detail_base_url)
    table.add_row("Max concurrency", "OK", str(settings.max_concurrency))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("Index reachable", "OK" if ok_http else "FAIL", detail_http)

    ok_out, detail_out = _check_output_dir(settings.output_path)
    table.add_row("Output directory", "OK" if ok_out else "FAIL", detail_out)

    _console.print(table)

    if not (ok_http and ok_out):
        raise typer.Exit(code=1)
