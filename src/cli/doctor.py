"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from core.config import AppSettings, write_user_env_vars
from core.domain.errors import EchoNestError
from core.services.artist_api import create_client

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get("/")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


def _check_api_call(settings: AppSettings) -> tuple[bool, str]:
    """Call a cheap endpoint (list_genres) to validate the API key."""

    try:
        with create_client(settings) as client:
            genres = client.artist_list_genres()
        return True, f"{len(genres)} genres"
    except EchoNestError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="echonest-d2 Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    has_key = bool(settings.api_key)
    table.add_row("API key", "OK" if has_key else "MISSING", "Set" if has_key else "Run `echonest doctor setup-key`")
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    if has_key and ok_http:
        ok_api, detail_api = _check_api_call(settings)
        table.add_row("API call", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)


@app.command(name="setup-key")
def setup_key() -> None:
    """Store the Echo Nest API key in the user config .env."""

    api_key = typer.prompt("Echo Nest API key", hide_input=True).strip()
    if not api_key:
        raise typer.BadParameter("API key is required")

    base_url = typer.prompt("Base URL", default=AppSettings().base_url, show_default=True).strip()

    env_path = write_user_env_vars(
        {
            "ECHONEST_API_KEY": api_key,
            "ECHONEST_BASE_URL": base_url,
        }
    )
    _console.print(f"[green]Saved API config to:[/green] {env_path}")
