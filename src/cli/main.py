"""CLI entry point (Typer).

Commands:
- `echonest endpoints`: list the artist endpoint table.
- `echonest artist OPERATION -p key=value ...`: call one artist operation.
- `echonest doctor ...`: diagnostics and API key setup.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from adapters.json_exporter import export_results_json, results_to_jsonable
from cli.doctor import app as doctor_app
from cli.ui_components import build_endpoints_table, build_record_panel, build_results_table
from core.config import AppSettings
from core.domain.errors import EchoNestError
from core.logging_config import get_logger, setup_logging
from core.services.artist_api import create_client
from core.services.endpoints import get_endpoint, iter_endpoints

app = typer.Typer(no_args_is_help=True, help="Echo Nest artist API client.")
app.add_typer(doctor_app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)
logger = get_logger("cli")


def parse_params(values: List[str]) -> dict[str, str | list[str]]:
    """Parse `key=value` pairs; a repeated key becomes a multi-valued param."""

    params: dict[str, str | list[str]] = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got {raw!r}", param_hint="--param")
        if key in params:
            previous = params[key]
            params[key] = [*previous, value] if isinstance(previous, list) else [previous, value]
        else:
            params[key] = value
    return params


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging."),
) -> None:
    settings = AppSettings()
    setup_logging("DEBUG" if verbose else settings.log_level, settings.log_file)


@app.command()
def endpoints() -> None:
    """Show every supported artist operation."""

    _console.print(build_endpoints_table(iter_endpoints()))


@app.command()
def artist(
    operation: str = typer.Argument(..., help="Operation name, e.g. profile, search, biographies."),
    param: Optional[List[str]] = typer.Option(
        None, "--param", "-p", help="Query parameter as key=value (repeatable)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of tables."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write results to a JSON file."),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Override ECHONEST_API_KEY."),
) -> None:
    """Call one artist operation and print the results."""

    try:
        endpoint = get_endpoint(operation)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0]), param_hint="OPERATION") from exc

    options = parse_params(param or [])

    settings = AppSettings()
    if api_key:
        settings = settings.model_copy(update={"api_key": api_key})

    try:
        with create_client(settings) as client:
            results = client.call_endpoint(endpoint, options)
    except EchoNestError as exc:
        logger.debug("artist %s failed", operation, exc_info=True)
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if output is not None:
        path = export_results_json(results=results, output_path=output)
        _err_console.print(f"[green]Saved results to:[/green] {path}")

    if as_json:
        typer.echo(json.dumps(results_to_jsonable(results), ensure_ascii=False, indent=2))
    elif isinstance(results, list):
        _console.print(build_results_table(results, title=operation))
    else:
        _console.print(build_record_panel(results, title=operation))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
