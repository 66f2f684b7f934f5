"""Componentes de UI para CLI (Rich).

Tablas y paneles reutilizables entre comandos; sin lógica de llamadas.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import EchoNestRecord
from core.services.endpoints import Endpoint

_MAX_CELL_CHARS = 80


def _cell(value: object) -> str:
    text = value if isinstance(value, str) else repr(value)
    text = " ".join(text.split())
    if len(text) > _MAX_CELL_CHARS:
        return text[: _MAX_CELL_CHARS - 1].rstrip() + "…"
    return text


def build_endpoints_table(endpoints: Iterable[Endpoint]) -> Table:
    table = Table(title="Artist endpoints")
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Path", style="white")
    table.add_column("Envelope key", style="magenta")
    table.add_column("Result", style="green")
    table.add_column("Arity", style="dim")
    for endpoint in endpoints:
        table.add_row(
            endpoint.name,
            endpoint.path,
            endpoint.envelope_key,
            endpoint.result_type.__name__,
            endpoint.arity.value,
        )
    return table


def build_results_table(results: Sequence[EchoNestRecord], *, title: str) -> Table:
    """Una fila por resultado; columnas = unión de campos poblados."""

    rows = [item.model_dump(mode="json", exclude_none=True) for item in results]
    columns: list[str] = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)

    table = Table(title=f"{title} ({len(rows)})")
    table.add_column("#", style="dim", no_wrap=True)
    for column in columns:
        table.add_column(column, overflow="fold")
    for index, row in enumerate(rows, start=1):
        table.add_row(str(index), *(_cell(row[c]) if c in row else "" for c in columns))
    return table


def build_record_panel(record: EchoNestRecord, *, title: str) -> Panel:
    """Panel clave/valor para resultados únicos (profile, urls, ...)."""

    data = record.model_dump(mode="json", exclude_none=True)
    body = Text()
    if not data:
        body.append("(empty result)", style="dim")
    for key, value in data.items():
        body.append(f"{key}: ", style="bold")
        body.append(_cell(value) + "\n")
    return Panel(body, title=Text(title, style="bold yellow"), border_style="yellow")
