"""Exportación JSON de resultados.

Escribe un modelo o una lista de modelos como JSON UTF-8 con formato estable,
para encadenar con otras herramientas o guardar respuestas.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from core.domain.models import EchoNestRecord


def results_to_jsonable(results: EchoNestRecord | Sequence[EchoNestRecord]) -> Any:
    if isinstance(results, EchoNestRecord):
        return results.model_dump(mode="json", exclude_none=True)
    return [item.model_dump(mode="json", exclude_none=True) for item in results]


def export_results_json(
    *,
    results: EchoNestRecord | Sequence[EchoNestRecord],
    output_path: Path,
) -> Path:
    """Exporta resultados a JSON UTF-8 (indentado, claves ordenadas)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(results_to_jsonable(results), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
