"""Contrato del transporte HTTP.

El dispatcher solo necesita `get(path, params)`. Cualquier objeto con esa
forma sirve (httpx en producción, stubs en memoria en los tests).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Respuesta 2xx ya decodificada."""

    status_code: int
    body: Any
    headers: Mapping[str, str] = field(default_factory=dict)


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo de transporte.

    Reglas:
    - `get` es bloqueante: una petición por llamada.
    - Adjunta las credenciales (api_key) por su cuenta.
    - Lanza `EchoNestError` (Unauthorized, ApiError, NetworkError,
      MalformedResponse) ante cualquier respuesta no-2xx o fallo de red.
    """

    def get(self, path: str, params: Mapping[str, Any]) -> TransportResponse:
        ...
