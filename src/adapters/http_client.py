"""Transporte HTTP sobre httpx.

- Estandariza base URL, timeouts y headers a partir de `AppSettings`.
- Adjunta `api_key` y `format=json` a cada petición.
- Traduce errores de httpx y respuestas no-2xx a la jerarquía `EchoNestError`.
- Se puede inyectar un `httpx.Client` propio (p.ej. con `httpx.MockTransport`).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

import httpx

from core.config import AppSettings
from core.domain.envelope import envelope_status
from core.domain.errors import MalformedResponse, NetworkError, api_error_for
from core.interfaces.transport import TransportResponse
from core.logging_config import get_logger

logger = get_logger("http")


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults de la aplicación."""

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _decode_json(response: httpx.Response) -> object | None:
    try:
        return response.json()
    except ValueError:
        return None


class HttpxTransport:
    """Implementación de `core.interfaces.transport.Transport` con httpx."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_client(self._settings)

    def _query(self, params: Mapping[str, Any]) -> dict[str, Any]:
        query = dict(params)
        if self._settings.api_key:
            query["api_key"] = self._settings.api_key
        else:
            logger.warning("No Echo Nest API key configured (set ECHONEST_API_KEY)")
        query.setdefault("format", "json")
        return query

    def get(self, path: str, params: Mapping[str, Any]) -> TransportResponse:
        started = time.monotonic()
        try:
            response = self._client.get(path, params=self._query(params))
        except httpx.TimeoutException as exc:
            raise NetworkError(f"Timeout calling {path}: {exc}") from exc
        except httpx.TransportError as exc:
            raise NetworkError(f"Network error calling {path}: {exc}") from exc

        elapsed = time.monotonic() - started
        level = logging.INFO if self._settings.trace_api_calls else logging.DEBUG
        logger.log(level, "GET %s -> %s (%.2fs)", path, response.status_code, elapsed)

        remaining = response.headers.get("X-RateLimit-Remaining")
        if remaining is not None:
            logger.debug("Rate limit remaining: %s", remaining)

        body = _decode_json(response)

        if not response.is_success:
            status = envelope_status(body)
            if status is not None:
                code, message = status
            else:
                code, message = None, response.reason_phrase or "HTTP error"
            raise api_error_for(message, status_code=response.status_code, code=code)

        if body is None:
            raise MalformedResponse(f"{path}: response body is not valid JSON")

        return TransportResponse(
            status_code=response.status_code,
            body=body,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
