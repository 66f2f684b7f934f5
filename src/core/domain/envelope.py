"""Envelope JSON de Echo Nest.

Todas las respuestas tienen la forma:

    {"response": {"status": {"code": 0, "message": "Success", "version": "4.2"},
                  "<clave>": ...}}

`status.code != 0` indica error aunque el HTTP sea 200.
"""

from __future__ import annotations

from typing import Any

from core.domain.errors import MalformedResponse, api_error_for


def envelope_status(body: object) -> tuple[int, str] | None:
    """Devuelve `(code, message)` si el cuerpo trae `response.status`."""

    if not isinstance(body, dict):
        return None
    response = body.get("response")
    if not isinstance(response, dict):
        return None
    status = response.get("status")
    if not isinstance(status, dict) or "code" not in status:
        return None
    try:
        code = int(status["code"])
    except (TypeError, ValueError):
        return None
    message = status.get("message")
    return code, message if isinstance(message, str) else "Unknown error."


def unwrap_response(body: object, *, status_code: int | None = None) -> dict[str, Any]:
    """Valida el envelope y devuelve el objeto `response`.

    - Cuerpo sin `response` objeto => `MalformedResponse`.
    - `status.code != 0` => `ApiError` / `Unauthorized`.
    """

    if not isinstance(body, dict) or not isinstance(body.get("response"), dict):
        raise MalformedResponse("Response body is not an Echo Nest envelope ({'response': {...}})")

    status = envelope_status(body)
    if status is not None and status[0] != 0:
        code, message = status
        raise api_error_for(message, status_code=status_code, code=code)
    return body["response"]
