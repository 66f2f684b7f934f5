"""Table-driven request dispatch.

One request primitive and two result shapes:

- `fetch_list` builds one result per element of `response[envelope_key]`.
- `fetch_single` builds exactly one result from `response[envelope_key]`,
  falling back to an empty instance when the key is absent or null.

Transport errors propagate unmodified; nothing here retries or paginates.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from core.domain.envelope import unwrap_response
from core.domain.errors import MalformedResponse
from core.domain.models import EchoNestRecord
from core.interfaces.transport import Transport
from core.logging_config import get_logger
from core.services.endpoints import Arity, Endpoint

logger = get_logger("dispatcher")

RecordT = TypeVar("RecordT", bound=EchoNestRecord)


def _request(transport: Transport, path: str, options: Mapping[str, Any] | None) -> dict[str, Any]:
    params = dict(options or {})
    response = transport.get(path, params)
    return unwrap_response(response.body, status_code=response.status_code)


def fetch_list(
    transport: Transport,
    path: str,
    envelope_key: str,
    result_type: type[RecordT],
    options: Mapping[str, Any] | None = None,
) -> list[RecordT]:
    """GET `path` and build one `result_type` per element of the envelope array."""

    payload = _request(transport, path, options).get(envelope_key)
    if payload is None:
        logger.debug("%s: no %r in response, returning empty list", path, envelope_key)
        return []
    if not isinstance(payload, list):
        raise MalformedResponse(
            f"{path}: expected a JSON array under {envelope_key!r}, got {type(payload).__name__}"
        )
    results: list[RecordT] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise MalformedResponse(
                f"{path}: element {index} of {envelope_key!r} is {type(item).__name__}, not an object"
            )
        results.append(result_type.from_payload(item))  # type: ignore[arg-type]
    return results


def fetch_single(
    transport: Transport,
    path: str,
    envelope_key: str,
    result_type: type[RecordT],
    options: Mapping[str, Any] | None = None,
) -> RecordT:
    """GET `path` and build a single `result_type` from the envelope object."""

    payload = _request(transport, path, options).get(envelope_key)
    if payload is not None and not isinstance(payload, dict):
        raise MalformedResponse(
            f"{path}: expected a JSON object under {envelope_key!r}, got {type(payload).__name__}"
        )
    return result_type.from_payload(payload)  # type: ignore[return-value]


def call_endpoint(
    transport: Transport,
    endpoint: Endpoint,
    options: Mapping[str, Any] | None = None,
) -> EchoNestRecord | list[EchoNestRecord]:
    """Route an endpoint to `fetch_list` or `fetch_single` by arity."""

    if endpoint.arity is Arity.LIST:
        return fetch_list(transport, endpoint.path, endpoint.envelope_key, endpoint.result_type, options)
    return fetch_single(transport, endpoint.path, endpoint.envelope_key, endpoint.result_type, options)
