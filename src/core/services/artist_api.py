"""Client facade for the artist API.

`EchoNestClient` exposes one ``artist_<operation>`` method per row of the
endpoint table (``artist_biographies``, ``artist_profile``, ...). The methods
are generated from `core.services.endpoints.ENDPOINTS`; they all delegate to
`EchoNestClient.call`.

Usage::

    with create_client() as client:
        artist = client.artist_profile(id="ARH6W4X1187B99274F")
        bios = client.artist_biographies({"name": "Weezer", "results": 5})
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from adapters.http_client import HttpxTransport
from core.config import AppSettings
from core.domain.models import EchoNestRecord
from core.interfaces.transport import Transport
from core.services.dispatcher import call_endpoint
from core.services.endpoints import ENDPOINTS, Arity, Endpoint, get_endpoint

Result = EchoNestRecord | list[EchoNestRecord]


def merge_options(options: Mapping[str, Any] | None, params: Mapping[str, Any]) -> dict[str, Any]:
    """Combine an options mapping and keyword params into a fresh dict."""

    merged: dict[str, Any] = dict(options or {})
    merged.update(params)
    return merged


class EchoNestClient:
    """Stateless binding over a `Transport`."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    def call(self, operation: str, options: Mapping[str, Any] | None = None, /, **params: Any) -> Result:
        """Invoke the artist operation named `operation`.

        `operation` and `options` are positional-only, so query options with
        those names can still be passed as keywords.
        """

        return self.call_endpoint(get_endpoint(operation), options, **params)

    def call_endpoint(
        self,
        endpoint: Endpoint,
        options: Mapping[str, Any] | None = None,
        /,
        **params: Any,
    ) -> Result:
        return call_endpoint(self._transport, endpoint, merge_options(options, params))

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "EchoNestClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _operation(endpoint: Endpoint) -> Callable[..., Result]:
    def method(self: EchoNestClient, options: Mapping[str, Any] | None = None, /, **params: Any) -> Result:
        return self.call_endpoint(endpoint, options, **params)

    shape = f"list[{endpoint.result_type.__name__}]" if endpoint.arity is Arity.LIST else endpoint.result_type.__name__
    method.__name__ = f"artist_{endpoint.name}"
    method.__qualname__ = f"EchoNestClient.artist_{endpoint.name}"
    method.__doc__ = f"GET {endpoint.path} -> {shape} (from response.{endpoint.envelope_key})."
    return method


for _endpoint in ENDPOINTS:
    setattr(EchoNestClient, f"artist_{_endpoint.name}", _operation(_endpoint))
del _endpoint


def create_client(settings: AppSettings | None = None) -> EchoNestClient:
    """Build a client over the httpx transport configured by `settings`."""

    return EchoNestClient(HttpxTransport(settings or AppSettings()))
