"""Servicios: tabla de endpoints, dispatcher y fachada `EchoNestClient`."""

from core.services.artist_api import EchoNestClient, create_client
from core.services.dispatcher import call_endpoint, fetch_list, fetch_single
from core.services.endpoints import ENDPOINTS, Arity, Endpoint, get_endpoint, iter_endpoints

__all__ = [
    "ENDPOINTS",
    "Arity",
    "EchoNestClient",
    "Endpoint",
    "call_endpoint",
    "create_client",
    "fetch_list",
    "fetch_single",
    "get_endpoint",
    "iter_endpoints",
]
