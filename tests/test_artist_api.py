import httpx
import pytest

from conftest import StubTransport, envelope
from core.domain.errors import Unauthorized
from core.domain.models import Artist
from core.services import dispatcher
from core.services.artist_api import EchoNestClient, create_client
from core.services.endpoints import ENDPOINTS


@pytest.mark.parametrize("endpoint", ENDPOINTS, ids=lambda e: e.name)
def test_every_endpoint_has_a_method(endpoint):
    method = getattr(EchoNestClient, f"artist_{endpoint.name}")
    assert callable(method)
    assert endpoint.path in method.__doc__


def test_profile_example():
    transport = StubTransport(envelope(artist={"id": "SOCZMFK12AC468668F", "name": "Weezer"}))
    client = EchoNestClient(transport)

    artist = client.artist_profile({"id": "SOCZMFK12AC468668F"})

    assert isinstance(artist, Artist)
    assert artist.id == "SOCZMFK12AC468668F"
    assert artist.name == "Weezer"
    assert transport.calls == [("/api/v4/artist/profile", {"id": "SOCZMFK12AC468668F"})]


def test_search_example():
    client = EchoNestClient(StubTransport(envelope(artists=[{"name": "Radiohead"}])))

    results = client.artist_search(name="radiohead")

    assert len(results) == 1
    assert results[0].name == "Radiohead"


def test_call_by_name_merges_options_and_keywords():
    transport = StubTransport(envelope(biographies=[]))
    client = EchoNestClient(transport)
    options = {"id": "ARH6W4X1187B99274F"}

    client.call("biographies", options, results=5, start=15)

    assert transport.calls == [
        ("/api/v4/artist/biographies", {"id": "ARH6W4X1187B99274F", "results": 5, "start": 15})
    ]
    assert options == {"id": "ARH6W4X1187B99274F"}


def test_call_unknown_operation():
    with pytest.raises(KeyError):
        EchoNestClient(StubTransport()).call("discography")


@pytest.mark.parametrize("endpoint", ENDPOINTS, ids=lambda e: e.name)
def test_http_401_is_unauthorized_for_every_operation(endpoint, mock_http, monkeypatch):
    unwrapped: list[object] = []
    monkeypatch.setattr(dispatcher, "unwrap_response", lambda body, **kwargs: unwrapped.append(body))
    client = EchoNestClient(mock_http(lambda request: httpx.Response(401, text="Unauthorized")))

    with pytest.raises(Unauthorized):
        getattr(client, f"artist_{endpoint.name}")(id="ARH6W4X1187B99274F")
    assert unwrapped == []


def test_context_manager_closes_transport():
    transport = StubTransport()
    with EchoNestClient(transport) as client:
        client.artist_list_genres()
    assert transport.closed


def test_create_client_uses_httpx_transport(settings):
    from adapters.http_client import HttpxTransport

    with create_client(settings) as client:
        assert isinstance(client.transport, HttpxTransport)


def test_query_options_named_like_call_parameters_are_forwarded():
    transport = StubTransport(envelope(artists=[]))
    client = EchoNestClient(transport)

    client.call("search", None, operation="and", options="or")
    client.artist_search(options="x")

    assert transport.calls == [
        ("/api/v4/artist/search", {"operation": "and", "options": "or"}),
        ("/api/v4/artist/search", {"options": "x"}),
    ]
