import pytest
from pydantic import ValidationError

from core.domain.errors import MalformedResponse
from core.domain.models import Artist, Familiarity, Term, Urls


def test_from_payload_populates_fields():
    artist = Artist.from_payload({"id": "ARH6W4X1187B99274F", "name": "Radiohead", "hotttnesss": 0.8})
    assert artist.id == "ARH6W4X1187B99274F"
    assert artist.name == "Radiohead"
    assert artist.hotttnesss == 0.8


def test_none_payload_builds_empty_instance():
    urls = Urls.from_payload(None)
    assert isinstance(urls, Urls)
    assert urls.official_url is None
    assert urls.is_empty()


def test_extra_fields_are_kept():
    artist = Artist.from_payload({"name": "Weezer", "biographies": [{"text": "..."}]})
    assert artist.biographies == [{"text": "..."}]
    assert not artist.is_empty()


def test_records_are_frozen():
    term = Term.from_payload({"name": "rock", "weight": 1.0})
    with pytest.raises(ValidationError):
        term.name = "pop"


def test_non_object_payload_is_malformed():
    with pytest.raises(MalformedResponse):
        Term.from_payload(["rock"])


def test_invalid_field_is_malformed():
    with pytest.raises(MalformedResponse):
        Familiarity.from_payload({"familiarity": "very"})
