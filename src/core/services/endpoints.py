"""Artist endpoint table.

Every supported call of the Echo Nest v4 artist API is one row here. The
dispatcher and the client facade are driven entirely by this table, so adding
an endpoint is a one-line change.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from core.domain.models import (
    Artist,
    Biography,
    Blog,
    EchoNestRecord,
    Familiarity,
    Genre,
    Hotttnesss,
    Image,
    NewsArticle,
    Review,
    Song,
    Term,
    Urls,
    Video,
)

API_PREFIX = "/api/v4/artist"


class Arity(str, Enum):
    """Whether an endpoint yields one result or a list of them."""

    LIST = "list"
    SINGLE = "single"


@dataclass(frozen=True)
class Endpoint:
    name: str
    path: str
    envelope_key: str
    result_type: type[EchoNestRecord]
    arity: Arity


def _artist(name: str, envelope_key: str, result_type: type[EchoNestRecord], arity: Arity) -> Endpoint:
    return Endpoint(
        name=name,
        path=f"{API_PREFIX}/{name}",
        envelope_key=envelope_key,
        result_type=result_type,
        arity=arity,
    )


ENDPOINTS: tuple[Endpoint, ...] = (
    _artist("biographies", "biographies", Biography, Arity.LIST),
    _artist("blogs", "blogs", Blog, Arity.LIST),
    _artist("extract", "artists", Artist, Arity.LIST),
    _artist("familiarity", "artist", Familiarity, Arity.SINGLE),
    _artist("hotttnesss", "artist", Hotttnesss, Arity.SINGLE),
    _artist("images", "images", Image, Arity.LIST),
    _artist("list_genres", "genres", Genre, Arity.LIST),
    _artist("list_terms", "terms", Term, Arity.LIST),
    _artist("news", "news", NewsArticle, Arity.LIST),
    _artist("profile", "artist", Artist, Arity.SINGLE),
    _artist("search", "artists", Artist, Arity.LIST),
    _artist("reviews", "reviews", Review, Arity.LIST),
    _artist("similar", "artists", Artist, Arity.LIST),
    _artist("songs", "songs", Song, Arity.LIST),
    _artist("suggest", "artists", Artist, Arity.LIST),
    _artist("terms", "terms", Term, Arity.LIST),
    _artist("top_hottt", "artists", Artist, Arity.LIST),
    _artist("top_terms", "terms", Term, Arity.LIST),
    _artist("twitter", "artist", Artist, Arity.SINGLE),
    _artist("urls", "urls", Urls, Arity.SINGLE),
    _artist("video", "video", Video, Arity.LIST),
)

_BY_NAME: dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in ENDPOINTS}


def iter_endpoints() -> Iterator[Endpoint]:
    """Yield the endpoints in table order."""

    return iter(ENDPOINTS)


def get_endpoint(name: str) -> Endpoint:
    """Return the endpoint called `name` (e.g. ``"biographies"``)."""

    try:
        return _BY_NAME[name]
    except KeyError:
        known = ", ".join(_BY_NAME)
        raise KeyError(f"Unknown artist operation {name!r}. Known operations: {known}") from None
