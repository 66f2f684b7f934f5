"""Modelos del dominio (Pydantic v2).

Cada modelo representa un objeto JSON devuelto por la API de artistas de
Echo Nest (v4). Son registros pasivos:
- inmutables tras construirse (`frozen=True`);
- declaran los campos habituales como opcionales;
- conservan cualquier campo extra que devuelva el servicio (`extra="allow"`),
  accesible como atributo.

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from core.domain.errors import MalformedResponse


class EchoNestRecord(BaseModel):
    """Base común de todos los resultados."""

    model_config = ConfigDict(extra="allow", frozen=True)

    @classmethod
    def from_payload(cls, payload: object) -> "EchoNestRecord":
        """Construye una instancia desde un objeto JSON.

        - `None` (clave ausente o null) => instancia vacía.
        - `dict` => se valida contra el modelo.
        - Cualquier otra cosa => `MalformedResponse`.
        """

        if payload is None:
            return cls()
        if not isinstance(payload, dict):
            raise MalformedResponse(
                f"Expected a JSON object for {cls.__name__}, got {type(payload).__name__}"
            )
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise MalformedResponse(f"Invalid {cls.__name__} payload: {exc}") from exc

    def is_empty(self) -> bool:
        """True si no se pobló ningún campo (payload ausente)."""

        return not self.model_dump(exclude_none=True)


class Biography(EchoNestRecord):
    text: str | None = None
    site: str | None = None
    url: str | None = None
    truncated: bool | None = None
    license: dict[str, Any] | None = None


class Blog(EchoNestRecord):
    id: str | None = None
    name: str | None = None
    url: str | None = None
    summary: str | None = None
    date_posted: str | None = None
    date_found: str | None = None


class Image(EchoNestRecord):
    url: str | None = None
    license: dict[str, Any] | None = None


class NewsArticle(EchoNestRecord):
    id: str | None = None
    name: str | None = None
    url: str | None = None
    summary: str | None = None
    date_posted: str | None = None
    date_found: str | None = None


class Review(EchoNestRecord):
    id: str | None = None
    name: str | None = None
    url: str | None = None
    summary: str | None = None
    release: str | None = None
    image_url: str | None = None
    date_reviewed: str | None = None
    date_found: str | None = None


class Song(EchoNestRecord):
    id: str | None = None
    title: str | None = None
    artist_id: str | None = None
    artist_name: str | None = None


class Term(EchoNestRecord):
    name: str | None = None
    frequency: float | None = None
    weight: float | None = None


class Genre(EchoNestRecord):
    name: str | None = None
    description: str | None = None


class Video(EchoNestRecord):
    id: str | None = None
    title: str | None = None
    url: str | None = None
    site: str | None = None
    image_url: str | None = None
    date_found: str | None = None


class Artist(EchoNestRecord):
    """Artista (profile/search/similar/...).

    Los `bucket` solicitados (biographies, images, terms, ...) llegan como
    campos extra con el JSON original.
    """

    id: str | None = Field(
        default=None,
        description="Echo Nest ID (p.ej. 'ARH6W4X1187B99274F').",
    )
    name: str | None = None
    twitter: str | None = None
    familiarity: float | None = None
    hotttnesss: float | None = None


class Familiarity(EchoNestRecord):
    """Familiaridad del artista (se lee del campo `artist` del envelope)."""

    id: str | None = None
    name: str | None = None
    familiarity: float | None = None


class Hotttnesss(EchoNestRecord):
    """Hotttnesss del artista (se lee del campo `artist` del envelope)."""

    id: str | None = None
    name: str | None = None
    hotttnesss: float | None = None


class Urls(EchoNestRecord):
    official_url: str | None = None
    lastfm_url: str | None = None
    mb_url: str | None = None
    myspace_url: str | None = None
    wikipedia_url: str | None = None
    amazon_url: str | None = None
    itunes_url: str | None = None
    aolmusic_url: str | None = None
