"""
Representations JSON des films pour l'API REST.

Les noms de champs sont exposes en camelCase (imdbId, dauerMin, totalElements).
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from filmcatalog.core.entities.film import Film, Filmart
from filmcatalog.core.value_objects import Pageable, Slice

_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class BeschreibungOut(BaseModel):
    model_config = _MODEL_CONFIG

    beschreibung: str


class SchauspielerOut(BaseModel):
    model_config = _MODEL_CONFIG

    vorname: str
    nachname: str
    rolle: Optional[str] = None


class FilmOut(BaseModel):
    """Film tel que renvoye par GET /rest/{id} et dans les pages de resultats."""

    model_config = _MODEL_CONFIG

    id: int
    version: int
    imdb_id: Optional[str] = None
    titel: str
    bewertung: int
    art: Optional[Filmart] = None
    dauer_min: Optional[int] = None
    erscheinungsdatum: Optional[date] = None
    beschreibung: Optional[BeschreibungOut] = None
    schauspieler: Optional[list[SchauspielerOut]] = None


class PageMeta(BaseModel):
    model_config = _MODEL_CONFIG

    number: int
    size: int
    total_elements: int
    total_pages: int


class FilmPage(BaseModel):
    """Page de resultats de GET /rest."""

    model_config = _MODEL_CONFIG

    content: list[FilmOut]
    page: PageMeta


def film_to_json(film: Film) -> dict[str, Any]:
    """Serialise un film en dictionnaire JSON (cles camelCase)."""
    return FilmOut.model_validate(film).model_dump(by_alias=True, mode="json")


def page_to_json(result: Slice[Film], pageable: Pageable) -> dict[str, Any]:
    """Serialise une page de films avec ses metadonnees de pagination."""
    page = FilmPage(
        content=[FilmOut.model_validate(film) for film in result.content],
        page=PageMeta(
            number=pageable.number,
            size=pageable.size,
            total_elements=result.total_elements,
            total_pages=result.total_pages(pageable.size),
        ),
    )
    return page.model_dump(by_alias=True, mode="json")
