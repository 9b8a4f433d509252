"""
Validation des donnees de film recues par les adaptateurs (REST, GraphQL).

Les contraintes sont decrites par des modeles pydantic ; les erreurs sont
converties en une liste de violations par champ, exploitable par l'appelant
avant tout appel au FilmWriteService.

Contraintes :
- imdbId : "tt" suivi de 7 ou 8 chiffres
- titel : 100 caracteres maximum
- bewertung : entier de 0 a 5
- art : valeur de Filmart (optionnel)
- dauerMin : entier >= 1, borne par l'entier SQL 64 bits (optionnel)
- erscheinungsdatum : date ISO 8601 (optionnel)
- beschreibung.beschreibung : commence par un caractere de mot, 1000 caracteres maximum
- schauspieler : vorname/nachname 40 caracteres maximum, rolle 60 (optionnel)
"""

from collections.abc import Mapping
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from filmcatalog.core.entities.film import Beschreibung, Film, Filmart, Schauspieler
from filmcatalog.core.exceptions import FilmValidationError, Violation
from filmcatalog.core.value_objects import MAX_SQL_INTEGER

MAX_BEWERTUNG = 5

_MODEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BeschreibungDTO(BaseModel):
    """Description d'un film."""

    model_config = _MODEL_CONFIG

    beschreibung: str = Field(pattern=r"^\w", max_length=1000)


class SchauspielerDTO(BaseModel):
    """Acteur d'un film."""

    model_config = _MODEL_CONFIG

    vorname: str = Field(max_length=40)
    nachname: str = Field(max_length=40)
    rolle: Optional[str] = Field(default=None, max_length=60)


class FilmOhneRefDTO(BaseModel):
    """Attributs modifiables d'un film (sans description ni acteurs)."""

    model_config = _MODEL_CONFIG

    imdb_id: str = Field(pattern=r"^tt\d{7,8}$")
    titel: str = Field(max_length=100)
    bewertung: int = Field(ge=0, le=MAX_BEWERTUNG)
    art: Optional[Filmart] = None
    dauer_min: Optional[int] = Field(default=None, ge=1, le=MAX_SQL_INTEGER)
    erscheinungsdatum: Optional[date] = None


class FilmDTO(FilmOhneRefDTO):
    """Film complet pour la creation."""

    beschreibung: BeschreibungDTO
    schauspieler: Optional[list[SchauspielerDTO]] = None


def _violations(error: ValidationError) -> list[Violation]:
    """Convertit les erreurs pydantic en violations (chemin du champ en notation pointee)."""
    return [
        Violation(
            field=".".join(str(part) for part in err["loc"]) or "body",
            message=err["msg"],
        )
        for err in error.errors()
    ]


def _attributes(dto: FilmOhneRefDTO) -> dict[str, Any]:
    return {
        "imdb_id": dto.imdb_id,
        "titel": dto.titel,
        "bewertung": dto.bewertung,
        "art": dto.art,
        "dauer_min": dto.dauer_min,
        "erscheinungsdatum": dto.erscheinungsdatum,
    }


def parse_film(payload: Mapping[str, Any]) -> Film:
    """
    Valide les donnees d'un nouveau film et construit l'entite.

    Args:
        payload: Donnees brutes (cles camelCase ou snake_case)

    Returns:
        Le Film avec sa description et ses acteurs (liste vide par defaut)

    Raises:
        FilmValidationError: Au moins une contrainte n'est pas respectee
    """
    try:
        dto = FilmDTO.model_validate(payload)
    except ValidationError as e:
        raise FilmValidationError(_violations(e)) from e

    return Film(
        **_attributes(dto),
        beschreibung=Beschreibung(beschreibung=dto.beschreibung.beschreibung),
        schauspieler=[
            Schauspieler(vorname=s.vorname, nachname=s.nachname, rolle=s.rolle)
            for s in dto.schauspieler or []
        ],
    )


def parse_film_update(payload: Mapping[str, Any]) -> Film:
    """
    Valide les attributs modifiables d'un film (mise a jour).

    Une description ou des acteurs eventuellement presents sont ignores.

    Raises:
        FilmValidationError: Au moins une contrainte n'est pas respectee
    """
    try:
        dto = FilmOhneRefDTO.model_validate(payload)
    except ValidationError as e:
        raise FilmValidationError(_violations(e)) from e

    return Film(**_attributes(dto), beschreibung=None, schauspieler=None)
