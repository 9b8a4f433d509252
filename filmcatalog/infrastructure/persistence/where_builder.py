"""
Construction de la clause WHERE pour la recherche de films.

Fonction pure : Suchparameter -> liste de predicats SQLAlchemy combines par AND.

Exemple :
    Suchparameter(titel="a", bewertung="4", art="THRILLER")
    -> WHERE lower(titel) LIKE '%a%' AND bewertung >= 4 AND art = 'THRILLER'
"""

from datetime import date
from typing import Any, Optional

from loguru import logger
from sqlalchemy.sql.elements import ColumnElement

from filmcatalog.core.entities.film import Filmart
from filmcatalog.core.value_objects import MAX_SQL_INTEGER, Suchparameter
from filmcatalog.infrastructure.persistence.models import FilmModel


def _to_int(value: Any) -> Optional[int]:
    """Convertit en entier, None si non numerique ou hors de l'intervalle SQL 64 bits."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except ValueError:
            return None
    if not -MAX_SQL_INTEGER - 1 <= number <= MAX_SQL_INTEGER:
        return None
    return number


def _to_date(value: Any) -> Optional[date]:
    """Convertit une date ISO (AAAA-MM-JJ), None si invalide."""
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def build_where(suchparameter: Suchparameter) -> list[ColumnElement[bool]]:
    """
    Construit les predicats de recherche.

    - imdb_id : egalite
    - titel : sous-chaine insensible a la casse
    - bewertung : note minimale (>=)
    - art : egalite
    - dauer_min : duree maximale (<=)
    - erscheinungsdatum : date minimale (>=)

    Les valeurs numeriques ou dates non convertibles, ainsi que les entiers
    hors de l'intervalle SQL 64 bits, sont ignores (aucun predicat) :
    ce n'est pas une erreur.

    Args:
        suchparameter: Criteres de recherche (valeurs brutes)

    Returns:
        Liste de predicats, vide si aucun critere exploitable
    """
    if suchparameter.is_empty():
        return []

    where: list[ColumnElement[bool]] = []

    if suchparameter.imdb_id is not None:
        where.append(FilmModel.imdb_id == str(suchparameter.imdb_id))

    if suchparameter.titel is not None:
        where.append(FilmModel.titel.icontains(str(suchparameter.titel), autoescape=True))

    if suchparameter.bewertung is not None:
        bewertung = _to_int(suchparameter.bewertung)
        if bewertung is not None:
            where.append(FilmModel.bewertung >= bewertung)
        else:
            logger.debug(
                f"bewertung ignoree (non numerique ou hors limites) : {suchparameter.bewertung!r}"
            )

    if suchparameter.art is not None:
        art = suchparameter.art.value if isinstance(suchparameter.art, Filmart) else str(suchparameter.art)
        where.append(FilmModel.art == art)

    if suchparameter.dauer_min is not None:
        dauer_min = _to_int(suchparameter.dauer_min)
        if dauer_min is not None:
            where.append(FilmModel.dauer_min <= dauer_min)
        else:
            logger.debug(
                f"dauer_min ignoree (non numerique ou hors limites) : {suchparameter.dauer_min!r}"
            )

    if suchparameter.erscheinungsdatum is not None:
        erscheinungsdatum = _to_date(suchparameter.erscheinungsdatum)
        if erscheinungsdatum is not None:
            where.append(FilmModel.erscheinungsdatum >= erscheinungsdatum)
        else:
            logger.debug(
                f"erscheinungsdatum ignoree (date invalide) : {suchparameter.erscheinungsdatum!r}"
            )

    return where
