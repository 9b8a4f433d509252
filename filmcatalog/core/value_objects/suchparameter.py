"""
Objet valeur pour les parametres de recherche de films.

Les valeurs sont conservees brutes (telles que recues d'une query string ou
d'un input GraphQL) : la conversion en nombres et en dates est faite par le
where-builder, qui ignore silencieusement les valeurs non convertibles.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from datetime import date
from typing import Any, Optional, Union

# Cle externe (camelCase) -> attribut
_ALIASES = {
    "imdbId": "imdb_id",
    "dauerMin": "dauer_min",
}

RawValue = Union[str, int, date]


@dataclass(frozen=True)
class Suchparameter:
    """
    Filtre de recherche sur les films, chaque champ etant optionnel.

    Attributs:
        imdb_id: Egalite exacte
        titel: Sous-chaine, insensible a la casse
        bewertung: Note minimale (>=)
        art: Egalite exacte sur le genre
        dauer_min: Duree maximale en minutes (<=)
        erscheinungsdatum: Date de sortie minimale (>=)
    """

    imdb_id: Optional[RawValue] = None
    titel: Optional[RawValue] = None
    bewertung: Optional[RawValue] = None
    art: Optional[RawValue] = None
    dauer_min: Optional[RawValue] = None
    erscheinungsdatum: Optional[RawValue] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Suchparameter":
        """
        Construit les parametres depuis un dictionnaire (query string, input GraphQL).

        Les cles camelCase (imdbId, dauerMin) et snake_case sont acceptees,
        les cles inconnues et les valeurs vides sont ignorees.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = _ALIASES.get(key, key)
            if name not in known or value is None or value == "":
                continue
            kwargs[name] = value
        return cls(**kwargs)

    def is_empty(self) -> bool:
        """Vrai si aucun critere n'est renseigne."""
        return all(getattr(self, f.name) is None for f in fields(self))
