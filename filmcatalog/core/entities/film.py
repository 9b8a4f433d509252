"""
Film entities.

Entities representing a film of the catalog with its one-to-one description
and its ordered list of actors.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional


class Filmart(Enum):
    """Kind of film."""

    ROMCOM = "ROMCOM"
    THRILLER = "THRILLER"
    DRAMA = "DRAMA"
    HORROR = "HORROR"
    ANIME = "ANIME"
    ANIMATION = "ANIMATION"
    ACTION = "ACTION"
    FANTASY = "FANTASY"
    SCI_FI = "SCI_FI"
    MYSTERY = "MYSTERY"
    BIOGRAFIE = "BIOGRAFIE"


@dataclass
class Beschreibung:
    """Free text description of a film (required, created with the film)."""

    beschreibung: str = ""


@dataclass
class Schauspieler:
    """
    Actor playing in a film.

    Attributes:
        vorname: First name
        nachname: Last name
        rolle: Role played in the film, if known
    """

    vorname: str = ""
    nachname: str = ""
    rolle: Optional[str] = None


@dataclass
class Film:
    """
    Film of the catalog.

    The version is the revision counter used for optimistic concurrency:
    0 on creation, incremented by exactly 1 on every successful update.

    Attributes:
        id: Internal database ID (assigned by the store)
        version: Revision counter
        imdb_id: IMDb identifier (tt + 7-8 digits), unique across all films
        titel: Title
        bewertung: Rating from 0 to 5
        art: Kind of film
        dauer_min: Runtime in minutes
        erscheinungsdatum: Release date
        beschreibung: Description (None when not loaded)
        schauspieler: Actors in order (None when not loaded)
        erzeugt: Creation timestamp
        aktualisiert: Last update timestamp
    """

    id: Optional[int] = None
    version: int = 0
    imdb_id: Optional[str] = None
    titel: str = ""
    bewertung: int = 0
    art: Optional[Filmart] = None
    dauer_min: Optional[int] = None
    erscheinungsdatum: Optional[date] = None
    beschreibung: Optional[Beschreibung] = None
    schauspieler: Optional[list[Schauspieler]] = field(default_factory=list)
    erzeugt: Optional[datetime] = None
    aktualisiert: Optional[datetime] = None
