"""
Jeu de films d'exemple pour `filmcatalog init-db --beispiele`.

Les films sont inseres via le FilmWriteService : les films dont l'IMDb-ID
existe deja sont ignores, la commande peut donc etre relancee.
"""

from datetime import date

from loguru import logger

from .core.entities.film import Beschreibung, Film, Filmart, Schauspieler
from .core.exceptions import ImdbIdExistsError
from .services.film_write_service import FilmWriteService


def beispiel_filme() -> list[Film]:
    """Retourne de nouvelles instances des films d'exemple."""
    return [
        Film(
            imdb_id="tt0133093",
            titel="The Matrix",
            bewertung=5,
            art=Filmart.SCI_FI,
            dauer_min=136,
            erscheinungsdatum=date(1999, 3, 31),
            beschreibung=Beschreibung("Ein Hacker entdeckt die wahre Natur seiner Realitaet."),
            schauspieler=[
                Schauspieler(vorname="Keanu", nachname="Reeves", rolle="Neo"),
                Schauspieler(vorname="Carrie-Anne", nachname="Moss", rolle="Trinity"),
            ],
        ),
        Film(
            imdb_id="tt0245429",
            titel="Chihiros Reise ins Zauberland",
            bewertung=5,
            art=Filmart.ANIME,
            dauer_min=125,
            erscheinungsdatum=date(2001, 7, 20),
            beschreibung=Beschreibung("Ein Maedchen gelangt in eine Welt der Geister."),
        ),
        Film(
            imdb_id="tt0102926",
            titel="Das Schweigen der Laemmer",
            bewertung=4,
            art=Filmart.THRILLER,
            dauer_min=118,
            erscheinungsdatum=date(1991, 2, 14),
            beschreibung=Beschreibung("Eine FBI-Agentin sucht Rat bei einem inhaftierten Moerder."),
            schauspieler=[
                Schauspieler(vorname="Jodie", nachname="Foster", rolle="Clarice Starling"),
                Schauspieler(vorname="Anthony", nachname="Hopkins", rolle="Hannibal Lecter"),
            ],
        ),
        Film(
            imdb_id="tt0332280",
            titel="Wie ein einziger Tag",
            bewertung=3,
            art=Filmart.ROMCOM,
            dauer_min=123,
            erscheinungsdatum=date(2004, 6, 25),
            beschreibung=Beschreibung("Eine Liebesgeschichte ueber Jahrzehnte."),
        ),
        Film(
            imdb_id="tt0081505",
            titel="Shining",
            bewertung=4,
            art=Filmart.HORROR,
            dauer_min=146,
            erscheinungsdatum=date(1980, 5, 23),
            beschreibung=Beschreibung("Ein Winter als Hausmeister in einem abgelegenen Hotel."),
            schauspieler=[Schauspieler(vorname="Jack", nachname="Nicholson", rolle="Jack Torrance")],
        ),
        Film(
            imdb_id="tt1375666",
            titel="Inception",
            bewertung=5,
            art=Filmart.ACTION,
            dauer_min=148,
            erscheinungsdatum=date(2010, 7, 16),
            beschreibung=Beschreibung("Diebe stehlen Geheimnisse aus Traeumen."),
        ),
    ]


async def load_beispiele(write_service: FilmWriteService) -> int:
    """
    Insere les films d'exemple.

    Returns:
        Nombre de films effectivement crees
    """
    created = 0
    for film in beispiel_filme():
        try:
            await write_service.create(film)
        except ImdbIdExistsError:
            logger.debug(f"Film d'exemple deja present : {film.imdb_id}")
            continue
        created += 1
    return created
