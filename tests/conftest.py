"""
Fixtures pytest partagees pour les tests du catalogue de films.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires et jetons d'acces
- Base SQLite en memoire (engine, fabrique de sessions, repository, services)
- Fabrique de films valides
- Client HTTP de test sur l'application complete
"""

from collections.abc import AsyncIterator, Callable, Iterator
from datetime import date
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from dependency_injector import providers
from fastapi.testclient import TestClient

from filmcatalog.config import Settings
from filmcatalog.container import Container
from filmcatalog.core.entities.film import Beschreibung, Film, Filmart, Schauspieler
from filmcatalog.core.ports.repositories import IFilmRepository
from filmcatalog.infrastructure.persistence.database import (
    create_engine,
    create_session_factory,
    init_db,
)
from filmcatalog.infrastructure.persistence.repositories import SQLModelFilmRepository
from filmcatalog.services.film_service import FilmReadService
from filmcatalog.services.film_write_service import FilmWriteService
from filmcatalog.web.app import create_app

ADMIN_TOKEN = "admin-token"
USER_TOKEN = "user-token"
GAST_TOKEN = "gast-token"


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Trois jetons sont configures : admin, user et un jeton sans role d'ecriture.
    """
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "test.log",
        auth_tokens={
            ADMIN_TOKEN: ["admin"],
            USER_TOKEN: ["user"],
            GAST_TOKEN: ["gast"],
        },
    )


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[Any]:
    """Fabrique de sessions sur une base SQLite en memoire, tables creees."""
    engine = create_engine("sqlite+aiosqlite://")
    await init_db(engine)
    yield create_session_factory(engine)
    await engine.dispose()


@pytest.fixture
def repository(session_factory) -> SQLModelFilmRepository:
    """Repository SQLModel sur la base en memoire."""
    return SQLModelFilmRepository(session_factory)


@pytest.fixture
def read_service(repository) -> FilmReadService:
    return FilmReadService(repository)


@pytest.fixture
def write_service(repository, read_service) -> FilmWriteService:
    return FilmWriteService(repository, read_service)


@pytest.fixture
def mock_repository() -> MagicMock:
    """
    Mock de IFilmRepository pour les tests.

    Toutes les methodes sont des AsyncMock ; les valeurs de retour
    doivent etre configurees dans chaque test.
    """
    mock = MagicMock(spec=IFilmRepository)
    for name in (
        "get_by_id",
        "list_all",
        "find",
        "count",
        "get_id_by_imdb_id",
        "create",
        "update_versioned",
        "delete",
    ):
        setattr(mock, name, AsyncMock())
    mock.get_id_by_imdb_id.return_value = None
    return mock


@pytest.fixture
def make_film() -> Callable[..., Film]:
    """
    Fabrique de films valides.

    Chaque appel retourne une nouvelle instance ; les attributs passes
    en argument remplacent les valeurs par defaut.
    """

    def _make(**overrides: Any) -> Film:
        values: dict[str, Any] = {
            "imdb_id": "tt0133093",
            "titel": "The Matrix",
            "bewertung": 5,
            "art": Filmart.SCI_FI,
            "dauer_min": 136,
            "erscheinungsdatum": date(1999, 3, 31),
            "beschreibung": Beschreibung("Ein Hacker entdeckt die Wahrheit."),
            "schauspieler": [
                Schauspieler(vorname="Keanu", nachname="Reeves", rolle="Neo"),
                Schauspieler(vorname="Carrie-Anne", nachname="Moss", rolle="Trinity"),
            ],
        }
        values.update(overrides)
        return Film(**values)

    return _make


@pytest.fixture
def film_payload() -> dict[str, Any]:
    """Donnees JSON d'un nouveau film valide (cles camelCase)."""
    return {
        "imdbId": "tt0245429",
        "titel": "Chihiros Reise",
        "bewertung": 4,
        "art": "ANIME",
        "dauerMin": 125,
        "erscheinungsdatum": "2001-07-20",
        "beschreibung": {"beschreibung": "Ein Maedchen in der Geisterwelt."},
        "schauspieler": [{"vorname": "Rumi", "nachname": "Hiiragi", "rolle": "Chihiro"}],
    }


@pytest.fixture
def client(test_settings: Settings) -> Iterator[TestClient]:
    """
    Client HTTP sur l'application complete (REST et GraphQL).

    Le contexte du client declenche le lifespan : les tables sont creees
    dans la base SQLite temporaire.
    """
    container = Container()
    container.config.override(providers.Object(test_settings))
    app = create_app(container)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """En-tete Authorization avec le jeton admin."""
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def user_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {USER_TOKEN}"}


@pytest.fixture
def gast_headers() -> dict[str, str]:
    """Jeton valide mais sans role d'ecriture."""
    return {"Authorization": f"Bearer {GAST_TOKEN}"}
