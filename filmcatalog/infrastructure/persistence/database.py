"""
Configuration de la base de donnees asynchrone pour FilmCatalog.

Ce module fournit :
- Engine SQLAlchemy async (aiosqlite par defaut) avec cles etrangeres SQLite actives
- Session factory (une session SQLModel par operation de repository)
- Fonction d'initialisation des tables

La base de donnees est configuree via FILMCATALOG_DATABASE_URL
(defaut: sqlite+aiosqlite:///filmcatalog.db).
"""

from pathlib import Path
from typing import Any

from loguru import logger
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """Active ON DELETE CASCADE pour SQLite (desactive par defaut)."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Cree l'engine async pour l'URL donnee.

    Pour SQLite :
    - le repertoire parent du fichier est cree si necessaire
    - une base en memoire utilise un StaticPool (une seule connexion partagee)
    - les cles etrangeres sont activees a chaque connexion

    Args:
        database_url: URL SQLAlchemy avec driver async
        echo: Journaliser les requetes SQL

    Returns:
        L'engine async (les connexions sont ouvertes paresseusement)
    """
    url = make_url(database_url)
    kwargs: dict[str, Any] = {}

    is_sqlite = url.get_backend_name() == "sqlite"
    if is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(exist_ok=True, parents=True)

    engine = create_async_engine(database_url, echo=echo, **kwargs)
    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    logger.debug("Engine cree", backend=url.get_backend_name(), database=url.database)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Cree la fabrique de sessions SQLModel async.

    Utilisation :
        async with session_factory() as session:          # lecture
            ...
        async with session_factory.begin() as session:    # ecriture transactionnelle
            ...                                            # commit ou rollback garanti
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Cette fonction importe les modeles pour enregistrer leurs metadonnees
    dans SQLModel.metadata, puis cree les tables correspondantes si elles
    n'existent pas deja.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from filmcatalog.infrastructure.persistence import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
