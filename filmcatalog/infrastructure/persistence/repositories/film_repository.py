"""
Implementation SQLModel du repository Film.

Implemente l'interface IFilmRepository pour la persistance des films,
de leur description et de leurs acteurs via SQLModel (SQLAlchemy async).

Chaque methode ouvre sa propre session :
- lecture : session simple, sans transaction explicite
- ecriture : session_factory.begin(), commit en sortie normale et
  rollback sur toute exception
"""

from typing import Optional

from loguru import logger
from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from filmcatalog.core.entities.film import Beschreibung, Film, Filmart, Schauspieler
from filmcatalog.core.exceptions import ImdbIdExistsError
from filmcatalog.core.ports.repositories import IFilmRepository
from filmcatalog.core.value_objects import Pageable, Slice, Suchparameter
from filmcatalog.infrastructure.persistence.models import (
    BeschreibungModel,
    FilmModel,
    SchauspielerModel,
    utc_now,
)
from filmcatalog.infrastructure.persistence.where_builder import build_where


class SQLModelFilmRepository(IFilmRepository):
    """
    Repository SQLModel pour les films.

    Implemente IFilmRepository avec conversion bidirectionnelle
    entre l'entite Film (domaine) et FilmModel (persistance).
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """
        Initialise le repository avec une fabrique de sessions.

        Args :
            session_factory : Fabrique de sessions SQLModel async
        """
        self._session_factory = session_factory

    def _to_entity(self, model: FilmModel, mit_schauspieler: bool = False) -> Film:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele FilmModel avec sa description chargee
            mit_schauspieler : Les acteurs ont ete charges (sinon schauspieler=None)

        Retourne :
            L'entite Film correspondante
        """
        beschreibung = None
        if model.beschreibung is not None:
            beschreibung = Beschreibung(beschreibung=model.beschreibung.beschreibung)

        schauspieler = None
        if mit_schauspieler:
            schauspieler = [
                Schauspieler(vorname=s.vorname, nachname=s.nachname, rolle=s.rolle)
                for s in model.schauspieler
            ]

        return Film(
            id=model.id,
            version=model.version,
            imdb_id=model.imdb_id,
            titel=model.titel,
            bewertung=model.bewertung,
            art=Filmart(model.art) if model.art else None,
            dauer_min=model.dauer_min,
            erscheinungsdatum=model.erscheinungsdatum,
            beschreibung=beschreibung,
            schauspieler=schauspieler,
            erzeugt=model.erzeugt,
            aktualisiert=model.aktualisiert,
        )

    def _to_model(self, entity: Film) -> FilmModel:
        """
        Convertit une entite domaine en modele DB (nouveau film, version 0).

        Args :
            entity : L'entite Film du domaine

        Retourne :
            Le modele FilmModel avec sa description et ses acteurs
        """
        model = FilmModel(
            version=0,
            imdb_id=entity.imdb_id,
            titel=entity.titel,
            bewertung=entity.bewertung,
            art=entity.art.value if entity.art else None,
            dauer_min=entity.dauer_min,
            erscheinungsdatum=entity.erscheinungsdatum,
        )
        if entity.beschreibung is not None:
            model.beschreibung = BeschreibungModel(
                beschreibung=entity.beschreibung.beschreibung
            )
        model.schauspieler = [
            SchauspielerModel(vorname=s.vorname, nachname=s.nachname, rolle=s.rolle)
            for s in entity.schauspieler or []
        ]
        return model

    async def get_by_id(self, film_id: int, mit_details: bool = False) -> Optional[Film]:
        """Recupere un film par son ID (description, et acteurs si mit_details)."""
        options = [selectinload(FilmModel.beschreibung)]
        if mit_details:
            options.append(selectinload(FilmModel.schauspieler))
        statement = select(FilmModel).where(FilmModel.id == film_id).options(*options)
        async with self._session_factory() as session:
            model = (await session.exec(statement)).first()
            if model:
                return self._to_entity(model, mit_schauspieler=mit_details)
        return None

    async def list_all(self) -> list[Film]:
        """Liste tous les films (avec description), tries par ID."""
        statement = (
            select(FilmModel)
            .options(selectinload(FilmModel.beschreibung))
            .order_by(FilmModel.id)
        )
        async with self._session_factory() as session:
            models = (await session.exec(statement)).all()
            return [self._to_entity(model) for model in models]

    async def find(self, suchparameter: Suchparameter, pageable: Pageable) -> Slice[Film]:
        """Recherche paginee triee par ID, avec le nombre total hors pagination."""
        where = build_where(suchparameter)

        statement = select(FilmModel).options(selectinload(FilmModel.beschreibung))
        count_statement = select(func.count()).select_from(FilmModel)
        for clause in where:
            statement = statement.where(clause)
            count_statement = count_statement.where(clause)
        statement = (
            statement.order_by(FilmModel.id).offset(pageable.offset).limit(pageable.size)
        )

        async with self._session_factory() as session:
            models = (await session.exec(statement)).all()
            total = (await session.exec(count_statement)).one()
            content = [self._to_entity(model) for model in models]

        return Slice(content=content, total_elements=total)

    async def count(self) -> int:
        """Nombre total de films."""
        async with self._session_factory() as session:
            return (await session.exec(select(func.count()).select_from(FilmModel))).one()

    async def get_id_by_imdb_id(self, imdb_id: str) -> Optional[int]:
        """Retourne l'ID du film portant cette IMDb-ID."""
        statement = select(FilmModel.id).where(FilmModel.imdb_id == imdb_id)
        async with self._session_factory() as session:
            return (await session.exec(statement)).first()

    async def create(self, film: Film) -> int:
        """Insere film, description et acteurs dans une seule transaction."""
        model = self._to_model(film)
        try:
            async with self._session_factory.begin() as session:
                session.add(model)
                await session.flush()
                film_id = model.id
        except IntegrityError as e:
            # Insertion concurrente de la meme IMDb-ID entre la verification et l'ecriture
            logger.debug(f"Violation de contrainte a l'insertion : {e.orig}")
            if film.imdb_id is not None:
                raise ImdbIdExistsError(film.imdb_id) from e
            raise
        return film_id

    async def update_versioned(
        self, film_id: int, film: Film, expected_version: int
    ) -> Optional[int]:
        """UPDATE conditionnel sur (id, version) : compare-and-swap de la version."""
        statement = (
            update(FilmModel)
            .where(FilmModel.id == film_id)
            .where(FilmModel.version == expected_version)
            .values(
                version=FilmModel.version + 1,
                imdb_id=film.imdb_id,
                titel=film.titel,
                bewertung=film.bewertung,
                art=film.art.value if film.art else None,
                dauer_min=film.dauer_min,
                erscheinungsdatum=film.erscheinungsdatum,
                aktualisiert=utc_now(),
            )
        )
        try:
            async with self._session_factory.begin() as session:
                result = await session.exec(statement)
                rowcount = result.rowcount
        except IntegrityError as e:
            if film.imdb_id is not None:
                raise ImdbIdExistsError(film.imdb_id) from e
            raise

        if rowcount == 0:
            return None
        return expected_version + 1

    async def delete(self, film_id: int) -> bool:
        """Supprime un film, sa description et ses acteurs. Sans effet si absent."""
        statement = (
            select(FilmModel)
            .where(FilmModel.id == film_id)
            .options(selectinload(FilmModel.beschreibung), selectinload(FilmModel.schauspieler))
        )
        async with self._session_factory.begin() as session:
            model = (await session.exec(statement)).first()
            if model is None:
                return False
            await session.delete(model)
        return True
