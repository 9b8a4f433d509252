"""
Service de lecture des films.

Le FilmReadService est la seule source de la version courante d'un film,
utilisee par le FilmWriteService pour la synchronisation optimiste.
Il ne modifie jamais l'etat de la base.
"""

import re
from typing import Any, Optional

from loguru import logger

from filmcatalog.core.entities.film import Film
from filmcatalog.core.exceptions import EmptyCollectionError, NotFoundError
from filmcatalog.core.ports.repositories import IFilmRepository
from filmcatalog.core.value_objects import Pageable, Slice, Suchparameter

# ID externe valide : entier positif, sans zero initial
ID_PATTERN = re.compile(r"^[1-9]\d{0,10}$")


def parse_id(value: Any) -> Optional[int]:
    """
    Convertit un ID recu de l'exterieur (chemin REST, ID GraphQL).

    Returns:
        L'ID entier, ou None si la valeur n'est pas un ID valide
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value if value > 0 else None
    if value is None or not ID_PATTERN.match(str(value)):
        return None
    return int(str(value))


class FilmReadService:
    """
    Service de lecture pour les films.

    Example:
        service = FilmReadService(repository=repo)

        film = await service.find_by_id(1, mit_details=True)
        filme = await service.find_all()
        page = await service.find(Suchparameter(titel="a"), Pageable(number=0, size=5))
    """

    def __init__(self, repository: IFilmRepository) -> None:
        """
        Initialise le service de lecture.

        Args:
            repository: Repository des films
        """
        self._repository = repository

    async def find_by_id(self, film_id: Optional[int], mit_details: bool = False) -> Film:
        """
        Recherche un film par son ID.

        Args:
            film_id: ID du film
            mit_details: Charger aussi les acteurs (la description est toujours chargee)

        Returns:
            Le film trouve

        Raises:
            NotFoundError: Aucun film avec cet ID
        """
        logger.debug(f"find_by_id: id={film_id}, mit_details={mit_details}")
        if film_id is None:
            raise NotFoundError(film_id)

        film = await self._repository.get_by_id(film_id, mit_details=mit_details)
        if film is None:
            logger.debug(f"find_by_id: aucun film avec l'ID {film_id}")
            raise NotFoundError(film_id)

        logger.debug(f"find_by_id: film={film.titel!r}, version={film.version}")
        return film

    async def find_all(self) -> list[Film]:
        """
        Retourne tous les films avec leur description.

        Une collection vide est traitee comme une erreur, contrairement a find().

        Raises:
            EmptyCollectionError: Aucun film en base
        """
        logger.debug("find_all")
        filme = await self._repository.list_all()
        if not filme:
            logger.debug("find_all: aucun film trouve")
            raise EmptyCollectionError()

        logger.debug(f"find_all: {len(filme)} films trouves")
        return filme

    async def find(
        self,
        suchparameter: Optional[Suchparameter] = None,
        pageable: Optional[Pageable] = None,
    ) -> Slice[Film]:
        """
        Recherche paginee selon les criteres donnes.

        Args:
            suchparameter: Criteres (None = tous les films)
            pageable: Fenetre de pagination (None = premiere page par defaut)

        Returns:
            La page de films et le nombre total de correspondances
            (page vide sans erreur si rien ne correspond)
        """
        suchparameter = suchparameter or Suchparameter()
        pageable = pageable or Pageable()
        logger.debug(f"find: suchparameter={suchparameter}, pageable={pageable}")

        result = await self._repository.find(suchparameter, pageable)

        logger.debug(
            f"find: {len(result.content)} films sur la page, {result.total_elements} au total"
        )
        return result

    async def count(self) -> int:
        """Nombre total de films."""
        anzahl = await self._repository.count()
        logger.debug(f"count: {anzahl}")
        return anzahl
