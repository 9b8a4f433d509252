"""
Service d'ecriture des films : creation, mise a jour, suppression.

Le FilmWriteService est le seul composant autorise a modifier les films.
Il garantit :
- la presence d'une description et l'unicite de l'IMDb-ID a la creation
  (verifiees avant toute ecriture)
- la synchronisation optimiste : la version fournie sous forme de jeton
  '"<n>"' ne doit pas etre inferieure a la version en base, et la version
  est incrementee de exactement 1 par mise a jour
- une transaction par operation (portee par le repository)

La comparaison est asymetrique : une version fournie
superieure a la version en base est acceptee.
"""

import re
from typing import Optional

from loguru import logger

from filmcatalog.core.entities.film import Film
from filmcatalog.core.exceptions import (
    FilmValidationError,
    ImdbIdExistsError,
    NotFoundError,
    VersionInvalidError,
    VersionOutdatedError,
    Violation,
)
from filmcatalog.core.ports.repositories import IFilmRepository
from filmcatalog.services.film_service import FilmReadService

# Jeton de version : 1 a 3 chiffres entre guillemets, ex: "0"
VERSION_PATTERN = re.compile(r'^"(\d{1,3})"$')


class FilmWriteService:
    """
    Service d'ecriture pour les films.

    Example:
        service = FilmWriteService(repository=repo, read_service=FilmReadService(repo))

        film_id = await service.create(film)
        version = await service.update(film_id, film_modifie, '"0"')  # -> 1
        await service.delete(film_id)
    """

    def __init__(self, repository: IFilmRepository, read_service: FilmReadService) -> None:
        """
        Initialise le service d'ecriture.

        Args:
            repository: Repository des films (operations transactionnelles)
            read_service: Service de lecture, source de la version courante
        """
        self._repository = repository
        self._read_service = read_service

    async def create(self, film: Film) -> int:
        """
        Cree un nouveau film avec sa description et ses acteurs.

        Args:
            film: Le film a creer (id et version sont ignores)

        Returns:
            L'ID du nouveau film

        Raises:
            FilmValidationError: Le film n'a pas de description
            ImdbIdExistsError: L'IMDb-ID est deja utilisee
        """
        logger.debug(f"create: titel={film.titel!r}, imdb_id={film.imdb_id}")
        await self._validate_create(film)

        film.version = 0
        if film.schauspieler is None:
            film.schauspieler = []
        film_id = await self._repository.create(film)

        logger.debug(f"create: id={film_id}")
        return film_id

    async def update(self, film_id: Optional[int], film: Film, version: Optional[str]) -> int:
        """
        Met a jour les attributs d'un film existant.

        Seuls imdb_id, titel, bewertung, art, dauer_min et erscheinungsdatum
        sont remplaces ; description et acteurs ne sont pas modifies.

        Args:
            film_id: ID du film a mettre a jour
            film: Nouvelles valeurs
            version: Jeton de version, ex: '"0"'

        Returns:
            La nouvelle version

        Raises:
            NotFoundError: Aucun film avec cet ID
            VersionInvalidError: Le jeton n'a pas la forme attendue
            VersionOutdatedError: La version fournie est perimee
            ImdbIdExistsError: La nouvelle IMDb-ID appartient a un autre film
        """
        logger.debug(f"update: id={film_id}, titel={film.titel!r}, version={version}")
        if film_id is None:
            logger.debug("update: ID absente")
            raise NotFoundError(film_id)

        current = await self._validate_update(film_id, film, version)

        new_version = await self._repository.update_versioned(
            film_id, film, expected_version=current.version
        )
        if new_version is None:
            # Un autre ecrivain a modifie ou supprime le film depuis la lecture :
            # NotFoundError si le film a disparu
            await self._read_service.find_by_id(film_id)
            logger.debug(f"update: version modifiee en base entre-temps, id={film_id}")
            raise VersionOutdatedError(self._parse_version(version))

        logger.debug(f"update: nouvelle version={new_version}")
        return new_version

    async def delete(self, film_id: int) -> bool:
        """
        Supprime un film (description et acteurs compris), sans controle de version.

        Returns:
            True si le film existait et a ete supprime, False sinon
        """
        logger.debug(f"delete: id={film_id}")
        deleted = await self._repository.delete(film_id)
        logger.debug(f"delete: supprime={deleted}")
        return deleted

    async def _validate_create(self, film: Film) -> None:
        """Verifie la presence de la description et que l'IMDb-ID est libre."""
        if film.beschreibung is None:
            logger.debug("_validate_create: description absente")
            raise FilmValidationError(
                [Violation(field="beschreibung", message="La description est obligatoire")]
            )

        if film.imdb_id is None:
            return

        existing_id = await self._repository.get_id_by_imdb_id(film.imdb_id)
        if existing_id is not None:
            logger.debug(f"_validate_create: imdb_id deja utilisee : {film.imdb_id}")
            raise ImdbIdExistsError(film.imdb_id)

    def _parse_version(self, version: Optional[str]) -> int:
        """Extrait le numero du jeton de version, VersionInvalidError si mal forme."""
        match = VERSION_PATTERN.match(version) if version is not None else None
        if match is None:
            raise VersionInvalidError(version)
        return int(match.group(1))

    async def _validate_update(self, film_id: int, film: Film, version: Optional[str]) -> Film:
        """
        Controle le jeton de version puis le compare a la version en base.

        Le format du jeton est verifie avant toute lecture en base.

        Returns:
            Le film tel qu'en base (version courante)
        """
        supplied = self._parse_version(version)
        current = await self._read_service.find_by_id(film_id)

        if supplied < current.version:
            logger.debug(f"_validate_update: version={supplied}, versionDb={current.version}")
            raise VersionOutdatedError(supplied)

        if film.imdb_id is not None and film.imdb_id != current.imdb_id:
            owner = await self._repository.get_id_by_imdb_id(film.imdb_id)
            if owner is not None and owner != film_id:
                logger.debug(f"_validate_update: imdb_id deja utilisee : {film.imdb_id}")
                raise ImdbIdExistsError(film.imdb_id)

        return current
