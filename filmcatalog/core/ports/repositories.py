"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des films.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite/PostgreSQL via SQLModel, mocks pour les tests, etc.).

Toutes les opérations sont asynchrones. Chaque opération d'écriture s'exécute
dans sa propre transaction : soit tout est validé, soit rien.
"""

from abc import ABC, abstractmethod
from typing import Optional

from filmcatalog.core.entities.film import Film
from filmcatalog.core.value_objects import Pageable, Slice, Suchparameter


class IFilmRepository(ABC):
    """
    Interface de stockage des films.

    Définit les opérations pour persister et récupérer les entités Film
    avec leur description et leurs acteurs.
    """

    @abstractmethod
    async def get_by_id(self, film_id: int, mit_details: bool = False) -> Optional[Film]:
        """
        Récupère un film par son ID.

        La description est toujours chargée, les acteurs seulement si mit_details.
        """
        ...

    @abstractmethod
    async def list_all(self) -> list[Film]:
        """Liste tous les films (avec description), triés par ID."""
        ...

    @abstractmethod
    async def find(self, suchparameter: Suchparameter, pageable: Pageable) -> Slice[Film]:
        """Recherche paginée, triée par ID, avec le nombre total de correspondances."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Nombre total de films."""
        ...

    @abstractmethod
    async def get_id_by_imdb_id(self, imdb_id: str) -> Optional[int]:
        """Retourne l'ID du film portant cette IMDb-ID, ou None."""
        ...

    @abstractmethod
    async def create(self, film: Film) -> int:
        """
        Insère un film avec sa description et ses acteurs.

        Retourne :
            L'ID généré par la base
        """
        ...

    @abstractmethod
    async def update_versioned(
        self, film_id: int, film: Film, expected_version: int
    ) -> Optional[int]:
        """
        Remplace les attributs modifiables si la version en base vaut expected_version.

        La version est incrémentée de 1 dans la même instruction.

        Retourne :
            La nouvelle version, ou None si aucune ligne ne correspond
            (film supprimé ou modifié entre-temps)
        """
        ...

    @abstractmethod
    async def delete(self, film_id: int) -> bool:
        """Supprime un film par ID (cascade). Retourne True si supprimé."""
        ...
