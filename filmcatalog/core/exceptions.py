"""
Exceptions metier du catalogue de films.

Les services levent ces exceptions, les adaptateurs (REST, GraphQL, CLI) les
traduisent en codes de statut ou en erreurs de leur protocole.
"""

from dataclasses import dataclass
from typing import Optional


class FilmCatalogError(Exception):
    """Classe de base des erreurs du catalogue."""


class NotFoundError(FilmCatalogError):
    """
    Exception levee quand aucun film ne correspond a l'ID demande.

    Attributes:
        film_id: ID recherche (None si l'ID est absent ou invalide)
    """

    def __init__(self, film_id: Optional[int] = None, message: Optional[str] = None) -> None:
        self.film_id = film_id
        super().__init__(message or f"Aucun film avec l'ID {film_id}.")


class EmptyCollectionError(NotFoundError):
    """Exception levee quand find_all ne trouve aucun film."""

    def __init__(self) -> None:
        super().__init__(message="Aucun film trouve")


class ImdbIdExistsError(FilmCatalogError):
    """
    Exception levee quand l'IMDb-ID est deja utilisee par un autre film.

    Attributes:
        imdb_id: L'IMDb-ID en collision
    """

    def __init__(self, imdb_id: str) -> None:
        self.imdb_id = imdb_id
        super().__init__(f"L'IMDb-ID {imdb_id} existe deja.")


class VersionInvalidError(FilmCatalogError):
    """
    Exception levee quand le jeton de version n'a pas la forme "<chiffres>".

    Attributes:
        version: Le jeton recu tel quel
    """

    def __init__(self, version: Optional[str]) -> None:
        self.version = version
        super().__init__(f"Le numero de version {version} est invalide.")


class VersionOutdatedError(FilmCatalogError):
    """
    Exception levee quand la version fournie est plus ancienne que celle en base.

    Attributes:
        version: La version fournie par l'appelant
    """

    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"Le numero de version {version} est perime.")


@dataclass(frozen=True)
class Violation:
    """Violation d'une contrainte sur un champ des donnees recues."""

    field: str
    message: str


class FilmValidationError(FilmCatalogError):
    """
    Exception levee quand les donnees d'un film ne respectent pas les contraintes.

    Attributes:
        violations: Liste des violations par champ
    """

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = violations
        fields = ", ".join(v.field for v in violations)
        super().__init__(f"Donnees de film invalides : {fields}")
