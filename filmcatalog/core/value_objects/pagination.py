"""
Objets valeur pour la pagination.

- Pageable : fenetre demandee (numero de page a partir de 0, taille)
- Slice : contenu d'une page et nombre total de resultats hors pagination
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 5
MAX_PAGE_SIZE = 100

# Plus grand entier SQL signe (64 bits) ; au-dela, OFFSET et comparaisons debordent
MAX_SQL_INTEGER = 2**63 - 1


def _parse_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class Pageable:
    """
    Fenetre de pagination.

    Attributs:
        number: Numero de page (0 = premiere page)
        size: Nombre maximal d'elements par page
    """

    number: int = DEFAULT_PAGE_NUMBER
    size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        """Nombre d'elements a sauter avant la page."""
        return self.number * self.size

    @classmethod
    def create(cls, number: Any = None, size: Any = None) -> "Pageable":
        """
        Construit un Pageable depuis des valeurs brutes.

        Les valeurs non numeriques ou negatives reprennent les valeurs par defaut,
        de meme qu'un numero de page dont l'offset depasse MAX_SQL_INTEGER ;
        une taille superieure a MAX_PAGE_SIZE est ramenee a MAX_PAGE_SIZE.
        """
        page_size = _parse_int(size)
        if page_size is None or page_size <= 0:
            page_size = DEFAULT_PAGE_SIZE
        page_size = min(page_size, MAX_PAGE_SIZE)

        page_number = _parse_int(number)
        if (
            page_number is None
            or page_number < 0
            or page_number * page_size > MAX_SQL_INTEGER
        ):
            page_number = DEFAULT_PAGE_NUMBER

        return cls(number=page_number, size=page_size)


@dataclass(frozen=True)
class Slice(Generic[T]):
    """Page de resultats et nombre total de correspondances."""

    content: list[T] = field(default_factory=list)
    total_elements: int = 0

    def total_pages(self, size: int) -> int:
        """Nombre de pages necessaires pour une taille de page donnee."""
        if size <= 0:
            return 0
        return (self.total_elements + size - 1) // size
