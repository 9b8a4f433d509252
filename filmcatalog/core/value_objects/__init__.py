"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Suchparameter : Criteres de recherche de films
- Pageable : Fenetre de pagination demandee
- Slice : Page de resultats avec le nombre total de correspondances
"""

from filmcatalog.core.value_objects.pagination import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MAX_SQL_INTEGER,
    Pageable,
    Slice,
)
from filmcatalog.core.value_objects.suchparameter import Suchparameter

__all__ = [
    "Suchparameter",
    "Pageable",
    "Slice",
    "DEFAULT_PAGE_NUMBER",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "MAX_SQL_INTEGER",
]
