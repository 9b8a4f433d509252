"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans filmcatalog/core/ports/repositories.py, utilisant SQLModel
(SQLAlchemy async) pour la persistance.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une fabrique de sessions via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from filmcatalog.infrastructure.persistence.repositories.film_repository import (
    SQLModelFilmRepository,
)

__all__ = [
    "SQLModelFilmRepository",
]
