"""
Module de persistance pour FilmCatalog.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy async).
Il contient :

- database.py : Engine async, fabrique de sessions, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees
- where_builder.py : Traduction des criteres de recherche en predicats SQL
- repositories/ : Implementations des ports repository

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from filmcatalog.infrastructure.persistence import create_engine, init_db

    engine = create_engine("sqlite+aiosqlite:///filmcatalog.db")
    await init_db(engine)  # Cree les tables si necessaire
"""

from filmcatalog.infrastructure.persistence.database import (
    create_engine,
    create_session_factory,
    init_db,
)
from filmcatalog.infrastructure.persistence.models import (
    BeschreibungModel,
    FilmModel,
    SchauspielerModel,
)

__all__ = [
    "create_engine",
    "create_session_factory",
    "init_db",
    "FilmModel",
    "BeschreibungModel",
    "SchauspielerModel",
]
