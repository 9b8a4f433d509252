"""
FilmCatalog - Backend CRUD pour un catalogue de films.

Ce package expose un catalogue de films via REST et GraphQL, avec mises a jour
par synchronisation optimiste (numero de version), pagination et protection
des ecritures par roles.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, objets valeur, ports, exceptions)
- services/ : Couche application (lecture, ecriture, validation)
- infrastructure/ : Persistance SQLModel (SQLAlchemy async)
- web/ : Adaptateurs REST (FastAPI) et GraphQL (strawberry)
"""

__version__ = "0.1.0"
