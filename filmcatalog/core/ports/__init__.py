"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des données
- IFilmRepository : Stockage des films, descriptions et acteurs
"""

from filmcatalog.core.ports.repositories import IFilmRepository

__all__ = [
    "IFilmRepository",
]
