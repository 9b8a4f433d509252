"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.

Exports:
- Film: A film of the catalog
- Beschreibung: The description of a film
- Schauspieler: An actor playing in a film
- Filmart: Kind of film
"""

from filmcatalog.core.entities.film import Beschreibung, Film, Filmart, Schauspieler

__all__ = [
    "Film",
    "Beschreibung",
    "Schauspieler",
    "Filmart",
]
