"""
Services applicatifs (cas d'utilisation).

- FilmReadService : lecture (par ID, tous, recherche paginee, comptage)
- FilmWriteService : creation, mise a jour optimiste, suppression
- validation : controle des donnees recues, violations par champ
"""

from filmcatalog.services.film_service import FilmReadService
from filmcatalog.services.film_write_service import FilmWriteService

__all__ = [
    "FilmReadService",
    "FilmWriteService",
]
