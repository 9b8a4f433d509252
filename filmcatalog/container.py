"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI, REST et GraphQL.
Inclut l'engine async, la fabrique de sessions, le repository SQLModel et les services.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import create_engine, create_session_factory
from .infrastructure.persistence.repositories import SQLModelFilmRepository
from .services.film_service import FilmReadService
from .services.film_write_service import FilmWriteService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        await init_db(container.engine())  # Cree les tables une fois
        service = container.film_service()
        write_service = container.film_write_service()

    Dans les tests, la configuration se remplace par :
        container.config.override(providers.Object(Settings(database_url=...)))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine async - partage par toutes les requetes (pool de connexions)
    engine = providers.Singleton(
        create_engine,
        database_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    # Fabrique de sessions - une session par operation de repository
    session_factory = providers.Singleton(create_session_factory, engine=engine)

    # Repository - sans etat propre, la fabrique de sessions est partagee
    film_repository = providers.Factory(
        SQLModelFilmRepository,
        session_factory=session_factory,
    )

    # Services - Factory, une instance par requete
    film_service = providers.Factory(
        FilmReadService,
        repository=film_repository,
    )

    film_write_service = providers.Factory(
        FilmWriteService,
        repository=film_repository,
        read_service=film_service,
    )
