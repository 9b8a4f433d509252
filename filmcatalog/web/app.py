"""
Application FastAPI du catalogue de films.

Initialise l'application avec le Container DI, cree les tables au demarrage
et monte les routes REST (/rest) et l'API GraphQL (/graphql).
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from loguru import logger

from .. import __version__
from ..container import Container
from ..infrastructure.persistence.database import init_db
from .errors import register_exception_handlers
from .graphql_api import create_graphql_router
from .routes.films import router as films_router
from .routes.films_write import router as films_write_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application web.

    Args:
        container: Container DI a utiliser (un nouveau Container par defaut,
            les tests y injectent leur configuration)
    """
    container = container or Container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Cree les tables au demarrage et libere l'engine a l'arret."""
        engine = container.engine()
        await init_db(engine)
        logger.info(f"Catalogue de films demarre (base : {container.config().database_url})")
        yield
        await engine.dispose()
        logger.info("Catalogue de films arrete")

    app = FastAPI(title="Filmkatalog", version=__version__, lifespan=lifespan)
    app.state.container = container

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f} ms)"
        )
        return response

    register_exception_handlers(app)

    # Routes
    app.include_router(films_router)
    app.include_router(films_write_router)
    app.include_router(create_graphql_router(), prefix="/graphql")

    return app


app = create_app()
