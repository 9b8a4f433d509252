"""
Point d'entree CLI du catalogue de films.

Initialise le container DI, configure le logging et fournit les commandes CLI :
serve, info, version, init-db et filme.
"""

import asyncio
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .beispieldaten import load_beispiele
from .config import Settings
from .container import Container
from .core.exceptions import EmptyCollectionError
from .infrastructure.persistence.database import init_db
from .logging_config import configure_logging

app = typer.Typer(
    name="filmcatalog",
    help="Catalogue de films avec API REST et GraphQL",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration du catalogue de films")
    typer.echo(f"Base de donnees : {config.database_url}")
    typer.echo(f"Serveur : {config.host}:{config.port}")
    typer.echo(f"TLS : {'active' if config.tls_enabled else 'desactive'}")
    typer.echo(f"Jetons configures : {len(config.auth_tokens)}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Filmcatalog v{__version__}")


@app.command(name="init-db")
def init_database(
    beispiele: Annotated[
        bool, typer.Option("--beispiele", help="Inserer les films d'exemple")
    ] = False,
) -> None:
    """Cree les tables et insere eventuellement les films d'exemple."""

    async def _run() -> int:
        engine = container.engine()
        try:
            await init_db(engine)
            if not beispiele:
                return 0
            return await load_beispiele(container.film_write_service())
        finally:
            await engine.dispose()

    created = asyncio.run(_run())
    typer.echo("Tables creees")
    if beispiele:
        typer.echo(f"Films d'exemple inseres : {created}")


@app.command()
def filme() -> None:
    """Liste tous les films du catalogue."""

    async def _run():
        engine = container.engine()
        try:
            await init_db(engine)
            return await container.film_service().find_all()
        finally:
            await engine.dispose()

    try:
        result = asyncio.run(_run())
    except EmptyCollectionError:
        console.print("[yellow]Aucun film dans le catalogue[/yellow]")
        return

    table = Table(title="Films")
    table.add_column("ID", justify="right", no_wrap=True)
    table.add_column("Version", justify="right")
    table.add_column("IMDb-ID", no_wrap=True)
    table.add_column("Titre")
    table.add_column("Note", justify="right")
    table.add_column("Genre")
    table.add_column("Duree", justify="right")
    table.add_column("Sortie")
    for film in result:
        table.add_row(
            str(film.id),
            str(film.version),
            film.imdb_id or "",
            film.titel,
            str(film.bewertung),
            film.art.value if film.art else "",
            f"{film.dauer_min} min" if film.dauer_min else "",
            film.erscheinungsdatum.isoformat() if film.erscheinungsdatum else "",
        )
    console.print(table)


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'ecoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'ecoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur REST/GraphQL (HTTPS si certificat et cle sont configures)."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port

    ssl_options = {}
    if config.tls_enabled:
        ssl_options = {
            "ssl_keyfile": str(config.tls_keyfile),
            "ssl_certfile": str(config.tls_certfile),
        }

    scheme = "https" if config.tls_enabled else "http"
    typer.echo(f"Demarrage du serveur sur {scheme}://{host}:{port}")
    uvicorn.run("filmcatalog.web.app:app", host=host, port=port, reload=reload, **ssl_options)


def main() -> None:
    """Point d'entree de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info(f"Demarrage du catalogue de films v{__version__}")

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
