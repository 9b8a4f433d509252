"""
Schema GraphQL du catalogue (strawberry).

Queries : film(id), filme, suche(suchparameter, page, size), anzahl
Mutations : create(input), update(input), delete(id)

Les erreurs metier sont renvoyees comme erreurs GraphQL avec extensions.code :
NOT_FOUND, BAD_USER_INPUT, UNAUTHENTICATED ou FORBIDDEN.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict
from datetime import date
from typing import Any, Optional

import strawberry
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from filmcatalog.core.entities.film import Film, Filmart
from filmcatalog.core.exceptions import (
    FilmValidationError,
    ImdbIdExistsError,
    NotFoundError,
    VersionInvalidError,
    VersionOutdatedError,
)
from filmcatalog.core.value_objects import Pageable, Suchparameter
from filmcatalog.services.film_service import parse_id
from filmcatalog.services.validation import parse_film, parse_film_update
from filmcatalog.web.security import (
    ROLE_ADMIN,
    ROLE_USER,
    ForbiddenError,
    UnauthenticatedError,
    check_roles,
)

Art = strawberry.enum(Filmart, name="Art")


@contextmanager
def _domain_errors() -> Iterator[None]:
    """Traduit les exceptions metier et de securite en GraphQLError."""
    try:
        yield
    except NotFoundError as e:
        raise GraphQLError(str(e), extensions={"code": "NOT_FOUND"}) from e
    except FilmValidationError as e:
        raise GraphQLError(
            str(e),
            extensions={
                "code": "BAD_USER_INPUT",
                "violations": [asdict(v) for v in e.violations],
            },
        ) from e
    except (ImdbIdExistsError, VersionInvalidError, VersionOutdatedError) as e:
        raise GraphQLError(str(e), extensions={"code": "BAD_USER_INPUT"}) from e
    except UnauthenticatedError as e:
        raise GraphQLError(str(e), extensions={"code": "UNAUTHENTICATED"}) from e
    except ForbiddenError as e:
        raise GraphQLError(str(e), extensions={"code": "FORBIDDEN"}) from e


def _container(info: Info) -> Any:
    return info.context["request"].app.state.container


# --- Types de sortie ---


@strawberry.type(name="Beschreibung")
class BeschreibungType:
    beschreibung: str


@strawberry.type(name="Schauspieler")
class SchauspielerType:
    vorname: str
    nachname: str
    rolle: Optional[str] = None


@strawberry.type(name="Film")
class FilmType:
    id: strawberry.ID
    version: int
    imdb_id: Optional[str]
    titel: str
    bewertung: int
    art: Optional[Art]
    dauer_min: Optional[int]
    erscheinungsdatum: Optional[date]
    beschreibung: Optional[BeschreibungType]
    schauspieler: Optional[list[SchauspielerType]]

    @classmethod
    def from_entity(cls, film: Film) -> "FilmType":
        return cls(
            id=strawberry.ID(str(film.id)),
            version=film.version,
            imdb_id=film.imdb_id,
            titel=film.titel,
            bewertung=film.bewertung,
            art=film.art,
            dauer_min=film.dauer_min,
            erscheinungsdatum=film.erscheinungsdatum,
            beschreibung=(
                BeschreibungType(beschreibung=film.beschreibung.beschreibung)
                if film.beschreibung is not None
                else None
            ),
            schauspieler=(
                [
                    SchauspielerType(vorname=s.vorname, nachname=s.nachname, rolle=s.rolle)
                    for s in film.schauspieler
                ]
                if film.schauspieler is not None
                else None
            ),
        )


@strawberry.type
class FilmSlice:
    """Page de resultats de la query suche."""

    content: list[FilmType]
    number: int
    size: int
    total_elements: int
    total_pages: int


@strawberry.type
class CreatePayload:
    id: strawberry.ID


@strawberry.type
class UpdatePayload:
    version: int


@strawberry.type
class DeletePayload:
    success: bool


# --- Types d'entree ---


@strawberry.input
class SuchparameterInput:
    imdb_id: Optional[str] = None
    titel: Optional[str] = None
    bewertung: Optional[int] = None
    art: Optional[Art] = None
    dauer_min: Optional[int] = None
    erscheinungsdatum: Optional[str] = None


@strawberry.input
class BeschreibungInput:
    beschreibung: str


@strawberry.input
class SchauspielerInput:
    vorname: str
    nachname: str
    rolle: Optional[str] = None


@strawberry.input
class FilmInput:
    imdb_id: str
    titel: str
    bewertung: int
    beschreibung: BeschreibungInput
    art: Optional[Art] = None
    dauer_min: Optional[int] = None
    erscheinungsdatum: Optional[date] = None
    schauspieler: Optional[list[SchauspielerInput]] = None


@strawberry.input
class FilmUpdateInput:
    id: strawberry.ID
    version: int
    imdb_id: str
    titel: str
    bewertung: int
    art: Optional[Art] = None
    dauer_min: Optional[int] = None
    erscheinungsdatum: Optional[date] = None


# --- Resolvers ---


@strawberry.type
class Query:
    @strawberry.field
    async def film(self, info: Info, id: strawberry.ID) -> Optional[FilmType]:
        """Film par ID, avec description et acteurs."""
        service = _container(info).film_service()
        with _domain_errors():
            film = await service.find_by_id(parse_id(id), mit_details=True)
        return FilmType.from_entity(film)

    @strawberry.field
    async def filme(self, info: Info) -> list[FilmType]:
        """Tous les films ; erreur NOT_FOUND si le catalogue est vide."""
        service = _container(info).film_service()
        with _domain_errors():
            filme = await service.find_all()
        return [FilmType.from_entity(film) for film in filme]

    @strawberry.field
    async def suche(
        self,
        info: Info,
        suchparameter: Optional[SuchparameterInput] = None,
        page: Optional[int] = None,
        size: Optional[int] = None,
    ) -> FilmSlice:
        """Recherche paginee ; une page vide n'est pas une erreur."""
        criteria = (
            Suchparameter.from_mapping(strawberry.asdict(suchparameter))
            if suchparameter is not None
            else Suchparameter()
        )
        pageable = Pageable.create(page, size)

        service = _container(info).film_service()
        result = await service.find(criteria, pageable)
        return FilmSlice(
            content=[FilmType.from_entity(film) for film in result.content],
            number=pageable.number,
            size=pageable.size,
            total_elements=result.total_elements,
            total_pages=result.total_pages(pageable.size),
        )

    @strawberry.field
    async def anzahl(self, info: Info) -> int:
        """Nombre total de films."""
        return await _container(info).film_service().count()


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create(self, info: Info, input: FilmInput) -> CreatePayload:
        """Cree un film (roles admin ou user)."""
        with _domain_errors():
            check_roles(info.context["request"], (ROLE_ADMIN, ROLE_USER))
            film = parse_film(strawberry.asdict(input))
            film_id = await _container(info).film_write_service().create(film)
        return CreatePayload(id=strawberry.ID(str(film_id)))

    @strawberry.mutation
    async def update(self, info: Info, input: FilmUpdateInput) -> UpdatePayload:
        """Met a jour un film ; la version est convertie en jeton '"<n>"'."""
        with _domain_errors():
            check_roles(info.context["request"], (ROLE_ADMIN, ROLE_USER))
            values = strawberry.asdict(input)
            film_id = values.pop("id")
            version = values.pop("version")
            film = parse_film_update(values)
            new_version = await _container(info).film_write_service().update(
                parse_id(film_id), film, f'"{version}"'
            )
        return UpdatePayload(version=new_version)

    @strawberry.mutation
    async def delete(self, info: Info, id: strawberry.ID) -> DeletePayload:
        """Supprime un film (role admin) ; success vaut True meme si le film n'existait pas."""
        with _domain_errors():
            check_roles(info.context["request"], (ROLE_ADMIN,))
            film_id = parse_id(id)
            if film_id is not None:
                await _container(info).film_write_service().delete(film_id)
        return DeletePayload(success=True)


schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router() -> GraphQLRouter:
    """Routeur FastAPI du schema, a inclure avec le prefixe /graphql (GraphiQL inclus)."""
    return GraphQLRouter(schema)
