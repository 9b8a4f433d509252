"""
Routes REST d'ecriture des films (protegees par roles).

- POST /rest : creation (admin, user) -> 201 + Location
- PUT /rest/{id} : mise a jour avec If-Match (admin, user) -> 204 + ETag
- DELETE /rest/{id} : suppression (admin) -> 204, meme si le film n'existe pas
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Header, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from loguru import logger

from ...services.film_service import parse_id
from ...services.validation import parse_film, parse_film_update
from ..security import ROLE_ADMIN, ROLE_USER, require_roles

router = APIRouter(prefix="/rest", tags=["Film REST-API"])


@router.post("", dependencies=[Depends(require_roles(ROLE_ADMIN, ROLE_USER))])
async def create(request: Request, payload: dict[str, Any] = Body(...)):
    """Cree un film ; 400 avec les violations si les donnees sont invalides."""
    film = parse_film(payload)

    service = request.app.state.container.film_write_service()
    film_id = await service.create(film)
    logger.info(f"Film cree : id={film_id}, imdb_id={film.imdb_id}")

    return JSONResponse(
        {"id": film_id},
        status_code=201,
        headers={"Location": f"{router.prefix}/{film_id}"},
    )


@router.put("/{film_id}", dependencies=[Depends(require_roles(ROLE_ADMIN, ROLE_USER))])
async def update(
    request: Request,
    film_id: str,
    payload: dict[str, Any] = Body(...),
    if_match: Optional[str] = Header(default=None),
):
    """Met a jour un film ; la version attendue est passee dans If-Match, ex: "0"."""
    if if_match is None:
        return PlainTextResponse('En-tete "If-Match" manquant', status_code=428)

    film = parse_film_update(payload)

    service = request.app.state.container.film_write_service()
    version = await service.update(parse_id(film_id), film, if_match.strip())
    logger.info(f"Film mis a jour : id={film_id}, version={version}")

    return Response(status_code=204, headers={"ETag": f'"{version}"'})


@router.delete("/{film_id}", dependencies=[Depends(require_roles(ROLE_ADMIN))])
async def delete(request: Request, film_id: str):
    """Supprime un film ; 204 qu'il ait existe ou non."""
    parsed_id = parse_id(film_id)
    if parsed_id is not None:
        service = request.app.state.container.film_write_service()
        deleted = await service.delete(parsed_id)
        logger.info(f"Film supprime : id={film_id}, existait={deleted}")

    return Response(status_code=204)
