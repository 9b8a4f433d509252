"""
Routes REST de lecture des films (acces public).

- GET /rest/{id} : film avec description et acteurs, en-tete ETag = version
- GET /rest : recherche paginee (criteres et page/size en query string)
"""

from typing import Optional

from fastapi import APIRouter, Header, Request
from fastapi.responses import JSONResponse, Response

from ...core.value_objects import Pageable, Suchparameter
from ...services.film_service import parse_id
from ..schemas import film_to_json, page_to_json

router = APIRouter(prefix="/rest", tags=["Film REST-API"])


@router.get("/{film_id}")
async def get_by_id(
    request: Request,
    film_id: str,
    if_none_match: Optional[str] = Header(default=None),
):
    """Film par ID ; 304 si la version de l'en-tete If-None-Match est la version courante."""
    service = request.app.state.container.film_service()
    film = await service.find_by_id(parse_id(film_id), mit_details=True)

    etag = f'"{film.version}"'
    if if_none_match is not None and if_none_match.strip() == etag:
        return Response(status_code=304, headers={"ETag": etag})

    return JSONResponse(film_to_json(film), headers={"ETag": etag})


@router.get("")
async def find(request: Request):
    """Recherche paginee ; les criteres inconnus ou non numeriques sont ignores."""
    params = request.query_params
    suchparameter = Suchparameter.from_mapping(params)
    pageable = Pageable.create(params.get("page"), params.get("size"))

    service = request.app.state.container.film_service()
    result = await service.find(suchparameter, pageable)
    return JSONResponse(page_to_json(result, pageable))
