"""
Traduction des exceptions metier en reponses HTTP.

- NotFoundError (et EmptyCollectionError) : 404
- ImdbIdExistsError : 422
- VersionInvalidError : 428
- VersionOutdatedError : 412
- FilmValidationError : 400, avec la liste des violations
- UnauthenticatedError : 401, ForbiddenError : 403
"""

from dataclasses import asdict
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from filmcatalog.core.exceptions import (
    FilmValidationError,
    ImdbIdExistsError,
    NotFoundError,
    VersionInvalidError,
    VersionOutdatedError,
)
from filmcatalog.web.security import ForbiddenError, UnauthenticatedError

_STATUS_BY_EXCEPTION: dict[type[Exception], int] = {
    NotFoundError: 404,
    ImdbIdExistsError: 422,
    VersionInvalidError: 428,
    VersionOutdatedError: 412,
    FilmValidationError: 400,
    UnauthenticatedError: 401,
    ForbiddenError: 403,
}


def _error_body(status_code: int, message: str, **extra: Any) -> dict[str, Any]:
    return {"statusCode": status_code, "message": message, **extra}


async def _handle(request: Request, exc: Exception) -> JSONResponse:
    """Handler commun : statut selon le type d'exception (ou d'une classe parente)."""
    status_code = next(
        code for exc_type, code in _STATUS_BY_EXCEPTION.items() if isinstance(exc, exc_type)
    )
    logger.debug(f"{request.method} {request.url.path} : {type(exc).__name__} -> {status_code}")

    extra: dict[str, Any] = {}
    headers: Optional[dict[str, str]] = None
    if isinstance(exc, FilmValidationError):
        extra["violations"] = [asdict(v) for v in exc.violations]
    if isinstance(exc, UnauthenticatedError):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        _error_body(status_code, str(exc), **extra),
        status_code=status_code,
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre les handlers d'exceptions metier et de securite."""
    for exc_type in _STATUS_BY_EXCEPTION:
        app.add_exception_handler(exc_type, _handle)
