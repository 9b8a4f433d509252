"""
Protection des ecritures par roles.

Le jeton Bearer de l'en-tete Authorization est recherche dans la table
auth_tokens de la configuration (jeton -> roles). L'emission des jetons
n'est pas du ressort de l'application.

- create / update : roles "admin" ou "user"
- delete : role "admin"
"""

from collections.abc import Iterable
from typing import Optional

from fastapi import Request
from loguru import logger

ROLE_ADMIN = "admin"
ROLE_USER = "user"


class UnauthenticatedError(Exception):
    """Aucun jeton Bearer valide dans la requete."""


class ForbiddenError(Exception):
    """Le jeton ne donne aucun des roles requis."""


def get_roles(request: Request) -> Optional[set[str]]:
    """
    Retourne les roles associes au jeton Bearer de la requete.

    Returns:
        L'ensemble des roles, ou None si l'en-tete est absent ou le jeton inconnu
    """
    header = request.headers.get("Authorization")
    if not header:
        return None

    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None

    settings = request.app.state.container.config()
    roles = settings.auth_tokens.get(token.strip())
    if roles is None:
        return None
    return set(roles)


def check_roles(request: Request, required: Iterable[str]) -> set[str]:
    """
    Verifie que la requete porte au moins un des roles requis.

    Raises:
        UnauthenticatedError: Jeton absent ou inconnu
        ForbiddenError: Aucun des roles requis
    """
    required = set(required)
    roles = get_roles(request)
    if roles is None:
        logger.debug(f"Acces refuse (pas de jeton valide) : {request.method} {request.url.path}")
        raise UnauthenticatedError("Aucun jeton valide")
    if not roles & required:
        logger.debug(f"Acces refuse (roles {sorted(roles)}, requis {sorted(required)})")
        raise ForbiddenError("Aucun jeton avec des droits suffisants")
    return roles


def require_roles(*required: str):
    """Dependance FastAPI exigeant au moins un des roles donnes."""

    async def dependency(request: Request) -> set[str]:
        return check_roles(request, required)

    return dependency
