"""API GraphQL du catalogue de films."""

from .schema import create_graphql_router, schema

__all__ = ["create_graphql_router", "schema"]
