"""GraphQL schema, types and resolvers for authors and books."""

from .schema import create_graphql_router, execute, export_schema, schema, validate_schema

__all__ = ["create_graphql_router", "execute", "export_schema", "schema", "validate_schema"]
