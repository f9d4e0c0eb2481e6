"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.extensions import QueryDepthLimiter
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionResult

from ..config import settings
from ..exceptions import SchemaValidationError
from ..logging import get_logger
from ..store import DataStore
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    extensions=[
        # Author.books -> Book.author -> ... can nest without bound
        QueryDepthLimiter(max_depth=settings.max_query_depth),
    ],
)


async def execute(
    document: str,
    *,
    store: DataStore,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
) -> ExecutionResult:
    """Execute a GraphQL document against ``store``.

    Validation and resolver failures are reported in ``result.errors``
    rather than raised.
    """
    result = await schema.execute(
        document,
        variable_values=variables,
        context_value=build_context(store),
        operation_name=operation_name,
    )
    if result.errors:
        logger.info(
            "GraphQL execution returned errors",
            operation_name=operation_name,
            errors=[error.message for error in result.errors],
        )
    return result


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    This ensures that all type references, including the lazy Author <-> Book
    references, can be resolved.

    Raises:
        SchemaValidationError: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise SchemaValidationError(
                f"GraphQL schema validation failed: {'; '.join(error_messages)}"
            )

        # Check that introspection query works (catches most resolution issues)
        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise SchemaValidationError(
                f"GraphQL introspection failed: {'; '.join(error_messages)}"
            )

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def export_schema() -> str:
    """Return the schema in GraphQL SDL."""
    return schema.as_str()


# Create the GraphQL router for FastAPI integration
def create_graphql_router(store: DataStore) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI bound to ``store``."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return build_context(store, request=request)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
