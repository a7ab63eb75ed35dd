"""
Main GraphQL schema definition using Strawberry
"""

from typing import TYPE_CHECKING, Any

import strawberry
from fastapi import Request
from graphql import GraphQLError, get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..logging import get_logger
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query

if TYPE_CHECKING:
    from ..database.gateway import StorageGateway

logger = get_logger(__name__)


class SchemaValidationError(Exception):
    """The composed schema is invalid or cannot be introspected."""


class BookshelfSchema(strawberry.Schema):
    """Strawberry schema that reports execution errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            logger.warning(
                "GraphQL error",
                message=error.message,
                path=error.path,
                error_type=type(original).__name__ if original else "GraphQLError",
            )


def build_schema() -> strawberry.Schema:
    """Compose the query and mutation roots into one schema.

    There is no subscription root.
    """
    return BookshelfSchema(query=Query, mutation=Mutation)


def validate_schema(schema: strawberry.Schema) -> None:
    """Validate a GraphQL schema at startup.

    This ensures that all type references, including the lazy ones between
    User, Book and Content, can be resolved so the server fails fast.

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


def create_graphql_router(
    schema: strawberry.Schema, store: "StorageGateway", graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI bound to one schema and storage gateway."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return build_context(store, request=request)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
