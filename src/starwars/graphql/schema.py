"""
Star Wars GraphQL schema definition using Strawberry
"""

import strawberry
from graphql import GraphQLSchema, get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema

from ..logging import get_logger
from .queries.root import Query
from .types.character import Droid, Human

logger = get_logger(__name__)

# Human and Droid are only reachable through the Character interface,
# so they have to be registered explicitly.
schema = strawberry.Schema(query=Query, types=[Human, Droid])


def graphql_schema() -> GraphQLSchema:
    """The graphql-core schema the executor runs against."""
    return schema._schema


def render_schema() -> str:
    """Render the schema in SDL."""
    return schema.as_str()


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Ensures every type reference resolves and introspection works, so the
    server fails fast instead of erroring on the first request.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        errors = gql_validate_schema(graphql_schema())
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema(), get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise
