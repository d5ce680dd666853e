"""
Main GraphQL schema definition using Strawberry
"""

import strawberry
from graphql import get_introspection_query, graphql_sync, specified_scalar_types
from graphql import validate_schema as gql_validate_schema

from ..logging import get_logger
from .extensions import AllowUnusedVariables
from .queries.root import Query

logger = get_logger(__name__)

# Built once at import and shared read-only by every request
schema = strawberry.Schema(
    query=Query,
    extensions=[AllowUnusedVariables],
)

# graphql-core only keeps the scalars a schema references; variables may
# still be declared with any built-in scalar (e.g. `$x: Int`).
for _name, _scalar in specified_scalar_types.items():
    schema._schema.type_map.setdefault(_name, _scalar)

# Canonical query used when a request carries no query of its own
INTROSPECTION_QUERY = get_introspection_query()


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core's structural validation followed by a synchronous
    introspection, so a broken schema stops the server from starting.

    Raises:
        Exception: If the schema is invalid or introspection fails
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, INTROSPECTION_QUERY)
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def print_schema() -> str:
    """Get the schema in SDL form."""
    return schema.as_str()
