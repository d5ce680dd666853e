"""
Request decoding and execution against the GraphQL schema
"""

import json
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..logging import get_logger
from ..models import PEOPLE, Person
from .encoder import DeferredResult, DirectResult, ExecutionResult, StreamResult
from .schema import INTROSPECTION_QUERY, schema

logger = get_logger(__name__)


class RequestDecodeError(Exception):
    """Raised when a request body cannot be turned into a GraphQLRequest."""


class GraphQLRequest(BaseModel):
    """A decoded GraphQL request; a missing query means introspection."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: str | None = None
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")

    @field_validator("query", "operation_name", mode="before")
    @classmethod
    def _blank_string_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("variables", mode="before")
    @classmethod
    def _decode_variables(cls, value: Any) -> Any:
        # Older clients send variables as a JSON-encoded string
        if isinstance(value, str):
            if not value:
                return None
            try:
                return json.loads(value)
            except json.JSONDecodeError as e:
                raise ValueError(f"variables is not valid JSON: {e.msg}") from e
        return value


def decode_request(body: bytes) -> GraphQLRequest:
    """Decode a raw POST body into a GraphQLRequest.

    An empty or whitespace-only body decodes to an empty request.

    Raises:
        RequestDecodeError: If the body is not a JSON object of the expected shape
    """
    if not body.strip():
        return GraphQLRequest()

    try:
        payload = json.loads(body)
    except ValueError as e:
        raise RequestDecodeError(f"Request body is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise RequestDecodeError("Request body must be a JSON object")

    try:
        return GraphQLRequest.model_validate(payload)
    except ValidationError as e:
        reasons = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise RequestDecodeError(f"Invalid GraphQL request: {'; '.join(reasons)}") from e


def normalize_query(query: str) -> str:
    """Trim a query and fold CRLF line breaks into single spaces."""
    return query.strip().replace("\r\n", " ")


def _wrap_result(raw: Any) -> ExecutionResult:
    if hasattr(raw, "initial_result"):
        initial = raw.initial_result
        return DeferredResult(
            data=initial.data,
            errors=list(initial.errors or []),
            patches=raw.subsequent_results,
        )
    if hasattr(raw, "data"):
        return DirectResult(
            data=raw.data,
            errors=list(raw.errors or []),
            extensions=raw.extensions or None,
        )
    return StreamResult(source=raw)


def _log_result(result: ExecutionResult) -> None:
    if isinstance(result, StreamResult):
        logger.info("Result metadata", kind="stream")
        return

    logger.info(
        "Result metadata",
        kind="deferred" if isinstance(result, DeferredResult) else "direct",
        has_data=result.data is not None,
        error_count=len(result.errors),
        errors=[error.message for error in result.errors] or None,
        extensions=getattr(result, "extensions", None),
    )


async def execute_request(
    request: GraphQLRequest,
    people: Sequence[Person] = PEOPLE,
    context: dict[str, Any] | None = None,
) -> ExecutionResult:
    """Execute a decoded request against the schema.

    Without a query the canonical introspection query runs, whatever else the
    request carries. GraphQL errors are returned inside the result.

    Args:
        request: Decoded request
        people: Data source bound to the execution context
        context: Extra context entries for resolvers (e.g. the HTTP request)
    """
    context_value: dict[str, Any] = {**(context or {}), "people": people}

    if request.query is None:
        logger.info("No query received, running introspection")
        raw = await schema.execute(INTROSPECTION_QUERY, context_value=context_value)
    else:
        logger.info(
            "Received query",
            query=request.query,
            operation_name=request.operation_name,
        )
        query = normalize_query(request.query)
        if request.variables is not None:
            logger.info("Received variables", variables=request.variables)
            raw = await schema.execute(
                query,
                variable_values=request.variables,
                context_value=context_value,
                operation_name=request.operation_name,
            )
        else:
            raw = await schema.execute(
                query,
                context_value=context_value,
                operation_name=request.operation_name,
            )

    result = _wrap_result(raw)
    _log_result(result)
    return result
