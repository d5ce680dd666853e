"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)


def operation_name_from_query(query: str) -> str:
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = re.search(r"\bquery\s+(\w+)", query)
    if match:
        return match.group(1)
    return "unnamed_operation"


def operation_name_from_body(body: bytes) -> str | None:
    """Best-effort GraphQL operation name for logging; never raises."""
    if not body.strip():
        return "__introspection"

    try:
        data = json.loads(body)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None

    op = data.get("operationName")
    if isinstance(op, str) and op:
        return op

    q = data.get("query")
    if not isinstance(q, str) or not q.strip():
        return "__introspection"
    return operation_name_from_query(q)


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    def __init__(self, app: ASGIApp, graphql_path: str = "/graphql-app") -> None:
        super().__init__(app)
        self.graphql_path = graphql_path

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""

        request_id = set_request_context(request.headers.get("x-request-id"))

        try:
            graphql_operation = None
            if request.method == "POST" and request.url.path == self.graphql_path:
                graphql_operation = operation_name_from_body(await request.body())

            log_data: dict[str, Any] = {
                "method": request.method,
                "path": request.url.path,
                "user_agent": request.headers.get("user-agent"),
                "remote_addr": request.client.host if request.client else None,
            }
            if graphql_operation:
                log_data["graphql_operation"] = graphql_operation

            logger.info("Request started", **log_data)

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
            )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
