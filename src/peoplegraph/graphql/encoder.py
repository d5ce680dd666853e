"""
Execution result variants and their JSON encoding
"""

import json
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Any

from graphql import GraphQLError

from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DirectResult:
    """A complete result produced in one shot."""

    data: dict[str, Any] | None
    errors: list[GraphQLError] = field(default_factory=list)
    extensions: dict[str, Any] | None = None


@dataclass(frozen=True)
class DeferredResult:
    """An initial payload followed by incremental patches."""

    data: dict[str, Any] | None
    errors: list[GraphQLError] = field(default_factory=list)
    patches: AsyncIterator[Any] | None = None


@dataclass(frozen=True)
class StreamResult:
    """A streaming source; there is no transport for it."""

    source: AsyncIterator[Any] | None = None


ExecutionResult = DirectResult | DeferredResult | StreamResult


def _payload(
    data: dict[str, Any] | None,
    errors: list[GraphQLError],
    extensions: dict[str, Any] | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {"data": data}
    if errors:
        payload["errors"] = [error.formatted for error in errors]
    if extensions:
        payload["extensions"] = extensions
    return payload


def encode_result(result: ExecutionResult) -> dict[str, Any]:
    """Convert an execution result into the response payload.

    Only the initial payload of a deferred result is encoded; its patches are
    left for drain_patches(). Stream results encode as an empty object.
    """
    if isinstance(result, DirectResult):
        return _payload(result.data, result.errors, result.extensions)
    if isinstance(result, DeferredResult):
        return _payload(result.data, result.errors)
    if isinstance(result, StreamResult):
        return {}
    raise TypeError(f"Unsupported execution result: {type(result).__name__}")


def to_json(payload: dict[str, Any]) -> str:
    """Serialize a payload; equal payloads always give identical strings."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def encode_result_json(result: ExecutionResult) -> str:
    return to_json(encode_result(result))


async def drain_patches(result: DeferredResult) -> int:
    """Consume the patches of a deferred result, logging each one.

    Runs after the response is sent, so patches never reach the client.

    Returns:
        Number of patches observed
    """
    if result.patches is None:
        return 0

    count = 0
    async for patch in result.patches:
        count += 1
        formatted = getattr(patch, "formatted", patch)
        logger.info("Deferred patch received", patch=to_json(formatted), sequence=count)
    return count
