"""
GraphQL POST endpoint
"""

from fastapi import APIRouter, BackgroundTasks, Request, Response
from fastapi.responses import JSONResponse

from ...graphql.encoder import DeferredResult, drain_patches, encode_result_json
from ...graphql.executor import RequestDecodeError, decode_request, execute_request
from ...logging import get_logger

logger = get_logger(__name__)


async def graphql_app(request: Request, background_tasks: BackgroundTasks) -> Response:
    """Execute the GraphQL request in the body; an empty body runs introspection."""
    body = await request.body()

    try:
        graphql_request = decode_request(body)
    except RequestDecodeError as e:
        logger.warning("Rejected GraphQL request", error=str(e))
        return JSONResponse(status_code=400, content={"errors": [{"message": str(e)}]})

    result = await execute_request(graphql_request, context={"request": request})

    if isinstance(result, DeferredResult):
        # The response goes out first; patches are only logged
        background_tasks.add_task(drain_patches, result)

    return Response(content=encode_result_json(result), media_type="application/json")


def create_graphql_router(path: str = "/graphql-app") -> APIRouter:
    """Create the router serving the GraphQL endpoint at the given path."""
    router = APIRouter()
    router.add_api_route(path, graphql_app, methods=["POST"])
    return router
