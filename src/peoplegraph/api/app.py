"""
Main FastAPI application for the peoplegraph server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from .. import __version__
from ..config import Settings, resolve_web_root, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting peoplegraph API...", graphql_path=app.state.settings.graphql_path)
    yield
    logger.info("Shutting down peoplegraph API...")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app_settings = app_settings or settings

    app = FastAPI(
        title="peoplegraph API",
        description="Static people list over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings

    app.add_middleware(LoggingContextMiddleware, graphql_path=app_settings.graphql_path)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if app_settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(  # pyright: ignore [reportUnusedFunction]
        request: Request, exc: StarletteHTTPException
    ):
        """Unmatched routes and methods are both reported as Not Found."""
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not Found", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(  # pyright: ignore [reportUnusedFunction]
        request: Request, exc: Exception
    ):
        """Last-resort handler; debug mode shows Starlette's traceback page instead."""
        logger.error(
            "An unhandled exception has occurred while executing the request.",
            method=request.method,
            path=request.url.path,
            exc_info=exc,
        )
        detail = str(exc) if app_settings.expose_error_details else "Internal Server Error"
        return PlainTextResponse(detail, status_code=500)

    # GraphQL endpoint
    try:
        from ..graphql.schema import validate_schema
        from .endpoints.graphql import create_graphql_router

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(app_settings.graphql_path))
        logger.info("GraphQL endpoint initialized", endpoint=app_settings.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    from .endpoints import pages

    app.include_router(pages.router, tags=["Pages"])

    # Static files last so API routes take precedence
    app.mount("/", StaticFiles(directory=resolve_web_root(app_settings)), name="static")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "peoplegraph.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
