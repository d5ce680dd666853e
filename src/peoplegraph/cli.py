#!/usr/bin/env python3
"""
Main CLI entry point for the peoplegraph server.
"""

import asyncio
import json
import os
import sys

import click
import uvicorn

from peoplegraph import __version__
from peoplegraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="peoplegraph")
def cli() -> None:
    """peoplegraph CLI - run the server and query the schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=8080,
    type=int,
    help="Port to bind to (default: 8080)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Start the peoplegraph API server."""

    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting peoplegraph API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Reload and worker processes build Settings from these
    if log_level == "debug":
        os.environ["PEOPLEGRAPH_DEBUG"] = "true"
    else:
        os.environ.setdefault("PEOPLEGRAPH_DEBUG", "false")
    os.environ["PEOPLEGRAPH_LOG_LEVEL"] = log_level

    try:
        if reload or workers > 1:
            uvicorn.run(
                "peoplegraph.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from peoplegraph.api.app import create_app
            from peoplegraph.config import Settings

            # The module-level settings predate the environment above
            app = create_app(Settings())
            configure_logging(debug=(log_level == "debug"), level=log_level)

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.argument("query_text", required=False, default="")
@click.option(
    "--variables",
    default=None,
    help="Variables as a JSON object",
)
def query(query_text: str, variables: str | None) -> None:
    """Run QUERY_TEXT against the schema and print the JSON result.

    Without a query the introspection query runs.
    """
    from peoplegraph.graphql.encoder import encode_result_json
    from peoplegraph.graphql.executor import RequestDecodeError, decode_request, execute_request

    configure_logging(level="warning")

    payload = {"query": query_text, "variables": variables}
    try:
        request = decode_request(json.dumps(payload).encode())
    except RequestDecodeError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(2)

    result = asyncio.run(execute_request(request))
    click.echo(encode_result_json(result))


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from peoplegraph.graphql.schema import print_schema

    click.echo(print_schema())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
