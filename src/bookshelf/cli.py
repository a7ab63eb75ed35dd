#!/usr/bin/env python3
"""
Main CLI entry point for Bookshelf API server.
"""

import asyncio
import json
import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the server and execute GraphQL documents."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8090, type=int, help="Port to bind to (default: 8090)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Bookshelf API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info("Starting Bookshelf API server", host=host, port=port, reload=reload)

    # The app factory runs in the server process and reads settings from the environment
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"
        os.environ["BOOKSHELF_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSHELF_DEBUG", "false")
        os.environ.setdefault("BOOKSHELF_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "bookshelf.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.argument("document")
@click.option("--variables", default=None, help="Operation variables as a JSON object")
@click.option("--operation-name", default=None, help="Operation to run in a multi-operation document")
@click.option(
    "--database-url",
    default=None,
    help="Database URL (defaults to BOOKSHELF_DATABASE_URL / settings)",
)
def query(
    document: str, variables: str | None, operation_name: str | None, database_url: str | None
) -> None:
    """Execute a GraphQL DOCUMENT and print the JSON result.

    DOCUMENT is either the document text or '@path' to read it from a file.
    """
    from bookshelf.database.gateway import StorageGateway
    from bookshelf.graphql.execution import execute_operation, result_to_dict
    from bookshelf.graphql.schema import build_schema

    # Keep stdout for the JSON result
    configure_logging(stream=sys.stderr)

    if document.startswith("@"):
        with open(document[1:], encoding="utf-8") as f:
            document = f.read()

    try:
        variable_values = json.loads(variables) if variables else None
    except json.JSONDecodeError as e:
        click.echo(f"✗ Invalid --variables JSON: {e}", err=True)
        sys.exit(2)

    async def do_query() -> dict:
        store = StorageGateway.from_url(database_url)
        try:
            result = await execute_operation(
                build_schema(),
                document,
                store=store,
                variables=variable_values,
                operation_name=operation_name,
            )
            return result_to_dict(result)
        finally:
            await store.dispose()

    payload = asyncio.run(do_query())
    click.echo(json.dumps(payload, indent=2, default=str))
    if payload.get("errors"):
        sys.exit(1)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
