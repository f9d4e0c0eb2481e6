#!/usr/bin/env python3
"""
Main CLI entry point for Bookshelf backend server.
"""

import asyncio
import json
import logging
import os
import sys
from pathlib import Path

import click
import uvicorn

from bookshelf import __version__
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - serve the GraphQL API and work with its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=5000,
    type=int,
    help="Port to bind to (default: 5000)",
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
    help="Number of worker processes; each keeps its own in-memory store (default: 1)",
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
    """Start the Bookshelf API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Worker processes import the app fresh and read settings from the environment
    if log_level == "debug":
        os.environ["BOOKSHELF_DEBUG"] = "true"
        os.environ["BOOKSHELF_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("BOOKSHELF_DEBUG", "false")
        os.environ.setdefault("BOOKSHELF_LOG_LEVEL", log_level)

    if workers > 1:
        logger.warning(
            "Each worker process serves an independent in-memory store",
            workers=workers,
        )

    try:
        uvicorn.run(
            "bookshelf.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema_command(output: Path | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from bookshelf.graphql.schema import export_schema

    sdl = export_schema()
    if output is None:
        click.echo(sdl)
        return

    output.write_text(sdl + "\n", encoding="utf-8")
    click.echo(f"✓ Schema written to {output}")


@cli.command()
@click.argument("document")
@click.option(
    "--variables",
    default=None,
    help="JSON object of variable values",
)
@click.option(
    "--operation-name",
    default=None,
    help="Operation to run when the document holds several",
)
@click.option(
    "--empty",
    is_flag=True,
    default=False,
    help="Run against an empty store instead of the sample catalogue",
)
def query(document: str, variables: str | None, operation_name: str | None, empty: bool) -> None:
    """Run one GraphQL DOCUMENT against a fresh store and print the result."""
    from bookshelf.graphql.schema import execute
    from bookshelf.store import create_store

    # Keep stdout for the JSON result
    configure_logging(level=logging.WARNING, stream=sys.stderr)

    try:
        variable_values = json.loads(variables) if variables else None
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--variables") from e
    if variable_values is not None and not isinstance(variable_values, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--variables")

    store = create_store(seed=not empty)
    result = asyncio.run(
        execute(
            document,
            store=store,
            variables=variable_values,
            operation_name=operation_name,
        )
    )

    payload: dict = {"data": result.data}
    if result.errors:
        payload["errors"] = [error.formatted for error in result.errors]

    click.echo(json.dumps(payload, indent=2))
    if result.errors:
        sys.exit(1)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
