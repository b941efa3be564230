#!/usr/bin/env python3
"""
Main CLI entry point for the Star Wars GraphQL server.
"""

import os
import sys
from pathlib import Path

import click
import uvicorn

from starwars import __version__
from starwars.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="starwars")
def cli() -> None:
    """Star Wars GraphQL CLI - run the server and inspect the schema."""
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
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the GraphQL API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Star Wars GraphQL server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads these at import time
    if log_level == "debug":
        os.environ["STARWARS_DEBUG"] = "true"
        os.environ["STARWARS_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("STARWARS_DEBUG", "false")
        os.environ.setdefault("STARWARS_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "starwars.api.app:app",
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
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def schema(output: Path | None) -> None:
    """Print the GraphQL schema in SDL."""
    from starwars.graphql.schema import render_schema

    sdl = render_schema()
    if output is None:
        click.echo(sdl)
        return

    output.write_text(sdl + "\n", encoding="utf-8")
    click.echo(f"Schema written to {output}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
