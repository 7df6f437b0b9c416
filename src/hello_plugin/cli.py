#!/usr/bin/env python3
"""
Command line entry point for the Hello World plugin.
"""

import json
import os
import sys

import click
import uvicorn

from hello_plugin import __version__
from hello_plugin.config import settings
from hello_plugin.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="hello-plugin")
def cli() -> None:
    """Hello World plugin CLI - serve the plugin and inspect its operations."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, show_default=True, help="Host to bind to")
@click.option(
    "--port", default=settings.api_port, show_default=True, type=int, help="Port to bind to"
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the plugin API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting plugin API server", host=host, port=port, reload=reload, log_level=log_level
    )

    # Update the loaded settings for this process; the environment carries
    # them into the worker process uvicorn spawns when reloading
    debug = log_level == "debug"
    settings.debug = debug
    settings.log_level = log_level.upper()
    os.environ["HELLO_PLUGIN_DEBUG"] = str(debug).lower()
    os.environ["HELLO_PLUGIN_LOG_LEVEL"] = log_level

    try:
        uvicorn.run(
            "hello_plugin.api.app:app",
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
@click.option("--json", "as_json", is_flag=True, default=False, help="Print as JSON")
def operations(as_json: bool) -> None:
    """List the queries, mutations, functions and REST routes the plugin registers."""
    from hello_plugin.plugin import create_plugin

    description = create_plugin().describe()

    if as_json:
        click.echo(json.dumps(description, indent=2))
        return

    click.echo(f"{description['name']} {description['version']}")
    for kind in ("queries", "mutations", "functions"):
        click.echo(f"{kind.capitalize()}:")
        for name in description[kind]:
            click.echo(f"  {name}")
    click.echo("REST:")
    for route in description["rest"]:
        click.echo(f"  {route['method']:6} {route['path']}  {route['description']}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
