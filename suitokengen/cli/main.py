"""
Main CLI module for the Sui token generator.
"""

from typing import Optional

import click

from suitokengen import __version__
from suitokengen.cli.config_cmd import config
from suitokengen.cli.create_cmd import create
from suitokengen.cli.validate_cmd import validate
from suitokengen.cli.verify_cmd import verify
from suitokengen.config import get_settings
from suitokengen.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Override LOG_LEVEL from the environment",
)
def cli(log_level: Optional[str]):
    """Create and verify Sui coin contracts."""
    settings = get_settings()
    configure_logging(log_level or settings.LOG_LEVEL, settings.LOG_FILE)


# Add commands
cli.add_command(create, name="create")
cli.add_command(verify, name="verify")
cli.add_command(config, name="config")
cli.add_command(validate, name="validate")


@cli.command()
def version():
    """Show version information."""
    click.echo(f"suitokengen version {__version__}")


@cli.command()
@click.option("--host", help="Interface to bind (default: SERVER_HOST)")
@click.option("--port", type=int, help="Port to listen on (default: SERVER_PORT)")
def serve(host: Optional[str], port: Optional[int]):
    """Run the token generator API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "suitokengen.main:app",
        host=host or settings.SERVER_HOST,
        port=port or settings.SERVER_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    cli()
