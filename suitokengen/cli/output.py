"""
Success and error reporting for CLI commands.
"""

import sys
from typing import List, NoReturn, Optional

import click

from suitokengen.application.services.exceptions import TokenGenError
from suitokengen.domain.models import TokenParams


def handle_error(error: TokenGenError) -> NoReturn:
    """Print ``error`` to stderr and exit with status 1."""
    click.secho("❌ ERROR: ", fg="red", bold=True, err=True, nl=False)
    click.echo(f"{error.kind}: {error.message}", err=True)
    sys.exit(1)


def print_token_created(params: TokenParams, project_dir: str) -> None:
    click.secho("✅ SUCCESS: ", fg="green", bold=True, nl=False)
    click.echo(f"Contract has been generated in {project_dir}")
    click.echo("Token Details:")
    click.echo(f"  Name: {params.name}")
    click.echo(f"  Symbol: {params.symbol}")
    click.echo(f"  Decimals: {params.decimals}")
    click.echo(f"  Environment: {params.environment.value}")
    click.echo(f"  Description: {params.description or 'None'}")
    click.echo(f"  Frozen: {'Yes' if params.is_frozen else 'No'}")


def print_token_verified(
    path: Optional[str] = None,
    url: Optional[str] = None,
    files: Optional[List[str]] = None,
) -> None:
    click.secho("✅ SUCCESS: ", fg="green", bold=True, nl=False)
    if path:
        click.echo(f"Verified successfully from path: {path}")
    elif url:
        click.echo(f"Verified successfully from url: {url}")
    else:
        click.echo("Verified successfully")
    for file in files or []:
        click.echo(f"  - {file}")
