"""
`suitokengen validate`: check a .env file before starting the server or CLI.
"""

import os
from typing import Dict, Optional

import click
from dotenv import dotenv_values

from suitokengen.config.validation import KNOWN_KEYS, ValidationResult, validate_config


def collect_settings(env_file: str) -> Dict[str, Optional[str]]:
    """Values from the .env file, with process environment for keys it omits."""
    values = dict(dotenv_values(env_file))
    for key in KNOWN_KEYS:
        if values.get(key) is None:
            values[key] = os.getenv(key)
    return values


def format_result(key: str, result: ValidationResult) -> str:
    status = "ok" if result.is_valid else "FAIL"
    return f"[{status:>4}] {key}: {result.message}"


@click.command()
@click.option("--env-file", default=".env", show_default=True, help="Path to .env file")
def validate(env_file: str) -> None:
    """Validate token generator configuration.

    Exits with status 1 when any setting is invalid.
    """
    if not os.path.exists(env_file):
        raise click.ClickException(f"Environment file not found: {env_file}")

    results = validate_config(collect_settings(env_file))
    for key, result in results.items():
        click.echo(format_result(key, result))

    failures = [key for key, result in results.items() if not result.is_valid]
    if failures:
        raise click.ClickException(
            f"{len(failures)} setting(s) need attention: {', '.join(failures)}"
        )
    click.echo(f"{len(results)} settings checked, all valid")
