"""
`suitokengen config`: read and edit the settings stored in a .env file.
"""

from pathlib import Path
from typing import Optional

import click
from dotenv import dotenv_values, set_key, unset_key

from suitokengen.config import Settings
from suitokengen.config.validation import KNOWN_KEYS, validate_config

env_file_option = click.option(
    "--env-file",
    default=".env",
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Path to .env file",
)


def _require_known_key(key: str) -> None:
    if key not in KNOWN_KEYS:
        raise click.ClickException(
            f"Invalid configuration key: {key} (expected one of {', '.join(KNOWN_KEYS)})"
        )


@click.group()
def config() -> None:
    """Manage token generator configuration."""


@config.command("set", context_settings={"ignore_unknown_options": True})
@click.argument("key")
@click.argument("value")
@env_file_option
def set_value(key: str, value: str, env_file: str) -> None:
    """Validate VALUE and store it under KEY."""
    _require_known_key(key)

    check = validate_config({key: value}).get(key)
    if check is not None and not check.is_valid:
        raise click.ClickException(f"Invalid value for {key}: {check.message}")

    path = Path(env_file)
    try:
        path.touch(exist_ok=True)
        set_key(str(path), key, value)
    except OSError as e:
        raise click.ClickException(f"Could not write {path}: {e}") from e
    click.echo(f"Set {key}={value} in {path}")


@config.command("unset")
@click.argument("key")
@env_file_option
def unset_value(key: str, env_file: str) -> None:
    """Remove KEY from the .env file."""
    _require_known_key(key)

    path = Path(env_file)
    if key not in dotenv_values(path):
        raise click.ClickException(f"{key} is not set in {path}")
    unset_key(str(path), key)
    click.echo(f"Removed {key} from {path}")


@config.command("get")
@click.argument("key", required=False)
@env_file_option
@click.option(
    "--effective",
    is_flag=True,
    help="Show resolved settings (environment, .env file and defaults).",
)
def get_value(key: Optional[str], env_file: str, effective: bool) -> None:
    """Print one setting, or all of them."""
    if key:
        _require_known_key(key)

    if effective:
        values = {
            name: value
            for name, value in Settings(_env_file=env_file).model_dump().items()
            if value is not None
        }
    else:
        if not Path(env_file).exists():
            raise click.ClickException(f"Environment file not found: {env_file}")
        values = dotenv_values(env_file)

    if key:
        if key not in values:
            raise click.ClickException(f"{key} is not set")
        click.echo(f"{key}={values[key]}")
        return

    if not values:
        click.echo("No configuration values found")
    for name, value in values.items():
        click.echo(f"{name}={value}")
