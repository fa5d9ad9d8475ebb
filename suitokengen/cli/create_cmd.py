"""
Token creation command.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

import click

from suitokengen.application.services import validation_service
from suitokengen.application.services.exceptions import (
    FileIOError,
    TokenGenError,
    ValidationError,
)
from suitokengen.application.services.token_generator import GeneratedToken
from suitokengen.application.services.validation_service import ValidationResult
from suitokengen.cli.output import handle_error, print_token_created
from suitokengen.client.rpc_client import get_client
from suitokengen.domain.models import Environment, TokenParams, sanitize_name
from suitokengen.infrastructure.sources.move_files import SUB_FOLDER, TEST_FOLDER

logger = logging.getLogger(__name__)

ENVIRONMENT_CHOICES = [env.value for env in Environment]


def prompt_validated(
    label: str,
    check: Callable[..., ValidationResult],
    value_type: click.ParamType = click.STRING,
    default: Optional[object] = None,
    help_text: Optional[str] = None,
):
    """Prompt until ``check`` accepts the answer."""
    if help_text:
        click.echo(help_text)
    while True:
        value = click.prompt(
            label, type=value_type, default=default, show_default=default not in (None, "")
        )
        result = check(value)
        if result.is_valid:
            return value
        click.echo(f"❌ {result.message}")


def require_valid(field: str, result: ValidationResult) -> None:
    if not result.is_valid:
        raise ValidationError(field, result.message)


def project_dir_for(output_dir: str, name: str) -> Path:
    return Path(output_dir) / sanitize_name(name).lower()


def write_project(project_dir: Path, params: TokenParams, generated: GeneratedToken) -> None:
    """Write Move.toml, the coin module and its test module under ``project_dir``."""
    file_name = f"{params.slug.lower()}.move"
    files = {
        project_dir / "Move.toml": generated.move_toml,
        project_dir / SUB_FOLDER / file_name: generated.token_content,
        project_dir / TEST_FOLDER / file_name: generated.test_token_content,
    }

    for path, content in files.items():
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileIOError(path.parent, "create", str(e)) from e
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FileIOError(path, "write", str(e)) from e
        logger.debug("Wrote %s", path)


@click.command()
@click.option("--name", help="Token name, e.g. 'My Token'")
@click.option("--symbol", help="Ticker symbol, at most 6 letters or digits")
@click.option("--decimals", type=int, help="Decimal places, 1 to 99")
@click.option("--description", help="Optional token description")
@click.option("--frozen/--not-frozen", default=None, help="Freeze the coin metadata")
@click.option(
    "--environment",
    type=click.Choice(ENVIRONMENT_CHOICES),
    help="Sui network to build against",
)
@click.option(
    "--output-dir",
    default=".",
    type=click.Path(file_okay=False),
    help="Directory the project folder is created in",
)
@click.option("--force", is_flag=True, help="Overwrite an existing project folder")
@click.option("--server-url", help="Token generator server URL")
@click.option("--local", is_flag=True, help="Generate in-process instead of calling the server")
def create(
    name: Optional[str],
    symbol: Optional[str],
    decimals: Optional[int],
    description: Optional[str],
    frozen: Optional[bool],
    environment: Optional[str],
    output_dir: str,
    force: bool,
    server_url: Optional[str],
    local: bool,
) -> None:
    """Create a new Sui token contract."""
    try:
        if name is None:
            name = prompt_validated("Name", validation_service.check_name)
        else:
            require_valid("name", validation_service.check_name(name))

        project_dir = project_dir_for(output_dir, name)
        while project_dir.exists() and not force:
            if click.confirm(
                "A folder with this name already exists. Do you want to overwrite it?",
                default=False,
            ):
                break
            name = prompt_validated(
                "Please provide a new token name", validation_service.check_name
            )
            project_dir = project_dir_for(output_dir, name)

        if symbol is None:
            symbol = prompt_validated("Symbol", validation_service.check_symbol)
        else:
            require_valid("symbol", validation_service.check_symbol(symbol))

        if decimals is None:
            decimals = prompt_validated(
                "Decimals",
                validation_service.check_decimals,
                value_type=click.INT,
                help_text="Enter a value between 1 and 99 (e.g., 6 for USDC)",
            )
        else:
            require_valid("decimals", validation_service.check_decimals(decimals))

        if description is None:
            description = prompt_validated(
                "Description (optional)", validation_service.check_description, default=""
            )
        else:
            require_valid(
                "description", validation_service.check_description(description)
            )

        if frozen is None:
            frozen = click.confirm("Freeze metadata?", default=False)

        if environment is None:
            environment = click.prompt(
                "Environment",
                type=click.Choice(ENVIRONMENT_CHOICES),
                default=Environment.default().value,
            )

        click.echo("Creating contract...")
        client = get_client(local=local, base_url=server_url)
        generated = client.create(
            decimals=decimals,
            name=name,
            symbol=symbol,
            description=description,
            is_frozen=frozen,
            environment=environment,
        )

        params = TokenParams.from_request(
            decimals=decimals,
            name=name,
            symbol=symbol,
            description=description,
            is_frozen=frozen,
            environment=environment,
        )
        write_project(project_dir, params, generated)
    except TokenGenError as e:
        handle_error(e)

    print_token_created(params, str(project_dir))
