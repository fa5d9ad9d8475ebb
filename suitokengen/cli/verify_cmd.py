"""
Token verification command.
"""

import logging
from typing import List, Optional

import click

from suitokengen.application.services.exceptions import (
    TamperedError,
    TokenGenError,
    ValidationError,
)
from suitokengen.cli.output import handle_error, print_token_verified
from suitokengen.client.rpc_client import ITokenGenClient, get_client
from suitokengen.infrastructure.sources.local_resolver import LocalSourceResolver
from suitokengen.infrastructure.sources.move_files import find_move_files, read_move_file

logger = logging.getLogger(__name__)


def verify_path(client: ITokenGenClient, path: str, verify_all: bool) -> List[str]:
    """Read Move files from ``path`` and verify their content through ``client``."""
    verified = []
    with LocalSourceResolver().fetch(path) as root:
        files = find_move_files(root)
        if not verify_all:
            files = files[:1]
        for file in files:
            label = str(file.relative_to(root)) if file != root else file.name
            click.echo(f"Verifying {label}...")
            try:
                client.verify_content(read_move_file(file))
            except TamperedError as e:
                raise TamperedError(f"{label}: {e.message}") from e
            verified.append(label)
    return verified


@click.command()
@click.option("--path", "-p", help="Local package directory or Move file")
@click.option("--url", "-u", help="GitHub or GitLab repository URL")
@click.option("--all", "verify_all", is_flag=True, help="Verify every Move file, not just the first")
@click.option("--server-url", help="Token generator server URL")
@click.option("--local", is_flag=True, help="Verify in-process instead of calling the server")
def verify(
    path: Optional[str],
    url: Optional[str],
    verify_all: bool,
    server_url: Optional[str],
    local: bool,
) -> None:
    """Verify an existing contract from a repository or local path."""
    try:
        if not path and not url:
            raise ValidationError("input", "Either --path or --url must be provided.")

        client = get_client(local=local, base_url=server_url)
        if path:
            files = verify_path(client, path, verify_all)
            print_token_verified(path=path, files=files)
        if url:
            click.echo(f"Verifying {url}...")
            client.verify_url(url)
            print_token_verified(url=url)
    except TokenGenError as e:
        handle_error(e)
