"""
Shared fixtures for the token generator tests.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterator, Optional

import pytest

from suitokengen.application.interfaces.isource_fetcher import ISourceFetcher
from suitokengen.domain.models import Environment, TokenParams
from suitokengen.infrastructure.rendering.jinja_renderer import (
    JinjaTemplateRenderer,
    get_renderer,
)
from suitokengen.infrastructure.services.setup import Services, setup_services


class FakeRepositoryFetcher(ISourceFetcher):
    """Serves pre-built repository directories instead of cloning."""

    def __init__(self, repositories: Optional[Dict[str, Path]] = None) -> None:
        self.repositories = repositories or {}
        self.fetched = []

    @contextmanager
    def fetch(self, target: str) -> Iterator[Path]:
        self.fetched.append(target)
        yield self.repositories[target]


@pytest.fixture
def renderer() -> JinjaTemplateRenderer:
    """Provide the renderer backed by the bundled templates."""
    return get_renderer()


@pytest.fixture
def fake_fetcher() -> FakeRepositoryFetcher:
    return FakeRepositoryFetcher()


@pytest.fixture
def services(
    renderer: JinjaTemplateRenderer, fake_fetcher: FakeRepositoryFetcher
) -> Services:
    """Services wired with a fetcher that never touches the network."""
    return setup_services(renderer=renderer, git_fetcher=fake_fetcher)


@pytest.fixture
def token_params() -> TokenParams:
    return TokenParams(
        decimals=8,
        symbol="MTK",
        name="My Token",
        description="A custom token.",
        is_frozen=False,
        environment=Environment.TESTNET,
    )


@pytest.fixture
def frozen_params() -> TokenParams:
    return TokenParams(
        decimals=6,
        symbol="ICE",
        name="Cold Coin",
        description="",
        is_frozen=True,
    )


@pytest.fixture
def contract(renderer: JinjaTemplateRenderer, token_params: TokenParams) -> str:
    """A freshly generated, untouched coin module."""
    return renderer.render(token_params)


@pytest.fixture
def make_package(tmp_path: Path) -> Callable[..., Path]:
    """Factory laying out a minimal Move package with a contract under sources/."""

    def factory(
        contract: str, file_name: str = "mytoken.move", folder: str = "package"
    ) -> Path:
        root = tmp_path / folder
        sources = root / "sources"
        sources.mkdir(parents=True, exist_ok=True)
        (sources / file_name).write_text(contract)
        (root / "Move.toml").write_text('[package]\nname = "mytoken"\n')
        return root

    return factory
