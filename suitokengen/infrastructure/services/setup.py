"""Helper module for setting up services with minimal configuration."""

from dataclasses import dataclass
from typing import Optional

from suitokengen.application.interfaces.itemplate_renderer import ITemplateRenderer
from suitokengen.application.services.token_generator import TokenGeneratorService
from suitokengen.application.services.verification_service import VerificationService
from suitokengen.infrastructure.rendering.jinja_renderer import get_renderer
from suitokengen.infrastructure.sources.git_fetcher import GitRepositoryFetcher
from suitokengen.infrastructure.sources.local_resolver import LocalSourceResolver


@dataclass
class Services:
    """A dataclass that holds all the services."""

    renderer: ITemplateRenderer
    token_generator: TokenGeneratorService
    verification_service: VerificationService


def setup_services(
    renderer: Optional[ITemplateRenderer] = None,
    git_fetcher: Optional[GitRepositoryFetcher] = None,
) -> Services:
    """
    Set up services with minimal configuration.

    Args:
        renderer: Template renderer. Defaults to the bundled Jinja templates.
        git_fetcher: Repository fetcher. Defaults to one configured from settings.

    Returns:
        Services instance with all required services
    """
    renderer = renderer or get_renderer()

    return Services(
        renderer=renderer,
        token_generator=TokenGeneratorService(renderer),
        verification_service=VerificationService(
            renderer,
            remote_fetcher=git_fetcher or GitRepositoryFetcher(),
            local_fetcher=LocalSourceResolver(),
        ),
    )
