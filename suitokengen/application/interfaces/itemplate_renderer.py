"""Interface for the template renderer."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from suitokengen.domain.models import Environment, TokenParams


class TemplateVariant(str, Enum):
    """Which Move template a token is rendered with."""

    STANDARD = "standard"
    TEST = "test"


class ITemplateRenderer(ABC):
    """Turns token parameters into Move package text."""

    @abstractmethod
    def render(
        self, params: TokenParams, variant: TemplateVariant = TemplateVariant.STANDARD
    ) -> str:
        """Render the Move module (or its unit-test module) for ``params``.

        Args:
            params: Token parameters to substitute
            variant: STANDARD for the coin module, TEST for its test module

        Returns:
            Move source text

        Raises:
            TemplateError: If the template cannot be found or compiled
            RenderError: If the template uses a variable that was not supplied
        """
        pass

    @abstractmethod
    def render_manifest(
        self,
        package_name: str,
        environment: Environment,
        year: Optional[int] = None,
    ) -> str:
        """Render the Move.toml package manifest.

        Args:
            package_name: Package and address name
            environment: Network whose framework revision to depend on
            year: Edition year, defaults to the current year

        Returns:
            TOML text
        """
        pass
