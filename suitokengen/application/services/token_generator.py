"""Token package generation service."""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from suitokengen.application.interfaces.itemplate_renderer import (
    ITemplateRenderer,
    TemplateVariant,
)
from suitokengen.application.services.validation_service import validate_token_params
from suitokengen.domain.models import TokenParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedToken:
    """Text of every file in a generated Move package."""

    token_content: str
    move_toml: str
    test_token_content: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class TokenGeneratorService:
    """Validates token parameters and renders the Move package for them."""

    def __init__(self, renderer: ITemplateRenderer):
        self.renderer = renderer

    def create(
        self,
        decimals: int,
        name: str,
        symbol: str,
        description: str,
        is_frozen: bool,
        environment: Optional[str],
    ) -> GeneratedToken:
        """Generate the coin module, its test module and Move.toml.

        Raises:
            ValidationError: If a parameter breaks a domain rule
            TemplateError: If a template cannot be loaded or rendered
        """
        validate_token_params(decimals, name, symbol, description or "")
        params = TokenParams.from_request(
            decimals=decimals,
            name=name,
            symbol=symbol,
            description=description,
            is_frozen=is_frozen,
            environment=environment,
        )
        return self.generate(params)

    def generate(self, params: TokenParams) -> GeneratedToken:
        """Render every file for already validated ``params``."""
        logger.info(
            "Generating token %s (%s) for %s",
            params.name,
            params.symbol,
            params.environment.value,
        )
        return GeneratedToken(
            token_content=self.renderer.render(params, TemplateVariant.STANDARD),
            move_toml=self.renderer.render_manifest(
                params.package_name, params.environment
            ),
            test_token_content=self.renderer.render(params, TemplateVariant.TEST),
        )
