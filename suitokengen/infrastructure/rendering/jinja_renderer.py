"""Jinja2 implementation of the Move template renderer."""

import logging
from datetime import datetime
from functools import lru_cache
from typing import Any, Dict, Optional

from jinja2 import (
    Environment as JinjaEnvironment,
    PackageLoader,
    StrictUndefined,
    TemplateError as JinjaTemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)

from suitokengen.application.interfaces.itemplate_renderer import (
    ITemplateRenderer,
    TemplateVariant,
)
from suitokengen.application.services.exceptions import RenderError, TemplateError
from suitokengen.domain.models import Environment, TokenParams

logger = logging.getLogger(__name__)

# Upstream Sui framework the generated packages depend on
SUI_PROJECT = "https://github.com/MystenLabs/sui.git"
SUI_PROJECT_SUB_DIR = "crates/sui-framework/packages/sui-framework"

TEMPLATE_FILES = {
    TemplateVariant.STANDARD: "token_template.move",
    TemplateVariant.TEST: "test_token_template.move",
}
MANIFEST_TEMPLATE = "Move.toml"


def hex_bytes(value: Any) -> str:
    """Lower-case hex of the UTF-8 encoding of ``value``, for Move ``x"..."`` literals."""
    return str(value).encode("utf-8").hex()


class JinjaTemplateRenderer(ITemplateRenderer):
    """Renders Move sources and manifests from the bundled templates."""

    def __init__(self, env: Optional[JinjaEnvironment] = None):
        """Initialize the renderer.

        Args:
            env: Jinja environment to load templates from. Defaults to the
                templates shipped with this package.
        """
        self.env = env or self._default_environment()
        self.env.filters.setdefault("hex", hex_bytes)

    @staticmethod
    def _default_environment() -> JinjaEnvironment:
        return JinjaEnvironment(
            loader=PackageLoader("suitokengen.infrastructure.rendering", "templates"),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def render(
        self, params: TokenParams, variant: TemplateVariant = TemplateVariant.STANDARD
    ) -> str:
        context = {
            "module_name": params.module_name,
            "token_type": params.token_type,
            "name": params.name,
            "symbol": params.symbol,
            "decimals": params.decimals,
            "description": params.description,
            "is_frozen": params.is_frozen,
        }
        return self._render(TEMPLATE_FILES[TemplateVariant(variant)], context)

    def render_manifest(
        self,
        package_name: str,
        environment: Environment,
        year: Optional[int] = None,
    ) -> str:
        environment = Environment.coerce(environment)
        context = {
            "package_name": package_name,
            "year": year if year is not None else datetime.now().year,
            "sui_git": SUI_PROJECT,
            "sui_subdir": SUI_PROJECT_SUB_DIR,
            "revision": environment.framework_revision,
        }
        return self._render(MANIFEST_TEMPLATE, context)

    def _render(self, template_name: str, context: Dict[str, Any]) -> str:
        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            logger.error("Template not found: %s", template_name)
            raise TemplateError(f"Template not found: {e.name}") from e
        except TemplateSyntaxError as e:
            logger.error("Template %s failed to compile: %s", template_name, e)
            raise TemplateError(
                f"Template {template_name} failed to compile: {e.message}"
            ) from e

        try:
            rendered = template.render(**context)
        except UndefinedError as e:
            logger.error("Template %s uses an undefined variable: %s", template_name, e)
            raise RenderError(f"Failed to render {template_name}: {e.message}") from e
        except JinjaTemplateError as e:
            raise RenderError(f"Failed to render {template_name}: {e}") from e

        logger.debug("Rendered %s (%d chars)", template_name, len(rendered))
        return rendered


@lru_cache()
def get_renderer() -> JinjaTemplateRenderer:
    """Get the shared renderer backed by the bundled templates."""
    return JinjaTemplateRenderer()


def render(
    params: TokenParams, variant: TemplateVariant = TemplateVariant.STANDARD
) -> str:
    """Render ``params`` with the bundled templates."""
    return get_renderer().render(params, variant)


def render_manifest(
    package_name: str, environment: Environment, year: Optional[int] = None
) -> str:
    """Render Move.toml with the bundled template."""
    return get_renderer().render_manifest(package_name, environment, year)
