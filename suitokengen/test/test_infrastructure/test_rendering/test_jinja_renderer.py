"""
Tests for the Jinja template renderer.
"""

import pytest
from jinja2 import DictLoader, Environment as JinjaEnvironment, StrictUndefined

from suitokengen.application.interfaces.itemplate_renderer import TemplateVariant
from suitokengen.application.services.exceptions import RenderError, TemplateError
from suitokengen.domain.models import Environment, TokenParams
from suitokengen.infrastructure.rendering import render, render_manifest
from suitokengen.infrastructure.rendering.jinja_renderer import (
    SUI_PROJECT,
    SUI_PROJECT_SUB_DIR,
    JinjaTemplateRenderer,
    hex_bytes,
)


def _renderer_with(templates: dict) -> JinjaTemplateRenderer:
    env = JinjaEnvironment(loader=DictLoader(templates), undefined=StrictUndefined)
    return JinjaTemplateRenderer(env)


def test_hex_bytes() -> None:
    assert hex_bytes("MTK") == "4d544b"
    assert hex_bytes("") == ""
    assert hex_bytes("A b.") == "4120622e"


def test_render_standard(renderer: JinjaTemplateRenderer, token_params: TokenParams) -> None:
    source = renderer.render(token_params, TemplateVariant.STANDARD)

    assert source.startswith("module MyToken::MyToken {")
    assert "public struct MYTOKEN has drop {}" in source
    assert 'witness, 8, b"MTK", b"My Token", b"A custom token.", option::none(), ctx' in source
    assert "const DECIMALS: u8 = 8;" in source
    assert 'const SYMBOL: vector<u8> = x"4d544b";' in source
    assert "transfer::public_share_object(metadata);" in source
    assert "public_freeze_object" not in source
    assert "const FROZEN_METADATA: bool = false;" in source
    assert "{{" not in source and "{%" not in source


def test_render_frozen(renderer: JinjaTemplateRenderer, frozen_params: TokenParams) -> None:
    source = renderer.render(frozen_params)
    assert "transfer::public_freeze_object(metadata);" in source
    assert "public_share_object" not in source
    assert "const FROZEN_METADATA: bool = true;" in source
    assert 'const DESCRIPTION: vector<u8> = x"";' in source


def test_render_test_variant(renderer: JinjaTemplateRenderer, token_params: TokenParams) -> None:
    source = renderer.render(token_params, TemplateVariant.TEST)

    assert "#[test_only]" in source
    assert "module MyToken::MyToken_tests {" in source
    assert "use MyToken::MyToken::{Self, MYTOKEN};" in source
    assert "take_shared<CoinMetadata<MYTOKEN>>" in source
    assert "coin::get_decimals(&metadata) == 8" in source


def test_render_test_variant_frozen(
    renderer: JinjaTemplateRenderer, frozen_params: TokenParams
) -> None:
    source = renderer.render(frozen_params, TemplateVariant.TEST)
    assert "take_immutable<CoinMetadata<COLDCOIN>>" in source
    assert "return_immutable(metadata)" in source


def test_render_is_deterministic(
    renderer: JinjaTemplateRenderer, token_params: TokenParams
) -> None:
    assert renderer.render(token_params) == renderer.render(token_params)


def test_render_manifest(renderer: JinjaTemplateRenderer) -> None:
    manifest = renderer.render_manifest("MyToken", Environment.TESTNET, year=2024)

    assert manifest.splitlines()[:4] == [
        "[package]",
        'name = "MyToken"',
        'edition = "2024.beta"',
        'version = "0.0.1"',
    ]
    assert "[dependencies.Sui]" in manifest
    assert f'git = "{SUI_PROJECT}"' in manifest
    assert f'subdir = "{SUI_PROJECT_SUB_DIR}"' in manifest
    assert 'rev = "framework/testnet"' in manifest
    assert '[addresses]\nMyToken = "0x0"' in manifest


def test_render_manifest_unknown_environment_uses_devnet(
    renderer: JinjaTemplateRenderer,
) -> None:
    manifest = renderer.render_manifest("MyToken", "localnet", year=2024)
    assert 'rev = "framework/devnet"' in manifest


def test_module_level_helpers(token_params: TokenParams) -> None:
    assert render(token_params).startswith("module MyToken::MyToken {")
    assert 'rev = "framework/mainnet"' in render_manifest("MyToken", Environment.MAINNET)


def test_missing_template_raises_template_error(token_params: TokenParams) -> None:
    renderer = _renderer_with({})
    with pytest.raises(TemplateError) as exc_info:
        renderer.render(token_params)
    assert not isinstance(exc_info.value, RenderError)
    assert "token_template.move" in exc_info.value.message


def test_broken_template_raises_template_error(token_params: TokenParams) -> None:
    renderer = _renderer_with({"token_template.move": "module {{ module_name "})
    with pytest.raises(TemplateError, match="failed to compile"):
        renderer.render(token_params)


def test_undefined_variable_raises_render_error(token_params: TokenParams) -> None:
    renderer = _renderer_with({"token_template.move": "module {{ unknown_variable }}"})
    with pytest.raises(RenderError, match="unknown_variable"):
        renderer.render(token_params)


def test_custom_environment_gets_hex_filter(token_params: TokenParams) -> None:
    renderer = _renderer_with({"token_template.move": 'x"{{ symbol | hex }}"'})
    assert renderer.render(token_params) == 'x"4d544b"'
