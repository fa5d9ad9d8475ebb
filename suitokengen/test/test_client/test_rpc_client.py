"""
Tests for the HTTP and in-process token generator clients.
"""

from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

from suitokengen.application.services.exceptions import (
    ERROR_KINDS,
    FileIOError,
    GitCloneError,
    RPCConnectionError,
    TamperedError,
    TokenGenError,
    ValidationError,
    error_from_dict,
)
from suitokengen.application.services.token_generator import GeneratedToken
from suitokengen.client.rpc_client import (
    LocalTokenGenClient,
    TokenGenClient,
    get_client,
)
from suitokengen.infrastructure.services.setup import Services


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int, body: Any = None, invalid_json: bool = False):
        self.status_code = status_code
        self._body = body
        self._invalid_json = invalid_json

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("No JSON object could be decoded")
        return self._body


def _session(response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
    session = MagicMock(spec=requests.Session)
    if error is not None:
        session.post.side_effect = error
    else:
        session.post.return_value = response
    return session


def _client(session) -> TokenGenClient:
    return TokenGenClient(base_url="http://rpc.test:5001/", timeout=3, session=session)


def test_create_posts_params_and_returns_files() -> None:
    data = {"token_content": "module", "move_toml": "[package]", "test_token_content": "tests"}
    session = _session(FakeResponse(200, {"success": True, "message": "ok", "data": data}))

    generated = _client(session).create(
        decimals=8,
        name="My Token",
        symbol="MTK",
        description="",
        is_frozen=True,
        environment="mainnet",
    )

    assert generated == GeneratedToken("module", "[package]", "tests")
    session.post.assert_called_once_with(
        "http://rpc.test:5001/create",
        json={
            "decimals": 8,
            "name": "My Token",
            "symbol": "MTK",
            "description": "",
            "is_frozen": True,
            "environment": "mainnet",
        },
        timeout=3,
    )


def test_verify_content_success() -> None:
    session = _session(FakeResponse(200, {"success": True, "message": "Verified successfully"}))
    _client(session).verify_content("module a::a {}")
    session.post.assert_called_once_with(
        "http://rpc.test:5001/verify_content", json={"content": "module a::a {}"}, timeout=3
    )


def test_verify_content_tampered() -> None:
    body = {"success": False, "error": "tampered", "message": "content mismatch detected"}
    session = _session(FakeResponse(409, body))

    with pytest.raises(TamperedError, match="content mismatch detected"):
        _client(session).verify_content("module a::a {}")


def test_verify_url_git_failure() -> None:
    body = {"success": False, "error": "git_clone_error", "message": "Git operation failed"}
    session = _session(FakeResponse(502, body))

    with pytest.raises(GitCloneError):
        _client(session).verify_url("https://github.com/owner/repo")


def test_validation_error_keeps_field() -> None:
    body = {
        "success": False,
        "error": "validation_error",
        "message": "Decimals must be between 1 and 99",
        "field": "decimals",
    }
    session = _session(FakeResponse(400, body))

    with pytest.raises(ValidationError) as exc_info:
        _client(session).create(0, "My Token", "MTK", "", False, "devnet")
    assert exc_info.value.field == "decimals"


def test_connection_failure() -> None:
    session = _session(error=requests.ConnectionError("refused"))

    with pytest.raises(RPCConnectionError, match="rpc.test"):
        _client(session).verify_content("module a::a {}")


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse(502, invalid_json=True),
        FakeResponse(200, ["not", "an", "object"]),
    ],
)
def test_unexpected_response(response: FakeResponse) -> None:
    with pytest.raises(TokenGenError, match="Unexpected response"):
        _client(_session(response)).verify_content("module a::a {}")


def test_error_from_dict_known_kinds() -> None:
    for kind, error_cls in ERROR_KINDS.items():
        error = error_from_dict({"error": kind, "message": "boom"})
        assert type(error) is error_cls
        assert error.message == "boom"


def test_error_from_dict_io_error() -> None:
    error = error_from_dict(
        {"error": "io_error", "message": "Failed to read x", "path": "x", "operation": "read"}
    )
    assert isinstance(error, FileIOError)
    assert error.to_dict() == {
        "error": "io_error",
        "message": "Failed to read x",
        "path": "x",
        "operation": "read",
    }


def test_error_from_dict_unknown_kind() -> None:
    error = error_from_dict({"error": "something_new"})
    assert type(error) is TokenGenError
    assert error.message == "An error occurred"


def test_local_client(services: Services, contract: str) -> None:
    client = LocalTokenGenClient(services)

    generated = client.create(8, "My Token", "MTK", "A custom token.", False, "testnet")
    assert generated.token_content == contract

    client.verify_content(contract)
    with pytest.raises(TamperedError):
        client.verify_content(contract.replace('b"MTK"', 'b"XXX"'))


def test_get_client() -> None:
    assert isinstance(get_client(local=True), LocalTokenGenClient)

    remote = get_client(base_url="http://example.test:9000")
    assert isinstance(remote, TokenGenClient)
    assert remote.base_url == "http://example.test:9000"
