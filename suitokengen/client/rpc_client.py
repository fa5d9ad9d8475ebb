"""Clients for the token generator RPC operations."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from suitokengen.application.services.exceptions import (
    RPCConnectionError,
    TokenGenError,
    error_from_dict,
)
from suitokengen.application.services.token_generator import GeneratedToken
from suitokengen.config import get_settings
from suitokengen.domain.models import SourceLocation
from suitokengen.infrastructure.services.setup import Services, setup_services

logger = logging.getLogger(__name__)


class ITokenGenClient(ABC):
    """The three operations exposed by the token generator service."""

    @abstractmethod
    def create(
        self,
        decimals: int,
        name: str,
        symbol: str,
        description: str,
        is_frozen: bool,
        environment: str,
    ) -> GeneratedToken:
        pass

    @abstractmethod
    def verify_url(self, url: str) -> None:
        pass

    @abstractmethod
    def verify_content(self, content: str) -> None:
        pass


class TokenGenClient(ITokenGenClient):
    """Talks to a running token generator server over HTTP."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.SERVER_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT
        self.session = session or requests.Session()

    def create(
        self,
        decimals: int,
        name: str,
        symbol: str,
        description: str,
        is_frozen: bool,
        environment: str,
    ) -> GeneratedToken:
        data = self._post(
            "/create",
            {
                "decimals": decimals,
                "name": name,
                "symbol": symbol,
                "description": description,
                "is_frozen": is_frozen,
                "environment": environment,
            },
        )
        return GeneratedToken(
            token_content=data["token_content"],
            move_toml=data["move_toml"],
            test_token_content=data["test_token_content"],
        )

    def verify_url(self, url: str) -> None:
        self._post("/verify_url", {"url": url})

    def verify_content(self, content: str) -> None:
        self._post("/verify_content", {"content": content})

    def _post(self, path: str, payload: Dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("POST %s", url)
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Request to %s failed: %s", url, e)
            raise RPCConnectionError(
                f"Failed to initiate a connection to the RPC service at {self.base_url}"
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            raise TokenGenError(
                f"Unexpected response from {url} (HTTP {response.status_code})"
            ) from e
        if not isinstance(body, dict):
            raise TokenGenError(
                f"Unexpected response from {url} (HTTP {response.status_code})"
            )

        if not response.ok or not body.get("success", False):
            raise error_from_dict(body)
        return body.get("data")


class LocalTokenGenClient(ITokenGenClient):
    """Runs the operations in-process, without a server."""

    def __init__(self, services: Optional[Services] = None):
        self.services = services or setup_services()

    def create(
        self,
        decimals: int,
        name: str,
        symbol: str,
        description: str,
        is_frozen: bool,
        environment: str,
    ) -> GeneratedToken:
        return self.services.token_generator.create(
            decimals=decimals,
            name=name,
            symbol=symbol,
            description=description,
            is_frozen=is_frozen,
            environment=environment,
        )

    def verify_url(self, url: str) -> None:
        self.services.verification_service.verify_from_source(SourceLocation.remote(url))

    def verify_content(self, content: str) -> None:
        self.services.verification_service.verify(content)


def get_client(local: bool = False, base_url: Optional[str] = None) -> ITokenGenClient:
    """Client for the CLI: in-process when ``local``, HTTP otherwise."""
    if local:
        return LocalTokenGenClient()
    return TokenGenClient(base_url=base_url)
