"""
Domain token parameter model.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


def sanitize_name(name: str) -> str:
    """Return ``name`` with every non-alphanumeric character removed."""
    return "".join(ch for ch in name if ch.isalnum())


def sanitize_repo_name(repo_name: str) -> str:
    """Strip path traversal sequences from a repository name."""
    return repo_name.replace("..", "").replace("/", "").replace("\\", "")


class Environment(str, Enum):
    """Sui network a package is built against."""

    MAINNET = "mainnet"
    DEVNET = "devnet"
    TESTNET = "testnet"

    @classmethod
    def default(cls) -> "Environment":
        return cls.DEVNET

    @classmethod
    def coerce(cls, value: Optional[str]) -> "Environment":
        """Map ``value`` to a known environment, falling back to devnet."""
        if isinstance(value, Environment):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.debug("Unknown environment %r, using %s", value, cls.default().value)
            return cls.default()

    @property
    def framework_revision(self) -> str:
        return f"framework/{self.value}"


@dataclass(frozen=True)
class TokenParams:
    """Declared attributes of a Sui coin."""

    decimals: int
    symbol: str
    name: str
    description: str = ""
    is_frozen: bool = False
    environment: Environment = Environment.DEVNET

    @classmethod
    def from_request(
        cls,
        decimals: int,
        name: str,
        symbol: str,
        description: str,
        is_frozen: bool,
        environment: Optional[str],
    ) -> "TokenParams":
        """Build params from raw request values, coercing the environment."""
        return cls(
            decimals=decimals,
            symbol=symbol,
            name=name,
            description=description or "",
            is_frozen=is_frozen,
            environment=Environment.coerce(environment),
        )

    @property
    def slug(self) -> str:
        return sanitize_name(self.name)

    @property
    def module_name(self) -> str:
        return self.slug

    @property
    def token_type(self) -> str:
        return self.slug.upper()

    @property
    def package_name(self) -> str:
        return self.slug


@dataclass(frozen=True)
class ExtractedParams:
    """Parameters recovered from Move source text.

    The environment lives only in Move.toml, so it is not part of this model.
    """

    decimals: int = 0
    symbol: str = ""
    name: str = ""
    description: str = ""
    is_frozen: bool = False

    def to_token_params(self) -> TokenParams:
        return TokenParams(
            decimals=self.decimals,
            symbol=self.symbol,
            name=self.name,
            description=self.description,
            is_frozen=self.is_frozen,
        )
