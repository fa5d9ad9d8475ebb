"""
Verification target model.
"""

from dataclasses import dataclass
from enum import Enum


class SourceKind(str, Enum):
    LOCAL = "local"
    REMOTE = "remote"


@dataclass(frozen=True)
class SourceLocation:
    """A local directory (or file) path, or a remote git repository URL."""

    kind: SourceKind
    value: str

    @classmethod
    def local(cls, path: str) -> "SourceLocation":
        return cls(SourceKind.LOCAL, str(path))

    @classmethod
    def remote(cls, url: str) -> "SourceLocation":
        return cls(SourceKind.REMOTE, url)

    @classmethod
    def parse(cls, text: str) -> "SourceLocation":
        """Treat ``http(s)://`` input as a repository URL, anything else as a path."""
        if text.lower().startswith(("http://", "https://")):
            return cls.remote(text)
        return cls.local(text)

    @property
    def is_remote(self) -> bool:
        return self.kind is SourceKind.REMOTE

    def __str__(self) -> str:
        return self.value
