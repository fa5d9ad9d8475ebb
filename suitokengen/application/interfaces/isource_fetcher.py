"""Interface for resolving a verification target to a local directory."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from pathlib import Path


class ISourceFetcher(ABC):
    """Makes contract sources available on the local filesystem."""

    @abstractmethod
    def fetch(self, target: str) -> AbstractContextManager[Path]:
        """Resolve ``target`` to a directory.

        Used as a context manager; anything created to hold the sources (for
        example a clone) is removed when the block exits, however it exits.

        Args:
            target: Local path or repository URL

        Raises:
            SourceAcquisitionError: If the target cannot be resolved
        """
        pass
