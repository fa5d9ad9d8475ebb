"""Resolve local verification targets."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from suitokengen.application.interfaces.isource_fetcher import ISourceFetcher
from suitokengen.application.services.exceptions import SourcePathNotFoundError

logger = logging.getLogger(__name__)


class LocalSourceResolver(ISourceFetcher):
    """Yields an existing local directory or Move file unchanged."""

    @contextmanager
    def fetch(self, target: str) -> Iterator[Path]:
        path = Path(target).expanduser()
        if not path.exists():
            raise SourcePathNotFoundError(f"Invalid path: {target} not found")
        logger.debug("Using local sources at %s", path)
        yield path
