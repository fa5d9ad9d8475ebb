"""Contract verification service.

A contract is authentic when its text is exactly what the standard token
template produces for the parameters the contract itself declares, ignoring
comments, blank lines and indentation. This is a self-consistency check: a
contract that was built to match the template passes, whatever its origin.
"""

import logging
from pathlib import Path
from typing import List, Optional

from suitokengen.application.interfaces.isource_fetcher import ISourceFetcher
from suitokengen.application.interfaces.itemplate_renderer import (
    ITemplateRenderer,
    TemplateVariant,
)
from suitokengen.application.services.exceptions import TamperedError, UnsupportedSourceError
from suitokengen.domain.models import SourceLocation
from suitokengen.infrastructure.parsing.content_normalizer import normalize
from suitokengen.infrastructure.parsing.parameter_extractor import extract
from suitokengen.infrastructure.sources.move_files import (
    find_move_files,
    read_move_file,
)

logger = logging.getLogger(__name__)


class VerificationService:
    """Detects Move token contracts that deviate from the canonical template."""

    def __init__(
        self,
        renderer: ITemplateRenderer,
        remote_fetcher: Optional[ISourceFetcher] = None,
        local_fetcher: Optional[ISourceFetcher] = None,
    ):
        """Initialize the service.

        Args:
            renderer: Renderer used to regenerate the canonical contract
            remote_fetcher: Resolves repository URLs (needed for remote targets)
            local_fetcher: Resolves local paths (needed for local targets)
        """
        self.renderer = renderer
        self.remote_fetcher = remote_fetcher
        self.local_fetcher = local_fetcher

    def regenerate(self, candidate_source: str) -> str:
        """Render the standard contract for the parameters ``candidate_source`` declares."""
        extracted = extract(candidate_source)
        return self.renderer.render(extracted.to_token_params(), TemplateVariant.STANDARD)

    def verify(self, candidate_source: str) -> None:
        """Check that ``candidate_source`` matches its own regenerated contract.

        Raises:
            TamperedError: If the normalized texts differ
        """
        expected = normalize(self.regenerate(candidate_source))
        if normalize(candidate_source) != expected:
            logger.info("Contract content does not match the regenerated template")
            raise TamperedError()
        logger.info("Contract content verified")

    def verify_from_source(
        self, location: SourceLocation, verify_all: bool = False
    ) -> List[Path]:
        """Verify the Move file(s) found at a local path or repository URL.

        Args:
            location: Where the contract package lives
            verify_all: Verify every Move file instead of only the first one

        Returns:
            Paths of the verified files, relative to the package root

        Raises:
            SourceAcquisitionError: If the location cannot be resolved to Move files
                or no fetcher handles its kind
            FileIOError: If a Move file cannot be read
            TamperedError: If a file does not match, naming that file
        """
        fetcher = self.remote_fetcher if location.is_remote else self.local_fetcher
        if fetcher is None:
            raise UnsupportedSourceError(
                f"No source fetcher configured for {location.kind.value} targets"
            )

        verified: List[Path] = []
        with fetcher.fetch(location.value) as root:
            files = find_move_files(root, require_sources=location.is_remote)
            if not verify_all:
                files = files[:1]

            for path in files:
                relative = path.relative_to(root) if path != root else Path(path.name)
                logger.info("Verifying %s from %s", relative, location)
                try:
                    self.verify(read_move_file(path))
                except TamperedError as e:
                    raise TamperedError(f"{relative}: {e.message}") from e
                verified.append(relative)
        return verified
