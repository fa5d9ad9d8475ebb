"""Clone remote token repositories into temporary directories."""

import logging
import re
import secrets
import string
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional
from urllib.parse import urlparse

from suitokengen.application.interfaces.isource_fetcher import ISourceFetcher
from suitokengen.application.services.exceptions import (
    GitCloneError,
    InvalidUrlError,
    UnsupportedRepositoryError,
)
from suitokengen.config import get_settings
from suitokengen.domain.models import sanitize_repo_name

logger = logging.getLogger(__name__)

REPOSITORY_URL_PATTERN = re.compile(
    r"^https?://(www\.)?(github|gitlab)\.com/[\w\-]+/[\w\-.]+?(\.git)?/?$"
)
SUFFIX_ALPHABET = string.ascii_letters + string.digits


def validate_repository_url(url: str) -> str:
    """Check ``url`` and derive a safe local directory name for its clone.

    Args:
        url: Repository URL supplied by the caller

    Returns:
        The repository name, sanitized, with a random 8 character suffix

    Raises:
        InvalidUrlError: If the URL cannot be parsed
        UnsupportedRepositoryError: If it is not a GitHub or GitLab repository URL
    """
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL: {e}") from e
    if not parsed.scheme or not parsed.netloc:
        raise InvalidUrlError()

    if not REPOSITORY_URL_PATTERN.match(url):
        raise UnsupportedRepositoryError()

    repo_name = url.rstrip("/")
    if repo_name.endswith(".git"):
        repo_name = repo_name[: -len(".git")]
    repo_name = sanitize_repo_name(repo_name.rsplit("/", 1)[-1])

    suffix = "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(8))
    return f"{repo_name}_{suffix}"


class GitRepositoryFetcher(ISourceFetcher):
    """Shallow-clones a repository with the git command line client."""

    def __init__(
        self,
        git_executable: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the fetcher.

        Args:
            git_executable: git command (default: from settings)
            timeout: Seconds before a clone is aborted (default: from settings)
        """
        settings = get_settings()
        self.git_executable = git_executable or settings.GIT_EXECUTABLE
        self.timeout = timeout if timeout is not None else settings.GIT_CLONE_TIMEOUT

    @contextmanager
    def fetch(self, target: str) -> Iterator[Path]:
        clone_name = validate_repository_url(target)

        with tempfile.TemporaryDirectory(prefix="suitokengen-") as temp_dir:
            clone_path = Path(temp_dir) / clone_name
            self._clone(target, clone_path)
            yield clone_path
        logger.debug("Removed clone of %s", target)

    def _clone(self, url: str, destination: Path) -> None:
        command = [
            self.git_executable,
            "clone",
            "--depth",
            "1",
            "--quiet",
            url,
            str(destination),
        ]
        logger.info("Cloning %s", url)
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            logger.error("git clone of %s timed out after %ss", url, self.timeout)
            raise GitCloneError(
                f"Git operation failed: clone timed out after {self.timeout}s"
            ) from e
        except OSError as e:
            logger.error("Could not run %s: %s", self.git_executable, e)
            raise GitCloneError(f"Git operation failed: {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            logger.error("git clone exit code: %d, stderr: %s", result.returncode, stderr)
            raise GitCloneError(f"Git operation failed: {stderr or 'clone failed'}")
        logger.debug("Cloned %s into %s", url, destination)
