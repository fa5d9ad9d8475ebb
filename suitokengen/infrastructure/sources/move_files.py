"""Locate and read Move source files in a package directory."""

import logging
from pathlib import Path
from typing import List

from suitokengen.application.services.exceptions import (
    FileIOError,
    MissingSourcesError,
    NoMoveFilesError,
)

logger = logging.getLogger(__name__)

SUB_FOLDER = "sources"
TEST_FOLDER = "tests"
MOVE_EXTENSION = ".move"


def is_move_file(path: Path) -> bool:
    """True for ``name.move`` files; ``name.other.move`` is rejected as malformed."""
    return path.is_file() and path.suffix == MOVE_EXTENSION and "." not in path.stem


def find_move_files(root: Path, require_sources: bool = False) -> List[Path]:
    """Find the Move files to verify under ``root``.

    Args:
        root: A package directory, a sources directory, or a single .move file
        require_sources: Fail when ``root`` has no ``sources/`` folder
            (cloned repositories must follow the package layout)

    Returns:
        Move files sorted by name

    Raises:
        MissingSourcesError: If ``require_sources`` and there is no sources folder
        NoMoveFilesError: If no Move file is found
    """
    if root.is_file():
        if not is_move_file(root):
            raise NoMoveFilesError(f"Not a Move file: {root}")
        return [root]

    sources = root / SUB_FOLDER
    if sources.is_dir():
        search_dir = sources
    elif require_sources:
        raise MissingSourcesError(f"No {SUB_FOLDER} folder found in {root.name}")
    else:
        search_dir = root

    try:
        files = sorted(p for p in search_dir.iterdir() if is_move_file(p))
    except OSError as e:
        raise FileIOError(search_dir, "list", str(e)) from e

    if not files:
        raise NoMoveFilesError()
    logger.debug("Found %d Move file(s) in %s", len(files), search_dir)
    return files


def read_move_file(path: Path) -> str:
    """Read a Move file as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileIOError(path, "read", str(e)) from e
