"""Directory scanner for discovering component files."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from autocomponents.errors import DiscoveryError
from autocomponents.registry.types import Candidate

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_PATTERN", "discover"]

DEFAULT_PATTERN = r"[\w-]+\.py$"


def discover(
    root: str | Path,
    pattern: str | re.Pattern[str] = DEFAULT_PATTERN,
    follow_symlinks: bool = True,
) -> list[Candidate]:
    """Find component files directly inside root whose name matches pattern.

    The pattern is searched against ``./<filename>``. Subdirectories are never
    entered. Candidates come back in filesystem enumeration order.

    Raises:
        DiscoveryError: If root does not exist, is not a directory or cannot be read.
    """
    root = Path(root).resolve()
    if not root.exists():
        raise DiscoveryError(root=str(root), reason="directory does not exist")
    if not root.is_dir():
        raise DiscoveryError(root=str(root), reason="not a directory")

    regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    try:
        entries = list(os.scandir(root))
    except OSError as e:
        raise DiscoveryError(root=str(root), reason=str(e), cause=e) from e

    results: list[Candidate] = []
    for entry in entries:
        try:
            is_file = entry.is_file(follow_symlinks=follow_symlinks)
        except OSError as e:
            logger.error("OS error accessing %s: %s", entry.path, e)
            continue
        if not is_file:
            continue

        relative_path = f"./{entry.name}"
        if not regex.search(relative_path):
            continue
        results.append(Candidate(relative_path=relative_path, file_path=Path(entry.path)))

    logger.debug("Discovered %d candidate(s) in %s", len(results), root)
    return results
