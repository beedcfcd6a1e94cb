"""Directory walker — yields installable files below a scan root."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from pominstall.models.artifacts import ArtifactCandidate, CandidateKind

logger = logging.getLogger(__name__)


def walk(root: Path, recursive: bool = False) -> Iterator[ArtifactCandidate]:
    """Lazily yield a candidate for every ``.jar``, ``.zip`` and ``.pom`` file.

    Entries come back in directory listing order, which is not sorted.
    Subdirectories are only visited when ``recursive`` is set, and each
    physical directory is visited once even if symlinks lead back to it.
    A root that does not exist, or is not a directory, yields nothing.
    """
    root = Path(root)
    if not root.is_dir():
        logger.warning("Scan root %s does not exist or is not a directory", root)
        return
    yield from _scan(root.absolute(), recursive, set())


def _scan(
    directory: Path, recursive: bool, visited: set[tuple[int, int]]
) -> Iterator[ArtifactCandidate]:
    stat = directory.stat()
    key = (stat.st_dev, stat.st_ino)
    if key in visited:
        logger.debug("Skipping already visited directory %s", directory)
        return
    visited.add(key)

    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_dir():
                if recursive:
                    yield from _scan(Path(entry.path), recursive, visited)
                continue
            kind = CandidateKind.for_filename(entry.name)
            if kind is not None and entry.is_file():
                yield ArtifactCandidate(path=Path(entry.path), kind=kind)
