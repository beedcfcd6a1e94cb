"""Descriptor locator — finds the POM that describes a candidate file.

Lookup order for archives:

1. an entry matching ``META-INF/maven/<any>/pom.xml`` inside the archive,
   extracted to a temporary file;
2. a sibling ``<base>.pom`` next to the archive.

A descriptor-only candidate is its own descriptor.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import tempfile
import zipfile
import zlib
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from pominstall.models.artifacts import ArtifactCandidate, CandidateKind

logger = logging.getLogger(__name__)

POM_ENTRY_PATTERN = re.compile(r"META-INF/maven/.+/pom\.xml")

# Damaged, encrypted or unsupported archives all count as "no embedded POM"
_UNREADABLE_ARCHIVE = (
    OSError,
    EOFError,
    RuntimeError,
    NotImplementedError,
    zipfile.BadZipFile,
    zlib.error,
)


class DescriptorLocator:
    """Resolves the descriptor path for a candidate.

    Parameters
    ----------
    temp_dir:
        Directory for extracted descriptors.  Defaults to the system
        temporary directory.
    """

    def __init__(self, temp_dir: Path | None = None) -> None:
        self._temp_dir = temp_dir

    @contextmanager
    def locate(self, candidate: ArtifactCandidate) -> Iterator[Path | None]:
        """Yield the candidate's descriptor path, or ``None`` if there is none.

        A descriptor extracted from an archive lives in a temporary file that
        is removed when the ``with`` block exits, whether or not it raised.
        """
        if candidate.kind is CandidateKind.DESCRIPTOR_ONLY:
            yield candidate.path
            return

        extracted = self._extract_embedded(candidate)
        if extracted is not None:
            try:
                yield extracted
            finally:
                extracted.unlink(missing_ok=True)
            return

        sibling = candidate.sibling(CandidateKind.DESCRIPTOR_ONLY.extension)
        if sibling.is_file():
            logger.debug("Using sibling descriptor %s", sibling)
            yield sibling
        else:
            yield None

    def _extract_embedded(self, candidate: ArtifactCandidate) -> Path | None:
        """Copy the embedded ``pom.xml`` of an archive to a temporary file."""
        try:
            with zipfile.ZipFile(candidate.path) as archive:
                entry = select_pom_entry(archive.namelist())
                if entry is None:
                    logger.debug("pom.xml not found in %s", candidate.path.name)
                    return None
                fd, temp_name = tempfile.mkstemp(
                    prefix=f"{candidate.base_name}-", suffix=".pom", dir=self._temp_dir
                )
                temp_path = Path(temp_name)
                try:
                    with os.fdopen(fd, "wb") as target, archive.open(entry) as source:
                        shutil.copyfileobj(source, target)
                except BaseException:
                    temp_path.unlink(missing_ok=True)
                    raise
                logger.debug("Loading %s from %s", entry, candidate.path.name)
                return temp_path
        except _UNREADABLE_ARCHIVE as exc:
            logger.debug("Cannot read archive %s: %s", candidate.path, exc)
            return None


def select_pom_entry(names: list[str]) -> str | None:
    """Pick the descriptor entry among archive member names.

    When an archive embeds several descriptors (shaded or fat jars), the
    shortest entry name wins and ties are broken alphabetically.
    """
    matches = sorted(
        (name for name in names if POM_ENTRY_PATTERN.fullmatch(name)),
        key=lambda name: (len(name), name),
    )
    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            "Found %d embedded descriptors, using %s", len(matches), matches[0]
        )
    return matches[0]
