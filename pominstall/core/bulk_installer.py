"""Bulk installer — drives discovery, resolution, planning and install.

Candidates are processed one at a time.  Recoverable per-file conditions
(no descriptor, descriptor superseded by its binary) are logged and the
file is skipped.  Any other error propagates and stops the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from pominstall.core.descriptor_loader import DescriptorLoader, DescriptorParser
from pominstall.core.errors import InstallationFailure
from pominstall.core.identity import resolve
from pominstall.core.installer import RepositoryInstaller
from pominstall.core.locator import DescriptorLocator
from pominstall.core.planner import plan
from pominstall.core.walker import walk
from pominstall.models.artifacts import ArtifactCandidate, InstallRecord
from pominstall.models.repository import InstallSummary, RepositoryTarget

logger = logging.getLogger(__name__)


class BulkInstaller:
    """Installs every artifact found below a directory.

    Parameters
    ----------
    installer:
        Backend that writes records into the repository.
    target:
        Repository target shared by every install call of this instance.
    parser:
        Descriptor parsing backend.  Defaults to the XML parser.
    locator:
        Descriptor locator.  Defaults to one extracting into the system
        temporary directory.
    """

    def __init__(
        self,
        installer: RepositoryInstaller,
        target: RepositoryTarget,
        *,
        parser: DescriptorParser | None = None,
        locator: DescriptorLocator | None = None,
    ) -> None:
        self.installer = installer
        self.target = target
        self.loader = DescriptorLoader(parser)
        self.locator = locator or DescriptorLocator()

    def run(self, root: Path, recursive: bool = False) -> InstallSummary:
        """Install all candidates below ``root`` and summarise the outcome."""
        candidates = 0
        installed: list[str] = []
        superseded: list[str] = []
        missing: list[str] = []

        for candidate in walk(root, recursive):
            candidates += 1
            logger.debug("Processing %s", candidate.path)
            with self.locator.locate(candidate) as descriptor_path:
                if descriptor_path is None:
                    logger.warning("POM file not found for %s", candidate.path)
                    missing.append(str(candidate.path))
                    continue
                records = self._plan(candidate, descriptor_path)
                if not records:
                    superseded.append(str(candidate.path))
                    continue
                self._install(records)
                installed.extend(record.coordinates for record in records)

        if candidates == 0:
            logger.warning("Artifacts not found in %s", root)

        return InstallSummary(
            candidates=candidates,
            installed=installed,
            superseded=superseded,
            missing_descriptor=missing,
        )

    def preview(
        self, root: Path, recursive: bool = False
    ) -> Iterator[tuple[ArtifactCandidate, list[InstallRecord] | None]]:
        """Yield each candidate with the records ``run`` would install.

        Nothing is written.  Candidates without a descriptor come with
        ``None`` instead of a record list.  Extracted descriptor files only exist until the consumer advances
        to the next candidate.
        """
        for candidate in walk(root, recursive):
            with self.locator.locate(candidate) as descriptor_path:
                if descriptor_path is None:
                    logger.warning("POM file not found for %s", candidate.path)
                    yield candidate, None
                    continue
                yield candidate, self._plan(candidate, descriptor_path)

    def _plan(
        self, candidate: ArtifactCandidate, descriptor_path: Path
    ) -> list[InstallRecord]:
        descriptor = self.loader.load(descriptor_path)
        identity = resolve(descriptor)
        return plan(candidate, descriptor_path, identity)

    def _install(self, records: list[InstallRecord]) -> None:
        try:
            self.installer.install(records, self.target)
        except OSError as exc:
            raise InstallationFailure(records, exc) from exc
