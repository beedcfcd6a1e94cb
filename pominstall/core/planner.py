"""Install planner — turns a resolved candidate into install records."""

from __future__ import annotations

import logging
from pathlib import Path

from pominstall.models.artifacts import (
    ARCHIVE_TYPES,
    DESCRIPTOR_TYPE,
    ArtifactCandidate,
    InstallRecord,
)
from pominstall.models.descriptor import ResolvedIdentity

logger = logging.getLogger(__name__)


def plan(
    candidate: ArtifactCandidate,
    descriptor_path: Path,
    identity: ResolvedIdentity,
) -> list[InstallRecord]:
    """Return the records to install for ``candidate``.

    Archives always produce the archive itself plus its descriptor as a
    ``pom`` sub-artifact.  A bare descriptor produces a single ``pom``
    record, or nothing when a ``.jar`` or ``.zip`` with the same base name
    sits next to it, since installing that binary already carries the POM.
    """
    if candidate.kind.is_archive:
        return [
            _record(identity, candidate.kind.artifact_type, candidate.path),
            _record(identity, DESCRIPTOR_TYPE, descriptor_path),
        ]

    binary = superseding_binary(candidate)
    if binary is not None:
        logger.info("Skipping %s, installed with %s", candidate.path.name, binary.name)
        return []
    return [_record(identity, DESCRIPTOR_TYPE, candidate.path)]


def superseding_binary(candidate: ArtifactCandidate) -> Path | None:
    """Return a co-located ``.jar``/``.zip`` sharing the candidate's base name."""
    for artifact_type in ARCHIVE_TYPES:
        binary = candidate.sibling(f".{artifact_type}")
        if binary.exists():
            return binary
    return None


def _record(identity: ResolvedIdentity, artifact_type: str, file: Path) -> InstallRecord:
    return InstallRecord(
        group_id=identity.group_id,
        artifact_id=identity.artifact_id,
        version=identity.version,
        type=artifact_type,
        file=file,
    )
