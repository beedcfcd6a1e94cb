"""Artifact candidate and install record models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class CandidateKind(str, Enum):
    """How a file found during traversal is treated, keyed by extension."""

    ARCHIVE_PRIMARY = "archive-primary"
    ARCHIVE_SECONDARY = "archive-secondary"
    DESCRIPTOR_ONLY = "descriptor-only"

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def artifact_type(self) -> str:
        """Repository type of the main artifact (``jar``, ``zip`` or ``pom``)."""
        return _EXTENSIONS[self].lstrip(".")

    @property
    def is_archive(self) -> bool:
        return self is not CandidateKind.DESCRIPTOR_ONLY

    @classmethod
    def for_filename(cls, name: str) -> CandidateKind | None:
        """Classify a file name, or return ``None`` if it is not installable."""
        for kind, extension in _EXTENSIONS.items():
            if name.endswith(extension):
                return kind
        return None


_EXTENSIONS: dict[CandidateKind, str] = {
    CandidateKind.ARCHIVE_PRIMARY: ".jar",
    CandidateKind.ARCHIVE_SECONDARY: ".zip",
    CandidateKind.DESCRIPTOR_ONLY: ".pom",
}

DESCRIPTOR_TYPE = "pom"
ARCHIVE_TYPES: tuple[str, ...] = ("jar", "zip")


class ArtifactCandidate(BaseModel):
    """A file discovered during traversal that may be installable."""

    model_config = ConfigDict(frozen=True)

    path: Path
    kind: CandidateKind

    @property
    def base_name(self) -> str:
        """File name with its extension stripped (``foo-1.0.jar`` -> ``foo-1.0``)."""
        return self.path.name[: -len(self.kind.extension)]

    def sibling(self, extension: str) -> Path:
        """Path of a file in the same directory sharing this base name."""
        return self.path.with_name(f"{self.base_name}{extension}")


class InstallRecord(BaseModel):
    """One file to be written into the repository under full coordinates."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str
    type: str
    classifier: str = ""
    file: Path

    @property
    def coordinates(self) -> str:
        coords = f"{self.group_id}:{self.artifact_id}:{self.version}:{self.type}"
        if self.classifier:
            coords += f":{self.classifier}"
        return coords
