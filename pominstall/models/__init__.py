"""pominstall data models — all Pydantic v2, all frozen (immutable)."""

from pominstall.models.artifacts import (
    ARCHIVE_TYPES,
    DESCRIPTOR_TYPE,
    ArtifactCandidate,
    CandidateKind,
    InstallRecord,
)
from pominstall.models.descriptor import Descriptor, ParentRef, ResolvedIdentity
from pominstall.models.repository import (
    ContentLayout,
    InstallSummary,
    RepositoryTarget,
)

__all__ = [
    # artifacts
    "ARCHIVE_TYPES",
    "DESCRIPTOR_TYPE",
    "ArtifactCandidate",
    "CandidateKind",
    "InstallRecord",
    # descriptor
    "Descriptor",
    "ParentRef",
    "ResolvedIdentity",
    # repository
    "ContentLayout",
    "InstallSummary",
    "RepositoryTarget",
]
