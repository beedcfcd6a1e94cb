"""Descriptor (POM) models and the resolved identity derived from them."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ParentRef(BaseModel):
    """The ``<parent>`` reference of a descriptor."""

    model_config = ConfigDict(frozen=True)

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None


class Descriptor(BaseModel):
    """Identity fields read from a descriptor file.

    Every field is optional here; completeness is only checked once parent
    inheritance has been applied by the identity resolver.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None
    packaging: str | None = None
    parent: ParentRef | None = None


class ResolvedIdentity(BaseModel):
    """Complete coordinates of an artifact. All fields are non-empty."""

    model_config = ConfigDict(frozen=True)

    group_id: str = Field(min_length=1)
    artifact_id: str = Field(min_length=1)
    version: str = Field(min_length=1)
    packaging: str = Field(min_length=1)

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}:{self.packaging}"
