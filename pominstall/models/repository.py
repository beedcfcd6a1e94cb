"""Repository target and run summary models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ContentLayout(str, Enum):
    """Local repository content layout conventions."""

    DEFAULT = "default"
    SIMPLE = "simple"
    ENHANCED = "enhanced"


class RepositoryTarget(BaseModel):
    """Where and in which layout artifacts are written.

    Built once per invocation and handed unchanged to every install call.
    """

    model_config = ConfigDict(frozen=True)

    root: Path
    layout: ContentLayout = ContentLayout.DEFAULT

    @classmethod
    def for_session(
        cls, root: Path, layout: ContentLayout = ContentLayout.DEFAULT
    ) -> RepositoryTarget:
        """Build the session target, downgrading ``enhanced`` to ``default``."""
        layout = ContentLayout(layout)
        if layout is ContentLayout.ENHANCED:
            layout = ContentLayout.DEFAULT
        return cls(root=Path(root), layout=layout)


class InstallSummary(BaseModel):
    """Outcome of one bulk install run."""

    model_config = ConfigDict(frozen=True)

    candidates: int = 0
    installed: list[str] = Field(default_factory=list)
    superseded: list[str] = Field(default_factory=list)
    missing_descriptor: list[str] = Field(default_factory=list)

