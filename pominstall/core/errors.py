"""Fatal error taxonomy.

Per-file conditions that only skip a candidate (missing scan root, no
descriptor found, descriptor superseded by a co-located binary) are not
exceptions; they are logged and counted.  Everything here aborts the batch.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pominstall.models.artifacts import InstallRecord


class PomInstallError(RuntimeError):
    """Base class for errors that abort a bulk install."""


class DescriptorUnreadable(PomInstallError):
    """Raised when a descriptor file cannot be opened or read."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Error reading POM {path}")


class DescriptorMalformed(PomInstallError):
    """Raised when a descriptor is not a well-formed POM document."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        message = f"Error parsing POM {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class IncompleteIdentity(PomInstallError):
    """Raised when coordinates are still missing after parent inheritance."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            "The artifact information is incomplete: 'groupId', 'artifactId', "
            "'version', 'packaging' are required (missing: "
            + ", ".join(self.missing)
            + ")."
        )


class InstallationFailure(PomInstallError):
    """Raised when the repository installer fails; chained to the cause."""

    def __init__(self, records: Sequence[InstallRecord], cause: BaseException) -> None:
        self.records = list(records)
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)
