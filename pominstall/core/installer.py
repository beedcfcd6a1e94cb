"""Repository installer — commits install records into a local repository.

Layout (``default`` and ``simple``)::

    {root}/{groupId with dots as slashes}/{artifactId}/{version}/
        {artifactId}-{version}[-{classifier}].{type}

Repository metadata (``maven-metadata-local.xml``, checksums) is not
written.
"""

from __future__ import annotations

import filecmp
import logging
import os
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from pominstall.core.errors import InstallationFailure
from pominstall.models.artifacts import InstallRecord
from pominstall.models.repository import RepositoryTarget

logger = logging.getLogger(__name__)


class UnsafeCoordinates(ValueError):
    """Raised when a coordinate cannot be used as a repository path segment."""


@runtime_checkable
class RepositoryInstaller(Protocol):
    """Protocol for repository install backends.

    ``install`` is called once per candidate with that candidate's full,
    non-empty record set.
    """

    def install(
        self, records: Sequence[InstallRecord], target: RepositoryTarget
    ) -> None:
        """Write ``records`` into ``target``.

        Raises
        ------
        InstallationFailure
            If any record cannot be installed.
        """
        ...


class LocalRepositoryInstaller:
    """Installs records by copying files into a filesystem repository.

    Re-installing identical content is a no-op.  New content is copied to a
    temporary sibling and renamed into place so readers never observe a
    partially written artifact.
    """

    def install(
        self, records: Sequence[InstallRecord], target: RepositoryTarget
    ) -> None:
        if not records:
            raise ValueError("install() requires at least one record")
        try:
            destinations = [artifact_path(target, record) for record in records]
            for record, destination in zip(records, destinations):
                self._copy(record.file, destination)
                logger.info("Installed %s to %s", record.coordinates, destination)
        except (OSError, UnsafeCoordinates) as exc:
            raise InstallationFailure(records, exc) from exc

    @staticmethod
    def _copy(source: Path, destination: Path) -> None:
        if destination.is_file() and filecmp.cmp(source, destination, shallow=False):
            logger.debug("%s is up to date", destination)
            return
        destination.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{destination.name}-", dir=destination.parent
        )
        os.close(fd)
        try:
            shutil.copyfile(source, temp_name)
            os.replace(temp_name, destination)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise


def artifact_path(target: RepositoryTarget, record: InstallRecord) -> Path:
    """Compute the repository path of ``record`` under ``target``.

    Raises
    ------
    UnsafeCoordinates
        If a coordinate would place the file outside ``target.root``.
    """
    for field, value in (
        ("artifactId", record.artifact_id),
        ("version", record.version),
        ("type", record.type),
    ):
        _check_segment(field, value)
    if record.classifier:
        _check_segment("classifier", record.classifier)
    for part in record.group_id.split("."):
        _check_segment("groupId", part)

    file_name = f"{record.artifact_id}-{record.version}"
    if record.classifier:
        file_name += f"-{record.classifier}"
    file_name += f".{record.type}"
    return (
        Path(target.root)
        / Path(*record.group_id.split("."))
        / record.artifact_id
        / record.version
        / file_name
    )


def _check_segment(field: str, value: str) -> None:
    if value in ("", ".", "..") or "/" in value or "\\" in value or "\0" in value:
        raise UnsafeCoordinates(f"{field} {value!r} is not a valid path segment")
