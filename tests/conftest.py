"""Shared test fixtures for pominstall."""

from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

from pominstall.core.bulk_installer import BulkInstaller
from pominstall.core.installer import LocalRepositoryInstaller
from pominstall.core.locator import DescriptorLocator
from pominstall.models.repository import RepositoryTarget

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"


def pom_xml(
    group_id: str | None = "g",
    artifact_id: str | None = "foo",
    version: str | None = "1.0",
    packaging: str | None = "jar",
    parent: tuple[str, str, str] | None = None,
    namespaced: bool = True,
) -> bytes:
    """Render a minimal POM document; ``None`` leaves an element out."""
    parts = []
    if parent is not None:
        pg, pa, pv = parent
        parts.append(
            "<parent>"
            f"<groupId>{pg}</groupId><artifactId>{pa}</artifactId><version>{pv}</version>"
            "</parent>"
        )
    for tag, value in (
        ("groupId", group_id),
        ("artifactId", artifact_id),
        ("version", version),
        ("packaging", packaging),
    ):
        if value is not None:
            parts.append(f"<{tag}>{value}</{tag}>")
    xmlns = f' xmlns="{POM_NAMESPACE}"' if namespaced else ""
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>\n<project{xmlns}>'
        "<modelVersion>4.0.0</modelVersion>" + "".join(parts) + "</project>"
    ).encode("utf-8")


@pytest.fixture
def scan_dir(tmp_path: Path) -> Path:
    """Provide an empty directory to scan."""
    path = tmp_path / "files"
    path.mkdir()
    return path


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Provide the local repository root (not created up front)."""
    return tmp_path / "local_repo"


@pytest.fixture
def extract_dir(tmp_path: Path) -> Path:
    """Provide a dedicated directory for extracted descriptors."""
    path = tmp_path / "extract"
    path.mkdir()
    return path


@pytest.fixture
def target(repo_root: Path) -> RepositoryTarget:
    return RepositoryTarget.for_session(repo_root)


@pytest.fixture
def bulk(target: RepositoryTarget, extract_dir: Path) -> BulkInstaller:
    """Provide a BulkInstaller writing to the temp repository."""
    return BulkInstaller(
        LocalRepositoryInstaller(),
        target,
        locator=DescriptorLocator(extract_dir),
    )


@pytest.fixture
def make_archive() -> Callable[..., Path]:
    """Factory fixture: write a jar/zip with an optional embedded POM."""

    def _factory(
        path: Path,
        pom: bytes | None = None,
        entry: str = "META-INF/maven/g/foo/pom.xml",
        extra: dict[str, bytes] | None = None,
    ) -> Path:
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("META-INF/MANIFEST.MF", "Manifest-Version: 1.0\n")
            if pom is not None:
                archive.writestr(entry, pom)
            for name, data in (extra or {}).items():
                archive.writestr(name, data)
        return path

    return _factory


@pytest.fixture
def make_pom() -> Callable[..., Path]:
    """Factory fixture: write a POM file built by ``pom_xml``."""

    def _factory(path: Path, **fields) -> Path:
        path.write_bytes(pom_xml(**fields))
        return path

    return _factory


@pytest.fixture
def pom_bytes() -> Callable[..., bytes]:
    """Expose ``pom_xml`` to tests that need raw POM bytes."""
    return pom_xml


@pytest.fixture
def make_encrypted_archive() -> Callable[..., Path]:
    """Factory fixture: write a jar whose embedded POM is flagged as encrypted."""

    def _factory(
        path: Path, pom: bytes, entry: str = "META-INF/maven/g/foo/pom.xml"
    ) -> Path:
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr(entry, pom)
            # the central directory is written on close, with this flag set
            archive.getinfo(entry).flag_bits |= 0x1
        return path

    return _factory
