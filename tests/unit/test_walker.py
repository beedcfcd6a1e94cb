"""Tests for the directory walker — classification, recursion, missing roots."""

from __future__ import annotations

from pathlib import Path

from pominstall.core.walker import walk
from pominstall.models.artifacts import CandidateKind


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


class TestWalk:
    def test_classifies_recognized_files(self, scan_dir: Path):
        _touch(scan_dir / "foo-1.0.jar")
        _touch(scan_dir / "dist-1.0.zip")
        _touch(scan_dir / "bar-2.0.pom")
        _touch(scan_dir / "README.md")

        found = {c.path.name: c.kind for c in walk(scan_dir)}
        assert found == {
            "foo-1.0.jar": CandidateKind.ARCHIVE_PRIMARY,
            "dist-1.0.zip": CandidateKind.ARCHIVE_SECONDARY,
            "bar-2.0.pom": CandidateKind.DESCRIPTOR_ONLY,
        }

    def test_paths_are_absolute(self, scan_dir: Path):
        _touch(scan_dir / "foo-1.0.jar")
        (candidate,) = list(walk(scan_dir))
        assert candidate.path.is_absolute()

    def test_non_recursive_ignores_subdirectories(self, scan_dir: Path):
        _touch(scan_dir / "top.jar")
        _touch(scan_dir / "nested" / "inner.jar")
        names = [c.path.name for c in walk(scan_dir, recursive=False)]
        assert names == ["top.jar"]

    def test_recursive_descends(self, scan_dir: Path):
        _touch(scan_dir / "top.jar")
        _touch(scan_dir / "nested" / "inner.jar")
        _touch(scan_dir / "nested" / "deeper" / "deep.pom")
        names = sorted(c.path.name for c in walk(scan_dir, recursive=True))
        assert names == ["deep.pom", "inner.jar", "top.jar"]

    def test_symlink_loop_visited_once(self, scan_dir: Path):
        _touch(scan_dir / "a.jar")
        (scan_dir / "sub").mkdir()
        (scan_dir / "sub" / "loop").symlink_to(scan_dir, target_is_directory=True)
        names = [c.path.name for c in walk(scan_dir, recursive=True)]
        assert names == ["a.jar"]

    def test_symlinked_directory_followed(self, scan_dir: Path, tmp_path: Path):
        elsewhere = tmp_path / "elsewhere"
        _touch(elsewhere / "linked.jar")
        (scan_dir / "link").symlink_to(elsewhere, target_is_directory=True)
        names = [c.path.name for c in walk(scan_dir, recursive=True)]
        assert names == ["linked.jar"]

    def test_directory_named_like_artifact_is_not_a_candidate(self, scan_dir: Path):
        (scan_dir / "weird.jar").mkdir()
        assert list(walk(scan_dir)) == []

    def test_missing_root_yields_nothing(self, tmp_path: Path):
        assert list(walk(tmp_path / "does-not-exist")) == []

    def test_file_root_yields_nothing(self, tmp_path: Path):
        root = _touch(tmp_path / "file.jar")
        assert list(walk(root)) == []

