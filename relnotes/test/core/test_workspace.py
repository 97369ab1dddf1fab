"""Tests for relnotes.core.workspace module."""

from __future__ import annotations

from pathlib import Path

import pytest

from relnotes.core.config import Config, PathsConfig
from relnotes.core.result import Err, Ok
from relnotes.core.workspace import (
    Workspace,
    detect_workspace,
    find_workspace_upward,
    is_workspace_root,
)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "changes").mkdir()
    return tmp_path


class TestWorkspace:
    def test_default_layout(self, project: Path) -> None:
        """Directories resolve under the root with default names."""
        ws = Workspace(root=project)
        assert ws.config_path == project / "release-notes.toml"
        assert ws.changes_dir == project / "changes"
        assert ws.fragments_dir == project / "utility" / "release-note-fragments"
        assert ws.archives_dir == project / "release-archives"

    def test_release_notes_path(self, project: Path) -> None:
        """The output file is named after the version."""
        ws = Workspace(root=project)
        assert ws.release_notes_path("9.0.0") == (
            project / "release-archives" / "release-notes-9.0.0.md"
        )

    def test_with_config_overrides_layout(self, project: Path) -> None:
        """Configured paths replace the defaults."""
        config = Config(paths=PathsConfig(changes="docs/changes", archives="out"))
        ws = Workspace(root=project).with_config(config)
        assert ws.changes_dir == project / "docs" / "changes"
        assert ws.archives_dir == project / "out"


class TestIsWorkspaceRoot:
    def test_changes_dir_marks_root(self, project: Path) -> None:
        """A changes/ directory marks a project root."""
        assert is_workspace_root(project)

    def test_config_file_marks_root(self, tmp_path: Path) -> None:
        """A release-notes.toml file marks a project root."""
        (tmp_path / "release-notes.toml").write_text("", encoding="utf-8")
        assert is_workspace_root(tmp_path)

    def test_changes_file_is_not_enough(self, tmp_path: Path) -> None:
        """A plain file named changes does not mark a root."""
        (tmp_path / "changes").write_text("", encoding="utf-8")
        assert not is_workspace_root(tmp_path)


class TestDetectWorkspace:
    def test_finds_root_upward(self, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Detection walks up from a nested directory."""
        monkeypatch.delenv("RELNOTES_ROOT", raising=False)
        nested = project / "a" / "b"
        nested.mkdir(parents=True)

        assert find_workspace_upward(nested) == project
        result = detect_workspace(start_dir=nested)
        assert isinstance(result, Ok)
        assert result.value.root == project.resolve()

    def test_env_var_wins(
        self,
        project: Path,
        tmp_path_factory: pytest.TempPathFactory,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """RELNOTES_ROOT takes precedence over the search."""
        elsewhere = tmp_path_factory.mktemp("elsewhere")
        monkeypatch.setenv("RELNOTES_ROOT", str(project))

        result = detect_workspace(start_dir=elsewhere)
        assert isinstance(result, Ok)
        assert result.value.root == project.resolve()

    def test_invalid_env_var_is_an_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """RELNOTES_ROOT pointing at a non-root is an error."""
        monkeypatch.setenv("RELNOTES_ROOT", str(tmp_path))

        result = detect_workspace(start_dir=tmp_path)
        assert isinstance(result, Err)
        assert "RELNOTES_ROOT" in result.error.message

    def test_not_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The error records where the search started."""
        monkeypatch.delenv("RELNOTES_ROOT", raising=False)
        monkeypatch.setattr("relnotes.core.workspace.find_workspace_upward", lambda _start: None)

        result = detect_workspace(start_dir=tmp_path)
        assert isinstance(result, Err)
        assert result.error.searched_from == tmp_path.resolve()
