from __future__ import annotations

from pathlib import Path

import pytest
import typer

from relnotes.cli.context import CLIContext
from relnotes.core.errors import ErrorCode
from relnotes.core.workspace import Workspace
from relnotes.output.console import MockConsole


def _ctx(root: Path) -> CLIContext:
    changes = root / "changes"
    changes.mkdir(exist_ok=True)
    (changes / "1.0.0.md").write_text("- Initial release\n", encoding="utf-8")
    fragments = root / "utility" / "release-note-fragments"
    fragments.mkdir(parents=True, exist_ok=True)
    for name in ("packages-desc.md", "style-set-sample-image.md", "deprecated-packages.md"):
        (fragments / name).write_text(name, encoding="utf-8")
    return CLIContext(workspace=Workspace(root=root), console=MockConsole())


def _install(monkeypatch: pytest.MonkeyPatch, ctx: CLIContext) -> MockConsole:
    import relnotes.cli.commands.notes as notes_cmd

    monkeypatch.setattr(notes_cmd, "build_context", lambda: ctx)
    assert isinstance(ctx.console, MockConsole)
    return ctx.console


def test_generate_writes_archive(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """generate writes the file and reports a summary."""
    import relnotes.cli.commands.notes as notes_cmd

    console = _install(monkeypatch, _ctx(tmp_path))

    notes_cmd.generate(version="1.0.0", out=None, stdout=False, verbose=False)

    path = tmp_path / "release-archives" / "release-notes-1.0.0.md"
    assert path.exists()
    assert console.find(f"OK {path}")
    assert console.find("1 changelog entries, 67 packages")


def test_generate_stdout_does_not_write(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """--stdout prints the document instead of writing it."""
    import relnotes.cli.commands.notes as notes_cmd

    console = _install(monkeypatch, _ctx(tmp_path))

    notes_cmd.generate(version="1.0.0", out=None, stdout=True, verbose=False)

    assert not (tmp_path / "release-archives").exists()
    assert console.messages[-1].startswith("## Modifications since version 2.x\n")


def test_generate_invalid_version_is_user_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A non-version argument exits with USER_ERROR."""
    import relnotes.cli.commands.notes as notes_cmd

    console = _install(monkeypatch, _ctx(tmp_path))

    with pytest.raises(typer.Exit) as exc:
        notes_cmd.generate(version="nine", out=None, stdout=False, verbose=False)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert console.has_error()
    assert not (tmp_path / "release-archives").exists()


def test_generate_missing_fragment_is_io_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A missing static fragment exits with IO_ERROR and a hint."""
    import relnotes.cli.commands.notes as notes_cmd

    ctx = _ctx(tmp_path)
    (ctx.workspace.fragments_dir / "packages-desc.md").unlink()
    console = _install(monkeypatch, ctx)

    with pytest.raises(typer.Exit) as exc:
        notes_cmd.generate(version="1.0.0", out=None, stdout=False, verbose=False)

    assert exc.value.exit_code == int(ErrorCode.IO_ERROR)
    assert console.find("hint:")


def test_packages_prints_table(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """packages prints the full table."""
    import relnotes.cli.commands.notes as notes_cmd

    console = _install(monkeypatch, _ctx(tmp_path))

    notes_cmd.packages(version="9.0.0")

    (table,) = console.messages
    lines = table.splitlines()
    assert lines[:3] == ["### Packages", "| Package | Description |", "| --- | --- |"]
    assert len(lines) == 3 + 67 + 1


def test_changes_prints_section(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """changes prints only the changelog section."""
    import relnotes.cli.commands.notes as notes_cmd

    console = _install(monkeypatch, _ctx(tmp_path))

    notes_cmd.changes(version="1.0.0", verbose=False)

    assert console.messages == [
        "## Modifications since version 2.x\n * **1.0.0**\n   - Initial release\n   \n"
    ]
