"""Release-notes orchestration.

Sections are written in a fixed order:
1. changelog ("Modifications since version ...")
2. packages-desc.md
3. package table
4. style-set-sample-image.md
5. deprecated-packages.md

The whole document is assembled before anything touches the archive
directory, so a failed fragment read never leaves a partial file behind.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relnotes.core.result import Err, Ok, Result
from relnotes.core.workspace import Workspace
from relnotes.output.console import ConsoleProtocol, Style
from relnotes.platform.files import atomic_write_text
from relnotes.release.changelog import aggregate, write_change_list
from relnotes.release.document import DocumentBuilder, DocumentSink
from relnotes.release.errors import ReleaseNotesError
from relnotes.release.fragments import (
    DEPRECATED_PACKAGES_FRAGMENT,
    PACKAGES_DESC_FRAGMENT,
    SAMPLE_IMAGE_FRAGMENT,
    list_change_files,
    load_change_sources,
    read_static_fragment,
)
from relnotes.release.model import ChangeEntry, PackageEntry
from relnotes.release.packages import generate_packages, write_package_table
from relnotes.release.semver import SemVer, parse_semver
from relnotes.release.taxonomy import PACKAGE_SHAPES, PACKAGE_SPACINGS


@dataclass(frozen=True, slots=True)
class NotesSummary:
    version: SemVer
    changes: int
    packages: int


@dataclass(frozen=True, slots=True)
class WrittenNotes:
    path: Path
    summary: NotesSummary


def parse_target_version(text: str | None) -> Result[SemVer, ReleaseNotesError]:
    if text is None or not text.strip():
        return Err(
            ReleaseNotesError(
                kind="invalid_version",
                message="missing release version",
                hint="pass a semantic version, e.g. 9.0.0",
            )
        )
    version = parse_semver(text)
    if version is None:
        return Err(
            ReleaseNotesError(
                kind="invalid_version",
                message=f"not a semantic version: {text!r}",
                hint="expected MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]",
            )
        )
    return Ok(version)


def _report_skipped(console: ConsoleProtocol, files: list[Path], version: SemVer) -> None:
    for path in files:
        parsed = parse_semver(path.stem)
        if parsed is None:
            console.print(f"skip {path.stem}: not a version", Style.DIM)
        elif parsed > version:
            console.print(f"skip {path.stem}: newer than {version}", Style.DIM)


def load_changes(
    *,
    workspace: Workspace,
    version: SemVer,
    console: ConsoleProtocol,
    verbose: bool = False,
) -> Result[tuple[ChangeEntry, ...], ReleaseNotesError]:
    if verbose:
        files = list_change_files(workspace.changes_dir)
        if isinstance(files, Err):
            return files
        _report_skipped(console, files.value, version)

    sources = load_change_sources(workspace.changes_dir, version)
    if isinstance(sources, Err):
        return sources
    return Ok(aggregate(version, sources.value))


def list_packages(*, workspace: Workspace, version: SemVer) -> tuple[PackageEntry, ...]:
    product = workspace.config.product
    return generate_packages(
        PACKAGE_SHAPES,
        PACKAGE_SPACINGS,
        str(version),
        token=product.token,
        display_name=product.display_name,
    )


def _copy_fragment(
    sink: DocumentSink, workspace: Workspace, name: str
) -> Result[None, ReleaseNotesError]:
    content = read_static_fragment(workspace.fragments_dir, name)
    if isinstance(content, Err):
        return content
    sink.append(content.value)
    return Ok(None)


def build_release_notes(
    *,
    workspace: Workspace,
    version: SemVer,
    sink: DocumentSink,
    console: ConsoleProtocol,
    verbose: bool = False,
) -> Result[NotesSummary, ReleaseNotesError]:
    """Write every section for `version` into `sink`."""
    changes = load_changes(workspace=workspace, version=version, console=console, verbose=verbose)
    if isinstance(changes, Err):
        return changes
    write_change_list(sink, changes.value, baseline=workspace.config.changelog.baseline)

    copied = _copy_fragment(sink, workspace, PACKAGES_DESC_FRAGMENT)
    if isinstance(copied, Err):
        return copied

    packages = list_packages(workspace=workspace, version=version)
    write_package_table(sink, packages)

    for name in (SAMPLE_IMAGE_FRAGMENT, DEPRECATED_PACKAGES_FRAGMENT):
        copied = _copy_fragment(sink, workspace, name)
        if isinstance(copied, Err):
            return copied

    return Ok(NotesSummary(version=version, changes=len(changes.value), packages=len(packages)))


def render_release_notes(
    *,
    workspace: Workspace,
    version: SemVer,
    console: ConsoleProtocol,
    verbose: bool = False,
) -> Result[tuple[str, NotesSummary], ReleaseNotesError]:
    doc = DocumentBuilder()
    built = build_release_notes(
        workspace=workspace, version=version, sink=doc, console=console, verbose=verbose
    )
    if isinstance(built, Err):
        return built
    return Ok((doc.content(), built.value))


def write_release_notes(
    *,
    workspace: Workspace,
    version: SemVer,
    console: ConsoleProtocol,
    out_path: Path | None = None,
    verbose: bool = False,
) -> Result[WrittenNotes, ReleaseNotesError]:
    """Render the notes for `version` and write them to the archive directory."""
    rendered = render_release_notes(
        workspace=workspace, version=version, console=console, verbose=verbose
    )
    if isinstance(rendered, Err):
        return rendered
    content, summary = rendered.value

    path = out_path if out_path is not None else workspace.release_notes_path(str(version))
    try:
        atomic_write_text(path, content)
    except OSError as e:
        return Err(
            ReleaseNotesError(
                kind="write_failed",
                message=f"failed to write release notes: {e}",
                hint=str(path),
            )
        )

    return Ok(WrittenNotes(path=path, summary=summary))
