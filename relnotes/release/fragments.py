from __future__ import annotations

from pathlib import Path

from relnotes.core.result import Err, Ok, Result
from relnotes.release.errors import ReleaseNotesError
from relnotes.release.model import FragmentSource
from relnotes.release.semver import SemVer, parse_semver


CHANGE_FILE_SUFFIX = ".md"

PACKAGES_DESC_FRAGMENT = "packages-desc.md"
SAMPLE_IMAGE_FRAGMENT = "style-set-sample-image.md"
DEPRECATED_PACKAGES_FRAGMENT = "deprecated-packages.md"


def _read_text(path: Path) -> Result[str, ReleaseNotesError]:
    try:
        # newline="" keeps CRLF fragments byte-for-byte.
        with open(path, encoding="utf-8", newline="") as handle:
            return Ok(handle.read())
    except FileNotFoundError:
        return Err(
            ReleaseNotesError(
                kind="missing_fragment",
                message=f"fragment not found: {path.name}",
                hint=str(path),
            )
        )
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            ReleaseNotesError(
                kind="read_failed",
                message=f"failed to read {path.name}: {e}",
                hint=str(path),
            )
        )


def list_change_files(changes_dir: Path) -> Result[list[Path], ReleaseNotesError]:
    """List the `*.md` files in `changes_dir`, in file-name order."""
    if not changes_dir.is_dir():
        return Err(
            ReleaseNotesError(
                kind="missing_fragment",
                message=f"changes directory not found: {changes_dir}",
                hint="create it or set [paths].changes in release-notes.toml",
            )
        )
    return Ok(
        [
            path
            for path in sorted(changes_dir.iterdir(), key=lambda p: p.name)
            if path.suffix == CHANGE_FILE_SUFFIX and path.is_file()
        ]
    )


def load_change_sources(
    changes_dir: Path, target: SemVer
) -> Result[list[FragmentSource], ReleaseNotesError]:
    """Read the change files that belong to `target`'s history.

    A file is opened only when its stem is a version at or below `target`;
    other files in the directory are never read, so their content cannot
    fail the build.
    """
    files = list_change_files(changes_dir)
    if isinstance(files, Err):
        return files

    sources: list[FragmentSource] = []
    for path in files.value:
        version = parse_semver(path.stem)
        if version is None or version > target:
            continue
        text = _read_text(path)
        if isinstance(text, Err):
            return text
        sources.append(FragmentSource(name=path.stem, text=text.value))
    return Ok(sources)


def read_static_fragment(fragments_dir: Path, name: str) -> Result[str, ReleaseNotesError]:
    """Read a static markdown fragment verbatim."""
    return _read_text(fragments_dir / name)
