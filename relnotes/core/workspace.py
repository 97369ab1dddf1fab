"""Project root detection and paths.

The project root is the checkout of the font repository. It is identified by
a `release-notes.toml` file or, failing that, a `changes/` directory holding
the per-version changelog fragments.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .config import CONFIG_FILE_NAME, Config
from .result import Err, Ok, Result

__all__ = [
    "ROOT_ENV_VAR",
    "Workspace",
    "WorkspaceError",
    "detect_workspace",
    "find_workspace_upward",
    "is_workspace_root",
]

ROOT_ENV_VAR = "RELNOTES_ROOT"


@dataclass(frozen=True)
class WorkspaceError:
    """Error when the project root cannot be detected."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Workspace:
    """A detected project root plus the directory layout from its config."""

    root: Path
    config: Config = field(default_factory=Config)

    @property
    def config_path(self) -> Path:
        return self.root / CONFIG_FILE_NAME

    @property
    def changes_dir(self) -> Path:
        """Directory of `<version>.md` changelog fragments."""
        return self.root / self.config.paths.changes

    @property
    def fragments_dir(self) -> Path:
        """Directory of static markdown fragments spliced into the notes."""
        return self.root / self.config.paths.fragments

    @property
    def archives_dir(self) -> Path:
        return self.root / self.config.paths.archives

    def release_notes_path(self, version: str) -> Path:
        return self.archives_dir / f"release-notes-{version}.md"

    def with_config(self, config: Config) -> Workspace:
        return Workspace(root=self.root, config=config)

    def __str__(self) -> str:
        return str(self.root)


def is_workspace_root(path: Path) -> bool:
    """Check if a path is a project root.

    A project root must have either:
    - release-notes.toml
    - changes/ directory
    """
    return (path / CONFIG_FILE_NAME).is_file() or (path / "changes").is_dir()


def find_workspace_upward(start: Path) -> Path | None:
    """Search upward from start for a project root."""
    for parent in (start, *start.parents):
        if is_workspace_root(parent):
            return parent
    return None


def detect_workspace(
    *,
    start_dir: Path | None = None,
    env_var: str = ROOT_ENV_VAR,
) -> Result[Workspace, WorkspaceError]:
    """Detect the project root directory.

    Detection order:
    1. RELNOTES_ROOT environment variable (if set and valid)
    2. Search upward from start_dir (or cwd)

    The returned workspace carries the default config; callers load
    `release-notes.toml` themselves and attach it with `with_config`.
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir() and is_workspace_root(env_path):
            return Ok(Workspace(root=env_path))
        return Err(
            WorkspaceError(
                message=f"${env_var} is set to '{env_value}' but it is not a project root",
                searched_from=env_path if env_path.is_dir() else None,
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_workspace_upward(search_start)
    if found:
        return Ok(Workspace(root=found))

    return Err(
        WorkspaceError(
            message=f"Could not find project root ({CONFIG_FILE_NAME} or changes/ not found)",
            searched_from=search_start,
        )
    )
