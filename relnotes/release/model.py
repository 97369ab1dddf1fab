from __future__ import annotations

from dataclasses import dataclass

from relnotes.release.semver import SemVer


@dataclass(frozen=True, slots=True)
class FragmentSource:
    """A candidate changelog fragment before its name is validated."""

    name: str  # file stem, e.g. "2.5.0" or "readme"
    text: str


@dataclass(frozen=True, slots=True)
class ChangeFragment:
    version: SemVer
    text: str


@dataclass(frozen=True, slots=True)
class ChangeEntry:
    """One rendered changelog bullet."""

    version: SemVer
    rendered: str


@dataclass(frozen=True, slots=True)
class ShapeVariant:
    """A stylistic axis of the package matrix (default, slab, ss01, ...)."""

    key: str
    description: str
    name_suffix: str
    is_slab: bool = False
    # Counted shapes get a two-digit ordinal prefix in their file names.
    is_counted: bool = False
    # No-spacing shapes only ship with the default spacing.
    is_no_spacing: bool = False


@dataclass(frozen=True, slots=True)
class SpacingVariant:
    """A metrics axis of the package matrix (default, term, type, ...)."""

    key: str
    description: str
    has_ligatures: bool
    name_suffix: str

    @property
    def is_default(self) -> bool:
        return not self.key


@dataclass(frozen=True, slots=True)
class PackageEntry:
    index: int | None
    file_name: str
    display_name: str
    description: str
