"""Semantic Versioning 2.0.0 parsing and precedence.

Precedence follows semver.org section 11: major, minor and patch compare
numerically; a version with a pre-release sorts before the same version
without one; pre-release identifiers compare left to right, numeric ones
numerically and below alphanumeric ones, and a shorter identifier list sorts
first when all shared identifiers are equal. Build metadata never affects
precedence.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["SemVer", "compare", "parse_semver"]


_NUM = r"0|[1-9]\d*"
_PRE_ID = r"0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*"
_BUILD_ID = r"[0-9a-zA-Z-]+"

_SEMVER_RE = re.compile(
    rf"^v?({_NUM})\.({_NUM})\.({_NUM})"
    rf"(?:-((?:{_PRE_ID})(?:\.(?:{_PRE_ID}))*))?"
    rf"(?:\+({_BUILD_ID}(?:\.{_BUILD_ID})*))?$",
    re.ASCII,
)

type _PreKey = tuple[tuple[int, int, str], ...]


@dataclass(frozen=True, slots=True)
class SemVer:
    """An immutable semantic version.

    Equality is structural (build metadata included), so two fragments named
    `1.0.0+a` and `1.0.0+b` stay distinct. Ordering uses precedence only.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def precedence_key(self) -> tuple[int, int, int, int, _PreKey]:
        if not self.prerelease:
            # A release outranks all of its pre-releases.
            return (self.major, self.minor, self.patch, 1, ())
        pre: _PreKey = tuple(
            (0, int(ident), "") if ident.isdigit() else (1, 0, ident)
            for ident in self.prerelease
        )
        return (self.major, self.minor, self.patch, 0, pre)

    def sort_key(self) -> tuple[tuple[int, int, int, int, _PreKey], tuple[str, ...]]:
        """Precedence, then build metadata as a tie-break for stable output."""
        return (self.precedence_key(), self.build)

    def __lt__(self, other: SemVer) -> bool:
        return self.precedence_key() < other.precedence_key()

    def __le__(self, other: SemVer) -> bool:
        return self.precedence_key() <= other.precedence_key()

    def __gt__(self, other: SemVer) -> bool:
        return self.precedence_key() > other.precedence_key()

    def __ge__(self, other: SemVer) -> bool:
        return self.precedence_key() >= other.precedence_key()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


def parse_semver(text: str) -> SemVer | None:
    """Parse `text` as a semantic version, or return None.

    Surrounding whitespace and a single leading `v` are accepted, so tag-style
    names such as `v1.2.3` parse too.
    """
    m = _SEMVER_RE.match(text.strip())
    if m is None:
        return None
    pre = m.group(4)
    build = m.group(5)
    return SemVer(
        int(m.group(1)),
        int(m.group(2)),
        int(m.group(3)),
        tuple(pre.split(".")) if pre else (),
        tuple(build.split(".")) if build else (),
    )


def compare(a: SemVer, b: SemVer) -> int:
    """Return -1, 0 or 1 by precedence."""
    ka, kb = a.precedence_key(), b.precedence_key()
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0
