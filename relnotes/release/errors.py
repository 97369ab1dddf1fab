"""Error payload for release-notes generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseNotesErrorKind = Literal[
    "invalid_version",
    "missing_fragment",
    "read_failed",
    "write_failed",
]


@dataclass(frozen=True, slots=True)
class ReleaseNotesError:
    kind: ReleaseNotesErrorKind
    message: str
    hint: str | None = None
