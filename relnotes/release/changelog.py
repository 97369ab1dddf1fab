"""Version-ordered changelog aggregation.

Each release keeps its notes in `changes/<version>.md`. The section for a
release lists every fragment whose version is at or below the release,
newest first, each nested under a bullet naming its version:

    ## Modifications since version 2.x
     * **2.5.0**
       - Fix a
       - Fix b
       ...
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from relnotes.release.document import DocumentSink
from relnotes.release.model import ChangeEntry, ChangeFragment, FragmentSource
from relnotes.release.semver import SemVer, parse_semver

__all__ = [
    "INDENT",
    "aggregate",
    "collect_fragments",
    "indent_notes",
    "render_caption",
    "write_change_list",
]

INDENT = "   "

_LINE_START = re.compile(r"^", re.MULTILINE)


def collect_fragments(
    target: SemVer, sources: Iterable[FragmentSource]
) -> dict[SemVer, ChangeFragment]:
    """Keep the sources that belong to `target`'s history, keyed by version.

    Names that are not semantic versions are skipped silently; they are other
    files sharing the directory. When two sources map to the same version the
    last one wins.
    """
    fragments: dict[SemVer, ChangeFragment] = {}
    for source in sources:
        version = parse_semver(source.name)
        if version is None or version > target:
            continue
        fragments[version] = ChangeFragment(version=version, text=source.text)
    return fragments


def indent_notes(text: str) -> str:
    """Strip `text`, end it with a newline and indent every line.

    The position after the final newline counts as a line start too, so the
    result ends with a bare indent. This keeps the generated markdown
    identical to earlier releases.
    """
    return _LINE_START.sub(INDENT, text.strip() + "\n")


def aggregate(target: SemVer, sources: Iterable[FragmentSource]) -> tuple[ChangeEntry, ...]:
    """Select, order (newest first) and render the fragments for `target`."""
    fragments = collect_fragments(target, sources)
    ordered = sorted(fragments.values(), key=lambda f: f.version.sort_key(), reverse=True)
    return tuple(
        ChangeEntry(version=f.version, rendered=indent_notes(f.text)) for f in ordered
    )


def render_caption(baseline: str) -> str:
    """Caption line heading the changelog section."""
    return f"## Modifications since version {baseline}"


def write_change_list(sink: DocumentSink, entries: Iterable[ChangeEntry], *, baseline: str) -> None:
    """Write the caption, then one version bullet and its indented notes per entry."""
    sink.append(render_caption(baseline))
    for entry in entries:
        sink.append(f" * **{entry.version}**")
        sink.append(entry.rendered)
