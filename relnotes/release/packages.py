"""Package matrix enumeration.

Every release ships one archive per (shape, spacing) pair. The file name and
menu name of each archive are derived from the taxonomy entries, and the
resulting list is published as a markdown table in the release notes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from relnotes.core.config import DEFAULT_PRODUCT_DISPLAY_NAME, DEFAULT_PRODUCT_TOKEN
from relnotes.release.document import DocumentSink
from relnotes.release.model import PackageEntry, ShapeVariant, SpacingVariant

__all__ = [
    "build_name",
    "describe",
    "format_row",
    "generate_packages",
    "ligation_flag",
    "write_package_table",
]

TABLE_HEADING = "### Packages"
TABLE_HEADER = "| Package | Description |\n| --- | --- |"


def build_name(separator: str, *parts: str) -> str:
    """Join the non-empty parts; empty parts leave no separator behind."""
    return separator.join(p for p in parts if p)


def ligation_flag(has_ligatures: bool) -> str:
    """Bold "Yes" for ligature-capable spacings, plain "No" otherwise."""
    return "**Yes**" if has_ligatures else "No"


def describe(shape: ShapeVariant, spacing: SpacingVariant) -> str:
    """Description cell: the shape alone for no-spacing shapes, else shape, spacing and ligation."""
    if shape.is_no_spacing:
        return f"_{shape.description}_"
    return (
        f"**Shape**: _{shape.description}_; **Spacing**: _{spacing.description}_ <br/>"
        f"**Ligation**: {ligation_flag(spacing.has_ligatures)}"
    )


def generate_packages(
    shapes: Sequence[ShapeVariant],
    spacings: Sequence[SpacingVariant],
    version: str,
    *,
    token: str = DEFAULT_PRODUCT_TOKEN,
    display_name: str = DEFAULT_PRODUCT_DISPLAY_NAME,
) -> tuple[PackageEntry, ...]:
    """Enumerate every shipped package for `version`, in table order.

    Counted shapes share one ordinal across all of their spacings; the
    counter advances once per counted shape.
    """
    entries: list[PackageEntry] = []
    counter = 1
    for shape in shapes:
        index = counter if shape.is_counted else None
        for spacing in spacings:
            if shape.is_no_spacing and not spacing.is_default:
                continue
            file_name = build_name(
                "-",
                f"{index:02d}" if index is not None else "",
                token,
                spacing.key,
                shape.key,
                version,
            )
            menu_name = build_name(" ", display_name, spacing.name_suffix, shape.name_suffix)
            entries.append(
                PackageEntry(
                    index=index,
                    file_name=file_name,
                    display_name=menu_name,
                    description=describe(shape, spacing),
                )
            )
        if shape.is_counted:
            counter += 1
    return tuple(entries)


def format_row(entry: PackageEntry) -> str:
    """One markdown table row: file name and menu name, then the description."""
    return (
        f"| `{entry.file_name}`<br/>**Menu Name**: `{entry.display_name}` "
        f"| {entry.description} |"
    )


def write_package_table(sink: DocumentSink, entries: Iterable[PackageEntry]) -> None:
    """Write the heading, the header rows, one row per entry and a closing blank line."""
    sink.append(TABLE_HEADING)
    sink.append(TABLE_HEADER)
    for entry in entries:
        sink.append(format_row(entry))
    sink.append()
