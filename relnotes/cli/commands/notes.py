from __future__ import annotations

from pathlib import Path

import typer

from relnotes.cli.commands._helpers import exit_on_error
from relnotes.cli.context import build_context
from relnotes.output.console import Style
from relnotes.release.changelog import write_change_list
from relnotes.release.document import DocumentBuilder
from relnotes.release.packages import write_package_table
from relnotes.release.service import (
    list_packages,
    load_changes,
    parse_target_version,
    render_release_notes,
    write_release_notes,
)


def generate(
    version: str = typer.Argument(..., help="Release version (e.g. 9.0.0)"),
    out: Path | None = typer.Option(
        None,
        "--out",
        help="Output file (default: release-archives/release-notes-<version>.md)",
    ),
    stdout: bool = typer.Option(False, "--stdout", help="Print the notes instead of writing"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Report skipped fragments"),
) -> None:
    """Generate the release notes for VERSION."""
    ctx = build_context()
    target = exit_on_error(parse_target_version(version), ctx)

    if stdout:
        content, _ = exit_on_error(
            render_release_notes(
                workspace=ctx.workspace, version=target, console=ctx.console, verbose=verbose
            ),
            ctx,
        )
        ctx.console.raw(content)
        return

    written = exit_on_error(
        write_release_notes(
            workspace=ctx.workspace,
            version=target,
            console=ctx.console,
            out_path=out,
            verbose=verbose,
        ),
        ctx,
    )
    summary = written.summary
    ctx.console.print(
        f"{summary.changes} changelog entries, {summary.packages} packages", Style.DIM
    )
    ctx.console.success(str(written.path))


def packages(
    version: str = typer.Argument(..., help="Release version (e.g. 9.0.0)"),
) -> None:
    """Print the package table for VERSION."""
    ctx = build_context()
    target = exit_on_error(parse_target_version(version), ctx)

    doc = DocumentBuilder()
    write_package_table(doc, list_packages(workspace=ctx.workspace, version=target))
    ctx.console.raw(doc.content())


def changes(
    version: str = typer.Argument(..., help="Release version (e.g. 9.0.0)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Report skipped fragments"),
) -> None:
    """Print the changelog section for VERSION."""
    ctx = build_context()
    target = exit_on_error(parse_target_version(version), ctx)

    entries = exit_on_error(
        load_changes(workspace=ctx.workspace, version=target, console=ctx.console, verbose=verbose),
        ctx,
    )
    doc = DocumentBuilder()
    write_change_list(doc, entries, baseline=ctx.workspace.config.changelog.baseline)
    ctx.console.raw(doc.content())
