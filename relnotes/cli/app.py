from __future__ import annotations

import os
from pathlib import Path

import typer

from relnotes import __version__
from relnotes.cli.commands.notes import changes, generate, packages
from relnotes.core.errors import ErrorCode
from relnotes.core.workspace import ROOT_ENV_VAR, is_workspace_root


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Assemble release notes from changelog fragments and the package matrix.",
)


app.command()(generate)
app.command()(packages)
app.command()(changes)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    root: Path | None = typer.Option(
        None,
        "--root",
        help="Project root (overrides auto detection)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if root is not None:
        try:
            resolved = root.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --root: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not resolved.is_dir() or not is_workspace_root(resolved):
            typer.echo(
                f"error: --root '{resolved}' is not a project root "
                "(missing release-notes.toml or changes/)",
                err=True,
            )
            raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

        os.environ[ROOT_ENV_VAR] = str(resolved)


def main() -> None:
    app()
