"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer

from relnotes.core.errors import ErrorCode
from relnotes.core.result import Err, Result
from relnotes.output.console import Style
from relnotes.release.errors import ReleaseNotesError

if TYPE_CHECKING:
    from relnotes.cli.context import CLIContext


def exit_code_for(error: ReleaseNotesError) -> ErrorCode:
    match error.kind:
        case "invalid_version":
            return ErrorCode.USER_ERROR
        case _:
            # missing_fragment, read_failed, write_failed
            return ErrorCode.IO_ERROR


def exit_on_error[T](result: Result[T, ReleaseNotesError], ctx: CLIContext) -> T:
    """Return the value of an Ok result, or report the error and exit.

    Replaces the pattern:
        if isinstance(result, Err):
            ctx.console.error(result.error.message)
            ...
            raise typer.Exit(code=...)
        value = result.value
    """
    if isinstance(result, Err):
        error = result.error
        ctx.console.error(error.message)
        if error.hint:
            ctx.console.print(f"hint: {error.hint}", Style.DIM)
        raise typer.Exit(code=int(exit_code_for(error)))
    return result.value
