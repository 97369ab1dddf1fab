"""Result values for expected failures.

Loading a config file, reading a fragment or writing the release notes can
fail for ordinary reasons (missing file, bad version). Those paths return a
`Result` instead of raising, so the CLI decides how each failure is shown:

    parsed = load_config(path)
    if isinstance(parsed, Err):
        console.error(parsed.error.message)
        return
    config = parsed.value

Pattern matching works too:

    match render_release_notes(...):
        case Ok((text, summary)):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome carrying `value`."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed outcome carrying `error`."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
