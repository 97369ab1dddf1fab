"""Process exit codes.

Every command maps its failure to one of these values; scripts that call
`relnotes` in CI rely on them, so the numbers must not change:
- 0: Success
- 1: User error (bad version argument, bad option)
- 2: Config error (unreadable or malformed release-notes.toml, no project root)
- 5: I/O error (missing fragment, failed write)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    IO_ERROR = 5
