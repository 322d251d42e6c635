"""Error codes for CLI exit status.

The ``octorelease`` commands exit with one of these codes so a CI job can tell
a misconfigured step apart from a release the tool itself rejected.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (missing or invalid configuration)
    - 2: Environment error (executable missing, unsupported platform)
    - 3: Tool failure (octo.exe ran and returned non-zero)
    - 5: I/O error (process could not be started, config unwritable)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    TOOL_FAILURE = 3
    IO_ERROR = 5
