"""Process exit codes.

Every way a session can end maps to one of these codes. Cancelling a prompt
or picking "Exit" is a normal end of session and exits with OK.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for hc-swap.

    - 0: Success, including user cancellation
    - 1: User error (unknown tool, version not installed)
    - 2: Configuration error (unreadable or invalid config.toml)
    - 3: Archive error (corrupt archive, unsafe entry path)
    - 4: Network error (catalog or download failed)
    - 5: I/O error (version store, symlink)
    - 130: Interrupted with Ctrl-C
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    ARCHIVE_ERROR = 3
    NETWORK_ERROR = 4
    IO_ERROR = 5
    INTERRUPTED = 130

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
