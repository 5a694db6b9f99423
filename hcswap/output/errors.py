"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hcswap.core.errors import ErrorCode
from hcswap.output.console import Style
from hcswap.releases.errors import ActivateError, ExtractError, StoreError, SwapError
from hcswap.releases.http import HttpError

if TYPE_CHECKING:
    from hcswap.output.console import ConsoleProtocol

__all__ = ["print_swap_error", "swap_error_exit_code"]


def print_swap_error(error: SwapError, console: ConsoleProtocol) -> None:
    """Print a component error with a hint where one helps."""
    match error:
        case HttpError(status=404, url=url):
            console.error(f"not found on the release index: {url}")
            console.print("hint: check the version exists for your platform", Style.DIM)
        case HttpError():
            console.error(f"request failed: {error}")
        case ExtractError(kind="path_traversal", entry=entry, archive=archive):
            console.error(f"refusing to extract {archive}: entry {entry!r} escapes the target")
        case ExtractError(kind="corrupt_archive", archive=archive, message=message):
            console.error(f"corrupt archive {archive}: {message}")
            console.print("hint: remove the version and install it again", Style.DIM)
        case ExtractError():
            console.error(str(error))
        case ActivateError(link=link, message=message):
            console.error(f"cannot activate {link}: {message}")
        case StoreError(path=path, message=message):
            console.error(f"{message}: {path}")


def swap_error_exit_code(error: SwapError) -> int:
    """Get exit code for a component error."""
    match error:
        case HttpError():
            return int(ErrorCode.NETWORK_ERROR)
        case ExtractError():
            return int(ErrorCode.ARCHIVE_ERROR)
        case ActivateError() | StoreError():
            return int(ErrorCode.IO_ERROR)
    return int(ErrorCode.IO_ERROR)
