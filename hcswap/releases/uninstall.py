from __future__ import annotations

import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from hcswap.core.result import Err, Ok, Result
from hcswap.releases.errors import StoreError
from hcswap.releases.store import is_valid_version

if TYPE_CHECKING:
    from hcswap.releases.products import Tool

__all__ = ["uninstall"]


def uninstall(tool: Tool, store_root: Path, version: str) -> Result[Path, StoreError]:
    """Delete ``<store_root>/<version>`` and everything under it.

    Removing a version that is not there succeeds. The active symlink is not
    touched, even if it points into the removed directory.
    """
    path = store_root / version
    if not is_valid_version(version):
        return Err(StoreError(path=path, message=f"Invalid {tool.canonical} version {version!r}"))

    try:
        if path.is_symlink() or path.is_file():
            path.unlink()
        else:
            shutil.rmtree(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        return Err(StoreError(path=path, message=f"Cannot remove version ({e})"))
    return Ok(path)
