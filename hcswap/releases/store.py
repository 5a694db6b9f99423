"""Version store inspection.

A store is ``<app_dir>/<tool>-versions/``; each subdirectory is one
installed version and its name is the version id. There is no index file:
the directory listing is the whole state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from hcswap.core.result import Err, Ok, Result
from hcswap.releases.errors import StoreError

__all__ = [
    "Missing",
    "Empty",
    "Populated",
    "StoreState",
    "inspect_store",
    "active_version",
    "is_valid_version",
]


def is_valid_version(version: str) -> bool:
    """True if ``version`` can be used as one directory name in the store."""
    if version in {"", ".", ".."}:
        return False
    return "/" not in version and "\\" not in version


@dataclass(frozen=True, slots=True)
class Missing:
    """The store directory does not exist (tool never installed)."""


@dataclass(frozen=True, slots=True)
class Empty:
    """The store exists but holds no versions."""


@dataclass(frozen=True, slots=True)
class Populated:
    versions: tuple[str, ...]


StoreState = Missing | Empty | Populated


def inspect_store(store: Path) -> Result[StoreState, StoreError]:
    """Classify ``store``.

    Entries are returned in filesystem enumeration order, unsorted.
    Only "does not exist" maps to Missing; any other failure to read the
    directory (permissions, not a directory) is a StoreError.
    """
    try:
        with os.scandir(store) as it:
            names = tuple(entry.name for entry in it)
    except FileNotFoundError:
        return Ok(Missing())
    except OSError as e:
        return Err(StoreError(path=store, message=f"Cannot read version store ({e.strerror or e})"))

    if not names:
        return Ok(Empty())
    return Ok(Populated(versions=names))


def active_version(link: Path, store: Path) -> str | None:
    """Version the active symlink points into, if it points into ``store``.

    Returns None when there is no link, it is not a symlink, or it targets
    something outside the store. The target does not have to exist.
    """
    if not link.is_symlink():
        return None
    try:
        target = Path(os.readlink(link))
    except OSError:
        return None
    if not target.is_absolute():
        target = link.parent / target

    root = Path(os.path.normpath(os.path.abspath(store)))
    resolved = Path(os.path.normpath(os.path.abspath(target)))
    try:
        rel = resolved.relative_to(root)
    except ValueError:
        return None
    return rel.parts[0] if rel.parts else None
