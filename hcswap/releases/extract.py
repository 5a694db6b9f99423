"""Zip extraction into a version directory.

Every entry is checked before anything is written: if any entry would land
outside the destination (``../`` segments, absolute names) the whole archive
is rejected and the destination is left untouched.
"""

from __future__ import annotations

import os
import stat
import zipfile
import zlib
from dataclasses import dataclass
from pathlib import Path

from hcswap.core.result import Err, Ok, Result
from hcswap.releases.errors import ExtractError

__all__ = ["Extractor", "ExtractResult"]


@dataclass(frozen=True, slots=True)
class ExtractResult:
    """Result of an extraction.

    Attributes:
        dest: Directory the archive was unpacked into
        files_count: Number of regular files written
    """

    dest: Path
    files_count: int


@dataclass(frozen=True, slots=True)
class _Planned:
    info: zipfile.ZipInfo
    target: str


def _unix_mode(info: zipfile.ZipInfo) -> int:
    return info.external_attr >> 16


def _is_symlink(info: zipfile.ZipInfo) -> bool:
    return stat.S_ISLNK(_unix_mode(info))


class Extractor:
    """Safe zip extractor.

    Usage:
        result = Extractor().extract(archive, version_dir)
        if isinstance(result, Err):
            print(result.error)
    """

    def target_path(self, dest: Path, name: str) -> str | None:
        """Where ``name`` would be written under ``dest``, or None if it escapes.

        The joined path must have the cleaned destination plus a trailing
        separator as a strict prefix.
        """
        root = os.path.normpath(os.path.abspath(dest))
        target = os.path.normpath(os.path.join(root, name))
        if not target.startswith(root + os.sep):
            return None
        return target

    def extract(self, archive: Path, dest: Path) -> Result[ExtractResult, ExtractError]:
        """Extract ``archive`` into ``dest``.

        Args:
            archive: Path to a zip file
            dest: Target directory (created if missing)

        Returns:
            Ok with ExtractResult, or Err with ExtractError of kind
            ``corrupt_archive``, ``path_traversal`` or ``io_error``
        """
        if not archive.is_file():
            return Err(
                ExtractError(kind="io_error", archive=archive, message="Archive not found")
            )

        try:
            with zipfile.ZipFile(archive, "r") as zf:
                planned: list[_Planned] = []
                for info in zf.infolist():
                    target = self.target_path(dest, info.filename)
                    if target is None:
                        return Err(
                            ExtractError(
                                kind="path_traversal",
                                archive=archive,
                                message="Illegal file path in archive",
                                entry=info.filename,
                            )
                        )
                    planned.append(_Planned(info=info, target=target))

                dest.mkdir(parents=True, exist_ok=True)
                files_count = 0
                for item in planned:
                    if self._write_entry(zf, item):
                        files_count += 1

            return Ok(ExtractResult(dest=dest, files_count=files_count))

        except (zipfile.BadZipFile, zlib.error, EOFError, NotImplementedError) as e:
            return Err(
                ExtractError(
                    kind="corrupt_archive",
                    archive=archive,
                    message=f"Invalid zip file: {e}",
                )
            )
        except RuntimeError as e:
            # zipfile raises RuntimeError for encrypted entries
            return Err(ExtractError(kind="corrupt_archive", archive=archive, message=str(e)))
        except OSError as e:
            return Err(ExtractError(kind="io_error", archive=archive, message=f"IO error: {e}"))

    def _write_entry(self, zf: zipfile.ZipFile, item: _Planned) -> bool:
        """Write one entry. Returns True if a regular file was written."""
        info = item.info
        perms = _unix_mode(info) & 0o777
        target = Path(item.target)

        if info.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            if perms:
                target.chmod(perms)
            return False

        # Link entries could point anywhere once written; releases do not use them
        if _is_symlink(info):
            return False

        target.parent.mkdir(parents=True, exist_ok=True)
        with zf.open(info) as src, open(target, "wb") as dst:
            while chunk := src.read(64 * 1024):
                dst.write(chunk)

        if perms:
            target.chmod(perms)
        return True
