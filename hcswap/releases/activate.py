"""Active version switching.

The active version of a tool is whatever ``<bin_dir>/<tool>`` points at.
Activation replaces that link; it never checks that the target exists, so
activating a version whose directory was removed by hand yields a dangling
link.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from hcswap.core.result import Err, Ok, Result
from hcswap.output.console import Style
from hcswap.platform.process import ProcessError, run_streaming
from hcswap.releases.errors import ActivateError
from hcswap.releases.store import is_valid_version

if TYPE_CHECKING:
    from hcswap.output.console import ConsoleProtocol
    from hcswap.platform.detection import PlatformInfo
    from hcswap.releases.products import Tool

__all__ = ["Activator", "BannerRunner", "link_path", "target_path"]

BannerRunner = Callable[[list[str]], Result[None, ProcessError]]


def link_path(tool: Tool, bin_dir: Path) -> Path:
    return bin_dir / tool.canonical


def target_path(tool: Tool, store_root: Path, version: str, platform: PlatformInfo) -> Path:
    return store_root / version / tool.executable(platform.platform)


class Activator:
    """Points the tool's symlink at one installed version.

    After linking, the linked executable is run with ``--version`` so the
    user sees what is now active. That run is informational only.
    """

    def __init__(
        self,
        *,
        platform: PlatformInfo,
        console: ConsoleProtocol,
        run_banner: BannerRunner | None = None,
    ) -> None:
        self._platform = platform
        self._console = console
        self._run_banner = run_banner or run_streaming

    def activate(
        self,
        tool: Tool,
        store_root: Path,
        version: str,
        bin_dir: Path,
    ) -> Result[Path, ActivateError]:
        """Create or replace ``<bin_dir>/<tool>`` -> ``<store_root>/<version>/<exe>``.

        Returns:
            Ok with the link path, or Err with ActivateError when the version
            is not a single directory name or the link cannot be written.
        """
        link = link_path(tool, bin_dir)
        if not is_valid_version(version):
            return Err(ActivateError(link=link, message=f"Invalid version {version!r}"))
        target = target_path(tool, store_root, version, self._platform)
        self._console.print(f"Creating symlink for {tool.canonical} v{version}...", Style.BOLD)

        try:
            if link.is_symlink() or link.exists():
                link.unlink()
            else:
                bin_dir.mkdir(parents=True, exist_ok=True)
        except IsADirectoryError:
            return Err(ActivateError(link=link, message="A directory is in the way of the link"))
        except PermissionError:
            return Err(
                ActivateError(link=link, message="Permission denied (try again with sudo)")
            )
        except OSError as e:
            return Err(ActivateError(link=link, message=f"Cannot prepare link ({e})"))

        try:
            os.symlink(target, link)
        except PermissionError:
            return Err(
                ActivateError(link=link, message="Permission denied (try again with sudo)")
            )
        except OSError as e:
            return Err(ActivateError(link=link, message=f"Cannot create symlink ({e})"))

        self._console.success(f"{link} -> {target}")
        self._show_banner(tool, link)
        return Ok(link)

    def _show_banner(self, tool: Tool, link: Path) -> None:
        self._console.newline()
        banner = self._run_banner([str(link), "--version"])
        if isinstance(banner, Err):
            self._console.warning(f"{tool.canonical} --version: {banner.error}")
