"""Download and unpack release archives into the version store."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from hcswap.core.config import DEFAULT_CATALOG_URL
from hcswap.core.result import Err, Ok, Result
from hcswap.output.console import Style
from hcswap.releases.errors import FetchFailure, StoreError
from hcswap.releases.extract import Extractor
from hcswap.releases.store import is_valid_version

if TYPE_CHECKING:
    from hcswap.output.console import ConsoleProtocol
    from hcswap.platform.detection import PlatformInfo
    from hcswap.releases.http import HttpClient
    from hcswap.releases.products import Tool

__all__ = ["ReleaseFetcher"]


class ReleaseFetcher:
    """Installs versions of a tool from the release index.

    Versions are processed one after the other. The first failure stops the
    batch: versions already installed stay, the failing version's directory
    is left as is, later versions are not attempted.
    """

    def __init__(
        self,
        *,
        http: HttpClient,
        platform: PlatformInfo,
        console: ConsoleProtocol,
        base_url: str = DEFAULT_CATALOG_URL,
        keep_archives: bool = False,
        extractor: Extractor | None = None,
    ) -> None:
        self._http = http
        self._platform = platform
        self._console = console
        self._base_url = base_url.rstrip("/")
        self._keep_archives = keep_archives
        self._extractor = extractor or Extractor()

    def archive_name(self, tool: Tool, version: str) -> str:
        return f"{tool.canonical}_{version}_{self._platform.release_suffix}.zip"

    def artifact_url(self, tool: Tool, version: str) -> str:
        """e.g. https://releases.hashicorp.com/vault/1.15.0/vault_1.15.0_linux_amd64.zip"""
        return f"{self._base_url}/{tool.canonical}/{version}/{self.archive_name(tool, version)}"

    def download(
        self,
        tool: Tool,
        store_root: Path,
        versions: Sequence[str],
    ) -> Result[list[Path], FetchFailure]:
        """Install each version into ``<store_root>/<version>/``.

        Returns:
            Ok with the installed version directories, in order, or the
            first error encountered.
        """
        installed: list[Path] = []
        for version in versions:
            result = self._install_one(tool, store_root, version)
            if isinstance(result, Err):
                return result
            installed.append(result.value)
        return Ok(installed)

    def _install_one(
        self, tool: Tool, store_root: Path, version: str
    ) -> Result[Path, FetchFailure]:
        version_dir = store_root / version
        if not is_valid_version(version):
            return Err(StoreError(path=version_dir, message=f"Invalid version {version!r}"))

        self._console.print(f"Downloading {tool.canonical} v{version}...", Style.BOLD)
        try:
            version_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return Err(StoreError(path=version_dir, message=f"Cannot create directory ({e})"))

        url = self.artifact_url(tool, version)
        archive = version_dir / f"{version}.zip"
        dres = self._http.download(url, archive)
        if isinstance(dres, Err):
            return dres

        self._console.print("Download complete, unzipping binary...", Style.DIM)
        eres = self._extractor.extract(archive, version_dir)
        if isinstance(eres, Err):
            return eres

        if not self._keep_archives:
            try:
                archive.unlink(missing_ok=True)
            except OSError as e:
                return Err(StoreError(path=archive, message=f"Cannot remove archive ({e})"))

        self._console.success(f"{tool.canonical} v{version} installed in {version_dir}")
        return Ok(version_dir)
