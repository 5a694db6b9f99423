from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

import typer

from hcswap.core.config import Config, PathsConfig, load_config_or_default
from hcswap.core.errors import ErrorCode
from hcswap.core.result import Err
from hcswap.output.console import ConsoleProtocol, RichConsole
from hcswap.platform.detection import PlatformInfo, detect
from hcswap.platform.paths import config_file
from hcswap.releases.activate import Activator, BannerRunner
from hcswap.releases.catalog import CatalogClient
from hcswap.releases.fetch import ReleaseFetcher
from hcswap.releases.http import HttpClient, RealHttpClient


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Options given before the subcommand."""

    config: Path | None = None
    app_dir: Path | None = None
    bin_dir: Path | None = None
    limit: int | None = None


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    platform: PlatformInfo
    console: ConsoleProtocol
    http: HttpClient
    run_banner: BannerRunner | None = None

    @property
    def paths(self) -> PathsConfig:
        return self.config.paths

    def catalog(self, limit: int | None = None) -> CatalogClient:
        return CatalogClient(
            self.http,
            base_url=self.config.catalog.url,
            limit=limit or self.config.catalog.limit,
        )

    def fetcher(self) -> ReleaseFetcher:
        return ReleaseFetcher(
            http=self.http,
            platform=self.platform,
            console=self.console,
            base_url=self.config.catalog.url,
            keep_archives=self.config.install.keep_archives,
        )

    def activator(self) -> Activator:
        return Activator(
            platform=self.platform, console=self.console, run_banner=self.run_banner
        )


def _apply_overrides(config: Config, options: GlobalOptions) -> Config:
    paths = config.paths
    if options.app_dir is not None:
        paths = replace(paths, app_dir=str(options.app_dir))
    if options.bin_dir is not None:
        paths = replace(paths, bin_dir=str(options.bin_dir))
    catalog = config.catalog
    if options.limit is not None:
        catalog = replace(catalog, limit=options.limit)
    return replace(config, paths=paths, catalog=catalog)


def build_context(options: GlobalOptions | None = None) -> CLIContext:
    options = options or GlobalOptions()
    console = RichConsole()

    path = options.config.expanduser() if options.config is not None else config_file()
    config_result = load_config_or_default(path)
    if isinstance(config_result, Err):
        console.error(config_result.error.message)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    config = _apply_overrides(config_result.value, options)
    return CLIContext(
        config=config,
        platform=detect(),
        console=console,
        http=RealHttpClient(timeout=config.catalog.timeout),
    )
