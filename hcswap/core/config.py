"""Typed configuration loading and access.

hc-swap runs fine without a config file. When ``config.toml`` exists it can
override where versions are stored, where the active symlink lives and how
the remote catalog is queried.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_float, get_int, get_str, get_table

__all__ = [
    "Config",
    "CatalogConfig",
    "PathsConfig",
    "InstallConfig",
    "MenuConfig",
    "ConfigError",
    "load_config",
    "load_config_or_default",
    "DEFAULT_CATALOG_URL",
    "DEFAULT_CATALOG_LIMIT",
    "DEFAULT_APP_DIR",
    "DEFAULT_BIN_DIR",
]

DEFAULT_CATALOG_URL = "https://releases.hashicorp.com"
DEFAULT_CATALOG_LIMIT = 10
DEFAULT_TIMEOUT = 30.0
DEFAULT_APP_DIR = "~/hc-swap"
DEFAULT_BIN_DIR = "/usr/local/bin"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Remote release index settings."""

    url: str = DEFAULT_CATALOG_URL
    limit: int = DEFAULT_CATALOG_LIMIT
    timeout: float = DEFAULT_TIMEOUT


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Local directories.

    ``app_dir`` holds one ``<tool>-versions`` store per tool. ``bin_dir`` is
    where the active symlink for each tool is placed; it must be on PATH.
    """

    app_dir: str = DEFAULT_APP_DIR
    bin_dir: str = DEFAULT_BIN_DIR

    @property
    def app_path(self) -> Path:
        return Path(self.app_dir).expanduser()

    @property
    def bin_path(self) -> Path:
        return Path(self.bin_dir).expanduser()

    def store_dir(self, tool: str) -> Path:
        """Version store for a tool, e.g. ``~/hc-swap/terraform-versions``."""
        return self.app_path / f"{tool}-versions"


@dataclass(frozen=True, slots=True)
class InstallConfig:
    keep_archives: bool = False


@dataclass(frozen=True, slots=True)
class MenuConfig:
    # Picking an installed version ends the session unless this is set.
    loop_after_activate: bool = False


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    install: InstallConfig = field(default_factory=InstallConfig)
    menu: MenuConfig = field(default_factory=MenuConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: if a value is present but out of range.
        """
        catalog: StrDict = get_table(data, "catalog") or {}
        paths: StrDict = get_table(data, "paths") or {}
        install: StrDict = get_table(data, "install") or {}
        menu: StrDict = get_table(data, "menu") or {}

        limit = get_int(catalog, "limit")
        if limit is not None and limit < 1:
            raise ValueError(f"catalog.limit must be at least 1, got {limit}")
        timeout = get_float(catalog, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"catalog.timeout must be positive, got {timeout}")

        keep_archives = get_bool(install, "keep_archives")
        loop_after_activate = get_bool(menu, "loop_after_activate")

        return cls(
            catalog=CatalogConfig(
                url=(get_str(catalog, "url") or DEFAULT_CATALOG_URL).rstrip("/"),
                limit=limit if limit is not None else DEFAULT_CATALOG_LIMIT,
                timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
            ),
            paths=PathsConfig(
                app_dir=get_str(paths, "app_dir") or DEFAULT_APP_DIR,
                bin_dir=get_str(paths, "bin_dir") or DEFAULT_BIN_DIR,
            ),
            install=InstallConfig(keep_archives=bool(keep_archives)),
            menu=MenuConfig(loop_after_activate=bool(loop_after_activate)),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to config.toml file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but a missing file yields the default Config.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
