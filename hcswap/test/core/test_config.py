"""Tests for hcswap.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from hcswap.core.config import (
    DEFAULT_APP_DIR,
    DEFAULT_BIN_DIR,
    DEFAULT_CATALOG_LIMIT,
    DEFAULT_CATALOG_URL,
    CatalogConfig,
    Config,
    ConfigError,
    PathsConfig,
    load_config,
    load_config_or_default,
)
from hcswap.core.result import Err, Ok


class TestDefaults:
    """Config works with no file at all."""

    def test_catalog_defaults(self) -> None:
        config = CatalogConfig()
        assert config.url == "https://releases.hashicorp.com"
        assert config.limit == 10
        assert config.timeout == 30.0

    def test_paths_defaults(self) -> None:
        config = PathsConfig()
        assert config.app_dir == "~/hc-swap"
        assert config.bin_dir == "/usr/local/bin"

    def test_config_defaults(self) -> None:
        config = Config()
        assert config.catalog.url == DEFAULT_CATALOG_URL
        assert config.catalog.limit == DEFAULT_CATALOG_LIMIT
        assert config.paths.app_dir == DEFAULT_APP_DIR
        assert config.paths.bin_dir == DEFAULT_BIN_DIR
        assert config.install.keep_archives is False
        assert config.menu.loop_after_activate is False

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.catalog = CatalogConfig()  # type: ignore[misc]


class TestPathsConfig:
    def test_store_dir_per_tool(self, tmp_path: Path) -> None:
        paths = PathsConfig(app_dir=str(tmp_path))
        assert paths.store_dir("terraform") == tmp_path / "terraform-versions"
        assert paths.store_dir("vault") == tmp_path / "vault-versions"

    def test_app_path_expands_user(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))
        paths = PathsConfig()
        assert paths.app_path == tmp_path / "hc-swap"

    def test_bin_path(self, tmp_path: Path) -> None:
        paths = PathsConfig(bin_dir=str(tmp_path / "bin"))
        assert paths.bin_path == tmp_path / "bin"


class TestFromDict:
    def test_empty_dict_gives_defaults(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_full_dict(self) -> None:
        config = Config.from_dict(
            {
                "catalog": {"url": "https://mirror.example.com/", "limit": 5, "timeout": 10},
                "paths": {"app_dir": "/opt/hc", "bin_dir": "/opt/bin"},
                "install": {"keep_archives": True},
                "menu": {"loop_after_activate": True},
            }
        )
        assert config.catalog.url == "https://mirror.example.com"
        assert config.catalog.limit == 5
        assert config.catalog.timeout == 10.0
        assert config.paths.app_dir == "/opt/hc"
        assert config.paths.bin_dir == "/opt/bin"
        assert config.install.keep_archives is True
        assert config.menu.loop_after_activate is True

    def test_wrong_types_fall_back_to_defaults(self) -> None:
        config = Config.from_dict(
            {
                "catalog": {"url": 3, "limit": True, "timeout": "slow"},
                "paths": "not a table",
                "install": {"keep_archives": "yes"},
            }
        )
        assert config == Config()

    def test_limit_below_one_rejected(self) -> None:
        with pytest.raises(ValueError, match="catalog.limit"):
            Config.from_dict({"catalog": {"limit": 0}})

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValueError, match="catalog.timeout"):
            Config.from_dict({"catalog": {"timeout": 0}})


class TestLoadConfig:
    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[paths]\napp_dir = "/srv/hc"\n\n[catalog]\nlimit = 3\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.paths.app_dir == "/srv/hc"
        assert result.value.catalog.limit == 3

    def test_missing_file_is_error(self, tmp_path: Path) -> None:
        path = tmp_path / "nope.toml"
        result = load_config(path)
        assert isinstance(result, Err)
        assert isinstance(result.error, ConfigError)
        assert result.error.path == path
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[paths\n", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_out_of_range_value(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[catalog]\nlimit = -1\n", encoding="utf-8")
        result = load_config(path)
        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message

    def test_or_default_missing_file(self, tmp_path: Path) -> None:
        result = load_config_or_default(tmp_path / "absent.toml")
        assert result == Ok(Config())

    def test_or_default_broken_file_still_errors(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("= nope", encoding="utf-8")
        assert isinstance(load_config_or_default(path), Err)
