"""User-level directory lookup.

Version stores and the bin directory come from Config; this module only
answers "where is home" and "where does the config file live".
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from .detection import is_windows

__all__ = [
    "APP_NAME",
    "CONFIG_ENV_VAR",
    "home",
    "user_config_dir",
    "config_file",
    "clear_caches",
]

# Application name used for directory naming
APP_NAME = "hc-swap"

CONFIG_ENV_VAR = "HCSWAP_CONFIG"


@lru_cache(maxsize=1)
def home() -> Path:
    """Get user's home directory.

    Uses USERPROFILE on Windows, HOME on Unix, then Path.home().
    """
    if is_windows():
        userprofile = os.environ.get("USERPROFILE")
        if userprofile:
            return Path(userprofile)
    else:
        home_env = os.environ.get("HOME")
        if home_env:
            return Path(home_env)

    return Path.home()


@lru_cache(maxsize=1)
def user_config_dir() -> Path:
    """Get the user-level configuration directory.

    Location: $XDG_CONFIG_HOME/hc-swap or ~/.config/hc-swap (Linux/macOS),
    %APPDATA%/hc-swap (Windows).
    """
    if is_windows():
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data) / APP_NAME
        return home() / "AppData" / "Roaming" / APP_NAME

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME
    return home() / ".config" / APP_NAME


def config_file() -> Path:
    """Path of config.toml; $HCSWAP_CONFIG wins over the default location."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return user_config_dir() / "config.toml"


def clear_caches() -> None:
    """Clear cached paths (tests change env vars between cases)."""
    home.cache_clear()
    user_config_dir.cache_clear()
