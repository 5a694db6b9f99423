"""Platform abstraction layer."""

from .detection import (
    Arch,
    Platform,
    PlatformInfo,
    detect,
    is_windows,
)
from .paths import (
    config_file,
    home,
    user_config_dir,
)
from .process import (
    ProcessError,
    run_streaming,
)

__all__ = [
    # detection
    "Arch",
    "Platform",
    "PlatformInfo",
    "detect",
    "is_windows",
    # paths
    "config_file",
    "home",
    "user_config_dir",
    # process
    "ProcessError",
    "run_streaming",
]
