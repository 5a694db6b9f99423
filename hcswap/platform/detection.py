"""Platform and architecture detection.

Release archives are published per OS/architecture pair using Go's naming
(``linux``/``darwin``/``windows`` and ``amd64``/``arm64``/``386``/``arm``).
This module detects the running platform once and exposes those names.
"""

from __future__ import annotations

import os as _os
import platform as _platform
import sys as _sys
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache

__all__ = [
    "Platform",
    "Arch",
    "PlatformInfo",
    "detect",
    "detect_arch",
    "detect_platform",
    "is_windows",
]


class Platform(Enum):
    """Operating system platform."""

    LINUX = auto()
    MACOS = auto()
    WINDOWS = auto()
    FREEBSD = auto()
    OPENBSD = auto()
    SOLARIS = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def is_unix(self) -> bool:
        return self not in (Platform.WINDOWS, Platform.UNKNOWN)

    @property
    def release_os(self) -> str:
        """OS segment used in release archive names."""
        return {
            Platform.LINUX: "linux",
            Platform.MACOS: "darwin",
            Platform.WINDOWS: "windows",
            Platform.FREEBSD: "freebsd",
            Platform.OPENBSD: "openbsd",
            Platform.SOLARIS: "solaris",
            Platform.UNKNOWN: "unknown",
        }[self]

    @property
    def exe_suffix(self) -> str:
        return ".exe" if self == Platform.WINDOWS else ""

    def exe_name(self, name: str) -> str:
        """Executable file name, e.g. ``terraform.exe`` on Windows."""
        return f"{name}{self.exe_suffix}"


class Arch(Enum):
    """CPU architecture."""

    X64 = auto()
    ARM64 = auto()
    X86 = auto()
    ARM = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def release_arch(self) -> str:
        """Architecture segment used in release archive names."""
        return {
            Arch.X64: "amd64",
            Arch.ARM64: "arm64",
            Arch.X86: "386",
            Arch.ARM: "arm",
            Arch.UNKNOWN: "unknown",
        }[self]


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """Detected platform; use ``detect()`` to get one."""

    platform: Platform
    arch: Arch

    @property
    def release_suffix(self) -> str:
        """``<os>_<arch>`` as used in archive names, e.g. ``linux_amd64``."""
        return f"{self.platform.release_os}_{self.arch.release_arch}"

    def __str__(self) -> str:
        return f"{self.platform}-{self.arch}"


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect the current operating system (cached)."""
    system = _sys.platform.lower()
    if system.startswith("linux"):
        return Platform.LINUX
    if system.startswith("darwin"):
        return Platform.MACOS
    if system.startswith(("win32", "cygwin", "msys")):
        return Platform.WINDOWS
    if system.startswith("freebsd"):
        return Platform.FREEBSD
    if system.startswith("openbsd"):
        return Platform.OPENBSD
    if system.startswith("sunos"):
        return Platform.SOLARIS
    return Platform.UNKNOWN


@lru_cache(maxsize=1)
def detect_arch() -> Arch:
    """Detect the current CPU architecture (cached)."""
    # NOTE: platform.machine() may query WMI on Windows and hang.
    if detect_platform() == Platform.WINDOWS:
        env_arch = (
            _os.environ.get("PROCESSOR_ARCHITEW6432")
            or _os.environ.get("PROCESSOR_ARCHITECTURE")
            or ""
        )
        machine = env_arch.lower()
    else:
        machine = _platform.machine().lower()
    if machine in ("x86_64", "amd64"):
        return Arch.X64
    if machine in ("aarch64", "arm64"):
        return Arch.ARM64
    if machine in ("i386", "i686", "x86"):
        return Arch.X86
    if machine.startswith("arm"):
        return Arch.ARM
    return Arch.UNKNOWN


@lru_cache(maxsize=1)
def detect() -> PlatformInfo:
    """Detect complete platform information (cached)."""
    return PlatformInfo(platform=detect_platform(), arch=detect_arch())


def is_windows() -> bool:
    return detect_platform() == Platform.WINDOWS
