"""Supported tools.

Each tool is published on the release index under its lowercase name and
ships a single executable of the same name inside its zip archive.
"""

from __future__ import annotations

from enum import Enum

from hcswap.platform.detection import Platform

__all__ = ["Tool", "parse_tool"]


class Tool(Enum):
    TERRAFORM = "Terraform"
    PACKER = "Packer"
    VAULT = "Vault"

    def __str__(self) -> str:
        return self.canonical

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def canonical(self) -> str:
        """Name used in paths, URLs and the active symlink."""
        return self.value.lower()

    def executable(self, platform: Platform) -> str:
        return platform.exe_name(self.canonical)

    @classmethod
    def display_names(cls) -> list[str]:
        return [t.display_name for t in cls]


def parse_tool(name: str) -> Tool | None:
    """Look up a tool by display or canonical name, ignoring case."""
    wanted = name.strip().lower()
    for tool in Tool:
        if tool.canonical == wanted:
            return tool
    return None
