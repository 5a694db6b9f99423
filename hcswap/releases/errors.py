from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from hcswap.releases.http import HttpError

__all__ = [
    "ExtractError",
    "ExtractErrorKind",
    "ActivateError",
    "StoreError",
    "FetchFailure",
    "SwapError",
]

ExtractErrorKind = Literal["corrupt_archive", "path_traversal", "io_error"]


@dataclass(frozen=True, slots=True)
class ExtractError:
    kind: ExtractErrorKind
    archive: Path
    message: str
    entry: str | None = None

    def __str__(self) -> str:
        if self.entry is not None:
            return f"{self.message}: {self.entry} ({self.archive})"
        return f"{self.message}: {self.archive}"


@dataclass(frozen=True, slots=True)
class ActivateError:
    link: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message}: {self.link}"


@dataclass(frozen=True, slots=True)
class StoreError:
    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message}: {self.path}"


FetchFailure = HttpError | ExtractError | StoreError

SwapError = HttpError | ExtractError | ActivateError | StoreError
