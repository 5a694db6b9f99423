"""Tests for hcswap.output.errors module."""

from __future__ import annotations

from pathlib import Path

import pytest

from hcswap.core.errors import ErrorCode
from hcswap.output.console import MockConsole
from hcswap.output.errors import print_swap_error, swap_error_exit_code
from hcswap.releases.errors import ActivateError, ExtractError, StoreError, SwapError
from hcswap.releases.http import HttpError


class TestPrintSwapError:
    def test_not_found_has_hint(self) -> None:
        console = MockConsole()
        error = HttpError(url="https://x/terraform/9.9.9/", status=404, message="Not Found")
        print_swap_error(error, console)
        assert console.has_error()
        assert console.find("https://x/terraform/9.9.9/")
        assert console.find("hint:")

    def test_network_error(self) -> None:
        console = MockConsole()
        error = HttpError(url="https://x", status=0, message="Connection refused")
        print_swap_error(error, console)
        assert console.find("Connection refused")

    def test_path_traversal(self) -> None:
        console = MockConsole()
        error = ExtractError(
            kind="path_traversal",
            archive=Path("/tmp/a.zip"),
            message="unsafe entry",
            entry="../evil",
        )
        print_swap_error(error, console)
        assert console.find("'../evil'")

    def test_corrupt_archive_has_hint(self) -> None:
        console = MockConsole()
        error = ExtractError(kind="corrupt_archive", archive=Path("a.zip"), message="bad zip")
        print_swap_error(error, console)
        assert console.find("corrupt archive a.zip: bad zip")
        assert console.find("hint:")

    def test_activate_error(self) -> None:
        console = MockConsole()
        error = ActivateError(link=Path("/usr/local/bin/vault"), message="Permission denied")
        print_swap_error(error, console)
        assert console.find("cannot activate /usr/local/bin/vault: Permission denied")

    def test_store_error(self) -> None:
        console = MockConsole()
        print_swap_error(StoreError(path=Path("/s"), message="not a directory"), console)
        assert console.messages == ["error: not a directory: /s"]


class TestSwapErrorExitCode:
    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (HttpError(url="u", status=500, message="m"), ErrorCode.NETWORK_ERROR),
            (
                ExtractError(kind="io_error", archive=Path("a"), message="m"),
                ErrorCode.ARCHIVE_ERROR,
            ),
            (ActivateError(link=Path("l"), message="m"), ErrorCode.IO_ERROR),
            (StoreError(path=Path("p"), message="m"), ErrorCode.IO_ERROR),
        ],
    )
    def test_mapping(self, error: SwapError, code: ErrorCode) -> None:
        assert swap_error_exit_code(error) == int(code)
