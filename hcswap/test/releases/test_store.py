"""Tests for hcswap.releases.store module."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from hcswap.core.result import Err, Ok
from hcswap.releases.store import (
    Empty,
    Missing,
    Populated,
    active_version,
    inspect_store,
    is_valid_version,
)


class TestIsValidVersion:
    @pytest.mark.parametrize("version", ["1.5.7", "1.7.0-beta1", "0.12.31+ent"])
    def test_valid(self, version: str) -> None:
        assert is_valid_version(version) is True

    @pytest.mark.parametrize("version", ["", ".", "..", "1.0/..", "a\\b"])
    def test_invalid(self, version: str) -> None:
        assert is_valid_version(version) is False


class TestInspectStore:
    def test_missing(self, tmp_path: Path) -> None:
        assert inspect_store(tmp_path / "terraform-versions") == Ok(Missing())

    def test_empty(self, tmp_path: Path) -> None:
        store = tmp_path / "vault-versions"
        store.mkdir()
        assert inspect_store(store) == Ok(Empty())

    def test_populated(self, tmp_path: Path) -> None:
        store = tmp_path / "packer-versions"
        for v in ("1.9.4", "1.10.0"):
            (store / v).mkdir(parents=True)

        result = inspect_store(store)

        assert isinstance(result, Ok)
        assert isinstance(result.value, Populated)
        assert sorted(result.value.versions) == ["1.10.0", "1.9.4"]

    def test_not_a_directory(self, tmp_path: Path) -> None:
        store = tmp_path / "terraform-versions"
        store.write_text("oops", encoding="utf-8")

        result = inspect_store(store)

        assert isinstance(result, Err)
        assert result.error.path == store

    @pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="needs POSIX non-root")
    def test_unreadable(self, tmp_path: Path) -> None:
        store = tmp_path / "vault-versions"
        store.mkdir()
        store.chmod(0o000)
        try:
            assert isinstance(inspect_store(store), Err)
        finally:
            store.chmod(0o755)


class TestActiveVersion:
    def test_no_link(self, tmp_path: Path) -> None:
        assert active_version(tmp_path / "terraform", tmp_path / "store") is None

    def test_regular_file(self, tmp_path: Path) -> None:
        link = tmp_path / "terraform"
        link.write_text("binary", encoding="utf-8")
        assert active_version(link, tmp_path / "store") is None

    def test_link_into_store(self, tmp_path: Path) -> None:
        store = tmp_path / "store"
        (store / "1.5.7").mkdir(parents=True)
        link = tmp_path / "bin" / "terraform"
        link.parent.mkdir()
        link.symlink_to(store / "1.5.7" / "terraform")

        assert active_version(link, store) == "1.5.7"

    def test_dangling_link_still_reports(self, tmp_path: Path) -> None:
        store = tmp_path / "store"
        link = tmp_path / "vault"
        link.symlink_to(store / "1.15.0" / "vault")

        assert active_version(link, store) == "1.15.0"

    def test_relative_link(self, tmp_path: Path) -> None:
        store = tmp_path / "store"
        link = tmp_path / "packer"
        link.symlink_to(Path("store") / "1.9.4" / "packer")

        assert active_version(link, store) == "1.9.4"

    def test_link_outside_store(self, tmp_path: Path) -> None:
        link = tmp_path / "terraform"
        link.symlink_to(tmp_path / "elsewhere" / "terraform")
        assert active_version(link, tmp_path / "store") is None
