"""Tests for hcswap.releases.http module."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path

import pytest

from hcswap.core.result import Err, Ok
from hcswap.releases.http import HttpClient, HttpError, MockHttpClient, RealHttpClient

_PAYLOAD = b"x" * (200 * 1024)
_TRUNCATED = b"<a href='/x/'>"


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self) -> None:  # noqa: N802
        if self.path == "/terraform/":
            body = b'<a href="/terraform/1.6.0/">1.6.0</a>'
        elif self.path == "/archive.zip":
            body = _PAYLOAD
        elif self.path in ("/truncated/", "/truncated.zip"):
            # Promise more than is sent, then drop the connection
            self.send_response(200)
            self.send_header("Content-Length", "1000")
            self.end_headers()
            self.wfile.write(_TRUNCATED)
            self.close_connection = True
            return
        else:
            self.send_error(404, "Not Found")
            return
        self.send_response(200)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        pass


@pytest.fixture
def server_url() -> Iterator[str]:
    server = HTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


class TestHttpError:
    def test_str_with_status(self) -> None:
        error = HttpError(url="https://x/y", status=404, message="Not Found")
        assert str(error) == "HTTP 404: Not Found (https://x/y)"

    def test_str_network(self) -> None:
        error = HttpError(url="https://x/y", status=0, message="Connection refused")
        assert str(error) == "Connection refused (https://x/y)"


class TestMockHttpClient:
    def test_is_http_client(self) -> None:
        assert isinstance(MockHttpClient(), HttpClient)

    def test_unknown_url_is_404(self) -> None:
        result = MockHttpClient().get_text("https://nowhere/")
        assert isinstance(result, Err)
        assert result.error.status == 404

    def test_download_writes_file(self, tmp_path: Path) -> None:
        client = MockHttpClient()
        client.set_download("https://x/a.zip", b"zipdata")
        dest = tmp_path / "sub" / "a.zip"
        seen: list[tuple[int, int]] = []

        result = client.download("https://x/a.zip", dest, progress=lambda d, t: seen.append((d, t)))

        assert result == Ok(dest)
        assert dest.read_bytes() == b"zipdata"
        assert seen == [(7, 7)]
        assert client.calls == [("download", "https://x/a.zip")]

    def test_configured_error(self) -> None:
        client = MockHttpClient()
        error = HttpError(url="https://x/", status=500, message="boom")
        client.set_text("https://x/", error)
        assert client.get_text("https://x/") == Err(error)


class TestRealHttpClient:
    def test_default_user_agent(self) -> None:
        assert RealHttpClient().user_agent.startswith("hc-swap/")

    def test_get_text(self, server_url: str) -> None:
        result = RealHttpClient(timeout=5).get_text(f"{server_url}/terraform/")
        assert result == Ok('<a href="/terraform/1.6.0/">1.6.0</a>')

    def test_get_text_404(self, server_url: str) -> None:
        result = RealHttpClient(timeout=5).get_text(f"{server_url}/missing/")
        assert isinstance(result, Err)
        assert result.error.status == 404

    def test_download_streams_to_file(self, server_url: str, tmp_path: Path) -> None:
        dest = tmp_path / "dl" / "archive.zip"
        seen: list[tuple[int, int]] = []

        result = RealHttpClient(timeout=5).download(
            f"{server_url}/archive.zip", dest, progress=lambda d, t: seen.append((d, t))
        )

        assert result == Ok(dest)
        assert dest.read_bytes() == _PAYLOAD
        assert seen[-1] == (len(_PAYLOAD), len(_PAYLOAD))

    def test_download_404(self, server_url: str, tmp_path: Path) -> None:
        result = RealHttpClient(timeout=5).download(f"{server_url}/nope.zip", tmp_path / "x.zip")
        assert isinstance(result, Err)
        assert result.error.status == 404
        assert not (tmp_path / "x.zip").exists()

    def test_connection_refused(self, tmp_path: Path) -> None:
        # Port 9 (discard) is essentially never listening on loopback
        result = RealHttpClient(timeout=2).get_text("http://127.0.0.1:9/")
        assert isinstance(result, Err)
        assert result.error.status == 0

    def test_get_text_truncated_body(self, server_url: str) -> None:
        result = RealHttpClient(timeout=5).get_text(f"{server_url}/truncated/")
        assert isinstance(result, Err)
        assert result.error.status == 0
        assert "IncompleteRead" in result.error.message

    def test_download_truncated_body(self, server_url: str, tmp_path: Path) -> None:
        result = RealHttpClient(timeout=5).download(
            f"{server_url}/truncated.zip", tmp_path / "t.zip"
        )
        assert isinstance(result, Err)
        assert result.error.status == 0
        assert f"{len(_TRUNCATED)} of 1000 bytes" in result.error.message
