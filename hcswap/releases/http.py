"""HTTP client abstraction for the release index.

This module provides:
- HttpClient: Protocol for the two requests hc-swap makes (listing, archive)
- RealHttpClient: urllib implementation
- MockHttpClient: canned responses for tests
"""

from __future__ import annotations

import http.client
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from hcswap import __version__
from hcswap.core.result import Err, Ok, Result

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
    "HttpError",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
    """

    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations, injectable for tests."""

    def get_text(self, url: str) -> Result[str, HttpError]:
        """Fetch URL and return the body decoded as UTF-8."""
        ...

    def download(
        self,
        url: str,
        dest: Path,
        progress: Callable[[int, int], None] | None = None,
    ) -> Result[Path, HttpError]:
        """Stream URL to ``dest``.

        Args:
            url: URL to download
            dest: Destination file (parent is created if missing)
            progress: Optional callback(downloaded, total); total is 0 when
                the server sends no Content-Length

        Returns:
            Ok with dest path, or Err with HttpError
        """
        ...


class RealHttpClient:
    """HTTP client using urllib with system certificates."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = f"hc-swap/{__version__}",
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def _open(self, url: str) -> http.client.HTTPResponse:
        req = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
        return urllib.request.urlopen(req, timeout=self.timeout, context=self._ssl_context)

    def get_text(self, url: str) -> Result[str, HttpError]:
        try:
            with self._open(url) as response:
                body: bytes = response.read()
        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=e.reason))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except http.client.HTTPException as e:
            return Err(HttpError(url=url, status=0, message=str(e) or type(e).__name__))
        except (ValueError, OSError) as e:
            return Err(HttpError(url=url, status=0, message=str(e)))

        try:
            return Ok(body.decode("utf-8"))
        except UnicodeDecodeError as e:
            return Err(HttpError(url=url, status=0, message=f"Decode error: {e}"))

    def download(
        self,
        url: str,
        dest: Path,
        progress: Callable[[int, int], None] | None = None,
    ) -> Result[Path, HttpError]:
        try:
            with self._open(url) as response:
                total = int(response.headers.get("Content-Length", 0))
                downloaded = 0
                chunk_size = 64 * 1024

                dest.parent.mkdir(parents=True, exist_ok=True)
                with open(dest, "wb") as f:
                    while True:
                        chunk = response.read(chunk_size)
                        if not chunk:
                            break
                        f.write(chunk)
                        downloaded += len(chunk)
                        if progress:
                            progress(downloaded, total)

                if total and downloaded < total:
                    message = f"Incomplete download ({downloaded} of {total} bytes)"
                    return Err(HttpError(url=url, status=0, message=message))
                return Ok(dest)

        except urllib.error.HTTPError as e:
            return Err(HttpError(url=url, status=e.code, message=e.reason))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Download timed out"))
        except http.client.HTTPException as e:
            return Err(HttpError(url=url, status=0, message=str(e) or type(e).__name__))
        except (ValueError, OSError) as e:
            return Err(HttpError(url=url, status=0, message=str(e)))


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_text("https://releases.hashicorp.com/terraform/", "<a href=...>")
        client.set_download(archive_url, zip_bytes)
    """

    def __init__(self) -> None:
        self._text_responses: dict[str, str | HttpError] = {}
        self._download_responses: dict[str, bytes | HttpError] = {}
        self.calls: list[tuple[str, str]] = []

    def set_text(self, url: str, response: str | HttpError) -> None:
        self._text_responses[url] = response

    def set_download(self, url: str, response: bytes | HttpError) -> None:
        self._download_responses[url] = response

    def get_text(self, url: str) -> Result[str, HttpError]:
        self.calls.append(("get_text", url))

        if url not in self._text_responses:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        response = self._text_responses[url]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)

    def download(
        self,
        url: str,
        dest: Path,
        progress: Callable[[int, int], None] | None = None,
    ) -> Result[Path, HttpError]:
        self.calls.append(("download", url))

        if url not in self._download_responses:
            return Err(HttpError(url=url, status=404, message="Not found (mock)"))

        response = self._download_responses[url]
        if isinstance(response, HttpError):
            return Err(response)

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(response)
        if progress:
            progress(len(response), len(response))

        return Ok(dest)

    def urls(self, method: str) -> list[str]:
        """URLs requested with ``method`` ("get_text" or "download"), in order."""
        return [url for m, url in self.calls if m == method]
