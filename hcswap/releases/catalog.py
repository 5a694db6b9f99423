"""Remote version listing.

The release index serves one HTML page per tool with an anchor per
published version (``<a href="/terraform/1.6.0/">``). Only anchor hrefs are
read; everything else on the page is ignored.
"""

from __future__ import annotations

from html.parser import HTMLParser
from typing import TYPE_CHECKING

from hcswap.core.config import DEFAULT_CATALOG_LIMIT, DEFAULT_CATALOG_URL
from hcswap.core.result import Err, Ok, Result

if TYPE_CHECKING:
    from hcswap.releases.http import HttpClient, HttpError
    from hcswap.releases.products import Tool

__all__ = ["CatalogClient", "parse_versions", "IGNORED_HREFS"]

# Parent directory link and the CDN sponsor link at the bottom of each page
IGNORED_HREFS = frozenset({"../", "https://fastly.com/?utm_source=hashicorp"})


class _AnchorCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.hrefs: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "a":
            return
        for key, value in attrs:
            if key == "href" and value is not None:
                self.hrefs.append(value)


def _normalize(href: str, tool: str) -> str | None:
    version = href.removeprefix(f"/{tool}/").strip("/")
    if not version or version in {".", ".."}:
        return None
    # Must be usable as a single directory name in the version store
    if "/" in version or "\\" in version:
        return None
    return version


def parse_versions(html: str, tool: str, limit: int = DEFAULT_CATALOG_LIMIT) -> list[str]:
    """Extract up to ``limit`` version ids from a listing, in page order."""
    collector = _AnchorCollector()
    collector.feed(html)
    collector.close()

    versions: list[str] = []
    for href in collector.hrefs:
        if len(versions) >= limit:
            break
        if href in IGNORED_HREFS:
            continue
        version = _normalize(href, tool)
        if version is not None:
            versions.append(version)
    return versions


class CatalogClient:
    """Lists the versions published for a tool.

    The listing is newest-first on the index, but nothing here sorts: the
    first ``limit`` entries are returned in the order they appear.
    """

    def __init__(
        self,
        http: HttpClient,
        base_url: str = DEFAULT_CATALOG_URL,
        limit: int = DEFAULT_CATALOG_LIMIT,
    ) -> None:
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._limit = limit

    def index_url(self, tool: Tool) -> str:
        return f"{self._base_url}/{tool.canonical}/"

    def list_versions(self, tool: Tool, limit: int | None = None) -> Result[list[str], HttpError]:
        """Fetch the index page for ``tool`` and return candidate versions.

        An empty list is a valid answer (no versions published).
        """
        page = self._http.get_text(self.index_url(tool))
        if isinstance(page, Err):
            return page
        bound = self._limit if limit is None else limit
        return Ok(parse_versions(page.value, tool.canonical, bound))
