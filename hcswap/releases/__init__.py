"""Release handling: catalog, download, extraction, store and activation.

- Tool definitions (products.py)
- HTTP client (http.py)
- Version listing (catalog.py)
- Download and unpack (fetch.py, extract.py)
- Store inspection and removal (store.py, uninstall.py)
- Active symlink (activate.py)
"""

from hcswap.releases.activate import Activator
from hcswap.releases.catalog import CatalogClient
from hcswap.releases.errors import ActivateError, ExtractError, StoreError, SwapError
from hcswap.releases.extract import Extractor, ExtractResult
from hcswap.releases.fetch import ReleaseFetcher
from hcswap.releases.http import HttpClient, HttpError, MockHttpClient, RealHttpClient
from hcswap.releases.products import Tool, parse_tool
from hcswap.releases.store import Empty, Missing, Populated, StoreState, inspect_store
from hcswap.releases.uninstall import uninstall

__all__ = [
    # Tools
    "Tool",
    "parse_tool",
    # HTTP
    "HttpClient",
    "HttpError",
    "MockHttpClient",
    "RealHttpClient",
    # Catalog / fetch
    "CatalogClient",
    "ReleaseFetcher",
    "Extractor",
    "ExtractResult",
    # Store
    "StoreState",
    "Missing",
    "Empty",
    "Populated",
    "inspect_store",
    "uninstall",
    # Activation
    "Activator",
    # Errors
    "ActivateError",
    "ExtractError",
    "StoreError",
    "SwapError",
]
