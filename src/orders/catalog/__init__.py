"""Product catalog factory.

Provides get_catalog() / set_catalog() to swap implementations:
- FakeCatalog for development and testing (default)
- HttpCatalog when CATALOG_ADAPTER=http, pointed at CATALOG_URL
"""

import os

from orders.catalog.fake_adapter import FakeCatalog
from orders.catalog.http_adapter import HttpCatalog
from orders.catalog.port import ProductCatalog

_current_catalog: ProductCatalog | None = None


def _catalog_from_env() -> ProductCatalog:
    adapter = os.getenv("CATALOG_ADAPTER", "fake").lower()
    if adapter == "http":
        url = os.getenv("CATALOG_URL")
        if not url:
            raise RuntimeError("Missing required environment variable: CATALOG_URL")
        return HttpCatalog(url=url, timeout=float(os.getenv("CATALOG_TIMEOUT", "5")))
    if adapter == "fake":
        return FakeCatalog()
    raise RuntimeError(f"Unknown CATALOG_ADAPTER: {adapter}")


def get_catalog() -> ProductCatalog:
    """Return the current product catalog, building it from the environment on first use."""
    global _current_catalog
    if _current_catalog is None:
        _current_catalog = _catalog_from_env()
    return _current_catalog


def set_catalog(catalog: ProductCatalog) -> None:
    """Override the active product catalog (useful for tests)."""
    global _current_catalog
    _current_catalog = catalog


def reset_catalog() -> None:
    """Reset to the environment-selected catalog, closing the previous adapter."""
    global _current_catalog
    close = getattr(_current_catalog, "close", None)
    if close is not None:
        close()
    _current_catalog = None
