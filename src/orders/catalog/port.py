"""Product catalog port (abstract interface).

The catalog service is owned by another team and reached over
request/response messaging. Adapters translate its replies into
``CatalogResponse`` so the order workflows never see transport details.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

VALIDATE_PRODUCTS = "validate-products"


@dataclass(frozen=True)
class ProductRecord:
    """A product as reported by the catalog for the duration of one request."""

    id: str
    price: float
    name: str


@dataclass(frozen=True)
class CatalogResponse:
    """Result of a product validation round trip."""

    success: bool
    products: tuple[ProductRecord, ...] = ()
    unknown_ids: tuple[str, ...] = ()
    failure_reason: str | None = None


class ProductCatalog(ABC):
    """Abstract product catalog interface."""

    @abstractmethod
    def validate_products(self, product_ids: list[str]) -> CatalogResponse:
        """Resolve all ``product_ids`` in a single call."""
        ...
