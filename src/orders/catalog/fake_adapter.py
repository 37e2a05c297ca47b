"""In-memory product catalog for development and testing.

Holds a product table that tests seed directly, can be switched to
unavailable at runtime, and records every call it receives.
"""

from orders.catalog.port import VALIDATE_PRODUCTS, CatalogResponse, ProductCatalog, ProductRecord


class FakeCatalog(ProductCatalog):
    """Configurable fake product catalog."""

    def __init__(self, products: list[ProductRecord] | None = None) -> None:
        self.products: dict[str, ProductRecord] = {p.id: p for p in products or []}
        self.available: bool = True
        self.failure_reason: str = "Catalog service unavailable"
        self.calls: list[dict] = []

    def configure(self, available: bool, failure_reason: str = "Catalog service unavailable") -> None:
        """Configure catalog availability at runtime."""
        self.available = available
        self.failure_reason = failure_reason

    def add_product(self, product_id: str, price: float, name: str) -> ProductRecord:
        """Add or replace a product; replacing models a catalog price change."""
        record = ProductRecord(id=product_id, price=price, name=name)
        self.products[product_id] = record
        return record

    def validate_products(self, product_ids: list[str]) -> CatalogResponse:
        self.calls.append({"command": VALIDATE_PRODUCTS, "payload": list(product_ids)})

        if not self.available:
            return CatalogResponse(success=False, failure_reason=self.failure_reason)

        unknown = tuple(pid for pid in product_ids if pid not in self.products)
        if unknown:
            return CatalogResponse(
                success=False,
                unknown_ids=unknown,
                failure_reason="Some products were not found",
            )

        return CatalogResponse(
            success=True,
            products=tuple(self.products[pid] for pid in product_ids),
        )
