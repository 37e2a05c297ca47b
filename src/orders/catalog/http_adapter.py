"""Product catalog adapter speaking the catalog's RPC endpoint over HTTP.

Each lookup is one POST of ``{"command": "validate-products", "payload": [...]}``.
The catalog answers 200 with the product list, or 400/404 when it does not
know some of the ids (optionally enumerating them under ``unknownIds``).
"""

import httpx
import structlog

from orders.catalog.port import VALIDATE_PRODUCTS, CatalogResponse, ProductCatalog, ProductRecord

logger = structlog.get_logger(__name__)

_UNKNOWN_PRODUCT_STATUSES = (400, 404)


class HttpCatalog(ProductCatalog):
    """Catalog adapter backed by an ``httpx.Client``."""

    def __init__(self, url: str, timeout: float = 5.0, client: httpx.Client | None = None) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def validate_products(self, product_ids: list[str]) -> CatalogResponse:
        try:
            response = self._client.post(
                self.url,
                json={"command": VALIDATE_PRODUCTS, "payload": list(product_ids)},
            )
        except httpx.HTTPError as exc:
            logger.warning("Catalog request failed", url=self.url, error=str(exc))
            return CatalogResponse(success=False, failure_reason=f"Catalog request failed: {exc}")

        if response.status_code in _UNKNOWN_PRODUCT_STATUSES:
            body = _json_or_empty(response)
            unknown = body.get("unknownIds") or body.get("unknown_ids") or list(product_ids)
            return CatalogResponse(
                success=False,
                unknown_ids=tuple(str(pid) for pid in unknown),
                failure_reason=body.get("message", "Some products were not found"),
            )

        if response.is_error:
            return CatalogResponse(
                success=False,
                failure_reason=f"Catalog responded with status {response.status_code}",
            )

        try:
            products = tuple(
                ProductRecord(id=str(item["id"]), price=float(item["price"]), name=str(item["name"]))
                for item in response.json()
            )
        except (ValueError, KeyError, TypeError) as exc:
            return CatalogResponse(success=False, failure_reason=f"Malformed catalog response: {exc}")

        return CatalogResponse(success=True, products=products)

    def close(self) -> None:
        self._client.close()


def _json_or_empty(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
