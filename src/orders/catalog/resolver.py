"""Product resolution against the catalog.

One batched round trip per call regardless of how many ids are asked for.
The result is either every requested product or a typed failure; partial
answers are never handed back because prices cannot be missing downstream.
"""

from collections.abc import Iterable

import structlog

from orders.catalog import get_catalog
from orders.catalog.port import ProductRecord
from orders.order.errors import CatalogUnavailable, ProductNotFound

logger = structlog.get_logger(__name__)


def distinct_product_ids(product_ids: Iterable[str]) -> list[str]:
    """Deduplicate ids, keeping first-seen order."""
    return list(dict.fromkeys(str(pid) for pid in product_ids))


def resolve_products(product_ids: Iterable[str]) -> list[ProductRecord]:
    ids = distinct_product_ids(product_ids)
    if not ids:
        return []

    logger.debug("Resolving products", product_ids=ids)
    response = get_catalog().validate_products(ids)

    if not response.success:
        if response.unknown_ids:
            raise ProductNotFound(response.unknown_ids)
        raise CatalogUnavailable(response.failure_reason or "Catalog service unavailable")

    resolved = {product.id: product for product in response.products}
    missing = [pid for pid in ids if pid not in resolved]
    if missing:
        raise ProductNotFound(missing)

    return [resolved[pid] for pid in ids]
