"""Failures surfaced by the order workflows.

Every failure leaves the workflow as an ``OrderServiceError`` carrying the
HTTP-style status classification and the originating message.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

import structlog
from protean.exceptions import ValidationError

logger = structlog.get_logger(__name__)

BAD_REQUEST = 400
NOT_FOUND = 404


class OrderServiceError(Exception):
    """Base exception for all order workflow failures."""

    status_code = BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CatalogUnavailable(OrderServiceError):
    """Raised when the product catalog cannot be reached or answers garbage."""


class ProductNotFound(OrderServiceError):
    """Raised when the catalog does not know one or more requested products."""

    def __init__(self, product_ids: Iterable[str]):
        self.product_ids = sorted(set(product_ids))
        super().__init__(f"Products not found: {', '.join(self.product_ids)}")


class ProductMismatch(OrderServiceError):
    """Raised when a line item has no matching resolved product."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product {product_id} missing from resolved products")


class StoreFailure(OrderServiceError):
    """Raised when reading from or writing to the order store fails."""


class OrderNotFound(OrderServiceError):
    status_code = NOT_FOUND

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order with id {order_id} not found")


@contextmanager
def workflow_boundary(operation: str, **context) -> Iterator[None]:
    """Log and normalize failures leaving an order workflow.

    Workflow errors are re-raised unchanged, input validation errors belong to
    the caller, and anything else (store drivers, unit of work commit) is
    wrapped as ``StoreFailure``.
    """
    try:
        yield
    except ProductMismatch as exc:
        logger.warning("Order workflow anomaly", operation=operation, error=exc.message, **context)
        raise
    except OrderServiceError as exc:
        logger.error("Order workflow failed", operation=operation, error=exc.message, **context)
        raise
    except ValidationError:
        raise
    except Exception as exc:
        logger.error("Order store failed", operation=operation, error=str(exc), **context)
        raise StoreFailure(str(exc)) from exc
