"""Tests for how workflow failures are logged and normalized."""

import pytest
from orders.order.errors import (
    CatalogUnavailable,
    OrderNotFound,
    ProductMismatch,
    StoreFailure,
    workflow_boundary,
)
from protean.exceptions import ValidationError
from structlog.testing import capture_logs


class TestWorkflowBoundary:
    def test_product_mismatch_is_a_warning(self):
        with capture_logs() as logs:
            with pytest.raises(ProductMismatch):
                with workflow_boundary("create_order"):
                    raise ProductMismatch("prod-009")

        assert len(logs) == 1
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["operation"] == "create_order"
        assert logs[0]["error"] == "Product prod-009 missing from resolved products"

    def test_catalog_failure_is_logged_as_error(self):
        with capture_logs() as logs:
            with pytest.raises(CatalogUnavailable):
                with workflow_boundary("find_order", order_id="ord-1"):
                    raise CatalogUnavailable("Catalog down")

        assert len(logs) == 1
        assert logs[0]["log_level"] == "error"
        assert logs[0]["error"] == "Catalog down"
        assert logs[0]["order_id"] == "ord-1"

    def test_not_found_keeps_its_status(self):
        with capture_logs() as logs:
            with pytest.raises(OrderNotFound) as exc_info:
                with workflow_boundary("find_order"):
                    raise OrderNotFound("ord-2")

        assert exc_info.value.status_code == 404
        assert logs[0]["error"] == "Order with id ord-2 not found"

    def test_unexpected_error_becomes_store_failure(self):
        with capture_logs() as logs:
            with pytest.raises(StoreFailure) as exc_info:
                with workflow_boundary("list_orders"):
                    raise RuntimeError("disk full")

        assert exc_info.value.message == "disk full"
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert len(logs) == 1
        assert logs[0]["log_level"] == "error"
        assert logs[0]["error"] == "disk full"

    def test_validation_errors_pass_through(self):
        with capture_logs() as logs:
            with pytest.raises(ValidationError):
                with workflow_boundary("change_order_status"):
                    raise ValidationError({"status": ["Invalid"]})

        assert logs == []
