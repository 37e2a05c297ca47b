"""Application tests for order creation through the domain."""

import json
from unittest.mock import patch

import pytest
from orders.order.creation import CreateOrder, place_order
from orders.order.errors import CatalogUnavailable, ProductNotFound, StoreFailure
from orders.order.order import Order, OrderStatus
from orders.order.repository import OrderRepository
from protean import current_domain
from protean.exceptions import ValidationError


def _stored_order_count():
    return current_domain.repository_for(Order)._dao.query.all().total


class TestCreateOrderFlow:
    def test_single_item_order(self):
        order = place_order([{"product_id": "prod-001", "quantity": 2}])

        assert order["total_amount"] == 20.0
        assert order["total_items"] == 2
        assert order["status"] == OrderStatus.PENDING.value
        assert order["items"] == [{"product_id": "prod-001", "quantity": 2, "price": 10.0, "name": "Widget"}]

    def test_totals_cover_all_items(self):
        order = place_order(
            [
                {"product_id": "prod-001", "quantity": 2},
                {"product_id": "prod-002", "quantity": 1},
                {"product_id": "prod-003", "quantity": 4},
            ]
        )
        assert order["total_amount"] == 62.5
        assert order["total_items"] == 7
        assert len(order["items"]) == 3

    def test_order_is_persisted_with_items(self):
        created = place_order(
            [
                {"product_id": "prod-001", "quantity": 1},
                {"product_id": "prod-002", "quantity": 3},
            ]
        )

        order = current_domain.repository_for(Order).get(created["id"])
        assert order.status == OrderStatus.PENDING.value
        assert order.total_amount == 86.5
        assert order.total_items == 4
        prices = {str(item.product_id): item.price for item in order.items}
        assert prices == {"prod-001": 10.0, "prod-002": 25.5}

    def test_names_are_not_persisted(self):
        created = place_order([{"product_id": "prod-001", "quantity": 1}])
        order = current_domain.repository_for(Order).get(created["id"])
        assert all("name" not in item.to_dict() for item in order.items)

    def test_one_catalog_call_for_all_items(self, catalog):
        place_order(
            [
                {"product_id": "prod-001", "quantity": 1},
                {"product_id": "prod-002", "quantity": 1},
                {"product_id": "prod-001", "quantity": 2},
            ]
        )
        assert len(catalog.calls) == 1
        assert catalog.calls[0]["payload"] == ["prod-001", "prod-002"]

    def test_process_returns_enriched_order(self):
        command = CreateOrder(items=json.dumps([{"product_id": "prod-003", "quantity": 1}]))
        result = current_domain.process(command, asynchronous=False)
        assert result["items"][0]["name"] == "Gizmo"


class TestCreateOrderFailures:
    def test_unknown_product_creates_nothing(self):
        with pytest.raises(ProductNotFound) as exc_info:
            place_order([{"product_id": "prod-001", "quantity": 1}, {"product_id": "ghost", "quantity": 1}])

        assert exc_info.value.product_ids == ["ghost"]
        assert _stored_order_count() == 0

    def test_unavailable_catalog_creates_nothing(self, catalog):
        catalog.configure(available=False)

        with pytest.raises(CatalogUnavailable):
            place_order([{"product_id": "prod-001", "quantity": 1}])

        assert _stored_order_count() == 0

    def test_store_failure_is_wrapped(self):
        with patch.object(OrderRepository, "create_with_items", side_effect=RuntimeError("connection refused")):
            with pytest.raises(StoreFailure) as exc_info:
                place_order([{"product_id": "prod-001", "quantity": 1}])

        assert exc_info.value.message == "connection refused"
        assert exc_info.value.status_code == 400
        assert _stored_order_count() == 0

    def test_empty_items_are_rejected(self, catalog):
        with pytest.raises(ValidationError):
            place_order([])
        assert catalog.calls == []

    def test_malformed_items_are_rejected(self, catalog):
        with pytest.raises(ValidationError):
            place_order([{"quantity": 1}])
        assert catalog.calls == []

    def test_client_supplied_status_and_totals_are_ignored(self):
        order = place_order(
            [{"product_id": "prod-001", "quantity": 1, "status": "DELIVERED", "total_amount": 999.0}]
        )
        assert order["status"] == OrderStatus.PENDING.value
        assert order["total_amount"] == 10.0
