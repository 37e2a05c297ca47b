"""Order creation: command, handler, and entry point.

Resolve products, price the items, then persist. Each step needs the previous
step's output, and nothing is written until the last one, so a failure at any
point leaves no order behind.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Text
from protean.utils.globals import current_domain

from orders.catalog.resolver import distinct_product_ids, resolve_products
from orders.domain import orders
from orders.order.errors import workflow_boundary
from orders.order.order import Order
from orders.order.pricing import LineItem, compute_totals, price_line_items
from orders.order.views import present_order

logger = structlog.get_logger(__name__)


@orders.command(part_of="Order")
class CreateOrder:
    items = Text(required=True)  # JSON: list of {product_id, quantity}


def parse_line_items(raw_items) -> list[LineItem]:
    items_data = json.loads(raw_items) if isinstance(raw_items, str) else raw_items
    if not items_data:
        raise ValidationError({"items": ["An order needs at least one item"]})

    try:
        return [LineItem(product_id=str(item["product_id"]), quantity=int(item["quantity"])) for item in items_data]
    except (KeyError, TypeError, ValueError):
        raise ValidationError({"items": ["Each item needs a product_id and an integer quantity"]}) from None


@orders.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        line_items = parse_line_items(command.items)

        products = resolve_products(distinct_product_ids(item.product_id for item in line_items))
        totals = compute_totals(line_items, products)

        order = current_domain.repository_for(Order).create_with_items(
            totals,
            price_line_items(line_items, products),
        )
        logger.info(
            "Order created",
            order_id=str(order.id),
            total_amount=order.total_amount,
            total_items=order.total_items,
        )
        return present_order(order, products)


def place_order(items: list[dict]) -> dict:
    """Create an order from ``[{"product_id": ..., "quantity": ...}]``."""
    with workflow_boundary("create_order"):
        return current_domain.process(CreateOrder(items=json.dumps(items)), asynchronous=False)
