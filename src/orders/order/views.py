"""Response shaping for orders.

Catalog names are attached to line items here, from products already
resolved for the current request. Names are never written to the store.
"""

from collections.abc import Iterable

from orders.catalog.port import ProductRecord
from orders.order.errors import ProductMismatch
from orders.order.order import Order


def _timestamp(value):
    return value.isoformat() if value is not None else None


def order_summary(order: Order) -> dict:
    """Order fields without items, as used by list views."""
    return {
        "id": str(order.id),
        "total_amount": order.total_amount,
        "total_items": order.total_items,
        "status": order.status,
        "created_at": _timestamp(order.created_at),
        "updated_at": _timestamp(order.updated_at),
    }


def present_order(order: Order, products: Iterable[ProductRecord]) -> dict:
    """Order with its items, each item enriched with the product name."""
    names = {product.id: product.name for product in products}

    items = []
    for item in order.items:
        product_id = str(item.product_id)
        if product_id not in names:
            raise ProductMismatch(product_id)
        items.append(
            {
                "product_id": product_id,
                "quantity": item.quantity,
                "price": item.price,
                "name": names[product_id],
            }
        )

    return {**order_summary(order), "items": items}
