"""Order reads: single order with catalog names, and paginated listings."""

from protean.utils.globals import current_domain

from orders.catalog.port import ProductRecord
from orders.catalog.resolver import distinct_product_ids, resolve_products
from orders.order.errors import workflow_boundary
from orders.order.order import Order, OrderStatus
from orders.order.views import order_summary, present_order


def load_order_with_products(order_id: str) -> tuple[Order, list[ProductRecord]]:
    """Fetch an order and resolve its products from the catalog.

    Names are never cached, so every read goes back to the catalog; if the
    catalog cannot answer, the read fails even though the order exists.
    """
    order = current_domain.repository_for(Order).find_by_id_with_items(order_id)
    products = resolve_products(distinct_product_ids(item.product_id for item in order.items))
    return order, products


def find_order(order_id: str) -> dict:
    with workflow_boundary("find_order", order_id=order_id):
        order, products = load_order_with_products(order_id)
        return present_order(order, products)


def list_orders(status: OrderStatus | str | None = None, page: int = 1, limit: int = 10) -> dict:
    """List orders page by page. Items and catalog names are left out."""
    with workflow_boundary("list_orders", status=status, page=page, limit=limit):
        result = current_domain.repository_for(Order).find_page(status, page, limit)
        return {
            "data": [order_summary(order) for order in result.items],
            "meta": {
                "total": result.total,
                "page": result.page,
                "last_page": result.last_page,
            },
        }
