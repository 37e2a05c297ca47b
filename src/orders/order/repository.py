"""Order store: persistence operations the workflows rely on."""

import math
from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError

from orders.domain import orders
from orders.order.errors import OrderNotFound
from orders.order.order import Order, OrderStatus
from orders.order.pricing import OrderTotals


@dataclass(frozen=True)
class OrderPage:
    items: list[Order]
    total: int
    page: int
    last_page: int


@orders.repository(part_of=Order)
class OrderRepository:
    """Repository for the Order aggregate.

    Order items are child entities of the aggregate, so adding an order writes
    the order row and every item row in the same unit of work.
    """

    def create_with_items(self, totals: OrderTotals, priced_items: list[dict]) -> Order:
        order = Order.create(
            total_amount=totals.total_amount,
            total_items=totals.total_items,
            items_data=priced_items,
        )
        self.add(order)
        return order

    def find_by_id_with_items(self, order_id: str) -> Order:
        try:
            return self.get(order_id)
        except ObjectNotFoundError:
            raise OrderNotFound(order_id) from None

    def find_page(self, status: OrderStatus | str | None, page: int, per_page: int) -> OrderPage:
        """Fetch one page of orders, optionally restricted to a single status."""
        query = self._dao.query
        if status is not None:
            status_value = status.value if isinstance(status, OrderStatus) else status
            query = query.filter(status=status_value)

        results = query.order_by("created_at").offset((page - 1) * per_page).limit(per_page).all()
        return OrderPage(
            items=list(results.items),
            total=results.total,
            page=page,
            last_page=math.ceil(results.total / per_page),
        )

    def update_status(self, order: Order, status: OrderStatus | str) -> Order:
        order.change_status(status)
        self.add(order)
        return order
