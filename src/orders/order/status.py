"""Order status changes: command, handler, and entry point."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from orders.domain import orders
from orders.order.errors import workflow_boundary
from orders.order.order import Order, OrderStatus, coerce_status
from orders.order.queries import load_order_with_products
from orders.order.views import present_order

logger = structlog.get_logger(__name__)


@orders.command(part_of="Order")
class ChangeOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20, choices=OrderStatus)


@orders.command_handler(part_of=Order)
class ChangeOrderStatusHandler:
    @handle(ChangeOrderStatus)
    def change_status(self, command):
        target = coerce_status(command.status)
        order, products = load_order_with_products(command.order_id)

        if order.status == target.value:
            logger.debug("Order already in requested status", order_id=str(order.id), status=target.value)
            return present_order(order, products)

        previous = order.status
        order = current_domain.repository_for(Order).update_status(order, target)
        logger.info(
            "Order status changed",
            order_id=str(order.id),
            previous_status=previous,
            status=order.status,
        )
        return present_order(order, products)


def change_order_status(order_id: str, status: OrderStatus | str) -> dict:
    """Move an order to ``status``; asking for the current status is a no-op."""
    status_value = status.value if isinstance(status, OrderStatus) else status
    with workflow_boundary("change_order_status", order_id=order_id, status=status_value):
        command = ChangeOrderStatus(order_id=order_id, status=status_value)
        return current_domain.process(command, asynchronous=False)
