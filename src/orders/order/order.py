"""Order aggregate: a purchase order and the line items it owns.

Totals are computed once when the order is created and are frozen with it;
item prices are snapshots of the catalog price at that moment. After creation
only the status moves, and any status may follow any other.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from orders.domain import orders


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    DELIVERED = "DELIVERED"


def _utcnow():
    return datetime.now(UTC)


def coerce_status(status) -> OrderStatus:
    """Accept an ``OrderStatus`` or its value; reject anything else."""
    if isinstance(status, OrderStatus):
        return status
    try:
        return OrderStatus(status)
    except ValueError:
        valid = ", ".join(s.value for s in OrderStatus)
        raise ValidationError({"status": [f"Valid status are {valid}"]}) from None


@orders.entity(part_of="Order")
class OrderItem:
    """A line item: which product, how many, and the price paid for each."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)


@orders.aggregate
class Order:
    total_amount = Float(required=True, min_value=0.0)
    total_items = Integer(required=True, min_value=0)
    status = String(
        max_length=20,
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    items = HasMany(OrderItem)
    created_at = DateTime(default=_utcnow)
    updated_at = DateTime(default=_utcnow)

    @classmethod
    def create(cls, total_amount, total_items, items_data):
        """Create a PENDING order from priced line items.

        Args:
            total_amount: Sum of price x quantity over all items.
            total_items: Sum of quantities over all items.
            items_data: List of dicts with product_id, quantity, price.
        """
        if not items_data:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = _utcnow()
        return cls(
            total_amount=total_amount,
            total_items=total_items,
            status=OrderStatus.PENDING.value,
            items=[OrderItem(**item) for item in items_data],
            created_at=now,
            updated_at=now,
        )

    def change_status(self, status):
        self.status = coerce_status(status).value
        self.updated_at = _utcnow()
