"""Order pricing: totals and price snapshots from resolved products.

Pure functions: no I/O, and the same inputs always give the same result.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from orders.catalog.port import ProductRecord
from orders.order.errors import ProductMismatch


@dataclass(frozen=True)
class LineItem:
    """A requested product and quantity, before pricing."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderTotals:
    total_amount: float
    total_items: int


def _price_index(products: Iterable[ProductRecord]) -> dict[str, ProductRecord]:
    return {product.id: product for product in products}


def _product_for(line_item: LineItem, index: dict[str, ProductRecord]) -> ProductRecord:
    product = index.get(line_item.product_id)
    if product is None:
        raise ProductMismatch(line_item.product_id)
    return product


def compute_totals(line_items: list[LineItem], products: Iterable[ProductRecord]) -> OrderTotals:
    """Sum price x quantity and quantities across every line item."""
    index = _price_index(products)

    total_amount = 0.0
    total_items = 0
    for line_item in line_items:
        product = _product_for(line_item, index)
        total_amount += product.price * line_item.quantity
        total_items += line_item.quantity

    return OrderTotals(total_amount=round(total_amount, 2), total_items=total_items)


def price_line_items(line_items: list[LineItem], products: Iterable[ProductRecord]) -> list[dict]:
    """Attach the current catalog price to each line item for persistence."""
    index = _price_index(products)
    return [
        {
            "product_id": line_item.product_id,
            "quantity": line_item.quantity,
            "price": _product_for(line_item, index).price,
        }
        for line_item in line_items
    ]
