"""Pydantic request/response schemas for the Orders API.

These are external contracts (anti-corruption layer): separate from
internal Protean commands. Fields are camelCase on the wire; snake_case is
accepted on input as well.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from orders.order.order import OrderStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class OrderItemRequest(CamelModel):
    product_id: str = Field(min_length=1)
    quantity: int = Field(ge=1)


class CreateOrderRequest(CamelModel):
    items: list[OrderItemRequest] = Field(min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "items": [
                        {"productId": "prod-001", "quantity": 2},
                        {"productId": "prod-002", "quantity": 1},
                    ]
                }
            ]
        },
    )


class ChangeOrderStatusRequest(CamelModel):
    status: OrderStatus


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderItemResponse(CamelModel):
    product_id: str
    quantity: int
    price: float
    name: str


class OrderSummaryResponse(CamelModel):
    id: str
    total_amount: float
    total_items: int
    status: OrderStatus
    created_at: str | None = None
    updated_at: str | None = None


class OrderResponse(OrderSummaryResponse):
    items: list[OrderItemResponse]


class PageMeta(CamelModel):
    total: int
    page: int
    last_page: int


class OrderPageResponse(CamelModel):
    data: list[OrderSummaryResponse]
    meta: PageMeta


class ErrorResponse(BaseModel):
    status: int
    message: str
