"""FastAPI routes for the Orders service."""

from fastapi import APIRouter, Query

from orders.api.schemas import (
    ChangeOrderStatusRequest,
    CreateOrderRequest,
    ErrorResponse,
    OrderPageResponse,
    OrderResponse,
)
from orders.order.creation import place_order
from orders.order.order import OrderStatus
from orders.order.queries import find_order, list_orders
from orders.order.status import change_order_status

order_router = APIRouter(
    prefix="/orders",
    tags=["orders"],
    responses={400: {"model": ErrorResponse}},
)


@order_router.post("", status_code=201, response_model=OrderResponse)
def create_order(body: CreateOrderRequest) -> OrderResponse:
    items = [{"product_id": item.product_id, "quantity": item.quantity} for item in body.items]
    return OrderResponse.model_validate(place_order(items))


@order_router.get("", response_model=OrderPageResponse)
def get_orders(
    status: OrderStatus | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1),
) -> OrderPageResponse:
    return OrderPageResponse.model_validate(list_orders(status=status, page=page, limit=limit))


@order_router.get("/{order_id}", response_model=OrderResponse, responses={404: {"model": ErrorResponse}})
def get_order(order_id: str) -> OrderResponse:
    return OrderResponse.model_validate(find_order(order_id))


@order_router.patch("/{order_id}/status", response_model=OrderResponse, responses={404: {"model": ErrorResponse}})
def update_order_status(order_id: str, body: ChangeOrderStatusRequest) -> OrderResponse:
    return OrderResponse.model_validate(change_order_status(order_id, body.status))
