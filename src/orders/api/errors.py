"""Exception handlers turning workflow failures into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from orders.order.errors import OrderServiceError


async def order_service_error_handler(request: Request, exc: OrderServiceError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": exc.status_code, "message": exc.message},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install workflow and Protean domain exception handlers on ``app``."""
    app.add_exception_handler(OrderServiceError, order_service_error_handler)
    register_exception_handlers(app)
