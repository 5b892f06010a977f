from fastapi import APIRouter, Query, Request, status
from utils.deps import db_dependency, user_dependency
from models.enums import OrderStatus
from schemas.common import Pagination
from schemas.order_schemas import (CreateOrderRequest, UpdateOrderStatusRequest, OrderResponse,
                                   OrderEnvelope, OrderDetailEnvelope, OrderListResponse)
from services.pricing_service import PricingService
from services.order_service import OrderService
from middleware.rate_limiter import limiter

router = APIRouter(
    prefix="/orders",
    tags=["orders"]
)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=OrderEnvelope)
@limiter.limit("20/minute")
async def create_order(request: Request, body: CreateOrderRequest, user: user_dependency, db: db_dependency):
    """
    Place an order. The total is computed server side from current product
    prices plus the delivery fee; prices are snapshotted on the items.
    """
    order = PricingService.create_order(db, user, body)
    return OrderEnvelope(message="Order created", order=OrderResponse.from_order(order))


@router.get("", status_code=status.HTTP_200_OK, response_model=OrderListResponse)
async def list_orders(user: user_dependency, db: db_dependency,
                      order_status: OrderStatus | None = Query(None, alias="status"),
                      page: int = Query(1, ge=1), limit: int = Query(10, ge=1, le=100)):
    orders, total = OrderService.list_orders(db, user, status=order_status, page=page, limit=limit)
    return OrderListResponse(
        orders=[OrderResponse.from_order(order) for order in orders],
        pagination=Pagination.build(page, limit, total)
    )


@router.get("/{order_id}", status_code=status.HTTP_200_OK, response_model=OrderDetailEnvelope)
async def get_order(order_id: int, user: user_dependency, db: db_dependency):
    order = OrderService.get_order(db, user, order_id)
    return OrderDetailEnvelope(order=OrderResponse.from_order(order))


@router.patch("/{order_id}/status", status_code=status.HTTP_200_OK, response_model=OrderEnvelope)
@limiter.limit("60/minute")
async def update_order_status(request: Request, order_id: int, body: UpdateOrderStatusRequest,
                              user: user_dependency, db: db_dependency):
    order = OrderService.update_status(db, user, order_id, body.status)
    return OrderEnvelope(message="Order status updated", order=OrderResponse.from_order(order))
