from datetime import datetime
from pydantic import Field
from models.enums import OrderStatus
from schemas.common import CamelModel, RequestModel, Money, Pagination


class OrderItemRequest(RequestModel):
    product_id: int
    quantity: int = Field(ge=1)


class CreateOrderRequest(RequestModel):
    establishment_id: int
    delivery_address: str = Field(min_length=1)
    notes: str | None = None
    items: list[OrderItemRequest] = Field(min_length=1)


class UpdateOrderStatusRequest(RequestModel):
    status: OrderStatus


class OrderItemResponse(CamelModel):
    id: int
    product_id: int
    product_name: str
    quantity: int
    price: Money
    subtotal: Money


class OrderResponse(CamelModel):
    id: int
    user_id: int
    user_name: str | None = None
    user_phone: str | None = None
    establishment_id: int
    establishment_name: str
    status: OrderStatus
    total: Money
    delivery_address: str
    notes: str | None = None
    items: list[OrderItemResponse]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        return cls(
            id=order.id,
            user_id=order.user_id,
            user_name=order.user.name,
            user_phone=order.user.phone,
            establishment_id=order.establishment_id,
            establishment_name=order.establishment.name,
            status=order.status,
            total=order.total,
            delivery_address=order.delivery_address,
            notes=order.notes,
            items=[
                OrderItemResponse(
                    id=item.id,
                    product_id=item.product_id,
                    product_name=item.product.name,
                    quantity=item.quantity,
                    price=item.price,
                    subtotal=item.subtotal
                )
                for item in order.items
            ],
            created_at=order.created_at,
            updated_at=order.updated_at
        )


class OrderEnvelope(CamelModel):
    message: str
    order: OrderResponse


class OrderDetailEnvelope(CamelModel):
    order: OrderResponse


class OrderListResponse(CamelModel):
    orders: list[OrderResponse]
    pagination: Pagination
