from sqlalchemy.orm import Session
from core.exceptions import (AuthorizationError, NotFoundError, InvalidTransition,
                             ConcurrentStatusChange)
from models.enums import UserRole, OrderStatus
from models.orders import Order
from utils.logger import get_logger

logger = get_logger(__name__)


# DELIVERED and CANCELLED are terminal
ORDER_TRANSITIONS: dict[OrderStatus, tuple[OrderStatus, ...]] = {
    OrderStatus.PENDING: (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    OrderStatus.CONFIRMED: (OrderStatus.PREPARING, OrderStatus.CANCELLED),
    OrderStatus.PREPARING: (OrderStatus.READY, OrderStatus.CANCELLED),
    OrderStatus.READY: (OrderStatus.DELIVERED,),
    OrderStatus.DELIVERED: (),
    OrderStatus.CANCELLED: (),
}


def allowed_transitions(current: OrderStatus) -> tuple[OrderStatus, ...]:
    return ORDER_TRANSITIONS.get(current, ())


def ensure_transition(current: OrderStatus, target: OrderStatus) -> None:
    """Raise InvalidTransition unless target is reachable from current."""
    allowed = allowed_transitions(current)
    if target not in allowed:
        raise InvalidTransition(current, target, allowed)


class OrderService:

    @staticmethod
    def _scoped_query(db: Session, actor: dict):
        """
        Orders visible to the actor: customers see their own orders,
        establishments see orders placed with them.
        """
        query = db.query(Order)
        if actor["user_role"] == UserRole.ESTABLISHMENT and actor.get("establishment_id") is not None:
            return query.filter(Order.establishment_id == actor["establishment_id"])
        return query.filter(Order.user_id == actor["user_id"])

    @staticmethod
    def list_orders(db: Session, actor: dict, status: OrderStatus | None = None,
                    page: int = 1, limit: int = 10) -> tuple[list[Order], int]:
        query = OrderService._scoped_query(db, actor)
        if status is not None:
            query = query.filter(Order.status == status)

        total = query.count()
        orders = (
            query.order_by(Order.created_at.desc(), Order.id.desc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return orders, total

    @staticmethod
    def get_order(db: Session, actor: dict, order_id: int) -> Order:
        order = OrderService._scoped_query(db, actor).filter(Order.id == order_id).first()
        if not order:
            raise NotFoundError("Order not found")
        return order

    @staticmethod
    def update_status(db: Session, actor: dict, order_id: int, target: OrderStatus) -> Order:
        """
        Move an order to a new status.

        Only the establishment that received the order may change it, and
        only along ORDER_TRANSITIONS. The write is conditional on the status
        that was read, so two concurrent requests cannot both apply a
        transition from the same state.

        Raises:
            AuthorizationError: actor is not an establishment
            NotFoundError: order does not exist for this establishment
            InvalidTransition: target not allowed from the current status
            ConcurrentStatusChange: status changed since it was read
        """
        if actor["user_role"] != UserRole.ESTABLISHMENT or actor.get("establishment_id") is None:
            raise AuthorizationError("Only establishments can change order status")

        order = db.query(Order).filter(
            Order.id == order_id,
            Order.establishment_id == actor["establishment_id"]
        ).one_or_none()

        if not order:
            raise NotFoundError("Order not found")

        current = order.status
        try:
            ensure_transition(current, target)
        except InvalidTransition:
            logger.warning(
                "Order status change refused",
                extra={"order_id": order.id, "from": current.value, "to": target.value}
            )
            raise

        updated = db.query(Order).filter(
            Order.id == order.id,
            Order.status == current
        ).update({"status": target}, synchronize_session="fetch")

        if updated != 1:
            db.rollback()
            logger.warning(
                "Order status changed concurrently",
                extra={"order_id": order.id, "expected": current.value, "to": target.value}
            )
            raise ConcurrentStatusChange(
                "Order status was changed by another request, reload and try again",
                data={"expectedStatus": current.value}
            )

        db.commit()
        db.refresh(order)

        logger.info(
            "Order status updated",
            extra={
                "order_id": order.id,
                "establishment_id": order.establishment_id,
                "from": current.value,
                "to": target.value
            }
        )

        return order
