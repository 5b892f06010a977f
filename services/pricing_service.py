from dataclasses import dataclass
from decimal import Decimal
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from core.exceptions import (AuthorizationError, NotFoundError, ValidationError,
                             MinimumOrderNotMet, InfrastructureError)
from models.enums import UserRole, EstablishmentStatus, OrderStatus
from models.establishments import Establishment
from models.products import Product
from models.orders import Order
from models.order_items import OrderItem
from schemas.order_schemas import CreateOrderRequest
from utils.logger import get_logger

logger = get_logger(__name__)

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class PricedLine:
    product_id: int
    quantity: int
    price: Decimal
    subtotal: Decimal


@dataclass(frozen=True)
class Quote:
    lines: list[PricedLine]
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal


class PricingService:

    @staticmethod
    def quote(establishment: Establishment, products: dict[int, Product],
              items: list[tuple[int, int]]) -> Quote:
        """
        Price a cart against already resolved products.

        The delivery fee is added whenever the establishment delivers, no
        matter the order size. The minimum order is checked against the
        total including that fee.

        Raises:
            MinimumOrderNotMet: total below the establishment's minimum
        """
        lines = []
        subtotal = ZERO
        for product_id, quantity in items:
            price = products[product_id].price
            line_subtotal = price * quantity
            subtotal += line_subtotal
            lines.append(PricedLine(product_id, quantity, price, line_subtotal))

        delivery_fee = ZERO
        if establishment.has_delivery and establishment.delivery_fee:
            delivery_fee = establishment.delivery_fee

        total = subtotal + delivery_fee

        min_order = establishment.min_delivery_order
        if min_order and total < min_order:
            raise MinimumOrderNotMet(min_order, total)

        return Quote(lines=lines, subtotal=subtotal, delivery_fee=delivery_fee, total=total)

    @staticmethod
    def resolve_products(db: Session, establishment_id: int, product_ids: list[int]) -> dict[int, Product]:
        """
        Load the orderable products of an establishment.

        All or nothing: every requested line must map to an active product of
        this establishment, otherwise the whole cart is refused.
        """
        products = db.query(Product).filter(
            Product.id.in_(product_ids),
            Product.establishment_id == establishment_id,
            Product.is_active == True
        ).all()

        if len(products) != len(product_ids):
            raise ValidationError("One or more products were not found or are inactive")

        return {product.id: product for product in products}

    @staticmethod
    def create_order(db: Session, actor: dict, body: CreateOrderRequest) -> Order:
        """
        Price and place an order.

        Flow:
        1. Only USER accounts may order
        2. The establishment must exist and be approved
        3. Resolve products (all or nothing) and compute the total
        4. Persist the order and its items in one transaction (status PENDING)
        """
        if actor["user_role"] != UserRole.USER:
            raise AuthorizationError("Only customers can place orders")

        establishment = db.query(Establishment).filter(
            Establishment.id == body.establishment_id,
            Establishment.status == EstablishmentStatus.APPROVED
        ).one_or_none()

        if not establishment:
            raise NotFoundError("Establishment not found or inactive")

        items = [(item.product_id, item.quantity) for item in body.items]
        products = PricingService.resolve_products(db, establishment.id, [product_id for product_id, _ in items])

        try:
            quote = PricingService.quote(establishment, products, items)
        except MinimumOrderNotMet as exc:
            logger.info(
                "Order refused - minimum order not met",
                extra={
                    "user_id": actor["user_id"],
                    "establishment_id": establishment.id,
                    "min_order": str(exc.min_order),
                    "current_total": str(exc.current_total)
                }
            )
            raise

        order = Order(
            user_id=actor["user_id"],
            establishment_id=establishment.id,
            total=quote.total,
            delivery_address=body.delivery_address,
            notes=body.notes,
            status=OrderStatus.PENDING,
            items=[
                OrderItem(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    price=line.price,
                    subtotal=line.subtotal
                )
                for line in quote.lines
            ]
        )

        try:
            db.add(order)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(
                "Order creation failed - transaction rolled back",
                extra={"user_id": actor["user_id"], "establishment_id": establishment.id},
                exc_info=True
            )
            raise InfrastructureError("Could not place the order, please try again") from exc

        db.refresh(order)

        logger.info(
            "Order created",
            extra={
                "order_id": order.id,
                "user_id": order.user_id,
                "establishment_id": order.establishment_id,
                "total": str(order.total),
                "items": len(quote.lines)
            }
        )

        return order
