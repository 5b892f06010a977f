from core.database import Base
from sqlalchemy.orm import relationship
from sqlalchemy import (Column, Integer, String, ForeignKey, Numeric, Enum)
from .enums import OrderStatus
from .mixins import CreatedAtMixin, UpdatedAtMixin

class Order(Base, CreatedAtMixin, UpdatedAtMixin):
    __tablename__ = "orders"

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #fk
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    establishment_id = Column(Integer, ForeignKey("establishments.id"), nullable=False, index=True)

    #relationships
    user = relationship("User", back_populates="orders")
    establishment = relationship("Establishment", back_populates="orders")
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan",
                         order_by="OrderItem.id")

    # subtotals plus delivery fee, fixed at creation
    total = Column(Numeric(10, 2), nullable=False)
    delivery_address = Column(String, nullable=False)
    notes = Column(String)
    status = Column(Enum(OrderStatus, name="order_status"), default=OrderStatus.PENDING,
                    nullable=False, index=True)
