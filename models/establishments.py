from core.database import Base
from sqlalchemy import (Column, Integer, String, Boolean, ForeignKey, Numeric, Float, Enum)
from sqlalchemy.orm import relationship
from .enums import EstablishmentStatus, EstablishmentType
from .mixins import CreatedAtMixin, UpdatedAtMixin

class Establishment(Base, CreatedAtMixin, UpdatedAtMixin):
    """
    A vendor tenant. Owns the menu (categories and products), the weekly
    operating and delivery hours, and receives orders.

    When has_delivery is False the delivery fee, minimum order and radius
    are kept at zero.
    """
    __tablename__ = "establishments"

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #fk
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    #relationships
    user = relationship("User", back_populates="establishment")
    categories = relationship("Category", back_populates="establishment", cascade="all, delete-orphan")
    products = relationship("Product", back_populates="establishment")
    operating_hours = relationship("OperatingHours", back_populates="establishment",
                                   cascade="all, delete-orphan", order_by="OperatingHours.day_of_week")
    delivery_hours = relationship("DeliveryHours", back_populates="establishment",
                                  cascade="all, delete-orphan", order_by="DeliveryHours.day_of_week")
    orders = relationship("Order", back_populates="establishment")

    name = Column(String, nullable=False)
    description = Column(String)
    type = Column(Enum(EstablishmentType, name="establishment_type"), default=EstablishmentType.RESTAURANT)
    email = Column(String)
    phone = Column(String, default="")
    address = Column(String, default="")
    city = Column(String, default="")
    state = Column(String, default="")
    zip_code = Column(String, default="")
    logo_url = Column(String)
    status = Column(Enum(EstablishmentStatus, name="establishment_status"),
                    default=EstablishmentStatus.PENDING, nullable=False, index=True)

    has_delivery = Column(Boolean, default=False, nullable=False)
    delivery_fee = Column(Numeric(10, 2), default=0, nullable=False)
    min_delivery_order = Column(Numeric(10, 2), default=0, nullable=False)
    delivery_radius = Column(Float, default=0, nullable=False)
