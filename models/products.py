from core.database import Base
from sqlalchemy import (Column, Integer, String, Boolean, ForeignKey, Numeric)
from sqlalchemy.orm import relationship
from .mixins import CreatedAtMixin, UpdatedAtMixin

class Product(Base, CreatedAtMixin, UpdatedAtMixin):
    __tablename__ = "products"

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #fk
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    establishment_id = Column(Integer, ForeignKey("establishments.id"), nullable=False, index=True)

    #relationships
    order_items = relationship("OrderItem", back_populates="product")
    category = relationship("Category", back_populates="products")
    establishment = relationship("Establishment", back_populates="products")

    name = Column(String, nullable=False)
    description = Column(String)
    price = Column(Numeric(10, 2), nullable=False)
    image_url = Column(String)
    is_active = Column(Boolean, default=True, nullable=False)
    is_kosher = Column(Boolean, default=True, nullable=False)
    # menu display order inside a category
    position = Column(Integer, default=0, nullable=False)
