from core.database import Base
from sqlalchemy import (Column, Integer, String, ForeignKey)
from sqlalchemy.orm import relationship
from .mixins import CreatedAtMixin

class Category(Base, CreatedAtMixin):
    __tablename__ = "categories"

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #fk
    establishment_id = Column(Integer, ForeignKey("establishments.id"), nullable=False, index=True)

    #relationships
    establishment = relationship("Establishment", back_populates="categories")
    products = relationship("Product", back_populates="category")

    name = Column(String, nullable=False)
    description = Column(String)
