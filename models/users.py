from core.database import Base
from sqlalchemy import (Column, Integer, String, Boolean, Enum)
from sqlalchemy.orm import relationship
from .enums import UserRole
from .mixins import CreatedAtMixin

class User(Base, CreatedAtMixin):
    __tablename__ = "users"

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #relationships
    orders = relationship("Order", back_populates="user")
    establishment = relationship("Establishment", back_populates="user", uselist=False)

    email = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    phone = Column(String)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(UserRole, name="user_role"), default=UserRole.USER, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
