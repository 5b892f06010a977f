from core.database import Base
from sqlalchemy import (Column, Integer, ForeignKey, UniqueConstraint)
from sqlalchemy.orm import relationship
from .mixins import WeeklyHoursMixin

class OperatingHours(Base, WeeklyHoursMixin):
    __tablename__ = "operating_hours"
    __table_args__ = (
        UniqueConstraint("establishment_id", "day_of_week", name="uq_operating_hours_day"),
    )

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #fk
    establishment_id = Column(Integer, ForeignKey("establishments.id"), nullable=False)

    #relationships
    establishment = relationship("Establishment", back_populates="operating_hours")


class DeliveryHours(Base, WeeklyHoursMixin):
    __tablename__ = "delivery_hours"
    __table_args__ = (
        UniqueConstraint("establishment_id", "day_of_week", name="uq_delivery_hours_day"),
    )

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #fk
    establishment_id = Column(Integer, ForeignKey("establishments.id"), nullable=False)

    #relationships
    establishment = relationship("Establishment", back_populates="delivery_hours")
