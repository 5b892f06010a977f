from sqlalchemy.sql import func
from sqlalchemy import Column, DateTime, Integer, String, Boolean


class CreatedAtMixin:
    created_at = Column(DateTime, default=func.now(), nullable=False)


class UpdatedAtMixin:
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)


class WeeklyHoursMixin:
    """Columns shared by operating and delivery hours (one row per weekday)."""

    # 0 = Sunday ... 6 = Saturday
    day_of_week = Column(Integer, nullable=False)
    # "HH:mm", compared lexically
    open_time = Column(String(5), nullable=False)
    close_time = Column(String(5), nullable=False)
    is_open = Column(Boolean, default=True, nullable=False)
