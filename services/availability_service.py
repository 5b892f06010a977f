"""
Open/closed evaluation for establishments.

An establishment stores one OperatingHours row and (when it delivers) one
DeliveryHours row per weekday. Whether it is open right now is derived on
every read from the wall clock and those rows; nothing is cached.

Times are "HH:mm" strings compared lexically, which matches chronological
order inside a single day. Windows that cross midnight are rejected when
hours are saved (see HoursEntry), so a window never wraps here.
"""

from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo
from sqlalchemy.orm import Session
from core.config import Settings
from models.establishments import Establishment
from models.hours import OperatingHours, DeliveryHours
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Availability:
    is_open: bool
    # None means "not applicable": the establishment does not deliver
    is_delivery_open: bool | None
    operating_hours: OperatingHours | None
    delivery_hours: DeliveryHours | None


def day_and_time(now: datetime) -> tuple[int, str]:
    """Weekday (0 = Sunday ... 6 = Saturday) and minute-resolution "HH:mm"."""
    return now.isoweekday() % 7, now.strftime("%H:%M")


def is_within(hours, current_time: str) -> bool:
    """True when an open hours row covers current_time, bounds inclusive."""
    if hours is None or not hours.is_open:
        return False
    return hours.open_time <= current_time <= hours.close_time


class AvailabilityService:

    @staticmethod
    def local_now(config: Settings) -> datetime:
        return datetime.now(ZoneInfo(config.TIMEZONE))

    @staticmethod
    def _hours_for_day(db: Session, model, establishment_id: int, day: int):
        return db.query(model).filter(
            model.establishment_id == establishment_id,
            model.day_of_week == day,
            model.is_open == True
        ).one_or_none()

    @staticmethod
    def evaluate(db: Session, establishment: Establishment, config: Settings,
                 now: datetime | None = None) -> Availability:
        """
        Evaluate general and delivery availability of an establishment.

        Args:
            db: Database session
            establishment: Establishment to evaluate
            config: Settings providing the business timezone
            now: Instant to evaluate at (default: current time in TIMEZONE).
                 Naive datetimes are taken as local wall-clock time.
        """
        if now is None:
            now = AvailabilityService.local_now(config)
        elif now.tzinfo is not None:
            now = now.astimezone(ZoneInfo(config.TIMEZONE))

        day, current_time = day_and_time(now)

        operating = AvailabilityService._hours_for_day(db, OperatingHours, establishment.id, day)
        is_open = is_within(operating, current_time)

        delivery = None
        is_delivery_open = None
        if establishment.has_delivery:
            delivery = AvailabilityService._hours_for_day(db, DeliveryHours, establishment.id, day)
            is_delivery_open = is_within(delivery, current_time)

        logger.debug(
            "Availability evaluated",
            extra={
                "establishment_id": establishment.id,
                "day_of_week": day,
                "time": current_time,
                "is_open": is_open,
                "is_delivery_open": is_delivery_open
            }
        )

        return Availability(
            is_open=is_open,
            is_delivery_open=is_delivery_open,
            operating_hours=operating,
            delivery_hours=delivery
        )
