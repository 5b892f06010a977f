from datetime import datetime
from decimal import Decimal
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from core.config import Settings
from core.exceptions import NotFoundError, ValidationError, InfrastructureError
from models.establishments import Establishment
from models.users import User
from models.categories import Category
from models.products import Product
from models.hours import OperatingHours, DeliveryHours
from models.enums import EstablishmentStatus
from schemas.establishment_schemas import (EstablishmentSummary, TimeWindow, MenuCategory, MenuProduct,
                                           MenuResponse, DeliverySettingsRequest, UpdateProfileRequest,
                                           HoursEntry)
from services.availability_service import AvailabilityService
from utils.logger import get_logger

logger = get_logger(__name__)

ZERO = Decimal("0.00")


def _window(hours) -> TimeWindow | None:
    if hours is None:
        return None
    return TimeWindow(open_time=hours.open_time, close_time=hours.close_time)


class EstablishmentService:

    # public directory

    @staticmethod
    def summarize(db: Session, establishment: Establishment, config: Settings,
                  now: datetime | None = None) -> EstablishmentSummary:
        """Public view of an establishment with its current availability."""
        availability = AvailabilityService.evaluate(db, establishment, config, now)
        return EstablishmentSummary(
            id=establishment.id,
            name=establishment.name,
            description=establishment.description,
            address=establishment.address,
            phone=establishment.phone,
            logo_url=establishment.logo_url,
            has_delivery=establishment.has_delivery,
            delivery_fee=establishment.delivery_fee,
            min_delivery_order=establishment.min_delivery_order,
            delivery_radius=establishment.delivery_radius,
            is_open=availability.is_open,
            is_delivery_open=availability.is_delivery_open,
            operating_hours=_window(availability.operating_hours),
            delivery_hours=_window(availability.delivery_hours)
        )

    @staticmethod
    def list_approved(db: Session, config: Settings, page: int = 1, limit: int = 10,
                      search: str | None = None, has_delivery: bool | None = None,
                      now: datetime | None = None) -> tuple[list[EstablishmentSummary], int]:
        query = db.query(Establishment).filter(Establishment.status == EstablishmentStatus.APPROVED)

        if search:
            query = query.filter(func.lower(Establishment.name).contains(search.lower()))

        if has_delivery:
            query = query.filter(Establishment.has_delivery == True)

        total = query.count()
        establishments = (
            query.order_by(Establishment.name.asc())
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )

        # one clock reading for the whole page
        if now is None:
            now = AvailabilityService.local_now(config)

        return [EstablishmentService.summarize(db, e, config, now) for e in establishments], total

    @staticmethod
    def get_approved(db: Session, establishment_id: int) -> Establishment:
        establishment = db.query(Establishment).filter(
            Establishment.id == establishment_id,
            Establishment.status == EstablishmentStatus.APPROVED
        ).one_or_none()

        if not establishment:
            raise NotFoundError("Establishment not found or inactive")
        return establishment

    @staticmethod
    def get_menu(db: Session, establishment_id: int, config: Settings,
                 now: datetime | None = None) -> MenuResponse:
        """Categories (by name) with their active products (by position, then name)."""
        establishment = EstablishmentService.get_approved(db, establishment_id)

        categories = (
            db.query(Category)
            .filter(Category.establishment_id == establishment.id)
            .order_by(Category.name.asc())
            .all()
        )

        menu_categories = []
        for category in categories:
            products = (
                db.query(Product)
                .filter(Product.category_id == category.id, Product.is_active == True)
                .order_by(Product.position.asc(), Product.name.asc())
                .all()
            )
            menu_categories.append(MenuCategory(
                id=category.id,
                name=category.name,
                description=category.description,
                products=[MenuProduct.model_validate(product) for product in products]
            ))

        return MenuResponse(
            establishment=EstablishmentService.summarize(db, establishment, config, now),
            categories=menu_categories,
            total_products=sum(len(category.products) for category in menu_categories)
        )

    # self-service, scoped to the calling establishment

    @staticmethod
    def get_own(db: Session, establishment_id: int) -> Establishment:
        establishment = db.query(Establishment).filter(Establishment.id == establishment_id).one_or_none()
        if not establishment:
            raise NotFoundError("Establishment not found")
        return establishment

    @staticmethod
    def _apply_delivery(establishment: Establishment, has_delivery: bool, fee, min_order, radius):
        establishment.has_delivery = has_delivery
        if has_delivery:
            establishment.delivery_fee = fee if fee is not None else ZERO
            establishment.min_delivery_order = min_order if min_order is not None else ZERO
            establishment.delivery_radius = radius if radius is not None else 0
        else:
            establishment.delivery_fee = ZERO
            establishment.min_delivery_order = ZERO
            establishment.delivery_radius = 0

    @staticmethod
    def update_profile(db: Session, establishment_id: int, body: UpdateProfileRequest) -> Establishment:
        """
        Update the public profile. The contact email is also the owner's
        login, so both are changed together.
        """
        establishment = EstablishmentService.get_own(db, establishment_id)
        email = body.email.lower().strip()

        if email != establishment.user.email:
            taken = db.query(User).filter(User.email == email, User.id != establishment.user_id).first()
            if taken:
                raise ValidationError("Email already registered")

        establishment.name = body.name
        establishment.description = body.description
        establishment.phone = body.phone
        establishment.address = body.full_address()
        establishment.zip_code = body.cep
        establishment.city = body.city
        establishment.state = body.state
        establishment.email = email
        if body.image is not None:
            establishment.logo_url = body.image
        if body.type is not None:
            establishment.type = body.type
        if body.has_delivery is not None:
            EstablishmentService._apply_delivery(
                establishment, body.has_delivery, body.delivery_fee,
                body.min_delivery_order, body.delivery_radius
            )

        establishment.user.email = email

        db.commit()
        db.refresh(establishment)

        logger.info("Establishment profile updated", extra={"establishment_id": establishment.id})
        return establishment

    @staticmethod
    def update_delivery_settings(db: Session, establishment_id: int, body: DeliverySettingsRequest) -> Establishment:
        establishment = EstablishmentService.get_own(db, establishment_id)
        EstablishmentService._apply_delivery(
            establishment, body.has_delivery, body.delivery_fee,
            body.min_delivery_order, body.delivery_radius
        )
        db.commit()
        db.refresh(establishment)

        logger.info(
            "Delivery settings updated",
            extra={"establishment_id": establishment.id, "has_delivery": establishment.has_delivery}
        )
        return establishment

    @staticmethod
    def get_hours(db: Session, establishment_id: int, model) -> list:
        return (
            db.query(model)
            .filter(model.establishment_id == establishment_id)
            .order_by(model.day_of_week.asc())
            .all()
        )

    @staticmethod
    def replace_hours(db: Session, establishment_id: int, model, entries: list[HoursEntry]) -> list:
        """
        Replace the whole weekly schedule of one hours type.

        Old rows are deleted and new ones inserted in the same transaction,
        so readers never see a half-written week.
        """
        if model not in (OperatingHours, DeliveryHours):
            raise ValueError(f"Unsupported hours model: {model!r}")

        EstablishmentService.get_own(db, establishment_id)

        try:
            db.query(model).filter(model.establishment_id == establishment_id).delete(synchronize_session=False)
            db.add_all([
                model(
                    establishment_id=establishment_id,
                    day_of_week=entry.day_of_week,
                    open_time=entry.open_time,
                    close_time=entry.close_time,
                    is_open=entry.is_open
                )
                for entry in entries
            ])
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(
                "Hours update failed - transaction rolled back",
                extra={"establishment_id": establishment_id, "table": model.__tablename__},
                exc_info=True
            )
            raise InfrastructureError("Could not save hours, please try again") from exc

        logger.info(
            "Weekly hours replaced",
            extra={"establishment_id": establishment_id, "table": model.__tablename__, "days": len(entries)}
        )
        return EstablishmentService.get_hours(db, establishment_id, model)

    # administration

    @staticmethod
    def list_for_admin(db: Session, status: EstablishmentStatus | None = None) -> list[Establishment]:
        query = db.query(Establishment)
        if status is not None:
            query = query.filter(Establishment.status == status)
        return query.order_by(Establishment.created_at.desc(), Establishment.id.desc()).all()

    @staticmethod
    def set_status(db: Session, establishment_id: int, status: EstablishmentStatus) -> Establishment:
        establishment = EstablishmentService.get_own(db, establishment_id)
        establishment.status = status
        db.commit()
        db.refresh(establishment)

        logger.info(
            "Establishment status changed",
            extra={"establishment_id": establishment.id, "status": status.value}
        )
        return establishment
