"""
Populate a database with demo data: an administrator, a restaurant that
delivers and a bakery that only serves pickup, with weekly hours and a
small menu.

Usage:
    python -m seed
"""

from decimal import Decimal
from sqlalchemy.orm import Session
import models  # noqa: F401
from core.database import Base, SessionLocal, engine
from core.config import settings
from core.logging_config import setup_logging
from models import (User, Establishment, Category, Product, OperatingHours, DeliveryHours,
                    UserRole, EstablishmentStatus, EstablishmentType)
from utils.hashing import hash_password
from utils.logger import get_logger

logger = get_logger(__name__)

# (day_of_week, open, close); 0 = Sunday
RESTAURANT_HOURS = [(0, "11:00", "22:00")] + [(d, "11:00", "23:00") for d in range(1, 5)] + \
                   [(5, "11:00", "24:00"), (6, "11:00", "24:00")]
RESTAURANT_DELIVERY = [(0, "18:00", "22:00")] + [(d, "18:00", "22:30") for d in range(1, 5)] + \
                      [(5, "18:00", "23:00"), (6, "18:00", "23:00")]
BAKERY_HOURS = [(0, "08:00", "18:00")] + [(d, "06:00", "20:00") for d in range(1, 6)] + [(6, "08:00", "18:00")]


def _owner(email: str, password: str, name: str, phone: str | None = None, role=UserRole.ESTABLISHMENT) -> User:
    return User(email=email, hashed_password=hash_password(password), name=name, phone=phone, role=role)


def seed(db: Session) -> dict:
    """Insert the demo rows. Returns the created users keyed by short name."""
    if db.query(User).filter(User.email == "admin@bekosher.com").first():
        logger.info("Seed skipped - database already populated")
        return {}

    admin = _owner("admin@bekosher.com", "admin1234", "BeKosher Administrator", role=UserRole.ADMIN)

    restaurant_owner = _owner("restaurante@bekosher.com", "restaurante123", "Restaurante Kosher",
                              phone="+5511999999999")
    restaurant = Establishment(
        user=restaurant_owner,
        name="Restaurante Kosher Delícias",
        description="Traditional and modern kosher dishes.",
        type=EstablishmentType.RESTAURANT,
        email=restaurant_owner.email,
        phone="+5511999999999",
        address="Rua das Delícias, 123 - Bela Vista",
        city="São Paulo",
        state="SP",
        zip_code="01310-100",
        status=EstablishmentStatus.APPROVED,
        has_delivery=True,
        delivery_fee=Decimal("5.90"),
        min_delivery_order=Decimal("30.00"),
        delivery_radius=8.0,
        operating_hours=[OperatingHours(day_of_week=d, open_time=o, close_time=c) for d, o, c in RESTAURANT_HOURS],
        delivery_hours=[DeliveryHours(day_of_week=d, open_time=o, close_time=c) for d, o, c in RESTAURANT_DELIVERY],
    )

    bakery_owner = _owner("padaria@bekosher.com", "padaria123", "Padaria Kosher", phone="+5511888888888")
    bakery = Establishment(
        user=bakery_owner,
        name="Padaria Kosher Pão & Cia",
        description="Fresh kosher bread and sweets every day.",
        type=EstablishmentType.SWEET_SHOP,
        email=bakery_owner.email,
        phone="+5511888888888",
        address="Av. Paulista, 456 - Jardins",
        city="São Paulo",
        state="SP",
        zip_code="01310-200",
        status=EstablishmentStatus.APPROVED,
        has_delivery=False,
        operating_hours=[OperatingHours(day_of_week=d, open_time=o, close_time=c) for d, o, c in BAKERY_HOURS],
    )

    mains = Category(establishment=restaurant, name="Main courses", description="Meat and fish")
    breads = Category(establishment=bakery, name="Breads")
    products = [
        Product(establishment=restaurant, category=mains, name="Grilled salmon", price=Decimal("48.90"), position=1),
        Product(establishment=restaurant, category=mains, name="Beef brisket", price=Decimal("62.00"), position=2),
        Product(establishment=bakery, category=breads, name="Challah", price=Decimal("18.50")),
        Product(establishment=bakery, category=breads, name="Bagel", price=Decimal("6.00")),
    ]

    db.add_all([admin, restaurant_owner, bakery_owner, restaurant, bakery, mains, breads, *products])
    db.commit()

    logger.info("Seed complete", extra={"establishments": 2, "products": len(products)})
    return {"admin": admin, "restaurant": restaurant_owner, "bakery": bakery_owner}


if __name__ == "__main__":
    setup_logging(log_level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as session:
        seed(session)
