from datetime import datetime
from decimal import Decimal
import pytest
from sqlalchemy.exc import OperationalError
from core.config import settings
from core.exceptions import NotFoundError, ValidationError, InfrastructureError
from models import OperatingHours, DeliveryHours, EstablishmentStatus
from schemas.establishment_schemas import DeliverySettingsRequest, HoursEntry, UpdateProfileRequest
from services.establishment_service import EstablishmentService
from tests.factories import create_establishment


def test_list_approved_skips_pending(session, restaurant, bakery):
    create_establishment(session, "pending@example.com", "Awaiting", status=EstablishmentStatus.PENDING)

    summaries, total = EstablishmentService.list_approved(session, settings)

    assert total == 2
    assert [s.name for s in summaries] == ["Bread & Co", "Kosher Delights"]


def test_list_approved_search_and_delivery_filter(session, restaurant, bakery):
    summaries, total = EstablishmentService.list_approved(session, settings, search="KOSHER")
    assert total == 1
    assert summaries[0].id == restaurant.id

    summaries, total = EstablishmentService.list_approved(session, settings, has_delivery=True)
    assert [s.id for s in summaries] == [restaurant.id]


def test_summaries_carry_availability(session, restaurant, bakery):
    now = datetime(2024, 1, 3, 12, 0)

    summaries, _ = EstablishmentService.list_approved(session, settings, now=now)
    by_name = {s.name: s for s in summaries}

    assert by_name["Kosher Delights"].is_open is True
    assert by_name["Kosher Delights"].is_delivery_open is True
    assert by_name["Kosher Delights"].operating_hours.close_time == "24:00"
    assert by_name["Bread & Co"].is_open is False
    assert by_name["Bread & Co"].is_delivery_open is None
    assert by_name["Bread & Co"].operating_hours is None


def test_menu_lists_only_active_products_in_position_order(session, restaurant):
    menu = EstablishmentService.get_menu(session, restaurant.id, settings, now=datetime(2024, 1, 3, 12, 0))

    assert [category.name for category in menu.categories] == ["Mains"]
    assert [p.name for p in menu.categories[0].products] == ["Grilled salmon", "Falafel plate"]
    assert menu.total_products == 2


def test_menu_of_pending_establishment_not_found(session):
    pending = create_establishment(session, "pending@example.com", "Awaiting", status=EstablishmentStatus.PENDING)

    with pytest.raises(NotFoundError):
        EstablishmentService.get_menu(session, pending.id, settings)


def test_disabling_delivery_resets_fees(session, restaurant):
    establishment = EstablishmentService.update_delivery_settings(
        session, restaurant.id, DeliverySettingsRequest(has_delivery=False, delivery_fee="9.00")
    )

    assert establishment.has_delivery is False
    assert establishment.delivery_fee == Decimal("0.00")
    assert establishment.min_delivery_order == Decimal("0.00")


def test_update_profile_changes_login_email(session, restaurant):
    body = UpdateProfileRequest(
        name="Kosher Delights II", phone="(11) 99999-9999", street="Rua Augusta", number="500",
        neighborhood="Consolacao", city="Sao Paulo", state="SP", cep="01305-000",
        email="New@Example.com"
    )

    establishment = EstablishmentService.update_profile(session, restaurant.id, body)

    assert establishment.address == "Rua Augusta, 500, Consolacao"
    assert establishment.phone == "+5511999999999"
    assert establishment.email == "new@example.com"
    assert establishment.user.email == "new@example.com"


def test_update_profile_rejects_taken_email(session, restaurant, customer):
    body = UpdateProfileRequest(
        name="Kosher Delights", phone="(11) 99999-9999", street="Rua Augusta", number="500",
        city="Sao Paulo", state="SP", cep="01305-000", email=customer.email
    )

    with pytest.raises(ValidationError):
        EstablishmentService.update_profile(session, restaurant.id, body)


def test_replace_hours_swaps_whole_week(session, restaurant):
    entries = [
        HoursEntry(day_of_week=1, open_time="09:00", close_time="17:00"),
        HoursEntry(day_of_week=2, open_time="09:00", close_time="17:00", is_open=False),
    ]

    rows = EstablishmentService.replace_hours(session, restaurant.id, OperatingHours, entries)

    assert [(r.day_of_week, r.open_time, r.is_open) for r in rows] == [(1, "09:00", True), (2, "09:00", False)]
    # delivery hours untouched
    assert len(EstablishmentService.get_hours(session, restaurant.id, DeliveryHours)) == 7


def test_replace_hours_failure_keeps_old_week(session, restaurant, monkeypatch):
    def failing_commit():
        raise OperationalError("INSERT INTO operating_hours", {}, Exception("disk I/O error"))

    monkeypatch.setattr(session, "commit", failing_commit)

    with pytest.raises(InfrastructureError):
        EstablishmentService.replace_hours(
            session, restaurant.id, OperatingHours,
            [HoursEntry(day_of_week=1, open_time="09:00", close_time="17:00")]
        )

    monkeypatch.undo()
    assert len(EstablishmentService.get_hours(session, restaurant.id, OperatingHours)) == 7


def test_set_status(session):
    pending = create_establishment(session, "pending@example.com", "Awaiting", status=EstablishmentStatus.PENDING)

    assert [e.id for e in EstablishmentService.list_for_admin(session, EstablishmentStatus.PENDING)] == [pending.id]

    approved = EstablishmentService.set_status(session, pending.id, EstablishmentStatus.APPROVED)
    assert approved.status == EstablishmentStatus.APPROVED
    assert EstablishmentService.list_for_admin(session, EstablishmentStatus.PENDING) == []
