from datetime import datetime
from decimal import Decimal
from pydantic import EmailStr, Field, field_validator, model_validator
from models.enums import EstablishmentStatus, EstablishmentType
from schemas.common import CamelModel, RequestModel, Money, Pagination, TIME_PATTERN, normalize_phone


class HoursEntry(RequestModel):
    day_of_week: int = Field(ge=0, le=6)
    open_time: str = Field(pattern=TIME_PATTERN)
    close_time: str = Field(pattern=TIME_PATTERN)
    is_open: bool = True

    @model_validator(mode="after")
    def check_window(self):
        # Windows that cross midnight cannot be evaluated by HH:mm comparison;
        # callers split them (close at 24:00, reopen at 00:00 the next day).
        if self.is_open and self.close_time < self.open_time:
            raise ValueError(
                "close_time before open_time is not supported; split windows "
                "that cross midnight into 24:00 and 00:00 entries"
            )
        return self


class WeeklyHoursRequest(RequestModel):
    hours: list[HoursEntry] = Field(max_length=7)

    @field_validator("hours")
    @classmethod
    def unique_days(cls, value):
        days = [entry.day_of_week for entry in value]
        if len(days) != len(set(days)):
            raise ValueError("Each day_of_week may appear only once")
        return value


class HoursResponse(CamelModel):
    day_of_week: int
    open_time: str
    close_time: str
    is_open: bool


class TimeWindow(CamelModel):
    open_time: str
    close_time: str


class DeliverySettingsRequest(RequestModel):
    has_delivery: bool
    delivery_fee: Decimal = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    min_delivery_order: Decimal = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    delivery_radius: float = Field(default=0, ge=0, le=50)


class UpdateProfileRequest(RequestModel):
    name: str = Field(min_length=1)
    description: str | None = None
    phone: str = Field(min_length=1)
    street: str = Field(min_length=1)
    number: str = Field(min_length=1)
    neighborhood: str | None = None
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    cep: str = Field(min_length=1)
    email: EmailStr
    image: str | None = None
    type: EstablishmentType | None = None
    has_delivery: bool | None = None
    delivery_fee: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    min_delivery_order: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    delivery_radius: float | None = Field(default=None, ge=0, le=50)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value):
        return normalize_phone(value)

    def full_address(self) -> str:
        address = f"{self.street}, {self.number}"
        if self.neighborhood:
            address += f", {self.neighborhood}"
        return address


class EstablishmentProfile(CamelModel):
    id: int
    name: str
    description: str | None = None
    type: EstablishmentType | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    logo_url: str | None = None
    status: EstablishmentStatus
    has_delivery: bool
    delivery_fee: Money
    min_delivery_order: Money
    delivery_radius: float


class EstablishmentSummary(CamelModel):
    """Public view of an establishment, annotated with availability."""
    id: int
    name: str
    description: str | None = None
    address: str | None = None
    phone: str | None = None
    logo_url: str | None = None
    has_delivery: bool
    delivery_fee: Money
    min_delivery_order: Money
    delivery_radius: float
    is_open: bool
    # None when the establishment does not deliver
    is_delivery_open: bool | None = None
    operating_hours: TimeWindow | None = None
    delivery_hours: TimeWindow | None = None


class EstablishmentListResponse(CamelModel):
    establishments: list[EstablishmentSummary]
    pagination: Pagination


class MenuProduct(CamelModel):
    id: int
    name: str
    description: str | None = None
    price: Money
    image_url: str | None = None
    is_kosher: bool


class MenuCategory(CamelModel):
    id: int
    name: str
    description: str | None = None
    products: list[MenuProduct]


class MenuResponse(CamelModel):
    establishment: EstablishmentSummary
    categories: list[MenuCategory]
    total_products: int


class AdminEstablishment(CamelModel):
    id: int
    name: str
    email: str | None = None
    status: EstablishmentStatus
    created_at: datetime
