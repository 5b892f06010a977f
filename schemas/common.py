from decimal import Decimal
from typing import Annotated
from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel
import phonenumbers
import re

from core.config import settings


# Decimal on the inside, JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# "HH:mm" between 00:00 and 24:00 (24:00 marks the end of the day)
TIME_PATTERN = r"^(([01]\d|2[0-3]):[0-5]\d|24:00)$"


class CamelModel(BaseModel):
    """Responses are camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class RequestModel(CamelModel):
    """Request bodies: camelCase or snake_case keys, anything else is rejected."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(page=page, limit=limit, total=total, pages=-(-total // limit))


class MessageResponse(BaseModel):
    message: str


def validate_password_strength(value: str) -> str:
    """
    Password must be at least 8 characters and contain:
    - At least one letter
    - At least one digit
    """
    if len(value) < 8:
        raise ValueError('Password must be at least 8 characters')

    if not re.search(r'[A-Za-z]', value):
        raise ValueError('Password must contain at least one letter')

    if not re.search(r'\d', value):
        raise ValueError('Password must contain at least one digit')

    return value


def normalize_phone(value: str | None) -> str | None:
    """
    Validates a phone number with Google's phonenumbers library and returns
    it in E.164. Numbers without a country code are read in the configured
    default region, so "(11) 99999-9999" becomes "+5511999999999".
    """
    if value is None or not value.strip():
        return None
    try:
        parsed = phonenumbers.parse(value, settings.DEFAULT_PHONE_REGION)
    except phonenumbers.NumberParseException:
        raise ValueError('Invalid phone number')

    if not phonenumbers.is_valid_number(parsed):
        raise ValueError('Invalid phone number')

    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
