from pydantic import BaseModel, EmailStr, Field, field_validator
from models.enums import UserRole
from schemas.common import CamelModel, RequestModel, validate_password_strength, normalize_phone


class Token(BaseModel):
    access_token: str
    token_type: str


class CreateUserRequest(RequestModel):
    email: EmailStr
    password: str
    name: str = Field(min_length=1)
    phone: str | None = None

    @field_validator('password')
    @classmethod
    def validate_password(cls, value):
        return validate_password_strength(value)

    @field_validator('phone')
    @classmethod
    def validate_phone(cls, value):
        return normalize_phone(value)


class CreateEstablishmentAccountRequest(RequestModel):
    """
    Self-registration of an establishment. Only credentials are collected
    here; the profile is completed later and the account stays PENDING
    until an administrator approves it.
    """
    email: EmailStr
    password: str
    name: str = Field(default="New Establishment", min_length=1)

    @field_validator('password')
    @classmethod
    def validate_password(cls, value):
        return validate_password_strength(value)


class UserResponse(CamelModel):
    id: int
    email: str
    name: str
    phone: str | None = None
    role: UserRole
    establishment_id: int | None = None
