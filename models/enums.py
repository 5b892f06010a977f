import enum


class UserRole(str, enum.Enum):
    USER = "USER"
    ESTABLISHMENT = "ESTABLISHMENT"
    ADMIN = "ADMIN"


class EstablishmentStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class EstablishmentType(str, enum.Enum):
    RESTAURANT = "RESTAURANT"
    BUFFET = "BUFFET"
    SWEET_SHOP = "SWEET_SHOP"
    OTHER = "OTHER"


class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PREPARING = "PREPARING"
    READY = "READY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
