from decimal import Decimal
from pydantic import Field
from schemas.common import CamelModel, RequestModel, Money


class CategoryRequest(RequestModel):
    name: str = Field(min_length=1)
    description: str | None = None


class ProductRequest(RequestModel):
    name: str = Field(min_length=1)
    description: str | None = None
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    category_id: int
    image_url: str | None = None
    is_active: bool = True
    is_kosher: bool = True
    position: int = Field(default=0, ge=0)


class ProductResponse(CamelModel):
    id: int
    category_id: int
    name: str
    description: str | None = None
    price: Money
    image_url: str | None = None
    is_active: bool
    is_kosher: bool
    position: int


class CategoryResponse(CamelModel):
    id: int
    name: str
    description: str | None = None
    products: list[ProductResponse] = []
