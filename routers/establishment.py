from fastapi import APIRouter, Request, status
from utils.deps import db_dependency, establishment_dependency
from models.hours import OperatingHours, DeliveryHours
from schemas.common import MessageResponse
from schemas.establishment_schemas import (EstablishmentProfile, UpdateProfileRequest, DeliverySettingsRequest,
                                           WeeklyHoursRequest, HoursResponse)
from schemas.menu_schemas import CategoryRequest, CategoryResponse, ProductRequest, ProductResponse
from services.establishment_service import EstablishmentService
from services.menu_service import MenuService
from middleware.rate_limiter import limiter

# Endpoints for the logged-in establishment; every call is scoped to the
# establishment id carried by the access token.
router = APIRouter(
    prefix="/establishment",
    tags=["establishment"]
)


@router.get("/profile", response_model=EstablishmentProfile)
async def get_profile(user: establishment_dependency, db: db_dependency):
    return EstablishmentService.get_own(db, user["establishment_id"])


@router.patch("/profile", response_model=EstablishmentProfile)
@limiter.limit("10/minute")
async def update_profile(request: Request, body: UpdateProfileRequest, user: establishment_dependency,
                         db: db_dependency):
    return EstablishmentService.update_profile(db, user["establishment_id"], body)


@router.put("/delivery-settings", response_model=EstablishmentProfile)
async def update_delivery_settings(body: DeliverySettingsRequest, user: establishment_dependency,
                                   db: db_dependency):
    return EstablishmentService.update_delivery_settings(db, user["establishment_id"], body)


@router.get("/operating-hours", response_model=list[HoursResponse])
async def get_operating_hours(user: establishment_dependency, db: db_dependency):
    return EstablishmentService.get_hours(db, user["establishment_id"], OperatingHours)


@router.put("/operating-hours", response_model=list[HoursResponse])
async def replace_operating_hours(body: WeeklyHoursRequest, user: establishment_dependency, db: db_dependency):
    return EstablishmentService.replace_hours(db, user["establishment_id"], OperatingHours, body.hours)


@router.get("/delivery-hours", response_model=list[HoursResponse])
async def get_delivery_hours(user: establishment_dependency, db: db_dependency):
    return EstablishmentService.get_hours(db, user["establishment_id"], DeliveryHours)


@router.put("/delivery-hours", response_model=list[HoursResponse])
async def replace_delivery_hours(body: WeeklyHoursRequest, user: establishment_dependency, db: db_dependency):
    return EstablishmentService.replace_hours(db, user["establishment_id"], DeliveryHours, body.hours)


# categories

@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(user: establishment_dependency, db: db_dependency):
    return MenuService.list_categories(db, user["establishment_id"])


@router.post("/categories", status_code=status.HTTP_201_CREATED, response_model=CategoryResponse)
async def create_category(body: CategoryRequest, user: establishment_dependency, db: db_dependency):
    return MenuService.create_category(db, user["establishment_id"], body)


@router.patch("/categories/{category_id}", response_model=CategoryResponse)
async def update_category(category_id: int, body: CategoryRequest, user: establishment_dependency,
                          db: db_dependency):
    return MenuService.update_category(db, user["establishment_id"], category_id, body)


@router.delete("/categories/{category_id}", response_model=MessageResponse)
async def delete_category(category_id: int, user: establishment_dependency, db: db_dependency):
    MenuService.delete_category(db, user["establishment_id"], category_id)
    return {"message": "Category deleted"}


# products

@router.get("/products", response_model=list[ProductResponse])
async def list_products(user: establishment_dependency, db: db_dependency):
    return MenuService.list_products(db, user["establishment_id"])


@router.post("/products", status_code=status.HTTP_201_CREATED, response_model=ProductResponse)
async def create_product(body: ProductRequest, user: establishment_dependency, db: db_dependency):
    return MenuService.create_product(db, user["establishment_id"], body)


@router.patch("/products/{product_id}", response_model=ProductResponse)
async def update_product(product_id: int, body: ProductRequest, user: establishment_dependency,
                         db: db_dependency):
    return MenuService.update_product(db, user["establishment_id"], product_id, body)


@router.delete("/products/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: int, user: establishment_dependency, db: db_dependency):
    deleted = MenuService.delete_product(db, user["establishment_id"], product_id)
    if deleted:
        return {"message": "Product deleted"}
    return {"message": "Product has orders and was deactivated instead"}
