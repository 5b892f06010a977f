from fastapi import APIRouter, Query, Request, status
from utils.deps import db_dependency, settings_dependency
from schemas.common import Pagination
from schemas.establishment_schemas import EstablishmentListResponse, MenuResponse
from services.establishment_service import EstablishmentService
from middleware.rate_limiter import limiter

router = APIRouter(
    prefix="/establishments",
    tags=["establishments"]
)


@router.get("", status_code=status.HTTP_200_OK, response_model=EstablishmentListResponse)
@limiter.limit("60/minute")
async def list_establishments(request: Request, db: db_dependency, config: settings_dependency,
                              page: int = Query(1, ge=1), limit: int = Query(10, ge=1, le=100),
                              search: str | None = Query(None, max_length=100),
                              has_delivery: bool | None = Query(None, alias="hasDelivery")):
    """
    Approved establishments ordered by name, each annotated with whether it
    is open right now and, if it delivers, whether delivery is open.
    """
    establishments, total = EstablishmentService.list_approved(
        db, config, page=page, limit=limit, search=search, has_delivery=has_delivery
    )
    return EstablishmentListResponse(
        establishments=establishments,
        pagination=Pagination.build(page, limit, total)
    )


@router.get("/{establishment_id}/menu", status_code=status.HTTP_200_OK, response_model=MenuResponse)
@limiter.limit("60/minute")
async def get_menu(request: Request, establishment_id: int, db: db_dependency, config: settings_dependency):
    return EstablishmentService.get_menu(db, establishment_id, config)
