from fastapi import APIRouter, Query
from utils.deps import db_dependency, admin_dependency
from models.enums import EstablishmentStatus
from schemas.establishment_schemas import AdminEstablishment
from services.establishment_service import EstablishmentService

router = APIRouter(
    prefix="/admin",
    tags=["admin"]
)


@router.get("/establishments", response_model=list[AdminEstablishment])
async def list_establishments(user: admin_dependency, db: db_dependency,
                              establishment_status: EstablishmentStatus | None = Query(None, alias="status")):
    return EstablishmentService.list_for_admin(db, establishment_status)


@router.patch("/establishments/{establishment_id}/approve", response_model=AdminEstablishment)
async def approve_establishment(establishment_id: int, user: admin_dependency, db: db_dependency):
    return EstablishmentService.set_status(db, establishment_id, EstablishmentStatus.APPROVED)


@router.patch("/establishments/{establishment_id}/reject", response_model=AdminEstablishment)
async def reject_establishment(establishment_id: int, user: admin_dependency, db: db_dependency):
    return EstablishmentService.set_status(db, establishment_id, EstablishmentStatus.REJECTED)
