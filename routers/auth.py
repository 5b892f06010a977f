from fastapi import APIRouter, Depends, Request
from fastapi.security import OAuth2PasswordRequestForm
from starlette import status
from utils.deps import db_dependency, settings_dependency
from schemas.auth_schemas import Token, CreateUserRequest, CreateEstablishmentAccountRequest, UserResponse
from services.auth_service import AuthService
from services.token_service import TokenService
from middleware.rate_limiter import limiter
from utils.logger import get_logger, sanitize_log_data

# Setup logger
logger = get_logger(__name__)


router = APIRouter(
    prefix="/auth",
    tags=["auth"]
)


@router.post("/token", response_model=Token)
@limiter.limit("5/minute")
async def login_for_access_token(request: Request, db: db_dependency, config: settings_dependency,
                                 form_data: OAuth2PasswordRequestForm = Depends()):
    user = AuthService.authenticate_user(form_data.username, form_data.password, db)

    establishment_id = user.establishment.id if user.establishment else None
    access_token = TokenService.create_access_token(
        user.email, user.id, user.role.value, config, establishment_id=establishment_id
    )

    logger.info(
        "User logged in successfully",
        extra={"user_id": user.id, "role": user.role.value}
    )

    return {"access_token": access_token, "token_type": "bearer"}


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
@limiter.limit("3/minute")
async def register_user(request: Request, body: CreateUserRequest, db: db_dependency):
    user = AuthService.create_user(body, db)

    logger.info(
        "User registered successfully",
        extra=sanitize_log_data({"user_id": user.id, "email": user.email})
    )

    return UserResponse(id=user.id, email=user.email, name=user.name, phone=user.phone, role=user.role)


@router.post("/register-establishment", status_code=status.HTTP_201_CREATED)
@limiter.limit("3/minute")
async def register_establishment(request: Request, body: CreateEstablishmentAccountRequest, db: db_dependency):
    user = AuthService.create_establishment_account(body, db)

    logger.info(
        "Establishment registered, awaiting approval",
        extra={"user_id": user.id, "establishment_id": user.establishment.id}
    )

    return {
        "message": "Establishment registered. Awaiting administrator approval.",
        "userId": user.id,
        "establishmentId": user.establishment.id
    }
