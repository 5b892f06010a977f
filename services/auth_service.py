from utils.hashing import verify_password, hash_password
from models.users import User
from models.establishments import Establishment
from models.enums import UserRole, EstablishmentStatus
from schemas.auth_schemas import CreateUserRequest, CreateEstablishmentAccountRequest
from sqlalchemy.orm import Session
from fastapi import HTTPException
from starlette import status
from utils.logger import get_logger

logger = get_logger(__name__)

class AuthService:

    @staticmethod
    def _ensure_email_available(email: str, db: Session):
        existing_user = db.query(User).filter(User.email == email).first()
        if existing_user:
            logger.warning(
                "Registration attempt with existing email",
                extra={"email": email}
            )
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered"
            )

    @staticmethod
    def create_user(request: CreateUserRequest, db: Session) -> User:
        """Registers a customer account (role USER)."""
        email = request.email.lower().strip()
        AuthService._ensure_email_available(email, db)

        model = User(
            email=email,
            name=request.name,
            phone=request.phone,
            hashed_password=hash_password(request.password),
            role=UserRole.USER
        )

        db.add(model)
        db.commit()
        db.refresh(model)
        return model

    @staticmethod
    def create_establishment_account(request: CreateEstablishmentAccountRequest, db: Session) -> User:
        """
        Registers an establishment owner together with an empty establishment.

        The establishment starts PENDING; it cannot log in, be listed or
        receive orders until an administrator approves it.
        """
        email = request.email.lower().strip()
        AuthService._ensure_email_available(email, db)

        model = User(
            email=email,
            name=request.name,
            hashed_password=hash_password(request.password),
            role=UserRole.ESTABLISHMENT,
            establishment=Establishment(
                name=request.name,
                email=email,
                status=EstablishmentStatus.PENDING
            )
        )

        db.add(model)
        db.commit()
        db.refresh(model)
        return model

    @staticmethod
    def authenticate_user(email: str, password: str, db: Session) -> User:
        user = db.query(User).filter(User.email == email.lower().strip()).first()

        if not user:
            logger.warning(
            "Login failed - user not found",
            extra={"email": email}
            )
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate user.")

        if not user.is_active:
            logger.warning(
            "Login failed - inactive account",
            extra={"email": email}
            )
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate user.")

        if not verify_password(password, user.hashed_password):
            logger.warning(
                "Login failed - invalid password",
                extra={"user_id": user.id, "email": email}
            )
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate user.")

        if user.role == UserRole.ESTABLISHMENT:
            establishment = user.establishment
            if establishment is None or establishment.status != EstablishmentStatus.APPROVED:
                logger.warning(
                    "Login refused - establishment awaiting approval",
                    extra={"user_id": user.id}
                )
                raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                detail="Establishment awaiting approval.")

        logger.debug(
            "User authenticated successfully",
            extra={"user_id": user.id, "email": email}
        )

        return user

    @staticmethod
    def get_active_user_by_id(db: Session, user_id: int) -> User | None:
        model = db.query(User).filter(User.id == user_id, User.is_active == True).one_or_none()

        return model
