from core.database import SessionLocal
from core.config import Settings, get_settings
from typing import Annotated
from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose import JWTError
from starlette import status
from models.enums import UserRole
from services.token_service import TokenService


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

db_dependency = Annotated[Session, Depends(get_db)]

settings_dependency = Annotated[Settings, Depends(get_settings)]

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def get_current_user(token: Annotated[str, Depends(oauth2_scheme)], config: settings_dependency):
    """
    Resolve the auth context from the bearer token.

    Returns a dict with user_id, email, user_role and establishment_id
    (None unless the caller is an establishment account).
    """
    try:
        payload = TokenService.decode_token(token, config)
    except JWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail="Could not validate credentials.")

    email: str = payload.get("sub")
    user_id: int = payload.get("id")
    user_role: str = payload.get("role")

    if email is None or user_id is None or user_role not in UserRole._value2member_map_:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail="Could not validate credentials.")

    if payload.get("type") != "access":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail="Invalid token type. Access token required.")

    return {
        "email": email,
        "user_id": user_id,
        "user_role": UserRole(user_role),
        "establishment_id": payload.get("establishment_id")
    }


user_dependency = Annotated[dict, Depends(get_current_user)]


def require_role(*roles: UserRole):
    """Dependency factory rejecting callers whose role is not in roles."""
    def checker(user: user_dependency):
        if user["user_role"] not in roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                                detail="Operation not allowed for this account type.")
        return user
    return checker


def get_current_establishment_user(user: Annotated[dict, Depends(require_role(UserRole.ESTABLISHMENT))]):
    if user.get("establishment_id") is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN,
                            detail="Token is not scoped to an establishment.")
    return user


establishment_dependency = Annotated[dict, Depends(get_current_establishment_user)]
admin_dependency = Annotated[dict, Depends(require_role(UserRole.ADMIN))]
