from slowapi import Limiter
from slowapi.util import get_remote_address
from fastapi import Request
from jose import JWTError
from core.config import settings
from services.token_service import TokenService


def get_user_id(request: Request):
    """Rate-limit authenticated callers per user, anonymous ones per IP."""
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        try:
            payload = TokenService.decode_token(auth_header[len("Bearer "):], settings)
            user_id = payload.get("id")
            if user_id:
                return f"user:{user_id}"
        except JWTError:
            pass

    return get_remote_address(request)


limiter = Limiter(
    key_func=get_user_id,
    default_limits=["200/hour"],
    enabled=settings.ENV != "testing"
)
