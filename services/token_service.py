from datetime import datetime, timezone, timedelta
from jose import jwt
from core.config import Settings


class TokenService:
    """
    Issues and reads the JWT access tokens that carry the auth context
    (user id, role and, for establishment accounts, the establishment id).
    """

    @staticmethod
    def create_access_token(email: str, user_id: int, role: str, config: Settings,
                            establishment_id: int | None = None, expires_delta: timedelta = None):
        """
        Creates a signed access token.

        Args:
            email: User's email (stored as "sub")
            user_id: User's ID
            role: USER, ESTABLISHMENT or ADMIN
            config: Settings holding the signing key and algorithm
            establishment_id: Establishment scoped to the token, if any
            expires_delta: Lifetime (default: ACCESS_TOKEN_EXPIRE_MINUTES)
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)

        payload = {
            "sub": email,
            "id": user_id,
            "role": role,
            "type": "access",
            "exp": datetime.now(timezone.utc) + expires_delta
        }
        if establishment_id is not None:
            payload["establishment_id"] = establishment_id

        return jwt.encode(payload, config.SECRET_KEY, algorithm=config.ALGORITHM)

    @staticmethod
    def decode_token(token: str, config: Settings) -> dict:
        """Decode and verify a token. Raises jose.JWTError when invalid or expired."""
        return jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
