from datetime import datetime, timedelta, timezone
from jose import ExpiredSignatureError, JWTError, jwt
from ..config.settings import Settings
from .exceptions import AuthError


def create_access_token(user_id: str, settings: Settings) -> str:
    if not settings.SECRET_KEY:
        raise RuntimeError("SECRET_KEY is not configured")
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": str(user_id), "iat": issued_at, "exp": expire}
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def verify_token(token: str, settings: Settings) -> str:
    """Return the user id carried by ``token`` or raise ``AuthError``."""
    if not token or not settings.SECRET_KEY:
        raise AuthError()
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        raise AuthError("Token has expired")
    except (JWTError, ValueError, TypeError):
        raise AuthError()
    user_id = payload.get("sub")
    if not user_id or not isinstance(user_id, str):
        raise AuthError()
    return user_id
