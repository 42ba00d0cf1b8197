from typing import Optional
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from . import auth_token
from .exceptions import AuthError
from .utils import setup_logging
from ..config.settings import Settings
from ..service.user_store import UserStore

# this is the route/url from fastapi will be able to fetch the token
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)
logger = setup_logging() # initialize logger


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_store(request: Request) -> UserStore:
    return UserStore(request.app.state.database.users)


def get_current_user_id(
    token: Optional[str] = Depends(oauth2_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    if not token:
        raise AuthError("Not authenticated")
    try:
        return auth_token.verify_token(token, settings)
    except AuthError as e:
        logger.warning(f"Rejected bearer token: {e.message}")
        raise
