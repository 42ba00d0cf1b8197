from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool
import traceback
from ..models import models
from ..config.settings import Settings
from ..config.security_config import clean_name, validate_password
from ..helper import auth_token
from ..helper.exceptions import AuthError, AuthServiceError, ConflictError, NotFoundError
from ..helper.hashing import Hash, dummy_password_hash
from ..helper.oauth2 import get_current_user_id, get_settings, get_user_store
from ..helper.utils import create_new_log, normalize_email, setup_logging
from ..service.user_store import UserStore

auth_user = APIRouter(tags=["user Authentication"], prefix="/auth") # create a router for user

logger = setup_logging() # initialize logger

LOG_SOURCE = "/api/backend/Auth"
INVALID_LOGIN_MESSAGE = "Invalid email or password"


def internal_error() -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")


@auth_user.post("/register", status_code=status.HTTP_201_CREATED, response_model=models.AuthResponse)
async def register(
    data: models.register,
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
):
    """
    Create an account and sign the new user in.

    The email is lowercased before it is stored; the unique index on the
    collection rejects a second account for the same address with 409.
    The response carries a bearer token and the public profile only.
    """
    email = normalize_email(data.email)
    try:
        name = clean_name(data.name)
        validate_password(data.password)

        hashed_password = await run_in_threadpool(Hash.bcrypt, data.password, settings.BCRYPT_ROUNDS)
        user = await store.create(name=name, email=email, password_hash=hashed_password)
        token = auth_token.create_access_token(user.id, settings)

        await run_in_threadpool(create_new_log, "info", f"Account for user created successfully: {email}", LOG_SOURCE)
        logger.info(f"Account for user created successfully: {email}")
        return {"token": token, "user": user.public()}

    except ConflictError:
        await run_in_threadpool(create_new_log, "warning", f"Signup attempt with existing email: {email}", LOG_SOURCE)
        logger.warning(f"Signup attempt with existing email: {email}")
        raise
    except AuthServiceError:
        raise
    except Exception:
        formatted_error = traceback.format_exc()
        await run_in_threadpool(create_new_log, "error", f"Error creating new user: {formatted_error}", LOG_SOURCE)
        logger.error(f"Error creating new user: {formatted_error}")
        raise internal_error()


@auth_user.post("/login", status_code=status.HTTP_200_OK, response_model=models.AuthResponse)
async def login(
    data: models.login,
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
):
    """Exchange email and password for a fresh bearer token."""
    email = normalize_email(data.email)
    try:
        user = await store.find_by_email(email)
        # unknown emails still pay for a bcrypt check so both failures take the same time
        if user is not None:
            stored_hash = user.password_hash
        else:
            stored_hash = await run_in_threadpool(dummy_password_hash, settings.BCRYPT_ROUNDS)
        password_ok = await run_in_threadpool(Hash.verify, stored_hash, data.password)
        if user is None or not password_ok:
            await run_in_threadpool(create_new_log, "warning", f"login attempt with invalid credentials: {email}", LOG_SOURCE)
            logger.warning(f"login attempt with invalid credentials: {email}")
            raise AuthError(INVALID_LOGIN_MESSAGE)

        token = auth_token.create_access_token(user.id, settings)
        logger.info(f"User logged in: {email}")
        return {"token": token, "user": user.public()}

    except AuthServiceError:
        raise
    except Exception:
        formatted_error = traceback.format_exc()
        await run_in_threadpool(create_new_log, "error", f"login attempt failed: {formatted_error}", LOG_SOURCE)
        logger.error(f"login attempt failed: {formatted_error}")
        raise internal_error()


@auth_user.get("/me", status_code=status.HTTP_200_OK, response_model=models.ProfileResponse)
async def me(
    user_id: str = Depends(get_current_user_id),
    store: UserStore = Depends(get_user_store),
):
    try:
        user = await store.find_by_id(user_id)
        if user is None:
            logger.warning(f"Valid token for missing user: {user_id}")
            raise NotFoundError()
        return {"user": user.public()}

    except AuthServiceError:
        raise
    except Exception:
        formatted_error = traceback.format_exc()
        await run_in_threadpool(create_new_log, "error", f"Error fetching profile: {formatted_error}", LOG_SOURCE)
        logger.error(f"Error fetching profile: {formatted_error}")
        raise internal_error()
