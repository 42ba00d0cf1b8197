from typing import Dict, Optional
from fastapi import status


class AuthServiceError(Exception):
    """Base class for errors that map onto a client-facing HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"
    headers: Optional[Dict[str, str]] = None

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(AuthServiceError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Email already registered"


class AuthError(AuthServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"
    headers = {"WWW-Authenticate": "Bearer"}


class NotFoundError(AuthServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"
