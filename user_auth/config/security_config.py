"""
Security configuration and input validation for the authentication system.
"""
import re
from ..helper.exceptions import ValidationError
from ..helper.hashing import BCRYPT_MAX_BYTES

class SecurityConfig:
    """Security configuration class"""

    # Password requirements
    MIN_PASSWORD_LENGTH = 6
    MAX_PASSWORD_BYTES = BCRYPT_MAX_BYTES
    # set all these according to your needs
    REQUIRE_UPPERCASE = False
    REQUIRE_LOWERCASE = False
    REQUIRE_NUMBERS = False
    REQUIRE_SPECIAL_CHARS = False

def validate_password(password: str) -> bool:
    """
    Validate password against security requirements.

    Args:
        password: The password to validate

    Returns:
        bool: True if password meets requirements

    Raises:
        ValidationError: If password doesn't meet requirements
    """
    if not password or not password.strip():
        raise ValidationError("Password is required")

    if len(password) < SecurityConfig.MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {SecurityConfig.MIN_PASSWORD_LENGTH} characters long")

    if len(password.encode("utf-8")) > SecurityConfig.MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must not exceed {SecurityConfig.MAX_PASSWORD_BYTES} bytes")

    if SecurityConfig.REQUIRE_UPPERCASE and not re.search(r'[A-Z]', password):
        raise ValidationError("Password must contain at least one uppercase letter")

    if SecurityConfig.REQUIRE_LOWERCASE and not re.search(r'[a-z]', password):
        raise ValidationError("Password must contain at least one lowercase letter")

    if SecurityConfig.REQUIRE_NUMBERS and not re.search(r'\d', password):
        raise ValidationError("Password must contain at least one number")

    if SecurityConfig.REQUIRE_SPECIAL_CHARS and not re.search(r'[!@#$%^&*(),.?":{}|<>]', password):
        raise ValidationError("Password must contain at least one special character")

    return True

def clean_name(name: str) -> str:
    """
    Strip a display name and check it is usable.

    Raises:
        ValidationError: If the name is blank
    """
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Name is required")
    return cleaned
