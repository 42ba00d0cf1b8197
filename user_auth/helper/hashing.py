import secrets
from functools import lru_cache
import bcrypt

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


@lru_cache(maxsize=None)
def dummy_password_hash(rounds: int = 12) -> str:
    """A hash of a random throwaway password, one per cost factor."""
    return Hash.bcrypt(secrets.token_urlsafe(32), rounds=rounds)


class Hash():
    @staticmethod
    def bcrypt(password: str, rounds: int = 12) -> str:
        if not password or len(password.strip()) == 0:
            raise ValueError("Password cannot be empty")
        pwd_bytes = password.encode('utf-8')
        if len(pwd_bytes) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must not exceed {BCRYPT_MAX_BYTES} bytes")
        try:
            salt = bcrypt.gensalt(rounds=rounds)
            hashed_password = bcrypt.hashpw(password=pwd_bytes, salt=salt)
        except Exception as e:
            raise ValueError("Password hashing failed") from e
        return hashed_password.decode('utf-8')

    @staticmethod
    def verify(hashed_password, plain_password) -> bool:
        try:
            if not hashed_password or not plain_password:
                return False

            # Ensure plain_password is encoded
            if isinstance(plain_password, str):
                plain_password = plain_password.encode('utf-8')

            # Ensure hashed_password is encoded
            if isinstance(hashed_password, str):
                hashed_password = hashed_password.encode('utf-8')

            if len(plain_password) > BCRYPT_MAX_BYTES:
                return False

            return bcrypt.checkpw(plain_password, hashed_password)
        except ValueError:
            return False  # malformed hash or salt
