import os
from typing import List, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()  # Load environment variables from .env file


def build_mongo_uri() -> str:
    """Resolve the MongoDB URI from the environment (explicit URI, docker or local)."""
    explicit_uri = os.getenv("MONGO_URI")
    if explicit_uri:
        return explicit_uri

    DEVELOPMENT_ENV = os.getenv("DEVELOPMENT_ENV", "local")
    if DEVELOPMENT_ENV == "docker":
        MONGO_USER = os.getenv("MONGO_USER", "root")
        MONGO_PASS = os.getenv("MONGO_PASS", "example")
        MONGO_HOST = os.getenv("MONGO_HOST", "mongo")
        MONGO_PORT = os.getenv("MONGO_PORT", "27017")
        return f"mongodb://{MONGO_USER}:{MONGO_PASS}@{MONGO_HOST}:{MONGO_PORT}/"

    MONGO_HOST = os.getenv("MONGO_HOST", "localhost")
    MONGO_PORT = os.getenv("MONGO_PORT", "27017")
    return f"mongodb://{MONGO_HOST}:{MONGO_PORT}/"


class Settings(BaseModel):
    """Runtime configuration, read once by the application factory."""

    # database
    MONGO_URI: str = Field("mongodb://localhost:27017/", title="MongoDB connection URI")
    MONGO_DB: str = Field("auth", title="Database name")
    MONGO_USER_COLLECTION: str = Field("users", title="User collection name")
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = Field(5000, gt=0)
    MONGO_CONNECT_TIMEOUT_MS: int = Field(5000, gt=0)
    MONGO_SOCKET_TIMEOUT_MS: int = Field(10000, gt=0)
    MONGO_MAX_POOL_SIZE: int = Field(50, gt=0)

    # tokens
    SECRET_KEY: Optional[str] = Field(None, title="JWT signing secret")
    ALGORITHM: str = Field("HS256", title="JWT signing algorithm")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(60, gt=0)

    # password hashing
    BCRYPT_ROUNDS: int = Field(12, ge=4, le=31)

    # http
    API_PREFIX: str = Field("/api", title="Prefix for all API routes")
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        cors_origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            MONGO_URI=build_mongo_uri(),
            MONGO_DB=os.getenv("MONGO_DB", "auth"),
            MONGO_USER_COLLECTION=os.getenv("MONGO_USER_COLLECTION", "users"),
            MONGO_SERVER_SELECTION_TIMEOUT_MS=int(os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")),
            MONGO_CONNECT_TIMEOUT_MS=int(os.getenv("MONGO_CONNECT_TIMEOUT_MS", "5000")),
            MONGO_SOCKET_TIMEOUT_MS=int(os.getenv("MONGO_SOCKET_TIMEOUT_MS", "10000")),
            MONGO_MAX_POOL_SIZE=int(os.getenv("MONGO_MAX_POOL_SIZE", "50")),
            SECRET_KEY=os.getenv("SECRET_KEY"),
            ALGORITHM=os.getenv("ALGORITHM", "HS256"),
            ACCESS_TOKEN_EXPIRE_MINUTES=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")),
            BCRYPT_ROUNDS=int(os.getenv("BCRYPT_ROUNDS", "12")),
            API_PREFIX=os.getenv("API_PREFIX", "/api"),
            CORS_ORIGINS=[origin.strip() for origin in cors_origins.split(",") if origin.strip()],
        )
