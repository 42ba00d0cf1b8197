from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from scalar_fastapi import get_scalar_api_reference
from user_auth.config.database import MongoDatabase
from user_auth.config.settings import Settings
from user_auth.helper.error_handlers import register_exception_handlers
from user_auth.helper.utils import setup_logging
from user_auth.service.user_store import UserStore
from user_auth.src.auth_user import auth_user

logger = setup_logging() # initialize logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    if not settings.SECRET_KEY:
        raise RuntimeError("SECRET_KEY must be set before the service starts")

    database = app.state.database
    await database.connect()
    try:
        await UserStore(database.users).ensure_indexes()
        logger.info("Auth service started")
        yield
    finally:
        database.close()
        logger.info("Auth service stopped")


def create_app(settings: Settings = None, database=None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="User Auth API", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database or MongoDatabase(settings)

    app.include_router(auth_user, prefix=settings.API_PREFIX)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", include_in_schema=False)
    def health_check():
        return {"status": "healthy"}

    @app.get("/scalar", include_in_schema=False)
    def get_scalar_docs():
        return get_scalar_api_reference(
            openapi_url=app.openapi_url,
            title="User Auth API"
        )

    return app


app = create_app()
