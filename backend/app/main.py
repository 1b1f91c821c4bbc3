import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.database import build_engine, create_db_and_tables
from .core.errors import register_error_handlers
from .core.logging_config import configure_logging
from .core.settings import Settings, get_settings
from .auth.passwords import PasswordHasher
from .auth.tokens import TokenService

from .auth.router import router as auth_router
from .articles.router import router as articles_router

logger = logging.getLogger(__name__)

def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application. Run with `uvicorn app.main:create_app --factory`.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    engine = build_engine(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        create_db_and_tables(engine)
        logger.info("%s started", settings.PROJECT_NAME)
        yield
        engine.dispose()

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

    app.state.settings = settings
    app.state.engine = engine
    app.state.password_hasher = PasswordHasher(settings.PASSWORD_PEPPER)
    app.state.token_service = TokenService(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(articles_router)

    @app.get("/")
    def read_root():
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    return app
