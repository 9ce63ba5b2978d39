"""FastAPI application entry point."""

import logging
import os
import sys
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from pymongo.database import Database

from primekart import __version__
from primekart.api import admin, health, orders, products, users
from primekart.config import Settings, get_settings
from primekart.database.ensure_indexes import ensure_indexes
from primekart.database.mongo import create_client, get_database
from primekart.middleware.exception_handlers import register_exception_handlers
from primekart.middleware.request_logging import RequestLoggingMiddleware
from primekart.services.password import PasswordHasher
from primekart.services.token_service import TokenService

logger = logging.getLogger(__name__)


def configure_logging(env: str) -> None:
    """ENV=dev: INFO level with detailed format. ENV=prod/staging: WARNING level, minimal logs."""
    is_dev = env.lower() == "dev"
    logging.basicConfig(
        level=logging.INFO if is_dev else logging.WARNING,
        format=(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
            if is_dev
            else "%(levelname)s | %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    # Enable request/exception loggers in dev mode only
    if is_dev:
        logging.getLogger("primekart.request").setLevel(logging.INFO)
        logging.getLogger("primekart.exception").setLevel(logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    client = None
    if app.state.db is None:
        client = create_client(settings)
        app.state.db = get_database(client, settings)
        logger.info("MongoDB client created for database %s", settings.MONGODB_DB_NAME)

    ensure_indexes(app.state.db)
    try:
        yield
    finally:
        if client is not None:
            client.close()
            logger.info("MongoDB client closed")


def create_app(settings: Optional[Settings] = None, db: Optional[Database] = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Configuration; loaded from the environment when omitted
        db: An existing database handle. When omitted, a client is created at
            startup from ``settings.MONGODB_URI`` and closed at shutdown.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description="PrimeKart storefront API: accounts, catalog and orders",
        version=settings.APP_VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.db = db
    app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.token_service = TokenService(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expires_delta=timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Trace middleware for request logging and correlation
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(users.router, prefix="/api")
    app.include_router(products.router, prefix="/api")
    app.include_router(orders.router, prefix="/api")
    app.include_router(admin.router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": "PrimeKart Server Running", "version": __version__}

    return app


def run() -> None:
    """Console entry point. Exits with status 1 when required settings are missing."""
    configure_logging(os.getenv("ENV", "dev"))
    try:
        settings = get_settings()
    except ValidationError as e:
        missing = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        logger.error("Invalid configuration (%s); set MONGODB_URI and SECRET_KEY", missing)
        sys.exit(1)

    import uvicorn

    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
