"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from poetsite.api import pages
from poetsite.api.gate import RouteGateMiddleware
from poetsite.api.v1 import router as v1_router
from poetsite.core.auth_config import AuthConfig
from poetsite.core.config import Settings, get_settings
from poetsite.core.errors import AppError, StoreError

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    error = StoreError()
    return JSONResponse(status_code=error.status_code, content={"message": error.message})


def create_app(config: Settings | None = None) -> FastAPI:
    """Build the application; the auth config is fixed here for the process lifetime."""
    config = config or get_settings()
    auth_config = AuthConfig.from_settings(config)

    application = FastAPI(
        title="Poetsite API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.auth_config = auth_config

    application.add_middleware(RouteGateMiddleware, auth_config=auth_config)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if config.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(AppError, app_error_handler)
    application.add_exception_handler(SQLAlchemyError, store_error_handler)

    application.include_router(pages.router, tags=["pages"])
    application.include_router(v1_router, prefix=config.API_V1_PREFIX)

    @application.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Poetsite API"}

    return application


app = create_app()
