# inventory_api/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from inventory_api.api.api import api_router
from inventory_api.core.config import Settings, get_settings
from inventory_api.core.errors import ServiceError
from inventory_api.core.logging_config import configure_logging
from inventory_api.db.client import create_client
from inventory_api.db.init_db import init_db
from inventory_api.schemas.base import format_errors

logger = logging.getLogger(__name__)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("[API] %s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Missing or mistyped body fields are a plain 400, like service-level validation
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": format_errors(exc.errors())},
    )


def create_application(
    settings: Optional[Settings] = None,
    mongo_client: Optional[MongoClient] = None,
) -> FastAPI:
    """
    Build the app.

    When ``mongo_client`` is given the app uses it as-is and leaves closing
    it to the caller; otherwise a client is opened from ``settings`` at
    startup and closed at shutdown. A missing or unreachable store aborts
    startup.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_client = mongo_client is None
        client = create_client(settings) if owns_client else mongo_client

        app.state.mongo_client = client
        app.state.db = client[settings.database_name]
        try:
            init_db(app.state.db)
            yield
        finally:
            if owns_client:
                client.close()
                logger.info("[DB] MongoDB connection closed")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials="*" not in settings.backend_cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ERRORS ----------
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # ---------- HEALTH ----------
    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def read_root():
        return f"{settings.PROJECT_NAME} is running"

    @app.get("/healthz")
    def healthz(request: Request):
        db = request.app.state.db
        try:
            db.list_collection_names()
        except PyMongoError as exc:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "error", "detail": str(exc)[:200]},
            )
        return {"status": "ok", "database": db.name}

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_application()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run("inventory_api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
