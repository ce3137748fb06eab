import logging
import os
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from faq_service.api import routes
from faq_service.config import Settings, settings
from faq_service.exceptions import FAQServiceError, StorageError
from faq_service.logging_config import LoggingMiddleware, setup_logging
from faq_service.services.faq_store import FAQStore
from faq_service.services.self_test import run_write_self_test

logger = logging.getLogger("faq_service")


def _describe_validation_errors(errors) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts) or "Invalid request"


def describe_routes(app: FastAPI) -> List[str]:
    """One "METHODS path" line per documented endpoint, read from the OpenAPI schema"""
    lines = []
    for path, operations in app.openapi().get("paths", {}).items():
        methods = ",".join(sorted(method.upper() for method in operations))
        lines.append(f"{methods:<7} {path}")
    return lines


def create_app(app_settings: Settings = settings, store: Optional[FAQStore] = None) -> FastAPI:
    """
    Build the FastAPI application around a storage handle.

    A store can be passed in (tests); otherwise one is opened on the
    configured database file.
    """
    store = store or FAQStore.from_url(app_settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(app_settings.log_level, app_settings.log_file)
        logger.info(f"Database: {store.engine.url.database}")

        try:
            store.ensure_schema()
        except StorageError as e:
            logger.critical(f"Database connection error: {e.details or e.error}")
            raise

        if app_settings.startup_self_test:
            run_write_self_test(store)

        logger.info("Available routes:")
        for line in describe_routes(app):
            logger.info(f"   {line}")

        yield

        store.dispose()
        logger.info(f"{app_settings.app_name} stopped")

    # Create FastAPI app
    app = FastAPI(
        title=app_settings.app_name,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.settings = app_settings

    # Add middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    @app.exception_handler(FAQServiceError)
    async def faq_service_error_handler(request: Request, exc: FAQServiceError):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(expose_details=app_settings.expose_error_details),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={
                "error": "Validation failed",
                "message": _describe_validation_errors(exc.errors()),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # Include routers
    app.include_router(routes.router)
    if app_settings.enable_debug_routes:
        app.include_router(routes.debug_router)

    @app.get("/")
    def read_root():
        if os.path.isfile(app_settings.index_file):
            return FileResponse(app_settings.index_file)
        return {
            "message": f"Welcome to {app_settings.app_name}",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


def run():
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
