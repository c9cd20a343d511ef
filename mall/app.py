from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from mall.core.config import Settings, get_settings
from mall.repositories.json_storage import DocumentStore, JsonStore, StorageError
from mall.repositories.memory_storage import MemoryStore
from mall.routers import employees as employees_router
from mall.routers import health as health_router
from mall.routers import shops as shops_router
from mall.services.employee_service import EmployeeService
from mall.services.errors import ServiceError
from mall.services.shop_service import ShopService

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return _error(exc.status_code, exc.message)


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(500, "Internal server error")


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(400, "Invalid request body: expected a JSON object")


def build_store(settings: Settings) -> DocumentStore:
    if settings.in_memory:
        return MemoryStore()
    return JsonStore(settings.data_file)


def create_app(store: DocumentStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the API; ``store`` defaults to the one selected by ``DATA_FILE``."""
    settings = settings or get_settings()
    store = store or build_store(settings)

    app = FastAPI(title="Mall Directory API")
    app.state.settings = settings
    app.state.store = store
    app.state.shop_service = ShopService(store)
    app.state.employee_service = EmployeeService(store)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.include_router(health_router.router)
    app.include_router(shops_router.router)
    app.include_router(employees_router.router)

    # Mounted last so /api routes win over the front-end files.
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


app = create_app()
