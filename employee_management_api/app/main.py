"""
Main entrypoint for the Employee Management API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes the routers.  ``create_app``
builds and configures the app, which is then instantiated at module
import time as ``app`` so it can be served directly, e.g.::

    uvicorn employee_management_api.app.main:app --reload

The employee store is passed to ``create_app`` (or built from
settings when omitted) and kept on ``app.state``; handlers reach it
through the ``get_employee_service`` dependency.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.compat import router as compat_router
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.exceptions import EmployeeServiceError
from .core.logging_config import setup_logging
from .stores import EmployeeStore, create_store

logger = logging.getLogger(__name__)


def add_exception_handlers(app: FastAPI) -> None:
    """Map employee errors and request validation errors to JSON responses."""

    @app.exception_handler(EmployeeServiceError)
    async def employee_error_handler(request: Request, exc: EmployeeServiceError) -> JSONResponse:
        logger.warning(
            "%s on %s %s: %s",
            exc.__class__.__name__,
            request.method,
            request.url.path,
            exc.message,
        )
        content = {"error": exc.__class__.__name__, "message": exc.message}
        if exc.details:
            content["details"] = exc.details
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Invalid request on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": "ValidationError",
                "message": "Request validation failed",
                "details": jsonable_encoder(exc.errors()),
            },
        )


def create_app(store: Optional[EmployeeStore] = None, app_settings: Settings = default_settings) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[EmployeeStore]
        Store backing the employee service.  When omitted one is built
        from ``app_settings.storage_backend``.
    app_settings : Settings
        Configuration to use; defaults to the module level settings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(app_settings.log_level, app_settings.log_file, app_settings.access_log_level)

    employee_store = store if store is not None else create_store(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Creates the database file and tables for the SQLite backend.
        employee_store.initialize()
        logger.info("%s started with %s", app_settings.project_name, type(employee_store).__name__)
        yield
        logger.info("%s shutting down", app_settings.project_name)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )
    app.state.employee_store = employee_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    add_exception_handlers(app)

    app.include_router(v1_router, prefix="/api/v1")
    app.include_router(compat_router, prefix="/employeeapi", tags=["employeeapi"])

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
