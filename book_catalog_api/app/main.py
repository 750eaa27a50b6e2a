"""
Main entrypoint for the Book Catalog API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory stores and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn book_catalog_api.app.main:app --reload

Every error response has the shape ``{"message": "..."}``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import BookStore, UserStore


logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only field locations are logged; inputs may contain passwords.
    locations = [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]
    logger.info("Rejected request body on %s: %s", request.url.path, locations)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Request body must be a JSON object with the expected fields."},
    )


def create_app(
    book_store: Optional[BookStore] = None,
    user_store: Optional[UserStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call gets its own stores unless existing ones are passed in,
    so tests can build isolated applications.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.book_store = book_store if book_store is not None else BookStore()
    app.state.user_store = user_store if user_store is not None else UserStore()

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
