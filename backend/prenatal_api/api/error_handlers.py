"""Error Handlers — global exception handlers for the Prenatal Companion API.

Invariants:
    - PrenatalAPIError → {"error": message} with the error's HTTP status
    - Router-level 405 (methods no route declares) → same body as MethodNotAllowedError
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → never leaks internal details, still carries CORS headers

Design Decisions:
    - Three-layer handler: domain (PrenatalAPIError), validation (Pydantic), catch-all
    - Client errors logged at warning: a bad weeks value is not an incident
    - Catch-all response sets CORS headers itself: it is produced by the outermost
      server-error middleware, outside the header middleware
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from prenatal_api.api.cors_headers import CORS_HEADERS
from prenatal_api.core.errors import ErrorSeverity, MethodNotAllowedError, PrenatalAPIError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PrenatalAPIError)
    async def domain_error_handler(request: Request, exc: PrenatalAPIError):
        """Handle all Prenatal Companion domain errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def router_http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Give router 405s (e.g. TRACE) the same body as the content routes."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            error = MethodNotAllowedError(request.method)
            logger.warning(
                f"MethodNotAllowedError: {request.method} {request.url.path}",
                extra={"error_code": error.code, "path": request.url.path},
            )
            return JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return await http_exception_handler(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "An unexpected error occurred"},
            headers=CORS_HEADERS,
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": "Invalid request data",
        "severity": ErrorSeverity.ERROR.value,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
