"""Global exception handlers for FastAPI.

Every failure leaves the service as an error ``Outcome`` envelope.
Internal details (stack traces) are suppressed unless DEBUG is on.
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from outcome_envelope.config import settings
from outcome_envelope.core.errors import AppError
from outcome_envelope.schemas.outcome import Outcome, build_error

logger = logging.getLogger(__name__)


def _debug_enabled(request: Request) -> bool:
    ctx = getattr(request.app.state, "context", None)
    app_settings = ctx.settings if ctx is not None else settings
    return app_settings.DEBUG


def outcome_response(status_code: int, outcome: Outcome) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=outcome.to_body())


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle errors raised deliberately by the service layer."""
    logger.info(
        "%s %s failed: %s (%s)",
        request.method,
        request.url.path,
        exc.message,
        exc.kind.value,
    )
    return outcome_response(exc.status_code, exc.to_outcome())


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle FastAPI/Starlette HTTPException (including unknown routes)."""
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    response = outcome_response(exc.status_code, build_error(detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic / request validation errors."""
    details = []
    for err in exc.errors():
        loc = " -> ".join(str(l) for l in err.get("loc", []))
        details.append(f"{loc}: {err.get('msg', 'Invalid value')}")
    return outcome_response(
        status.HTTP_422_UNPROCESSABLE_CONTENT,
        build_error("Request validation failed.", "; ".join(details) or None),
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError raised by service layer for business-rule violations."""
    return outcome_response(status.HTTP_400_BAD_REQUEST, build_error(str(exc)))


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Catch-all for unhandled exceptions. Logs full traceback."""
    logger.error(
        "Unhandled exception on %s %s:\n%s",
        request.method,
        request.url.path,
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    )
    message = None
    if _debug_enabled(request):
        message = f"Internal error: {exc}"
    return outcome_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        build_error("An unexpected error occurred. Please try again later.", message),
    )


async def internal_validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """Pydantic errors raised inside the service are internal errors (500)."""
    return await unhandled_exception_handler(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global exception handlers on the FastAPI app."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, internal_validation_error_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
