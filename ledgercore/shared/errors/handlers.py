"""
Centralized error handlers for FastAPI.

Every error reaching the application is classified against the error
registry. The registry entry drives the status line; the JSON body is the
classifier's ErrorResponse, serialized verbatim. No stack traces or
internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from ledgercore.domain.errors import LedgerError
from ledgercore.interfaces.errors import NotFoundError
from ledgercore.shared.errors.classifier import classify
from ledgercore.shared.errors.wrapping import WrappedError, with_detail

logger = logging.getLogger(__name__)

# Routing failures Starlette raises before any endpoint runs.
ROUTING_STATUSES = frozenset({404, 405})


def write_http_error(request: Request, err: BaseException) -> JSONResponse:
    """Classify err and build the JSON error response for request.

    Server-side failures are logged with their traceback; client errors
    are logged with their code only.
    """
    body, info = classify(err)
    if info.http_status >= 500:
        logger.error(
            "%s %s failed: %s %s",
            request.method,
            request.url.path,
            info.code,
            type(err).__name__,
            exc_info=err,
        )
    else:
        logger.warning(
            "%s %s rejected: %d %s",
            request.method,
            request.url.path,
            info.http_status,
            info.code,
        )
    return JSONResponse(status_code=info.http_status, content=body.to_content())


def _validation_detail(exc: RequestValidationError) -> str:
    """Describe the first validation problem as `loc: msg`."""
    errors = exc.errors()
    if not errors:
        return ""
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "")
    return f"{location}: {message}" if location else message


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(LedgerError)
    async def handle_ledger_error(request: Request, exc: LedgerError) -> JSONResponse:
        """Handle errors raised by ledger subsystems."""
        return write_http_error(request, exc)

    @app.exception_handler(WrappedError)
    async def handle_wrapped(request: Request, exc: WrappedError) -> JSONResponse:
        """Handle errors annotated with context by a subsystem."""
        return write_http_error(request, exc)

    @app.exception_handler(TimeoutError)
    async def handle_timeout(request: Request, exc: TimeoutError) -> JSONResponse:
        """Handle request deadlines expiring."""
        return write_http_error(request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle malformed request bodies, reporting the first problem as detail."""
        return write_http_error(request, with_detail(exc, _validation_detail(exc)))

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limited(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        """Handle throttled requests. The exceeded limit becomes the detail."""
        return write_http_error(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing failures as CH006; other HTTP errors are unexpected."""
        if exc.status_code in ROUTING_STATUSES:
            return write_http_error(request, NotFoundError(detail=request.url.path))
        return write_http_error(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        return write_http_error(request, exc)
