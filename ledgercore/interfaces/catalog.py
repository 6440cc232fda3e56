"""
Error catalog router.

Publishes every error code the API can return, so clients can branch on
codes without out-of-band documentation. Reads the registry only.
"""

from fastapi import APIRouter, Request

from ledgercore.core.config import settings
from ledgercore.interfaces.schemas import ErrorCatalogItem, ErrorCatalogResponse
from ledgercore.shared.errors.registry import catalog, is_temporary
from ledgercore.shared.security.rate_limiting import limiter

router = APIRouter(tags=["errors"])


@router.get(
    "/errors",
    response_model=ErrorCatalogResponse,
    summary="Error catalog",
    description="Lists every error code with its HTTP status, message and retry advice.",
)
@limiter.limit(settings.rate_limit_default)
def list_error_codes(request: Request) -> ErrorCatalogResponse:
    """Return the published error codes sorted by code."""
    return ErrorCatalogResponse(
        errors=[
            ErrorCatalogItem(
                code=info.code,
                status=info.http_status,
                message=info.message,
                temporary=is_temporary(info.code),
            )
            for info in catalog()
        ]
    )
