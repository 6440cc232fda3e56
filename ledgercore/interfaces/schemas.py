"""
Pydantic schemas for API responses.

These schemas define the API contract. No business logic belongs here.
Error bodies use ErrorResponse from the shared error package.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str = Field(..., description="Application status")
    version: str = Field(..., description="API version")


class ErrorCatalogItem(BaseModel):
    """One published error code.

    Attributes:
        code: Stable error code, e.g. CH760.
        status: HTTP status sent with the code.
        message: Static message sent with the code.
        temporary: Whether a retry may succeed.
    """

    code: str
    status: int
    message: str
    temporary: bool


class ErrorCatalogResponse(BaseModel):
    """Response schema for the error catalog endpoint."""

    errors: list[ErrorCatalogItem]
