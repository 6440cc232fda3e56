"""
Transport-level errors raised by the API layer itself.

Request body validation and rate limiting reuse the errors raised by
FastAPI and slowapi; the remaining general failures are defined here.
"""

from ledgercore.domain.errors import LedgerError


class APIError(LedgerError):
    """Base error for request handling failures."""


class BadRequestHeaderError(APIError):
    default_message = "invalid request header"


class NotFoundError(APIError):
    """Raised for unknown routes and unsupported methods."""

    default_message = "not found"


class LeaderElectionError(APIError):
    """Raised while the cluster has no leader to serve the request."""

    default_message = "no leader; pending election"


class NotAuthenticatedError(APIError):
    default_message = "not authenticated"
