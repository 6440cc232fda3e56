"""
Errors raised by access token management.
"""

from ledgercore.domain.errors import LedgerError


class AccessTokenError(LedgerError):
    """Base error for access token operations."""


class BadIDError(AccessTokenError):
    """Raised when a token id is empty or contains invalid characters."""

    default_message = "invalid access token id"


class BadTypeError(AccessTokenError):
    """Raised when a token type is neither client nor network."""

    default_message = "access token type must be client or network"


class DuplicateIDError(AccessTokenError):
    """Raised when a token id is already in use."""

    default_message = "duplicate access token id"


class CurrentTokenError(AccessTokenError):
    """Raised when a request tries to delete the token it authenticated with."""

    default_message = "cannot delete the access token used by this request"
