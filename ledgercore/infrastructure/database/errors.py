"""
Errors raised by the data store adapter.
"""

from ledgercore.domain.errors import LedgerError


class UserInputNotFoundError(LedgerError):
    """Raised when a lookup keyed on client-supplied input matches no row."""

    default_message = "pg: user input not found"
