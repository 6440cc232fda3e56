"""
Errors raised by the mock HSM key store.
"""

from ledgercore.domain.errors import LedgerError


class MockHSMError(LedgerError):
    """Base error for mock HSM operations."""


class DuplicateKeyAliasError(MockHSMError):
    """Raised when a key is created with an alias that already exists."""

    default_message = "duplicate key alias"

    def __init__(self, alias: str | None = None, **kwargs) -> None:
        if alias:
            kwargs.setdefault("detail", f"alias {alias!r} is already in use")
        super().__init__(**kwargs)
        self.alias = alias


class InvalidAfterError(MockHSMError):
    """Raised when a key listing cursor cannot be parsed."""

    default_message = "invalid mockhsm `after`"
