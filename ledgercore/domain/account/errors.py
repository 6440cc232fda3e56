"""
Errors raised while reserving unspent outputs for account actions.
"""

from ledgercore.domain.errors import LedgerError


class AccountError(LedgerError):
    """Base error for account actions."""


class InsufficientFundsError(AccountError):
    """Raised when the account's unspent outputs cannot cover the amount."""

    default_message = "reservation found insufficient funds"

    def __init__(
        self, required: int | None = None, available: int | None = None, **kwargs
    ) -> None:
        if required is not None and available is not None:
            kwargs.setdefault(
                "detail", f"required {required}, available {available}"
            )
        super().__init__(**kwargs)
        self.required = required
        self.available = available


class OutputsReservedError(AccountError):
    """Raised when enough funds exist but some are held by other reservations."""

    default_message = "reservation found outputs already reserved"
