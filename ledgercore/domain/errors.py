"""
Base error for the ledger core.

Every subsystem derives its sentinel errors from LedgerError. A sentinel
is identified by its class: the API boundary maps each class to a stable
error code. No framework imports allowed.
"""


class LedgerError(Exception):
    """Base error for all ledger subsystems.

    Attributes:
        message: Human-readable description of the failure.
        detail: Optional explanatory text for the API client.
    """

    default_message = "ledger error"

    def __init__(self, message: str | None = None, *, detail: str = "") -> None:
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)
