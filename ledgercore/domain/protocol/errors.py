"""
Errors raised by the blockchain protocol state machine.
"""

from ledgercore.domain.errors import LedgerError


class DistantFutureError(LedgerError):
    """Raised when waiting for a block height far beyond the current one."""

    default_message = "block height too far in future"

    def __init__(self, height: int | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.height = height
