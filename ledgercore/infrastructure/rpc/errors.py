"""
Errors raised while talking to peer cores.
"""

from ledgercore.domain.errors import LedgerError


class WrongNetworkError(LedgerError):
    """Raised when a peer reports a different blockchain id."""

    default_message = "connected to a peer on a different network"

    def __init__(self, peer_url: str | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.peer_url = peer_url
