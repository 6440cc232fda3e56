"""
Errors raised by the block signer.
"""

from ledgercore.domain.errors import LedgerError


class ConsensusChangeError(LedgerError):
    """Raised when a block to sign changes the consensus program."""

    default_message = "block would change the consensus program"
