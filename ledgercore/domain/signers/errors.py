"""
Errors raised by signer (multisig key set) management.
"""

from ledgercore.domain.errors import LedgerError


class SignerError(LedgerError):
    """Base error for signer management."""


class BadQuorumError(SignerError):
    """Raised when the quorum is not within 1..len(xpubs)."""

    default_message = "quorum must be greater than 1 and less than or equal to the length of xpubs"


class BadXPubError(SignerError):
    default_message = "invalid xpub format"


class NoXPubsError(SignerError):
    default_message = "at least one xpub is required"


class BadTypeError(SignerError):
    """Raised when a stored signer is not of the type the caller asked for."""

    default_message = "retrieved type does not match expected type"
