"""
Errors raised while building, signing and submitting transactions.

Build errors cover action decoding and template construction. Submit
errors cover template finalization and rejection by the network.
"""

from ledgercore.domain.errors import LedgerError


class TxBuilderError(LedgerError):
    """Base error for transaction building and submission."""


# Build


class BadRefDataError(TxBuilderError):
    default_message = "transaction reference data does not match previous template's reference data"


class BadActionTypeError(TxBuilderError):
    """Raised when an action's `type` field names no known action."""

    default_message = "invalid action type"


class BadAliasError(TxBuilderError):
    default_message = "invalid alias on action"


class BadActionError(TxBuilderError):
    default_message = "invalid action object"


# Submit


class MissingRawTxError(TxBuilderError):
    default_message = "missing raw tx"


class BadInstructionCountError(TxBuilderError):
    default_message = "too many signing instructions in template"


class BadTxInputIdxError(TxBuilderError):
    default_message = "invalid tx input index"


class BadWitnessComponentError(TxBuilderError):
    default_message = "invalid witness component"


class RejectedError(TxBuilderError):
    """Raised when the network refuses a finalized transaction."""

    default_message = "transaction rejected"


class NoTxSighashCommitmentError(TxBuilderError):
    default_message = "no commitment to tx sighash"
