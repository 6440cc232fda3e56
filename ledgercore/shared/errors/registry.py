"""
Error code registry.

Maps the root cause of an error to the HTTP status, error code and message
returned to API clients. Identity of a root cause is its exception class;
matching is exact, subclasses of a registered class are not registered.

Codes are partitioned by subsystem family. Once published a code keeps its
meaning; new conditions get a new, unused code in their family's range.

The registry is built once at import and is read-only afterwards.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType

from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded

from ledgercore.domain.accesstoken import errors as accesstoken
from ledgercore.domain.account import errors as account
from ledgercore.domain.blocksigner import errors as blocksigner
from ledgercore.domain.config import errors as config
from ledgercore.domain.mockhsm import errors as mockhsm
from ledgercore.domain.protocol import errors as protocol
from ledgercore.domain.query import errors as query
from ledgercore.domain.signers import errors as signers
from ledgercore.domain.txbuilder import errors as txbuilder
from ledgercore.infrastructure.database import errors as database
from ledgercore.infrastructure.rpc import errors as rpc
from ledgercore.interfaces import errors as api

logger = logging.getLogger(__name__)

CODE_PREFIX = "CH"


@dataclass(frozen=True)
class ErrorInfo:
    """Response template for one error identity.

    Attributes:
        http_status: Status line sent by the transport.
        code: Stable, versioned error code.
        message: Static human-readable message.
    """

    http_status: int
    code: str
    message: str


@dataclass(frozen=True)
class CodeFamily:
    """A reserved, inclusive range of numeric codes owned by one subsystem."""

    name: str
    low: int
    high: int

    def contains(self, number: int) -> bool:
        return self.low <= number <= self.high


CODE_FAMILIES = (
    CodeFamily("general", 0, 99),
    CodeFamily("core", 100, 199),
    CodeFamily("signers", 200, 299),
    CodeFamily("access_tokens", 300, 399),
    CodeFamily("query", 600, 699),
    CodeFamily("transaction_build", 700, 729),
    CodeFamily("transaction_submit", 730, 759),
    CodeFamily("account_actions", 760, 799),
    CodeFamily("key_storage", 800, 899),
)

# Used for every error without a specific entry.
INFO_INTERNAL = ErrorInfo(500, "CH000", "API Error")

TEMPORARY_CODES = frozenset(
    {
        "CH000",  # internal server error
        "CH001",  # request timed out
        "CH761",  # outputs currently reserved
    }
)

_ERROR_INFO_TABLE = {
    # General error namespace (0xx)
    TimeoutError: ErrorInfo(408, "CH001", "Request timed out"),
    database.UserInputNotFoundError: ErrorInfo(400, "CH002", "Not found"),
    RequestValidationError: ErrorInfo(400, "CH003", "Invalid request body"),
    api.BadRequestHeaderError: ErrorInfo(400, "CH004", "Invalid request header"),
    api.NotFoundError: ErrorInfo(404, "CH006", "Not found"),
    RateLimitExceeded: ErrorInfo(429, "CH007", "Request limit exceeded"),
    api.LeaderElectionError: ErrorInfo(503, "CH008", "Electing a new leader for the core; try again soon"),
    api.NotAuthenticatedError: ErrorInfo(401, "CH009", "Request could not be authenticated"),
    # Core error namespace (1xx)
    config.UnconfiguredError: ErrorInfo(400, "CH100", "This core still needs to be configured"),
    config.AlreadyConfiguredError: ErrorInfo(400, "CH101", "This core has already been configured"),
    config.BadGeneratorError: ErrorInfo(400, "CH102", "Generator URL returned an invalid response"),
    config.BadBlockPubError: ErrorInfo(400, "CH103", "Provided Block XPub is invalid"),
    rpc.WrongNetworkError: ErrorInfo(502, "CH104", "A peer core is operating on a different blockchain network"),
    protocol.DistantFutureError: ErrorInfo(400, "CH105", "Requested height is too far ahead"),
    config.BadSignerURLError: ErrorInfo(400, "CH106", "Block signer URL is invalid"),
    config.BadSignerPubkeyError: ErrorInfo(400, "CH107", "Block signer pubkey is invalid"),
    config.BadQuorumError: ErrorInfo(400, "CH108", "Quorum must be greater than 0 if there are signers"),
    config.ProdResetError: ErrorInfo(400, "CH110", "Reset can only be called in a development system"),
    config.NoClientTokensError: ErrorInfo(400, "CH120", "Cannot enable client authentication with no client tokens"),
    blocksigner.ConsensusChangeError: ErrorInfo(400, "CH150", "Refuse to sign block with consensus change"),
    # Signers error namespace (2xx)
    signers.BadQuorumError: ErrorInfo(
        400, "CH200", "Quorum must be greater than 1 and less than or equal to the length of xpubs"
    ),
    signers.BadXPubError: ErrorInfo(400, "CH201", "Invalid xpub format"),
    signers.NoXPubsError: ErrorInfo(400, "CH202", "At least one xpub is required"),
    signers.BadTypeError: ErrorInfo(400, "CH203", "Retrieved type does not match expected type"),
    # Access token error namespace (3xx)
    accesstoken.BadIDError: ErrorInfo(400, "CH300", "Malformed or empty access token id"),
    accesstoken.BadTypeError: ErrorInfo(400, "CH301", "Access tokens must be type client or network"),
    accesstoken.DuplicateIDError: ErrorInfo(400, "CH302", "Access token id is already in use"),
    accesstoken.CurrentTokenError: ErrorInfo(
        400, "CH310", "The access token used to authenticate this request cannot be deleted"
    ),
    # Query error namespace (6xx)
    query.BadAfterError: ErrorInfo(400, "CH600", "Malformed pagination parameter `after`"),
    query.ParameterCountMismatchError: ErrorInfo(400, "CH601", "Incorrect number of parameters to filter"),
    query.BadFilterError: ErrorInfo(400, "CH602", "Malformed query filter"),
    # Transaction error namespace (7xx)
    # Build error namespace (70x)
    txbuilder.BadRefDataError: ErrorInfo(
        400, "CH700", "Reference data does not match previous transaction's reference data"
    ),
    txbuilder.BadActionTypeError: ErrorInfo(400, "CH701", "Invalid action type"),
    txbuilder.BadAliasError: ErrorInfo(400, "CH702", "Invalid alias on action"),
    txbuilder.BadActionError: ErrorInfo(400, "CH703", "Invalid action object"),
    # Submit error namespace (73x)
    txbuilder.MissingRawTxError: ErrorInfo(400, "CH730", "Missing raw transaction"),
    txbuilder.BadInstructionCountError: ErrorInfo(
        400, "CH731", "Too many signing instructions in template for transaction"
    ),
    txbuilder.BadTxInputIdxError: ErrorInfo(400, "CH732", "Invalid transaction input index"),
    txbuilder.BadWitnessComponentError: ErrorInfo(400, "CH733", "Invalid witness component"),
    txbuilder.RejectedError: ErrorInfo(400, "CH735", "Transaction rejected"),
    txbuilder.NoTxSighashCommitmentError: ErrorInfo(
        400, "CH736", "Transaction is not final, additional actions still allowed"
    ),
    # Account action error namespace (76x)
    account.InsufficientFundsError: ErrorInfo(400, "CH760", "Insufficient funds for tx"),
    account.OutputsReservedError: ErrorInfo(400, "CH761", "Some outputs are reserved; try again"),
    # Mock HSM error namespace (80x)
    mockhsm.DuplicateKeyAliasError: ErrorInfo(400, "CH800", "Duplicate alias for Mock HSM key"),
    mockhsm.InvalidAfterError: ErrorInfo(400, "CH801", "Invalid `after` in query"),
}


def code_number(code: str) -> int | None:
    """Return the numeric part of an error code, or None if malformed."""
    digits = code[len(CODE_PREFIX):]
    if not code.startswith(CODE_PREFIX) or len(digits) != 3 or not digits.isdigit():
        return None
    return int(digits)


def family_for(code: str) -> CodeFamily | None:
    """Return the family whose reserved range holds code."""
    number = code_number(code)
    if number is None:
        return None
    for family in CODE_FAMILIES:
        if family.contains(number):
            return family
    return None


def _build_registry(table: dict) -> MappingProxyType:
    """Validate table and freeze it.

    Raises:
        ValueError: If a key is not an exception class, a code is reused,
            or a code falls outside every family range.
    """
    seen = {INFO_INTERNAL.code: INFO_INTERNAL}
    for key, info in table.items():
        if not (isinstance(key, type) and issubclass(key, BaseException)):
            raise ValueError(f"error registry key {key!r} is not an exception class")
        if info.code in seen:
            raise ValueError(f"error code {info.code} registered twice")
        if family_for(info.code) is None:
            raise ValueError(f"error code {info.code} is outside every reserved range")
        seen[info.code] = info
    return MappingProxyType(dict(table))


ERROR_INFO = _build_registry(_ERROR_INFO_TABLE)


def lookup(cause) -> ErrorInfo:
    """Return the entry registered for cause, or INFO_INTERNAL.

    cause may be an error instance or an error class. A key that cannot be
    hashed or compared is treated like any other missing entry.
    """
    try:
        key = cause if isinstance(cause, type) else type(cause)
        info = ERROR_INFO.get(key)
    except Exception:
        logger.warning("Error type is not usable as a registry key", exc_info=True)
        return INFO_INTERNAL
    return info if info is not None else INFO_INTERNAL


def is_temporary(code: str) -> bool:
    """Return True if a client retry may succeed for code."""
    return code in TEMPORARY_CODES


def catalog() -> list[ErrorInfo]:
    """Return the default entry and every registered entry, sorted by code."""
    return sorted([INFO_INTERNAL, *ERROR_INFO.values()], key=lambda info: info.code)
