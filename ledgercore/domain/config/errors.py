"""
Errors raised while configuring a core.

These cover the one-time configuration step (generator URL, block signing
keys, quorum) and the development-only reset.
"""

from ledgercore.domain.errors import LedgerError


class ConfigError(LedgerError):
    """Base error for core configuration."""


class UnconfiguredError(ConfigError):
    default_message = "core is not configured"


class AlreadyConfiguredError(ConfigError):
    default_message = "core is already configured"


class BadGeneratorError(ConfigError):
    """Raised when the generator URL returns an unusable response."""

    default_message = "generator returned an invalid response"


class BadBlockPubError(ConfigError):
    default_message = "invalid block xpub"


class BadSignerURLError(ConfigError):
    default_message = "invalid block signer URL"


class BadSignerPubkeyError(ConfigError):
    default_message = "invalid block signer pubkey"


class BadQuorumError(ConfigError):
    """Raised when signers are configured with a quorum of zero."""

    default_message = "quorum must be greater than 0 if there are signers"


class ProdResetError(ConfigError):
    default_message = "reset called on a production system"


class NoClientTokensError(ConfigError):
    default_message = "cannot enable client authentication with no client tokens"
