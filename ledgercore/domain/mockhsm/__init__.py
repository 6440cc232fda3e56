"""Mock HSM key storage errors."""
