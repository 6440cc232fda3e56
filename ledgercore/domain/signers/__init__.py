"""Signer management errors."""
