"""
Domain layer package.

Contains the sentinel errors raised by every subsystem of the ledger core.
This layer has ZERO framework dependencies. No IO, no side effects.
"""
