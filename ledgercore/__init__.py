"""
LedgerCore API: error classification for a multi-subsystem ledger platform.

Application package root. Errors raised by any subsystem are resolved to a
stable, versioned error code at the API boundary.

Layers:
    - domain: Sentinel error classes per subsystem. No framework imports.
    - infrastructure: Sentinel errors raised by storage and peer adapters.
    - interfaces: FastAPI routers, Pydantic schemas, transport-level errors.
    - shared: Cross-cutting concerns (error registry, classifier, logging,
      rate limiting).
"""
