"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that errors raised by any subsystem
are consistently translated into API responses with a stable error code.
"""

from ledgercore.shared.errors.classifier import ErrorResponse, classify
from ledgercore.shared.errors.registry import INFO_INTERNAL, ErrorInfo
from ledgercore.shared.errors.wrapping import WrappedError, detail, root, with_detail, wrap

__all__ = [
    "INFO_INTERNAL",
    "ErrorInfo",
    "ErrorResponse",
    "WrappedError",
    "classify",
    "detail",
    "root",
    "with_detail",
    "wrap",
]
