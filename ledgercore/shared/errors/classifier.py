"""
Error classifier.

Resolves any error value to a registry entry and builds the response body
sent to API clients. Classification is total: it returns a well-formed
response for every input and never raises.
"""

import logging

from pydantic import BaseModel, ConfigDict

from ledgercore.shared.errors.registry import ErrorInfo, is_temporary, lookup
from ledgercore.shared.errors.wrapping import detail, root

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """JSON body of an error response.

    The HTTP status is carried separately by ErrorInfo and is never part
    of the body.

    Attributes:
        code: Stable error code clients can branch on.
        message: Static human-readable message for the code.
        detail: Explanatory text for this occurrence, possibly empty.
        temporary: Whether a retry may succeed.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: str = ""
    temporary: bool

    def to_content(self) -> dict:
        """Return the JSON-ready body, omitting an empty detail."""
        return self.model_dump(exclude={"detail"} if not self.detail else None)


def _root_cause(err):
    try:
        return root(err)
    except Exception:
        logger.warning("Could not unwrap error chain; classifying the outer error", exc_info=True)
        return err


def _detail(err) -> str:
    try:
        return detail(err)
    except Exception:
        logger.warning("Could not read error detail", exc_info=True)
        return ""


def classify(err) -> tuple[ErrorResponse, ErrorInfo]:
    """Return the response body and registry entry for err.

    The entry is chosen by the root cause of err; the detail comes from err
    itself so wrapping sites can add more specific text than the root.
    Unregistered errors, and errors unusable as a lookup key, get
    INFO_INTERNAL.

    Args:
        err: Any error value, wrapped or not.

    Returns:
        The body to serialize and the entry whose status the transport sends.
    """
    info = lookup(_root_cause(err))
    body = ErrorResponse(
        code=info.code,
        message=info.message,
        detail=_detail(err),
        temporary=is_temporary(info.code),
    )
    return body, info
