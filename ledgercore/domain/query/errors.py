"""
Errors raised while parsing and evaluating queries and filters.
"""

from ledgercore.domain.errors import LedgerError


class QueryError(LedgerError):
    """Base error for query evaluation."""


class BadAfterError(QueryError):
    """Raised when the pagination cursor `after` is malformed."""

    default_message = "malformed pagination parameter after"


class ParameterCountMismatchError(QueryError):
    """Raised when a filter's placeholders and parameters differ in number."""

    default_message = "wrong number of parameters to query"

    def __init__(self, expected: int | None = None, given: int | None = None, **kwargs) -> None:
        if expected is not None and given is not None:
            kwargs.setdefault("detail", f"expected {expected} parameters, got {given}")
        super().__init__(**kwargs)
        self.expected = expected
        self.given = given


class BadFilterError(QueryError):
    """Raised when a filter expression cannot be parsed or type-checked."""

    default_message = "invalid query filter"
