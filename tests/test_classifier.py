"""
Tests for the error classifier.

Covers registered, unregistered, wrapped and hostile error values.
classify() must return a well-formed response for every input.
"""

import pytest

from ledgercore.domain.account.errors import InsufficientFundsError, OutputsReservedError
from ledgercore.domain.mockhsm.errors import DuplicateKeyAliasError
from ledgercore.domain.query.errors import ParameterCountMismatchError
from ledgercore.domain.signers.errors import BadXPubError
from ledgercore.shared.errors import classify, wrap, with_detail
from ledgercore.shared.errors.classifier import ErrorResponse
from ledgercore.shared.errors.registry import ERROR_INFO, INFO_INTERNAL, ErrorInfo, is_temporary


class _ComparableMeta(type):
    """Metaclass whose classes compare by name; it leaves them unhashable."""

    def __eq__(cls, other):
        return getattr(other, "__name__", None) == cls.__name__


class UnhashableTypeError(Exception, metaclass=_ComparableMeta):
    pass


class HostileError(Exception):
    """Reading the detail blows up."""

    @property
    def detail(self):
        raise RuntimeError("no detail for you")


class TestConcreteScenarios:
    """Known errors map to their published responses."""

    @pytest.mark.parametrize(
        ("err", "expected_info", "temporary"),
        [
            (TimeoutError(), ErrorInfo(408, "CH001", "Request timed out"), True),
            (InsufficientFundsError(), ErrorInfo(400, "CH760", "Insufficient funds for tx"), False),
            (
                OutputsReservedError(),
                ErrorInfo(400, "CH761", "Some outputs are reserved; try again"),
                True,
            ),
            (BadXPubError(), ErrorInfo(400, "CH201", "Invalid xpub format"), False),
        ],
    )
    def test_scenario(self, err, expected_info: ErrorInfo, temporary: bool) -> None:
        body, info = classify(err)
        assert info == expected_info
        assert body == ErrorResponse(
            code=expected_info.code,
            message=expected_info.message,
            detail="",
            temporary=temporary,
        )

    def test_every_registered_class(self) -> None:
        """Every registered identity yields exactly its entry."""
        for key, expected in ERROR_INFO.items():
            body, info = classify(key)
            assert info is expected
            assert (body.code, body.message) == (expected.code, expected.message)
            assert body.temporary is is_temporary(expected.code)


class TestDetail:
    """Detail comes from the original error."""

    def test_registered_root_detail(self) -> None:
        body, _ = classify(DuplicateKeyAliasError("alice"))
        assert body.code == "CH800"
        assert body.detail == "alias 'alice' is already in use"

    def test_wrapped_detail_overrides_root(self) -> None:
        err = with_detail(ParameterCountMismatchError(expected=2, given=1), "filter 'a = $1 AND b = $2'")
        body, info = classify(err)
        assert info.code == "CH601"
        assert body.detail == "filter 'a = $1 AND b = $2'"

    def test_context_wrap_keeps_root_entry(self) -> None:
        body, info = classify(wrap(wrap(OutputsReservedError(), "reserve"), "build tx"))
        assert info.code == "CH761"
        assert body.temporary is True

    def test_translated_error_keeps_own_code(self) -> None:
        """A domain error raised `from` a low-level error is classified as itself."""
        try:
            try:
                {}["utxo"]
            except KeyError as exc:
                raise InsufficientFundsError(required=5, available=1) from exc
        except InsufficientFundsError as translated:
            body, info = classify(translated)
        assert info.code == "CH760"
        assert body.detail == "required 5, available 1"

    def test_translated_unregistered_error_is_internal(self) -> None:
        """The cause of an unregistered error does not lend it a code."""
        try:
            try:
                raise InsufficientFundsError()
            except InsufficientFundsError as exc:
                raise RuntimeError("spend action failed") from exc
        except RuntimeError as outer:
            _, info = classify(outer)
        assert info is INFO_INTERNAL


class TestFallback:
    """Unknown and unsafe inputs map to the default entry."""

    def test_unregistered_error(self) -> None:
        err = ValueError("boom")
        err.detail = "while parsing"
        body, info = classify(err)
        assert info is INFO_INTERNAL
        assert (info.http_status, body.code, body.message) == (500, "CH000", "API Error")
        assert body.temporary is True
        assert body.detail == "while parsing"

    def test_unhashable_root_type(self) -> None:
        """A root whose type cannot be hashed falls back without raising."""
        with pytest.raises(TypeError):
            hash(UnhashableTypeError)
        body, info = classify(UnhashableTypeError("x"))
        assert info is INFO_INTERNAL
        assert body.code == "CH000"

    def test_wrapped_unhashable_root(self) -> None:
        body, info = classify(with_detail(UnhashableTypeError(), "nested"))
        assert info is INFO_INTERNAL
        assert body.detail == "nested"

    def test_hostile_error(self) -> None:
        """Attribute reads that raise do not escape classify."""
        body, info = classify(HostileError())
        assert info is INFO_INTERNAL
        assert body.detail == ""

    @pytest.mark.parametrize("value", [None, "text", 42, object(), [1, 2], {"a": 1}])
    def test_non_error_values(self, value) -> None:
        body, info = classify(value)
        assert info is INFO_INTERNAL
        assert body.temporary is True


class TestResponseBody:
    """Tests for ErrorResponse serialization and stability."""

    def test_idempotent(self) -> None:
        err = with_detail(BadXPubError(), "xpub 3")
        assert classify(err) == classify(err)

    def test_fresh_frozen_body(self) -> None:
        err = BadXPubError()
        first, _ = classify(err)
        second, _ = classify(err)
        assert first is not second
        with pytest.raises(Exception):
            first.code = "CH999"

    def test_empty_detail_omitted(self) -> None:
        body, _ = classify(InsufficientFundsError())
        assert body.to_content() == {
            "code": "CH760",
            "message": "Insufficient funds for tx",
            "temporary": False,
        }

    def test_detail_included(self) -> None:
        body, _ = classify(with_detail(TimeoutError(), "ledger query"))
        assert body.to_content() == {
            "code": "CH001",
            "message": "Request timed out",
            "detail": "ledger query",
            "temporary": True,
        }
