"""Tests for the exception hierarchy and input validation."""

import pytest

from fmp_sdk.errors import FMPAPIError, FMPError, FMPValidationError
from fmp_sdk.validation import validate_date, validate_date_range, validate_symbol


class TestErrorTypes:
    def test_api_error_fields(self) -> None:
        err = FMPAPIError("Limit Reach", 429, "Too Many Requests")
        assert str(err) == "Limit Reach"
        assert err.status == 429
        assert err.status_text == "Too Many Requests"

    def test_api_error_defaults(self) -> None:
        err = FMPAPIError("timeout")
        assert err.status is None
        assert err.status_text is None

    def test_hierarchy(self) -> None:
        assert issubclass(FMPAPIError, FMPError)
        assert issubclass(FMPValidationError, FMPError)
        assert issubclass(FMPValidationError, ValueError)
        assert not issubclass(FMPAPIError, FMPValidationError)

    def test_repr(self) -> None:
        assert repr(FMPAPIError("x", 500, "Internal Server Error")) == (
            "FMPAPIError('x', status=500, status_text='Internal Server Error')"
        )


class TestValidateDate:
    @pytest.mark.parametrize("value", ["2024-01-31", "2024-02-29", "1999-12-31"])
    def test_valid(self, value: str) -> None:
        validate_date(value)

    @pytest.mark.parametrize("value", ["2024/01/31", "24-01-31", "2024-1-31", "", "yesterday"])
    def test_bad_format(self, value: str) -> None:
        with pytest.raises(FMPValidationError, match="YYYY-MM-DD"):
            validate_date(value)

    @pytest.mark.parametrize("value", ["2024-13-01", "2023-02-29", "2024-04-31"])
    def test_impossible_date(self, value: str) -> None:
        with pytest.raises(FMPValidationError, match="not a valid date"):
            validate_date(value)

    def test_param_name_in_message(self) -> None:
        with pytest.raises(FMPValidationError, match="^from "):
            validate_date("bad", "from")


class TestValidateSymbol:
    def test_valid(self) -> None:
        validate_symbol("AAPL")

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty(self, value) -> None:
        with pytest.raises(FMPValidationError, match="Symbol cannot be empty"):
            validate_symbol(value)


class TestValidateDateRange:
    def test_open_range(self) -> None:
        validate_date_range()
        validate_date_range("2024-01-01")
        validate_date_range(to_date="2024-01-01")

    def test_same_day(self) -> None:
        validate_date_range("2024-01-01", "2024-01-01")

    def test_inverted(self) -> None:
        with pytest.raises(
            FMPValidationError,
            match=r"'from' date \(2024-02-01\) cannot be after 'to' date \(2024-01-01\)",
        ):
            validate_date_range("2024-02-01", "2024-01-01")

    def test_bad_end(self) -> None:
        with pytest.raises(FMPValidationError, match="^to "):
            validate_date_range("2024-01-01", "2024-01-xx")
