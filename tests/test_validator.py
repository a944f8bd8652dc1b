"""Tests for input validation."""

from decimal import Decimal

import pytest

from expense_tracker.exceptions import (
    InvalidAmountError,
    InvalidDescriptionError,
    InvalidIdError,
    InvalidMonthError,
    InvalidYearError,
    MissingArgumentsError,
    ValidationError,
)
from expense_tracker.models.expense import ErrorKind
from expense_tracker.validation import (
    parse_amount,
    parse_description,
    parse_expense_id,
    parse_month,
    parse_update_fields,
    parse_year,
)


class TestParseAmount:
    """Tests for amount parsing."""

    @pytest.mark.parametrize(
        "raw, expected",
        [("20", Decimal("20")), ("7.5", Decimal("7.5")), (" 3.25 ", Decimal("3.25")), (5, Decimal("5"))],
    )
    def test_valid_amounts(self, raw, expected):
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "nan", "inf", "12,50"])
    def test_not_a_number(self, raw):
        with pytest.raises(InvalidAmountError, match="Amount must be a valid number"):
            parse_amount(raw)

    @pytest.mark.parametrize("raw", ["0", "-5", "0.00"])
    def test_not_positive(self, raw):
        with pytest.raises(InvalidAmountError, match="Amount must be greater than 0"):
            parse_amount(raw)

    def test_too_large_to_store(self):
        """A value that overflows a JSON number is not a valid amount."""
        with pytest.raises(InvalidAmountError, match="Amount must be a valid number"):
            parse_amount("1e400")

    def test_too_small_to_store(self):
        """A value that rounds to 0 as a JSON number is not positive."""
        with pytest.raises(InvalidAmountError, match="Amount must be greater than 0"):
            parse_amount("1e-400")

    def test_error_kind(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_amount("x")
        assert exc_info.value.kind == ErrorKind.INVALID_AMOUNT


class TestParseDescription:
    def test_trims(self):
        assert parse_description("  Lunch  ") == "Lunch"

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
    def test_rejects_blank(self, raw):
        with pytest.raises(InvalidDescriptionError):
            parse_description(raw)


class TestParseIds:
    """Tests for integer arguments."""

    def test_expense_id(self):
        assert parse_expense_id("42") == 42
        assert parse_expense_id(3) == 3

    @pytest.mark.parametrize("raw", ["abc", "1.5", ""])
    def test_invalid_expense_id(self, raw):
        with pytest.raises(InvalidIdError, match="Invalid expense ID"):
            parse_expense_id(raw)

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("12", 12), (6, 6)])
    def test_month(self, raw, expected):
        assert parse_month(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "13", "-1", "march"])
    def test_invalid_month(self, raw):
        with pytest.raises(InvalidMonthError, match="Month must be between 1 and 12"):
            parse_month(raw)

    def test_year(self):
        assert parse_year("2024") == 2024

    @pytest.mark.parametrize("raw", ["0", "10000", "next"])
    def test_invalid_year(self, raw):
        with pytest.raises(InvalidYearError):
            parse_year(raw)


class TestParseUpdateFields:
    """Tests for update argument validation."""

    def test_requires_at_least_one_field(self):
        with pytest.raises(MissingArgumentsError) as exc_info:
            parse_update_fields(None, None)
        assert exc_info.value.kind == ErrorKind.MISSING_ARGUMENTS

    def test_description_only(self):
        assert parse_update_fields(" Tea ", None) == ("Tea", None)

    def test_amount_only(self):
        assert parse_update_fields(None, "7.5") == (None, Decimal("7.5"))

    def test_amount_validated_like_add(self):
        with pytest.raises(InvalidAmountError):
            parse_update_fields("Tea", "-1")

    def test_blank_description_rejected(self):
        with pytest.raises(InvalidDescriptionError):
            parse_update_fields("  ", "2")
