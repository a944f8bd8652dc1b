"""Input validation package."""

from expense_tracker.validation.validator import (
    parse_amount,
    parse_description,
    parse_expense_id,
    parse_month,
    parse_update_fields,
    parse_year,
)

__all__ = [
    "parse_amount",
    "parse_description",
    "parse_expense_id",
    "parse_month",
    "parse_update_fields",
    "parse_year",
]
