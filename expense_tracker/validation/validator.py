"""
Input Validation

DESIGN DECISION: Raw command arguments (strings from the command line)
are parsed into typed values here, and nowhere else.

Every check runs before anything is saved, so a rejected command
never leaves a partial change behind.

IMPORTANT: Validation NEVER silently fixes input beyond trimming
surrounding whitespace. Anything else is rejected with a message.
"""

import math
from datetime import MAXYEAR, MINYEAR
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from expense_tracker.exceptions import (
    InvalidAmountError,
    InvalidDescriptionError,
    InvalidIdError,
    InvalidMonthError,
    InvalidYearError,
    MissingArgumentsError,
)


RawNumber = Union[str, int, float, Decimal]


def parse_amount(raw: RawNumber) -> Decimal:
    """
    Parse an amount.

    Accepts anything that reads as a finite decimal number greater than zero
    whose JSON form (a double) is still finite and greater than zero.
    """
    try:
        amount = Decimal(str(raw).strip())
    except InvalidOperation:
        raise InvalidAmountError("Amount must be a valid number")

    if not amount.is_finite():
        raise InvalidAmountError("Amount must be a valid number")
    if amount <= 0:
        raise InvalidAmountError("Amount must be greater than 0")

    # Stored as a JSON number: 1e400 would overflow, 1e-400 would round to 0
    as_float = float(amount)
    if math.isinf(as_float):
        raise InvalidAmountError("Amount must be a valid number")
    if as_float <= 0:
        raise InvalidAmountError("Amount must be greater than 0")

    return amount


def parse_description(raw: str) -> str:
    """Trim a description and reject it if nothing is left."""
    description = raw.strip()
    if not description:
        raise InvalidDescriptionError("Description cannot be empty")
    return description


def _parse_int(raw: RawNumber) -> int:
    if isinstance(raw, bool):
        raise ValueError("booleans are not integers")
    if isinstance(raw, int):
        return raw
    return int(str(raw).strip())


def parse_expense_id(raw: RawNumber) -> int:
    try:
        return _parse_int(raw)
    except ValueError:
        raise InvalidIdError("Invalid expense ID")


def parse_month(raw: RawNumber) -> int:
    """Parse a month number, 1 (January) to 12 (December)."""
    try:
        month = _parse_int(raw)
    except ValueError:
        raise InvalidMonthError("Month must be between 1 and 12")

    if not 1 <= month <= 12:
        raise InvalidMonthError("Month must be between 1 and 12")
    return month


def parse_year(raw: RawNumber) -> int:
    try:
        year = _parse_int(raw)
    except ValueError:
        raise InvalidYearError(f"Year must be between {MINYEAR} and {MAXYEAR}")

    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidYearError(f"Year must be between {MINYEAR} and {MAXYEAR}")
    return year


def parse_update_fields(
    description: Optional[str],
    amount: Optional[RawNumber],
) -> tuple[Optional[str], Optional[Decimal]]:
    """
    Validate the optional fields of an update.

    At least one of them must be given. Each given field is validated
    exactly as it is for a new expense.

    Returns: (description, amount), with None for fields left unchanged
    """
    if description is None and amount is None:
        raise MissingArgumentsError(
            "Please provide at least --description or --amount to update"
        )

    parsed_amount = parse_amount(amount) if amount is not None else None
    parsed_description = parse_description(description) if description is not None else None

    return parsed_description, parsed_amount
