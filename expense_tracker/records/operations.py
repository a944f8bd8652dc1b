"""
Record Operations

Pure functions over an in-memory expense collection.
Nothing here touches storage, the clock or the console: callers pass in
everything that is needed, including the year to filter on.
"""

from datetime import datetime
from decimal import Decimal
from typing import Iterable

from expense_tracker.exceptions import ExpenseNotFoundError
from expense_tracker.models.expense import Expense


# Fixed English names, independent of the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def next_id(expenses: Iterable[Expense]) -> int:
    """
    ID for the next expense: one past the highest ID in use, or 1.

    IDs of deleted expenses are never handed out again as long as a
    higher ID is still present.
    """
    return max((expense.id for expense in expenses), default=0) + 1


def local_date(value: datetime) -> datetime:
    """Convert a stored timestamp to local time (naive values are taken as local)."""
    return value.astimezone()


def format_date(value: datetime) -> str:
    """Calendar date of a timestamp as YYYY-MM-DD, in local time."""
    return local_date(value).strftime("%Y-%m-%d")


def month_name(month: int) -> str:
    """English name of a month number (1 = January)."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return MONTH_NAMES[month - 1]


def filter_by_month(
    expenses: Iterable[Expense],
    month: int,
    year: int,
) -> list[Expense]:
    """Expenses recorded in the given month of the given year, in collection order."""
    selected = []
    for expense in expenses:
        when = local_date(expense.date)
        if when.month == month and when.year == year:
            selected.append(expense)
    return selected


def total(expenses: Iterable[Expense]) -> Decimal:
    """Sum of amounts. Zero for an empty collection."""
    return sum((expense.amount for expense in expenses), Decimal("0"))


def find_by_id(expenses: list[Expense], expense_id: int) -> int:
    """
    Position of the expense with `expense_id`.

    Raises:
        ExpenseNotFoundError: If no expense has that ID
    """
    for index, expense in enumerate(expenses):
        if expense.id == expense_id:
            return index
    raise ExpenseNotFoundError(expense_id)
