"""Record operations package."""

from expense_tracker.records.operations import (
    MONTH_NAMES,
    filter_by_month,
    find_by_id,
    format_date,
    local_date,
    month_name,
    next_id,
    total,
)

__all__ = [
    "MONTH_NAMES",
    "filter_by_month",
    "find_by_id",
    "format_date",
    "local_date",
    "month_name",
    "next_id",
    "total",
]
