"""
Core Data Models for Expense Tracker

These models define the strict schemas for all data flowing through the system.
They are designed to:
1. Enforce the expense invariants at runtime (positive amount, non-empty text)
2. Provide clear validation error messages
3. Serialize to exactly the JSON layout of the data file

DESIGN DECISION: Amounts are Decimal in memory and plain JSON numbers on disk.
Summing Decimals keeps totals exact; writing numbers keeps the file readable
and compatible with files produced by earlier versions of the tool.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
)


def utc_now() -> datetime:
    """Current time, timezone-aware, in UTC."""
    return datetime.now(timezone.utc)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class ErrorKind(str, Enum):
    """
    Every way a command can fail.

    The CLI maps any of these to a non-zero exit status.
    """
    INVALID_AMOUNT = "invalid_amount"
    INVALID_DESCRIPTION = "invalid_description"
    INVALID_ID = "invalid_id"
    INVALID_MONTH = "invalid_month"
    INVALID_YEAR = "invalid_year"
    NOT_FOUND = "not_found"
    MISSING_ARGUMENTS = "missing_arguments"
    STORAGE_READ_ERROR = "storage_read_error"
    STORAGE_WRITE_ERROR = "storage_write_error"


class CommandName(str, Enum):
    """Commands understood by the dispatcher."""
    ADD = "add"
    LIST = "list"
    SUMMARY = "summary"
    UPDATE = "update"
    DELETE = "delete"


# =============================================================================
# CORE EXPENSE MODEL
# =============================================================================

class Expense(BaseModel):
    """
    A single recorded expense.

    CRITICAL: `id` and `date` are frozen. Only `amount` and `description`
    may change after creation, and every assignment is re-validated.
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    id: int = Field(
        ...,
        ge=1,
        frozen=True,
        description="Unique expense ID, assigned on creation"
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        description="Amount spent (currency-agnostic)"
    )
    description: str = Field(
        ...,
        min_length=1,
        description="What the money was spent on"
    )
    date: datetime = Field(
        default_factory=utc_now,
        frozen=True,
        description="When the expense was recorded"
    )

    @field_serializer('amount', when_used='json')
    def serialize_amount(self, amount: Decimal) -> float:
        """Write amounts as JSON numbers, not strings."""
        return float(amount)


# =============================================================================
# COMMAND RESULT MODEL
# =============================================================================

class CommandResult(BaseModel):
    """
    Outcome of executing one command.

    This is what the presentation layer turns into text and an exit status.
    Failed results carry an error kind and a human-readable message;
    successful ones carry whatever payload the command produced.
    """

    command: CommandName
    executed_at: datetime = Field(
        default_factory=utc_now
    )

    # Success/failure
    success: bool
    error_kind: Optional[ErrorKind] = None
    message: str = Field(
        ...,
        description="Human-readable outcome"
    )

    # Payload
    expense: Optional[Expense] = Field(
        default=None,
        description="The expense that was added, updated or deleted"
    )
    expenses: list[Expense] = Field(
        default_factory=list,
        description="Expenses returned by list (collection order)"
    )
    total: Optional[Decimal] = Field(
        default=None,
        description="Total computed by summary"
    )
    month: Optional[int] = Field(
        default=None,
        ge=1,
        le=12
    )
    year: Optional[int] = None

    @property
    def exit_code(self) -> int:
        """Process exit status for this result."""
        return 0 if self.success else 1
