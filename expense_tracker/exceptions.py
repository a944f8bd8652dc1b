"""
Exception Hierarchy

Every error raised on purpose inside the tracker derives from
ExpenseTrackerError and carries the ErrorKind it maps to, so the
dispatcher can turn any of them into a failed CommandResult.
"""

from expense_tracker.models.expense import ErrorKind


class ExpenseTrackerError(Exception):
    """Base exception for all tracker failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# =============================================================================
# VALIDATION - raised before any mutation is attempted
# =============================================================================

class ValidationError(ExpenseTrackerError):
    """User input failed validation."""
    pass


class InvalidAmountError(ValidationError):
    """Amount is not a number or is not greater than zero."""
    kind = ErrorKind.INVALID_AMOUNT


class InvalidDescriptionError(ValidationError):
    """Description is empty after trimming."""
    kind = ErrorKind.INVALID_DESCRIPTION


class InvalidIdError(ValidationError):
    """Expense ID is not an integer."""
    kind = ErrorKind.INVALID_ID


class InvalidMonthError(ValidationError):
    """Month is not an integer between 1 and 12."""
    kind = ErrorKind.INVALID_MONTH


class InvalidYearError(ValidationError):
    """Year is not a usable calendar year."""
    kind = ErrorKind.INVALID_YEAR


class MissingArgumentsError(ValidationError):
    """Update was called with nothing to change."""
    kind = ErrorKind.MISSING_ARGUMENTS


# =============================================================================
# LOOKUP
# =============================================================================

class ExpenseNotFoundError(ExpenseTrackerError):
    """No expense with the requested ID."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, expense_id: int):
        super().__init__(f"Expense with ID {expense_id} not found")
        self.expense_id = expense_id


# =============================================================================
# STORAGE
# =============================================================================

class StorageError(ExpenseTrackerError):
    """Base exception for storage operations."""
    pass


class StorageReadError(StorageError):
    """Data file exists but could not be read or parsed."""
    kind = ErrorKind.STORAGE_READ_ERROR


class StorageWriteError(StorageError):
    """Data file could not be written."""
    kind = ErrorKind.STORAGE_WRITE_ERROR
