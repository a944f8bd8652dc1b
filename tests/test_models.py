"""
Tests for Expense Tracker models

Test strategy:
1. Unit tests for individual components (models, operations, validation)
2. Storage tests against real temporary files
3. Command and CLI tests end to end, with the data file in tmp_path
"""

import json
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from expense_tracker.models.expense import (
    CommandName,
    CommandResult,
    ErrorKind,
    Expense,
)
from expense_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)


class TestExpenseModel:
    """Tests for the Expense model."""

    def test_expense_creation(self):
        """Test Expense model creation."""
        expense = Expense(id=1, amount=Decimal("20.00"), description="Lunch")
        assert expense.id == 1
        assert expense.amount == Decimal("20.00")
        assert expense.description == "Lunch"
        assert expense.date.tzinfo is not None

    def test_expense_strips_whitespace(self):
        """Test that whitespace is stripped from the description."""
        expense = Expense(id=1, amount=Decimal("5"), description="  Coffee  ")
        assert expense.description == "Coffee"

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-3.50")])
    def test_expense_rejects_non_positive_amount(self, amount):
        """Test that zero and negative amounts are rejected."""
        with pytest.raises(ValueError):
            Expense(id=1, amount=amount, description="Test")

    def test_expense_rejects_blank_description(self):
        """Test that a whitespace-only description is rejected."""
        with pytest.raises(ValueError):
            Expense(id=1, amount=Decimal("1"), description="   ")

    def test_expense_rejects_zero_id(self):
        with pytest.raises(ValueError):
            Expense(id=0, amount=Decimal("1"), description="Test")

    def test_amount_and_description_are_mutable(self):
        """Test in-place updates of the mutable fields."""
        expense = Expense(id=1, amount=Decimal("20"), description="Lunch")
        expense.amount = Decimal("7.5")
        expense.description = "Brunch"
        assert expense.amount == Decimal("7.5")
        assert expense.description == "Brunch"

    def test_assignment_is_validated(self):
        """Test that updates cannot break the positive-amount invariant."""
        expense = Expense(id=1, amount=Decimal("20"), description="Lunch")
        with pytest.raises(ValueError):
            expense.amount = Decimal("0")
        assert expense.amount == Decimal("20")

    def test_id_and_date_are_frozen(self):
        """Test that id and date cannot change after creation."""
        expense = Expense(id=1, amount=Decimal("20"), description="Lunch")
        with pytest.raises(ValueError):
            expense.id = 2
        with pytest.raises(ValueError):
            expense.date = datetime(2020, 1, 1, tzinfo=timezone.utc)

    def test_json_layout(self):
        """Test that amounts are written as numbers and dates as ISO strings."""
        expense = Expense(
            id=3,
            amount=Decimal("20"),
            description="Lunch",
            date=datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
        )
        data = json.loads(expense.model_dump_json())
        assert data == {
            "id": 3,
            "amount": 20.0,
            "description": "Lunch",
            "date": "2024-01-15T12:00:00Z",
        }

    def test_parses_legacy_record(self):
        """Test records written with millisecond Z timestamps."""
        expense = Expense.model_validate(
            {"id": 1, "amount": 5.5, "description": "Coffee", "date": "2024-01-15T12:00:00.000Z"}
        )
        assert expense.amount == Decimal("5.5")
        assert expense.date == datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


class TestCommandResult:
    """Tests for the CommandResult model."""

    def test_success_exit_code(self):
        result = CommandResult(command=CommandName.LIST, success=True, message="No expenses found")
        assert result.exit_code == 0
        assert result.error_kind is None
        assert result.expenses == []

    def test_failure_exit_code(self):
        result = CommandResult(
            command=CommandName.SUMMARY,
            success=False,
            error_kind=ErrorKind.INVALID_MONTH,
            message="Month must be between 1 and 12",
        )
        assert result.exit_code == 1
        assert result.error_kind == ErrorKind.INVALID_MONTH


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.EXPENSE_DELETED,
            description="Expense 1 deleted",
        )
        assert event.event_type == AuditEventType.EXPENSE_DELETED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEventBuilder.expense_added(
            expense_id=1,
            description="Lunch",
            amount="20",
        )
        log_dict = event.to_log_dict()
        assert log_dict["event_type"] == "expense_added"
        assert log_dict["expense_id"] == 1
        assert log_dict["details"]["amount"] == "20"

    def test_builder_expense_updated(self):
        event = AuditEventBuilder.expense_updated(
            expense_id=2,
            changes={"amount": "7.5", "description": "Tea"},
        )
        assert event.command == "update"
        assert event.description == "Expense 2 updated: amount, description"

    def test_builder_command_rejected(self):
        """Test AuditEventBuilder.command_rejected."""
        event = AuditEventBuilder.command_rejected(
            command="summary",
            error_kind="invalid_month",
            error_message="Month must be between 1 and 12",
        )
        assert event.event_type == AuditEventType.COMMAND_REJECTED
        assert event.error_kind == "invalid_month"

    def test_builder_storage_error_is_error_severity(self):
        event = AuditEventBuilder.storage_error(
            command="add",
            error_kind="storage_write_error",
            error_message="disk full",
            path="/tmp/expenses.json",
        )
        assert event.severity == AuditSeverity.ERROR
        assert event.details["path"] == "/tmp/expenses.json"

    def test_builder_summary_scope(self):
        event = AuditEventBuilder.summary_computed(total="25.00", count=2, month=3, year=2025)
        assert "2025-03" in event.description
        overall = AuditEventBuilder.summary_computed(total="25.00", count=2)
        assert "all" in overall.description


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
