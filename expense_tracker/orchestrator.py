"""
Command Orchestrator for Expense Tracker

This module ties together validation, record operations and storage,
and defines one flow per command:

    validate → load → compute / mutate → save → result

DESIGN DECISION: Commands never print and never exit.
Each one returns a CommandResult. Errors raised along the way are caught
at this boundary and become failed results, so the presentation layer
only has to translate a result into text and an exit status.
"""

from datetime import datetime
from typing import Callable, Optional

from expense_tracker.audit import AuditLogger
from expense_tracker.config import get_settings
from expense_tracker.exceptions import ExpenseTrackerError, StorageError
from expense_tracker.models.expense import (
    CommandName,
    CommandResult,
    Expense,
    utc_now,
)
from expense_tracker.records import (
    filter_by_month,
    find_by_id,
    month_name,
    next_id,
    total,
)
from expense_tracker.services.storage import (
    ExpenseStorageInterface,
    JsonFileExpenseStorage,
)
from expense_tracker.validation import (
    parse_amount,
    parse_description,
    parse_expense_id,
    parse_month,
    parse_update_fields,
    parse_year,
)


NO_EXPENSES_MESSAGE = "No expenses found"


class ExpenseCommands:
    """
    Executes tracker commands against a storage backend.

    Every public method takes raw arguments (as typed on the command line
    or as Python values) and returns a CommandResult. Nothing raises.
    """

    def __init__(
        self,
        storage: ExpenseStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
        clock: Callable[[], datetime] = utc_now,
        currency_symbol: str = "$",
    ):
        """
        Args:
            storage: Where the expense collection lives
            audit_logger: Receives one event per command. Optional.
            clock: Source of "now" for new expenses and the default year
            currency_symbol: Prefix for totals in summary messages
        """
        self._storage = storage
        self._audit_logger = audit_logger
        self._clock = clock
        self._currency_symbol = currency_symbol

    def _run(
        self,
        command: CommandName,
        flow: Callable[[], CommandResult],
    ) -> CommandResult:
        """Run a command flow, turning tracker errors into a failed result."""
        try:
            return flow()
        except ExpenseTrackerError as e:
            if self._audit_logger:
                if isinstance(e, StorageError):
                    self._audit_logger.log_storage_error(
                        command=command.value,
                        error_kind=e.kind.value,
                        error_message=e.message,
                        path=self._storage.location,
                    )
                else:
                    self._audit_logger.log_command_rejected(
                        command=command.value,
                        error_kind=e.kind.value,
                        error_message=e.message,
                    )
            return CommandResult(
                command=command,
                success=False,
                error_kind=e.kind,
                message=e.message,
            )

    # -------------------------------------------------------------------------
    # add
    # -------------------------------------------------------------------------

    def add(self, description: str, amount) -> CommandResult:
        """Record a new expense dated now."""
        def flow() -> CommandResult:
            parsed_amount = parse_amount(amount)
            parsed_description = parse_description(description)

            expenses = self._storage.load()
            expense = Expense(
                id=next_id(expenses),
                amount=parsed_amount,
                description=parsed_description,
                date=self._clock(),
            )
            expenses.append(expense)
            self._storage.save(expenses)

            if self._audit_logger:
                self._audit_logger.log_expense_added(
                    expense_id=expense.id,
                    description=expense.description,
                    amount=str(expense.amount),
                )

            return CommandResult(
                command=CommandName.ADD,
                success=True,
                message=f"Expense added successfully (ID: {expense.id})",
                expense=expense,
            )

        return self._run(CommandName.ADD, flow)

    # -------------------------------------------------------------------------
    # list
    # -------------------------------------------------------------------------

    def list_expenses(self) -> CommandResult:
        """All expenses in collection order."""
        def flow() -> CommandResult:
            expenses = self._storage.load()

            if self._audit_logger:
                self._audit_logger.log_expenses_listed(len(expenses))

            return CommandResult(
                command=CommandName.LIST,
                success=True,
                message=NO_EXPENSES_MESSAGE if not expenses else f"{len(expenses)} expenses",
                expenses=expenses,
            )

        return self._run(CommandName.LIST, flow)

    # -------------------------------------------------------------------------
    # summary
    # -------------------------------------------------------------------------

    def summary(self, month=None, year=None) -> CommandResult:
        """
        Total spent, overall or for one month.

        Without a month the whole collection is summed. With a month, only
        expenses from that month are counted; the year defaults to the
        current one.
        """
        def flow() -> CommandResult:
            parsed_month = parse_month(month) if month is not None else None
            parsed_year = parse_year(year) if year is not None else None

            expenses = self._storage.load()

            if not expenses:
                return CommandResult(
                    command=CommandName.SUMMARY,
                    success=True,
                    message=NO_EXPENSES_MESSAGE,
                )

            if parsed_month is None:
                amount = total(expenses)
                if self._audit_logger:
                    self._audit_logger.log_summary_computed(
                        total=str(amount),
                        count=len(expenses),
                    )
                return CommandResult(
                    command=CommandName.SUMMARY,
                    success=True,
                    message=f"Total expenses: {self._currency_symbol}{amount:.2f}",
                    total=amount,
                )

            if parsed_year is None:
                parsed_year = self._clock().astimezone().year

            name = month_name(parsed_month)
            selected = filter_by_month(expenses, parsed_month, parsed_year)

            if not selected:
                return CommandResult(
                    command=CommandName.SUMMARY,
                    success=True,
                    message=f"{NO_EXPENSES_MESSAGE} for {name}",
                    month=parsed_month,
                    year=parsed_year,
                )

            amount = total(selected)
            if self._audit_logger:
                self._audit_logger.log_summary_computed(
                    total=str(amount),
                    count=len(selected),
                    month=parsed_month,
                    year=parsed_year,
                )
            return CommandResult(
                command=CommandName.SUMMARY,
                success=True,
                message=f"Total expenses for {name}: {self._currency_symbol}{amount:.2f}",
                total=amount,
                month=parsed_month,
                year=parsed_year,
            )

        return self._run(CommandName.SUMMARY, flow)

    # -------------------------------------------------------------------------
    # update
    # -------------------------------------------------------------------------

    def update(self, expense_id, description=None, amount=None) -> CommandResult:
        """Change the description and/or amount of an existing expense."""
        def flow() -> CommandResult:
            parsed_id = parse_expense_id(expense_id)

            expenses = self._storage.load()
            expense = expenses[find_by_id(expenses, parsed_id)]

            # Fields are checked only once the record is known to exist
            new_description, new_amount = parse_update_fields(description, amount)

            changes = {}
            if new_description is not None:
                expense.description = new_description
                changes["description"] = new_description
            if new_amount is not None:
                expense.amount = new_amount
                changes["amount"] = str(new_amount)

            self._storage.save(expenses)

            if self._audit_logger:
                self._audit_logger.log_expense_updated(
                    expense_id=parsed_id,
                    changes=changes,
                )

            return CommandResult(
                command=CommandName.UPDATE,
                success=True,
                message=f"Expense updated successfully (ID: {parsed_id})",
                expense=expense,
            )

        return self._run(CommandName.UPDATE, flow)

    # -------------------------------------------------------------------------
    # delete
    # -------------------------------------------------------------------------

    def delete(self, expense_id) -> CommandResult:
        """Remove an expense. The others keep their IDs and order."""
        def flow() -> CommandResult:
            parsed_id = parse_expense_id(expense_id)

            expenses = self._storage.load()
            expense = expenses.pop(find_by_id(expenses, parsed_id))
            self._storage.save(expenses)

            if self._audit_logger:
                self._audit_logger.log_expense_deleted(parsed_id)

            return CommandResult(
                command=CommandName.DELETE,
                success=True,
                message="Expense deleted successfully",
                expense=expense,
            )

        return self._run(CommandName.DELETE, flow)


def create_app_components(
    data_file=None,
    tolerate_corrupt: Optional[bool] = None,
) -> ExpenseCommands:
    """
    Factory function to create the command executor.

    Args:
        data_file: Override for the configured data file location
        tolerate_corrupt: Override for the configured corrupt-file policy

    Returns:
        ExpenseCommands wired to JSON file storage and the audit logger
    """
    settings = get_settings()
    audit_logger = AuditLogger()
    storage = JsonFileExpenseStorage(
        path=data_file if data_file is not None else settings.storage.data_file,
        tolerate_corrupt=tolerate_corrupt,
        audit_logger=audit_logger,
    )
    return ExpenseCommands(
        storage=storage,
        audit_logger=audit_logger,
        currency_symbol=settings.app.currency_symbol,
    )
