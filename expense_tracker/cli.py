"""
Command Line Interface for Expense Tracker

This is the presentation layer. It:
1. Parses arguments
2. Hands raw values to ExpenseCommands (which does all validation)
3. Renders the CommandResult on stdout/stderr
4. Returns the exit status

Nothing below this layer prints or exits.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO

from expense_tracker import __version__
from expense_tracker.audit import configure_logging
from expense_tracker.config import get_settings
from expense_tracker.models.expense import CommandName, CommandResult, Expense
from expense_tracker.orchestrator import ExpenseCommands, create_app_components
from expense_tracker.records import format_date


TABLE_HEADER = f"{'ID':<2}  {'Date':<10} {'Description':<23} {'Amount':>8}"
TABLE_RULE = "--  ---------- ----------------------- --------"


def format_expense_row(expense: Expense) -> str:
    """One fixed-width table row."""
    return (
        f"{str(expense.id):<2}  "
        f"{format_date(expense.date):<10} "
        f"{expense.description:<23} "
        f"{expense.amount:>8.2f}"
    )


def render_table(expenses: list[Expense]) -> str:
    lines = [TABLE_HEADER, TABLE_RULE]
    lines.extend(format_expense_row(expense) for expense in expenses)
    return "\n".join(lines)


def render(
    result: CommandResult,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Write a result for a human and return the exit status."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    if not result.success:
        print(f"Error: {result.message}", file=stderr)
    elif result.command == CommandName.LIST and result.expenses:
        print(render_table(result.expenses), file=stdout)
    else:
        print(result.message, file=stdout)
    return result.exit_code


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expense-tracker",
        description="Track personal expenses in a local JSON file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--file",
        type=Path,
        help="Path to the expenses JSON file (default: EXPENSE_TRACKER_DATA_FILE or ./expenses.json)",
    )
    parser.add_argument(
        "--log-level",
        help="Audit log level on stderr (default: EXPENSE_TRACKER_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Add an expense")
    add.add_argument("--description", required=True, help="Expense description")
    add.add_argument("--amount", required=True, help="Expense amount")

    subparsers.add_parser(
        "list",
        help="List all expenses (dates are shown in local time)",
        description="List all expenses. Dates are shown in local time.",
    )

    summary = subparsers.add_parser("summary", help="Show total expenses")
    summary.add_argument("--month", help="Only count this month (1-12) of the current year")
    summary.add_argument("--year", help="Year for --month (default: current year)")

    update = subparsers.add_parser("update", help="Update an expense")
    update.add_argument("--id", required=True, dest="expense_id", help="Expense ID to update")
    update.add_argument("--description", help="New description")
    update.add_argument("--amount", help="New amount")

    delete = subparsers.add_parser("delete", help="Delete an expense")
    delete.add_argument("--id", required=True, dest="expense_id", help="Expense ID to delete")

    return parser


def dispatch(commands: ExpenseCommands, args: argparse.Namespace) -> CommandResult:
    """Route parsed arguments to the matching command."""
    command = CommandName(args.command)

    if command == CommandName.ADD:
        return commands.add(description=args.description, amount=args.amount)
    if command == CommandName.LIST:
        return commands.list_expenses()
    if command == CommandName.SUMMARY:
        return commands.summary(month=args.month, year=args.year)
    if command == CommandName.UPDATE:
        return commands.update(
            expense_id=args.expense_id,
            description=args.description,
            amount=args.amount,
        )
    return commands.delete(expense_id=args.expense_id)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or get_settings().app.log_level)

    commands = create_app_components(data_file=args.file)
    return render(dispatch(commands, args))


if __name__ == "__main__":
    sys.exit(main())
