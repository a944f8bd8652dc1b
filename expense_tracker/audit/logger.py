"""
Audit Logger

DESIGN DECISION: Every command is logged as a structured audit event.
This provides:
1. Traceability of every change to the data file
2. Debugging capability

The audit logger:
- Writes JSON lines to stderr so stdout stays clean for command output
"""

import logging
import sys
from typing import Optional

import structlog

from expense_tracker.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


_LEVELS = {
    AuditSeverity.DEBUG: logging.DEBUG,
    AuditSeverity.INFO: logging.INFO,
    AuditSeverity.WARNING: logging.WARNING,
    AuditSeverity.ERROR: logging.ERROR,
}


def configure_logging(level: str = "WARNING") -> None:
    """
    Configure stdlib logging and structlog.

    Call once at process start. The CLI does this before running a command.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Every event goes to the structured local log at the event's severity.
    """

    def __init__(self, logger_name: str = "expense_tracker.audit"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event at its severity.

        Returns True once the event has been handed to the logger.
        """
        self._logger.log(_LEVELS[event.severity], "audit_event", **event.to_log_dict())
        return True

    def log_expense_added(self, expense_id: int, description: str, amount: str) -> None:
        """Log a new expense."""
        self.log(AuditEventBuilder.expense_added(
            expense_id=expense_id,
            description=description,
            amount=amount,
        ))

    def log_expense_updated(self, expense_id: int, changes: dict[str, str]) -> None:
        """Log an in-place update."""
        self.log(AuditEventBuilder.expense_updated(
            expense_id=expense_id,
            changes=changes,
        ))

    def log_expense_deleted(self, expense_id: int) -> None:
        self.log(AuditEventBuilder.expense_deleted(expense_id))

    def log_expenses_listed(self, count: int) -> None:
        self.log(AuditEventBuilder.expenses_listed(count))

    def log_summary_computed(
        self,
        total: str,
        count: int,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> None:
        self.log(AuditEventBuilder.summary_computed(
            total=total,
            count=count,
            month=month,
            year=year,
        ))

    def log_command_rejected(
        self,
        command: str,
        error_kind: str,
        error_message: str,
    ) -> None:
        """Log a command that failed validation or lookup."""
        self.log(AuditEventBuilder.command_rejected(
            command=command,
            error_kind=error_kind,
            error_message=error_message,
        ))

    def log_storage_error(
        self,
        command: str,
        error_kind: str,
        error_message: str,
        path: str,
    ) -> None:
        """Log a storage read or write failure."""
        self.log(AuditEventBuilder.storage_error(
            command=command,
            error_kind=error_kind,
            error_message=error_message,
            path=path,
        ))
