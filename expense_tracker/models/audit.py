"""
Audit Models for Expense Tracker

Every command that runs is recorded as an audit event.
This provides:
1. Traceability of every change to the data file
2. Debugging information when things go wrong
3. Ability to reconstruct what happened from the log alone

DESIGN DECISION: Audit events are emitted to the structured log only.
The data file holds expenses and nothing else.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from expense_tracker.models.expense import utc_now


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Mutations
    EXPENSE_ADDED = "expense_added"
    EXPENSE_UPDATED = "expense_updated"
    EXPENSE_DELETED = "expense_deleted"

    # Reads
    EXPENSES_LISTED = "expenses_listed"
    SUMMARY_COMPUTED = "summary_computed"

    # Failures
    COMMAND_REJECTED = "command_rejected"
    STORAGE_ERROR = "storage_error"
    STORAGE_RECOVERED = "storage_recovered"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    timestamp: datetime = Field(
        default_factory=utc_now,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context
    command: Optional[str] = Field(
        default=None,
        description="Command that produced the event"
    )
    expense_id: Optional[int] = Field(
        default=None,
        description="ID of the expense this event relates to"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_kind: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "command": self.command,
            "expense_id": self.expense_id,
            "description": self.description,
            "details": self.details,
            "error_kind": self.error_kind,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.expense_added(expense_id, description, amount)
        event = AuditEventBuilder.command_rejected("update", kind, message)
    """

    @staticmethod
    def expense_added(
        expense_id: int,
        description: str,
        amount: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            command="add",
            expense_id=expense_id,
            description=f"Expense added: {description} - {amount}",
            details={
                "description": description,
                "amount": amount,
            },
        )

    @staticmethod
    def expense_updated(
        expense_id: int,
        changes: dict[str, str],
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_UPDATED,
            command="update",
            expense_id=expense_id,
            description=f"Expense {expense_id} updated: {', '.join(sorted(changes))}",
            details={
                "changes": changes,
            },
        )

    @staticmethod
    def expense_deleted(expense_id: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_DELETED,
            command="delete",
            expense_id=expense_id,
            description=f"Expense {expense_id} deleted",
        )

    @staticmethod
    def expenses_listed(count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSES_LISTED,
            severity=AuditSeverity.DEBUG,
            command="list",
            description=f"Listed {count} expenses",
            details={
                "count": count,
            },
        )

    @staticmethod
    def summary_computed(
        total: str,
        count: int,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> AuditEvent:
        scope = f"{year}-{month:02d}" if month else "all"
        return AuditEvent(
            event_type=AuditEventType.SUMMARY_COMPUTED,
            severity=AuditSeverity.DEBUG,
            command="summary",
            description=f"Summary for {scope}: {total} over {count} expenses",
            details={
                "total": total,
                "count": count,
                "month": month,
                "year": year,
            },
        )

    @staticmethod
    def command_rejected(
        command: str,
        error_kind: str,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.COMMAND_REJECTED,
            severity=AuditSeverity.INFO,
            command=command,
            description=f"Command {command} rejected: {error_kind}",
            error_kind=error_kind,
            error_message=error_message,
        )

    @staticmethod
    def storage_error(
        command: str,
        error_kind: str,
        error_message: str,
        path: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_ERROR,
            severity=AuditSeverity.ERROR,
            command=command,
            description=f"Storage failure during {command}",
            details={
                "path": path,
            },
            error_kind=error_kind,
            error_message=error_message,
        )

    @staticmethod
    def storage_recovered(path: str, error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORAGE_RECOVERED,
            severity=AuditSeverity.WARNING,
            description="Unreadable data file treated as empty",
            details={
                "path": path,
            },
            error_message=error_message,
        )
