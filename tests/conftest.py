"""Shared fixtures: isolated settings, temporary data files, a recording audit logger."""

from datetime import datetime
from decimal import Decimal

import pytest

from expense_tracker.audit import AuditLogger
from expense_tracker.config import get_settings
from expense_tracker.models.expense import Expense


class RecordingAuditLogger(AuditLogger):
    """Keeps events in a list instead of writing them out."""

    def __init__(self):
        super().__init__()
        self.events = []

    def log(self, event):
        self.events.append(event)
        return True

    @property
    def event_types(self):
        return [event.event_type.value for event in self.events]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """No env vars or .env file from the developer's machine leak into tests."""
    for name in (
        "EXPENSE_TRACKER_DATA_FILE",
        "EXPENSE_TRACKER_TOLERATE_CORRUPT_STORAGE",
        "EXPENSE_TRACKER_LOG_LEVEL",
        "EXPENSE_TRACKER_CURRENCY_SYMBOL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "expenses.json"


@pytest.fixture
def audit_logger():
    return RecordingAuditLogger()


def local(year, month, day, hour=12):
    """Timezone-aware timestamp in the machine's local zone."""
    return datetime(year, month, day, hour, 0).astimezone()


def make_expense(expense_id, amount, description="Item", when=None):
    return Expense(
        id=expense_id,
        amount=Decimal(str(amount)),
        description=description,
        date=when or local(2025, 3, 15),
    )
