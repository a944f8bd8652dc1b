"""
JSON File Storage Implementation

DESIGN DECISION: A single pretty-printed JSON file is the storage backend because:
1. Users can read and hand-edit their data
2. No database setup required
3. The whole collection fits comfortably in memory

TRADEOFFS:
- No locking: two processes writing at once means the last writer wins
- Every command rewrites the whole file (fine at personal scale)

Writes go to a temporary file in the same directory which is then renamed
over the target, so a reader never observes a half-written file.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from expense_tracker.audit import AuditLogger
from expense_tracker.config import get_settings
from expense_tracker.exceptions import StorageReadError, StorageWriteError
from expense_tracker.models.audit import AuditEventBuilder
from expense_tracker.models.expense import Expense
from expense_tracker.services.storage.interface import ExpenseStorageInterface


EXPENSE_LIST_ADAPTER = TypeAdapter(list[Expense])


class JsonFileExpenseStorage(ExpenseStorageInterface):
    """
    JSON file implementation of expense storage.

    The file holds a JSON array of
    {"id", "amount", "description", "date"} objects.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        tolerate_corrupt: Optional[bool] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        """
        Initialize file storage.

        Args:
            path: Data file location. Defaults to the configured data_file.
            tolerate_corrupt: Return an empty collection instead of raising
                when the file cannot be read. Defaults to configuration.
            audit_logger: Where to report recovered read failures.
        """
        settings = get_settings().storage
        self._path = Path(path).expanduser() if path is not None else settings.data_file
        self._tolerate_corrupt = (
            settings.tolerate_corrupt_storage
            if tolerate_corrupt is None
            else tolerate_corrupt
        )
        self._audit_logger = audit_logger

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def load(self) -> list[Expense]:
        """Load all expenses from the data file."""
        if not self._path.exists():
            return []

        try:
            return self._read()
        except StorageReadError as e:
            if not self._tolerate_corrupt:
                raise
            if self._audit_logger:
                self._audit_logger.log(
                    AuditEventBuilder.storage_recovered(
                        path=self.location,
                        error_message=e.message,
                    )
                )
            return []

    def _read(self) -> list[Expense]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageReadError(f"Could not read {self._path}: {e}") from e

        # A zero-length file holds no expenses yet
        if not raw.strip():
            return []

        try:
            expenses = EXPENSE_LIST_ADAPTER.validate_json(raw)
        except ValidationError as e:
            raise StorageReadError(
                f"Data file {self._path} is corrupt "
                f"({e.error_count()} invalid value(s))"
            ) from e

        seen: set[int] = set()
        for expense in expenses:
            if expense.id in seen:
                raise StorageReadError(
                    f"Data file {self._path} is corrupt (duplicate ID {expense.id})"
                )
            seen.add(expense.id)

        return expenses

    def save(self, expenses: list[Expense]) -> None:
        """Atomically replace the data file with `expenses`."""
        payload = EXPENSE_LIST_ADAPTER.dump_json(expenses, indent=2) + b"\n"

        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=str(self._path.parent),
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError(f"Could not write {self._path}: {e}") from e
