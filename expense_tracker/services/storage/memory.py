"""In-memory storage, used by tests and anything embedding the tracker."""

from typing import Optional

from expense_tracker.models.expense import Expense
from expense_tracker.services.storage.interface import ExpenseStorageInterface


class InMemoryExpenseStorage(ExpenseStorageInterface):
    """
    Keeps the collection in a list.

    Loads and saves hand out deep copies, so changes made to a loaded
    collection are invisible until they are saved, same as with a file.
    """

    def __init__(self, expenses: Optional[list[Expense]] = None):
        self._expenses = [e.model_copy(deep=True) for e in expenses or []]
        self.save_count = 0

    @property
    def location(self) -> str:
        return "memory"

    def load(self) -> list[Expense]:
        return [e.model_copy(deep=True) for e in self._expenses]

    def save(self, expenses: list[Expense]) -> None:
        self._expenses = [e.model_copy(deep=True) for e in expenses]
        self.save_count += 1
