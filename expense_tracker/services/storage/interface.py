"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the JSON file as the default backend
2. Use in-memory storage for testing
3. Keep command logic decoupled from storage implementation

The interface is intentionally tiny. The whole collection is small enough
to load, change in memory and write back on every command, so there is
no per-record API.
"""

from abc import ABC, abstractmethod

from expense_tracker.models.expense import Expense


class ExpenseStorageInterface(ABC):
    """
    Abstract interface for expense storage.

    Any storage implementation must implement these methods.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where the data lives."""
        pass

    @abstractmethod
    def load(self) -> list[Expense]:
        """
        Load the full expense collection.

        Returns:
            All expenses in insertion order. Empty if nothing was saved yet.

        Raises:
            StorageReadError: If stored data exists but cannot be read
        """
        pass

    @abstractmethod
    def save(self, expenses: list[Expense]) -> None:
        """
        Replace the stored collection with `expenses`.

        Args:
            expenses: The full collection, in the order to persist it

        Raises:
            StorageWriteError: If the write fails
        """
        pass
