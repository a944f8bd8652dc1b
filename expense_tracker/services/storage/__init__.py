"""
Storage Services Package

Provides the abstract storage interface and its implementations.
The JSON file is the default backend; the in-memory one backs tests.
"""

from expense_tracker.exceptions import (
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from expense_tracker.services.storage.interface import ExpenseStorageInterface
from expense_tracker.services.storage.json_file import JsonFileExpenseStorage
from expense_tracker.services.storage.memory import InMemoryExpenseStorage

__all__ = [
    # Interfaces
    "ExpenseStorageInterface",
    # Exceptions
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # Implementations
    "InMemoryExpenseStorage",
    "JsonFileExpenseStorage",
]
