"""
Storage errors raised by database/database.py.

Every sqlite3 failure is translated into one of these so the entry point
only has to catch StorageError.
"""


class StorageError(Exception):
    """Base exception for all card storage failures."""
    pass


class StorageOpenError(StorageError):
    """Raised when the database file cannot be opened or created."""
    pass


class SchemaError(StorageError):
    """Raised when the cards table cannot be created."""
    pass


class ConstraintError(StorageError):
    """Raised when inserting a card whose front already exists."""
    pass


class QueryError(StorageError):
    """Raised when a statement fails to execute."""
    pass


class InputOverflowError(StorageError):
    """Raised when a text field is too large to bind as a query parameter."""
    pass
