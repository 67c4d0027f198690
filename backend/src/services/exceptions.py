"""Shared exceptions for service layer operations."""


class PersistenceError(Exception):
    """
    Raised when a datastore call fails.

    Wraps the underlying SQLAlchemy error (connection loss, constraint
    violation, timeout). Services never retry; the API maps this to a 500.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Datastore operation failed: {operation}")
