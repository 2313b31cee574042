"""
Exceptions raised by the degree planning engine.

Only data-access failures are exceptional. Dirty user data (malformed
semester labels, incomplete requirement rows) degrades to empty results and
an unknown program yields an empty audit, so neither has an exception type.
"""


class RecordStoreError(RuntimeError):
    """Raised when the record store cannot be reached or rejects a query."""

    def __init__(self, operation: str, message: str = ""):
        self.operation = operation
        detail = f": {message}" if message else ""
        super().__init__(f"Record store {operation} failed{detail}")
