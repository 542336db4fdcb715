"""
Exceptions raised by the business tier.
"""


class ReportingError(Exception):
    """Raised when a reporting operation fails for any reason."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"Error in {operation}: '{message}'")
