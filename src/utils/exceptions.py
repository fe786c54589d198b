"""Custom exception classes."""
from typing import Iterable


class RegistrationError(Exception):
    """Base class for registration failures surfaced to API callers."""

    status_code = 500


class ValidationError(RegistrationError):
    """Raised when required registration fields are missing or empty."""

    status_code = 400

    def __init__(self, missing_fields: Iterable[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")


class MethodError(RegistrationError):
    """Raised when the endpoint is called with a verb other than POST."""

    status_code = 405

    def __init__(self, method: str, allowed: str = "POST"):
        self.method = method
        self.allowed = allowed
        super().__init__("Method not allowed")


class PersistenceError(RegistrationError):
    """Raised when the document store rejects or cannot take a write."""

    status_code = 500
