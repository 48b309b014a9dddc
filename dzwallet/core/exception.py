"""
Custom exceptions for clear error handling
"""
from typing import Any

from dzwallet.core.constants import ErrorKind, message_for


class BaseAppException(Exception):
    """Base exception for all application errors"""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    @property
    def kind(self) -> ErrorKind | None:
        return self.details.get("kind")

    @classmethod
    def from_kind(cls, kind: ErrorKind, **params: Any):
        """Build the exception from the message table"""
        return cls(message_for(kind, **params), {"kind": kind, **params})


class ValidationError(BaseAppException):
    """Raised when input validation fails"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, details)
        self.errors: list[str] = list(self.details.get("errors", [message]))


class RateLimitExceededError(BaseAppException):
    """Raised when a financial action is attempted too soon or too often"""
    pass


class UnsupportedConversionError(BaseAppException):
    """Raised when the rate table has no entry for a currency pair"""
    pass


class ResourceNotFoundError(BaseAppException):
    """Raised when requested resource doesn't exist"""
    pass


class BackendAPIError(BaseAppException):
    """Raised when the backend RPC layer fails or rejects a call"""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.status_code = status_code
        super().__init__(message, details)

    def __str__(self) -> str:
        return f"Backend API Error ({self.status_code}): {self.message}"
