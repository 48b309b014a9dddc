from .validation import (
    ConversionResult,
    ErrorResponse,
    FieldResult,
    RangeResult,
    SignupReport,
    ValidationReport,
)

__all__ = [
    "ConversionResult",
    "ErrorResponse",
    "FieldResult",
    "RangeResult",
    "SignupReport",
    "ValidationReport",
]
