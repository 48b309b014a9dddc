# dzwallet/schemas/validation.py
"""
Result shapes returned by validators and the currency converter
"""
from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from dzwallet.core.constants import ErrorKind


class FieldResult(BaseModel):
    """Outcome of a single-field validator"""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    value: Union[float, str] = ""
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None


class RangeResult(BaseModel):
    """Outcome of a validator that checks a relation, not a single value"""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None


class ValidationReport(BaseModel):
    """Collected errors of a composite validator, in check order"""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    kinds: list[ErrorKind] = Field(default_factory=list)


class SignupReport(BaseModel):
    """Collected signup errors keyed by form field"""

    is_valid: bool
    errors: dict[str, str] = Field(default_factory=dict)


class ConversionResult(BaseModel):
    """Currency conversion outcome"""

    from_amount: float
    to_amount: float
    from_currency: str
    to_currency: str
    rate: float
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Body returned by the API for every rejected request"""

    error: str
    kind: Optional[ErrorKind] = None
    errors: list[str] = Field(default_factory=list)
    details: dict[str, Any] = Field(default_factory=dict)
