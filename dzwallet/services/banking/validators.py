# dzwallet/services/banking/validators.py
"""
Banking validation rules

Field validators return a result record instead of raising, so composite
validators can collect every failing field and the client can show all
problems at once.
"""
import math
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Union

from dzwallet.core.constants import (
    ACCOUNT_NUMBER_PATTERN,
    ALGERIA_COUNTRY_CODE,
    ALGERIAN_PHONE_PATTERN,
    DEFAULT_CURRENCY,
    EMAIL_PATTERN,
    FULL_NAME_MIN_LENGTH,
    INTERNATIONAL_PHONE_PATTERN,
    MAX_AMOUNT,
    MAX_PROFIT_RATE,
    MIN_AMOUNT,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    REFERRAL_CODE_MIN_LENGTH,
    SUPPORTED_CURRENCIES,
    USERNAME_MIN_LENGTH,
    USERNAME_PATTERN,
    ErrorKind,
    InvestmentType,
    TransactionType,
    message_for,
)
from dzwallet.core.logging import logger
from dzwallet.schemas.banking import InvestmentPayload, SignupPayload, TransactionPayload
from dzwallet.schemas.validation import FieldResult, RangeResult, SignupReport, ValidationReport

_ACCOUNT_RE = re.compile(ACCOUNT_NUMBER_PATTERN)
_ALGERIAN_PHONE_RE = re.compile(ALGERIAN_PHONE_PATTERN)
_INTERNATIONAL_PHONE_RE = re.compile(INTERNATIONAL_PHONE_PATTERN)
_EMAIL_RE = re.compile(EMAIL_PATTERN)
_USERNAME_RE = re.compile(USERNAME_PATTERN)

_TRANSACTION_TYPES = frozenset(t.value for t in TransactionType)
_INVESTMENT_TYPES = frozenset(t.value for t in InvestmentType)

Number = Union[int, float, Decimal, str, None]


def parse_number(raw: Any) -> float | None:
    """Parse user input into a finite float, or None"""
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float, Decimal)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None

    return value if math.isfinite(value) else None


def _fail(kind: ErrorKind, value: Union[float, str] = "", **params: Any) -> FieldResult:
    return FieldResult(is_valid=False, value=value, error=message_for(kind, **params), kind=kind)


# ==================== AMOUNTS ====================

def validate_amount(
    amount: Number,
    min_amount: float = MIN_AMOUNT,
    max_amount: float = MAX_AMOUNT,
    balance: float | None = None,
) -> FieldResult:
    """
    Bounds-check a monetary amount.

    Checks run in order and the first failure wins: format, sign, zero,
    minimum, maximum, then available balance when one is given.
    """
    value = parse_number(amount)

    if value is None:
        return _fail(ErrorKind.INVALID_AMOUNT_FORMAT, 0)

    if value < 0:
        return _fail(ErrorKind.AMOUNT_NEGATIVE, 0)

    if value == 0:
        return _fail(ErrorKind.AMOUNT_NON_POSITIVE, 0)

    if value < min_amount:
        return _fail(ErrorKind.AMOUNT_BELOW_MINIMUM, 0, min_amount=f"{min_amount:,.0f}")

    if value > max_amount:
        return _fail(ErrorKind.AMOUNT_ABOVE_MAXIMUM, 0)

    if balance is not None and value > balance:
        return _fail(ErrorKind.INSUFFICIENT_BALANCE, 0)

    return FieldResult(is_valid=True, value=value)


def validate_profit_rate(rate: Number) -> FieldResult:
    """Profit rate is a percentage in [0, 100]"""
    value = parse_number(rate)

    if value is None:
        return _fail(ErrorKind.INVALID_PROFIT_RATE_FORMAT, 0)

    if value < 0:
        return _fail(ErrorKind.PROFIT_RATE_NEGATIVE, 0)

    if value > MAX_PROFIT_RATE:
        return _fail(ErrorKind.PROFIT_RATE_ABOVE_MAXIMUM, 0)

    return FieldResult(is_valid=True, value=value)


# ==================== CLOSED SETS ====================

def _validate_member(raw: Any, allowed: frozenset[str] | tuple[str, ...], kind: ErrorKind) -> FieldResult:
    normalized = str(raw or "").strip().lower()
    if normalized not in allowed:
        return _fail(kind)
    return FieldResult(is_valid=True, value=normalized)


def validate_currency(currency: str) -> FieldResult:
    return _validate_member(currency, SUPPORTED_CURRENCIES, ErrorKind.UNSUPPORTED_CURRENCY)


def validate_transaction_type(type_: str) -> FieldResult:
    return _validate_member(type_, _TRANSACTION_TYPES, ErrorKind.INVALID_TRANSACTION_TYPE)


def validate_investment_type(type_: str) -> FieldResult:
    return _validate_member(type_, _INVESTMENT_TYPES, ErrorKind.INVALID_INVESTMENT_TYPE)


# ==================== DATES ====================

def _parse_datetime(raw: Any) -> datetime | None:
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, date):
        parsed = datetime(raw.year, raw.month, raw.day)
    elif isinstance(raw, str) and raw.strip():
        try:
            parsed = datetime.fromisoformat(raw.strip())
        except ValueError:
            return None
    else:
        return None

    # Naive values are read as UTC so they compare with aware ones
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_date_range(start_date: Any, end_date: Any) -> RangeResult:
    """End must be strictly after start"""
    start = _parse_datetime(start_date)
    end = _parse_datetime(end_date)

    if start is None:
        kind = ErrorKind.INVALID_START_DATE
    elif end is None:
        kind = ErrorKind.INVALID_END_DATE
    elif end <= start:
        kind = ErrorKind.END_NOT_AFTER_START
    else:
        return RangeResult(is_valid=True)

    return RangeResult(is_valid=False, error=message_for(kind), kind=kind)


# ==================== IDENTIFIERS ====================

def validate_account_number(account_number: str) -> FieldResult:
    """Account numbers are ACC followed by exactly 9 digits"""
    trimmed = (account_number or "").strip()

    if not trimmed:
        return _fail(ErrorKind.ACCOUNT_NUMBER_REQUIRED)

    if not _ACCOUNT_RE.match(trimmed):
        return _fail(ErrorKind.INVALID_ACCOUNT_NUMBER)

    return FieldResult(is_valid=True, value=trimmed)


def validate_phone_number(phone: str, country_code: str = ALGERIA_COUNTRY_CODE) -> FieldResult:
    """
    Validate an optional phone number.

    An empty phone is valid here (the field is optional on this path),
    unlike validate_algerian_phone_number.
    """
    trimmed = (phone or "").strip()

    if not trimmed:
        return FieldResult(is_valid=True, value="")

    clean_phone = re.sub(r"[\s-]", "", trimmed)

    if country_code == ALGERIA_COUNTRY_CODE:
        full_number = (
            clean_phone
            if clean_phone.startswith(ALGERIA_COUNTRY_CODE)
            else f"{ALGERIA_COUNTRY_CODE}{clean_phone}"
        )
        if not _ALGERIAN_PHONE_RE.match(full_number):
            return _fail(ErrorKind.INVALID_PHONE_NUMBER)
        return FieldResult(is_valid=True, value=full_number)

    if not _INTERNATIONAL_PHONE_RE.match(clean_phone):
        return _fail(ErrorKind.INVALID_INTERNATIONAL_PHONE)

    return FieldResult(is_valid=True, value=clean_phone)


def normalize_algerian_phone(phone: str) -> str:
    """Keep digits and '+', drop one leading 0 and prefix +213 when missing"""
    clean_phone = re.sub(r"[^\d+]", "", phone)
    if clean_phone.startswith(ALGERIA_COUNTRY_CODE):
        return clean_phone
    if clean_phone.startswith("0"):
        clean_phone = clean_phone[1:]
    return f"{ALGERIA_COUNTRY_CODE}{clean_phone}"


def validate_algerian_phone_number(phone: str) -> FieldResult:
    """Validate a required Algerian mobile number (+213 then 5, 6 or 7 and 8 digits)"""
    trimmed = (phone or "").strip()

    if not trimmed:
        return _fail(ErrorKind.PHONE_REQUIRED)

    full_number = normalize_algerian_phone(trimmed)

    if not _ALGERIAN_PHONE_RE.match(full_number):
        return _fail(ErrorKind.INVALID_ALGERIAN_PHONE)

    return FieldResult(is_valid=True, value=full_number)


def validate_email(email: str) -> FieldResult:
    trimmed = (email or "").strip().lower()

    if not trimmed:
        return _fail(ErrorKind.EMAIL_REQUIRED)

    if not _EMAIL_RE.match(trimmed):
        return _fail(ErrorKind.INVALID_EMAIL)

    return FieldResult(is_valid=True, value=trimmed)


def validate_password(password: str) -> RangeResult:
    """Length only; character classes are not enforced here"""
    if not password:
        kind = ErrorKind.PASSWORD_REQUIRED
    elif len(password) < PASSWORD_MIN_LENGTH:
        kind = ErrorKind.PASSWORD_TOO_SHORT
    elif len(password) > PASSWORD_MAX_LENGTH:
        kind = ErrorKind.PASSWORD_TOO_LONG
    else:
        return RangeResult(is_valid=True)

    return RangeResult(is_valid=False, error=message_for(kind), kind=kind)


# ==================== COMPOSITES ====================

def validate_signup_data(data: Union[SignupPayload, Mapping[str, Any]]) -> SignupReport:
    """Validate the whole signup form, one message per failing field"""
    if isinstance(data, Mapping):
        data = SignupPayload.model_validate(data)

    errors: dict[str, str] = {}

    full_name = data.full_name.strip()
    if not full_name:
        errors["full_name"] = message_for(ErrorKind.FULL_NAME_REQUIRED)
    elif len(full_name) < FULL_NAME_MIN_LENGTH:
        errors["full_name"] = message_for(ErrorKind.FULL_NAME_TOO_SHORT)

    email = validate_email(data.email)
    if not email.is_valid:
        errors["email"] = email.error

    phone = validate_algerian_phone_number(data.phone)
    if not phone.is_valid:
        errors["phone"] = phone.error

    username = data.username.strip()
    if not username:
        errors["username"] = message_for(ErrorKind.USERNAME_REQUIRED)
    elif len(username) < USERNAME_MIN_LENGTH:
        errors["username"] = message_for(ErrorKind.USERNAME_TOO_SHORT)
    elif not _USERNAME_RE.match(username):
        errors["username"] = message_for(ErrorKind.USERNAME_INVALID_CHARS)

    password = validate_password(data.password)
    if not password.is_valid:
        errors["password"] = password.error

    if data.password != data.confirm_password:
        errors["confirm_password"] = message_for(ErrorKind.PASSWORD_MISMATCH)

    if not data.address.strip():
        errors["address"] = message_for(ErrorKind.ADDRESS_REQUIRED)

    referral_code = (data.referral_code or "").strip()
    if referral_code and len(referral_code) < REFERRAL_CODE_MIN_LENGTH:
        errors["referral_code"] = message_for(ErrorKind.REFERRAL_CODE_TOO_SHORT)

    if errors:
        logger.debug("Signup rejected on fields: {}", sorted(errors))

    return SignupReport(is_valid=not errors, errors=errors)


def _collect(report: ValidationReport, result: Union[FieldResult, RangeResult]) -> None:
    if not result.is_valid:
        report.errors.append(result.error)
        report.kinds.append(result.kind)


def validate_transaction_data(transaction: Union[TransactionPayload, Mapping[str, Any]]) -> ValidationReport:
    """Validate amount, currency, type and description; every failure is reported"""
    if isinstance(transaction, Mapping):
        transaction = TransactionPayload.model_validate(transaction)

    report = ValidationReport(is_valid=False)

    _collect(report, validate_amount(transaction.amount))
    _collect(report, validate_currency(transaction.currency or DEFAULT_CURRENCY))
    _collect(report, validate_transaction_type(transaction.type))

    if not (transaction.description or "").strip():
        report.errors.append(message_for(ErrorKind.DESCRIPTION_REQUIRED))
        report.kinds.append(ErrorKind.DESCRIPTION_REQUIRED)

    report.is_valid = not report.errors
    return report


def validate_investment_data(investment: Union[InvestmentPayload, Mapping[str, Any]]) -> ValidationReport:
    """Validate amount, plan type, profit rate and date range; every failure is reported"""
    if isinstance(investment, Mapping):
        investment = InvestmentPayload.model_validate(investment)

    report = ValidationReport(is_valid=False)

    _collect(report, validate_amount(investment.amount))
    _collect(report, validate_investment_type(investment.type))
    _collect(report, validate_profit_rate(investment.profit_rate))
    _collect(report, validate_date_range(investment.start_date, investment.end_date))

    report.is_valid = not report.errors
    return report
