# dzwallet/services/banking/security.py
"""
Masking, identifier generation and RIB checks for secure banking operations
"""
import secrets
import string
import time

from dzwallet.core.constants import RIB_MIN_LENGTH, ErrorKind, message_for
from dzwallet.schemas.validation import FieldResult

CARD_PREFIX = "4532"  # Visa
CARD_LENGTH = 16
RIB_LENGTH = 20
_BASE36 = string.digits + string.ascii_lowercase


def _random_digits(count: int) -> str:
    return "".join(str(secrets.randbelow(10)) for _ in range(count))


def generate_card_number() -> str:
    """Demo card number: Visa prefix + 12 random digits"""
    return CARD_PREFIX + _random_digits(CARD_LENGTH - len(CARD_PREFIX))


def generate_rib() -> str:
    return _random_digits(RIB_LENGTH)


def generate_transaction_id(prefix: str = "TXN") -> str:
    """PREFIX-<epoch ms>-<9 base36 chars>, upper-cased"""
    timestamp = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"{prefix}-{timestamp}-{suffix}".upper()


def mask_card_number(card_number: str) -> str:
    if len(card_number) < 4:
        return ""
    return "**** **** **** " + card_number[-4:]


def mask_number(value: int | float | str, show_last: int = 2) -> str:
    text = str(value)
    if len(text) <= show_last:
        return "*" * len(text)
    return "*" * (len(text) - show_last) + text[-show_last:]


def mask_rib(rib: str) -> str:
    if len(rib) < 4:
        return rib
    return "*" * (len(rib) - 4) + rib[-4:]


def mask_phone(phone: str | None) -> str:
    """Keep the country code and operator digit for log lines"""
    if not phone:
        return "غير محدد"
    return phone[:6] + "***"


def mask_email(email: str | None) -> str:
    if not email:
        return "غير محدد"
    return email[:3] + "***"


def validate_rib(value: str) -> FieldResult:
    """A RIB is required, digits only, at least 10 long"""
    if not value:
        kind = ErrorKind.RIB_REQUIRED
    elif len(value) < RIB_MIN_LENGTH:
        kind = ErrorKind.RIB_TOO_SHORT
    elif not value.isdigit() or not value.isascii():
        kind = ErrorKind.RIB_NOT_NUMERIC
    else:
        return FieldResult(is_valid=True, value=value)

    return FieldResult(is_valid=False, value="", error=message_for(kind), kind=kind)
