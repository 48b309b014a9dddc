# dzwallet/services/banking/bills.py
"""
Bill payment rules: bill catalogue, reference formats and the payment gate
"""
import re
from dataclasses import dataclass, field
from datetime import datetime

from dzwallet.core.constants import BILL_PAYMENT_MAX_ATTEMPTS, ErrorKind, message_for
from dzwallet.core.logging import logger
from dzwallet.services.banking.rate_limiter import RateLimitState
from dzwallet.services.banking.validators import parse_number


@dataclass(frozen=True)
class BillType:
    """A payable bill with its amount bounds (DZD) and reference format"""
    id: str
    name: str
    provider: str
    min_amount: float
    max_amount: float
    reference_pattern: re.Pattern[str]
    reference_hint: str


BILL_TYPES: dict[str, BillType] = {
    bill.id: bill
    for bill in (
        BillType(
            id="electricity",
            name="فاتورة الكهرباء",
            provider="سونلغاز",
            min_amount=500,
            max_amount=50_000,
            reference_pattern=re.compile(r"^[0-9]{8,12}$"),
            reference_hint="8-12 رقم",
        ),
        BillType(
            id="internet",
            name="فاتورة الإنترنت",
            provider="اتصالات الجزائر",
            min_amount=1_000,
            max_amount=15_000,
            reference_pattern=re.compile(r"^[0-9]{10}$"),
            reference_hint="10 أرقام",
        ),
        BillType(
            id="phone",
            name="فاتورة الهاتف",
            provider="موبيليس",
            min_amount=200,
            max_amount=10_000,
            reference_pattern=re.compile(r"^[0-9]{10}$"),
            reference_hint="رقم الهاتف (10 أرقام)",
        ),
        BillType(
            id="insurance",
            name="تأمين السيارة",
            provider="SAA",
            min_amount=5_000,
            max_amount=100_000,
            reference_pattern=re.compile(r"^[A-Z0-9]{6,10}$"),
            reference_hint="رقم البوليصة (6-10 أحرف/أرقام)",
        ),
    )
}


def get_bill_type(bill_id: str) -> BillType | None:
    return BILL_TYPES.get((bill_id or "").strip())


def validate_bill_reference(value: str, pattern: re.Pattern[str], hint: str) -> str:
    """Return the error message, or an empty string when the reference is valid"""
    trimmed = (value or "").strip()
    if not trimmed:
        return message_for(ErrorKind.BILL_REFERENCE_REQUIRED)
    if not pattern.match(trimmed):
        return message_for(ErrorKind.INVALID_BILL_REFERENCE, hint=hint)
    return ""


def validate_bill_payment(
    bill_id: str,
    reference: str,
    amount: str,
    balance: float | None = None,
) -> dict[str, str]:
    """
    Validate a bill payment form.

    Returns errors keyed by field ("bill", "reference", "amount"); an empty
    dict means the payment may be confirmed. Amount bounds come from the
    selected bill type.
    """
    errors: dict[str, str] = {}
    bill = get_bill_type(bill_id)

    if bill is None:
        errors["bill"] = message_for(ErrorKind.BILL_TYPE_REQUIRED)

    if not (reference or "").strip():
        errors["reference"] = message_for(ErrorKind.BILL_REFERENCE_REQUIRED)
    elif bill is not None:
        reference_error = validate_bill_reference(
            reference, bill.reference_pattern, bill.reference_hint
        )
        if reference_error:
            errors["reference"] = reference_error

    if not (amount or "").strip():
        errors["amount"] = message_for(ErrorKind.BILL_AMOUNT_REQUIRED)
    else:
        value = parse_number(amount)
        if value is None or value <= 0:
            errors["amount"] = message_for(ErrorKind.BILL_AMOUNT_INVALID)
        elif bill is not None:
            if value < bill.min_amount:
                errors["amount"] = message_for(
                    ErrorKind.BILL_AMOUNT_BELOW_MINIMUM, min_amount=f"{bill.min_amount:,.0f}"
                )
            elif value > bill.max_amount:
                errors["amount"] = message_for(
                    ErrorKind.BILL_AMOUNT_ABOVE_MAXIMUM, max_amount=f"{bill.max_amount:,.0f}"
                )
            elif balance is not None and value > balance:
                errors["amount"] = message_for(ErrorKind.INSUFFICIENT_BALANCE)

    return errors


@dataclass
class BillPaymentGate:
    """
    Rate-limit gate for one bill-payment flow.

    Every confirmed submit counts as an attempt; a successful payment
    clears both the counter and the cooldown.
    """

    state: RateLimitState = field(
        default_factory=lambda: RateLimitState(max_attempts=BILL_PAYMENT_MAX_ATTEMPTS)
    )

    def check(self, now: datetime | None = None) -> str | None:
        return self.state.check(now)

    def enforce(self, now: datetime | None = None) -> None:
        self.state.enforce(now)

    def record_attempt(self, now: datetime | None = None) -> None:
        self.state.record_attempt(now)
        logger.info(
            "🧾 Bill payment attempt {}/{}",
            self.state.attempt_count,
            self.state.max_attempts,
        )

    def record_success(self) -> None:
        self.state.reset()

    @property
    def attempts_remaining(self) -> int:
        return max(self.state.max_attempts - self.state.attempt_count, 0)
