# dzwallet/api/v1/endpoints/bills.py
"""
Bill payment pre-checks

The client keeps its rate-limit state and sends it with every submit; the
updated state comes back in the response.
"""
from fastapi import APIRouter

from dzwallet.core.config import settings
from dzwallet.core.logging import log_rejection, logger
from dzwallet.schemas.banking import (
    BillPaymentCheckResponse,
    BillPaymentRequest,
    RateLimitSnapshot,
)
from dzwallet.services.banking import BILL_TYPES, BillPaymentGate, RateLimitState, validate_bill_payment

router = APIRouter()


@router.get("/types")
async def list_bill_types():
    return [
        {
            "id": bill.id,
            "name": bill.name,
            "provider": bill.provider,
            "min_amount": bill.min_amount,
            "max_amount": bill.max_amount,
            "reference_hint": bill.reference_hint,
        }
        for bill in BILL_TYPES.values()
    ]


@router.post("/validate", response_model=BillPaymentCheckResponse)
async def validate_bill(request: BillPaymentRequest):
    """
    Validate a bill payment and count it as an attempt.

    Form errors leave the rate-limit state untouched. A valid form that is
    blocked by the cooldown or the attempt cap answers 429.
    """
    errors = validate_bill_payment(
        request.bill_type, request.reference, request.amount, request.balance
    )
    if errors:
        log_rejection("bill_payment", list(errors.values()), {"bill_type": request.bill_type})
        return BillPaymentCheckResponse(is_valid=False, errors=errors, rate_limit=request.rate_limit)

    gate = BillPaymentGate(
        RateLimitState(
            max_attempts=settings.BILL_PAYMENT_MAX_ATTEMPTS,
            last_action_time=request.rate_limit.last_action_time,
            attempt_count=request.rate_limit.attempt_count,
            cooldown_ms=settings.RATE_LIMIT_COOLDOWN_SECONDS * 1000,
        )
    )
    gate.enforce()
    gate.record_attempt()

    logger.info("🧾 Bill payment accepted: {} ({} attempt(s) left)", request.bill_type, gate.attempts_remaining)

    return BillPaymentCheckResponse(
        is_valid=True,
        rate_limit=RateLimitSnapshot(
            last_action_time=gate.state.last_action_time,
            attempt_count=gate.state.attempt_count,
        ),
    )
