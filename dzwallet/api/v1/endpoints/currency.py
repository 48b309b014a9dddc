"""Exchange rates and conversion"""

from fastapi import APIRouter

from dzwallet.core.exception import ValidationError
from dzwallet.schemas.banking import ConversionRequest
from dzwallet.schemas.validation import ConversionResult
from dzwallet.services.banking import validate_amount
from dzwallet.services.currency import (
    EXCHANGE_RATES,
    convert_currency,
    format_currency,
    supported_pairs,
)

router = APIRouter()


@router.get("/rates")
async def list_rates():
    return {
        "rates": EXCHANGE_RATES,
        "pairs": [{"from": src, "to": dst} for src, dst in supported_pairs()],
    }


@router.post("/convert")
async def convert(request: ConversionRequest):
    """Convert an amount; bad amounts answer 422, unsupported pairs 400"""
    checked = validate_amount(request.amount, min_amount=0)
    if not checked.is_valid:
        raise ValidationError(checked.error, {"kind": checked.kind})

    result: ConversionResult = convert_currency(
        checked.value, request.from_currency, request.to_currency
    )
    return {
        **result.model_dump(),
        "formatted": format_currency(result.to_amount, result.to_currency),
    }
