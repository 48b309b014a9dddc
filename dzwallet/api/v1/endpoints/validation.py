# dzwallet/api/v1/endpoints/validation.py
"""
Form validation endpoints

Every route answers 200 with the validator's result record; a failed check
is data, not an HTTP error.
"""
from fastapi import APIRouter

from dzwallet.core.config import settings
from dzwallet.schemas.banking import (
    AccountNumberRequest,
    AmountCheckRequest,
    InvestmentPayload,
    PhoneCheckRequest,
    SignupPayload,
    TransactionPayload,
)
from dzwallet.schemas.validation import FieldResult, SignupReport, ValidationReport
from dzwallet.services.banking import (
    validate_account_number,
    validate_algerian_phone_number,
    validate_amount,
    validate_investment_data,
    validate_phone_number,
    validate_signup_data,
    validate_transaction_data,
)

router = APIRouter()


@router.post("/amount", response_model=FieldResult)
async def check_amount(request: AmountCheckRequest):
    return validate_amount(
        request.amount,
        min_amount=settings.MIN_AMOUNT if request.min_amount is None else request.min_amount,
        max_amount=settings.MAX_AMOUNT if request.max_amount is None else request.max_amount,
        balance=request.balance,
    )


@router.post("/transaction", response_model=ValidationReport)
async def check_transaction(payload: TransactionPayload):
    return validate_transaction_data(payload)


@router.post("/investment", response_model=ValidationReport)
async def check_investment(payload: InvestmentPayload):
    return validate_investment_data(payload)


@router.post("/signup", response_model=SignupReport)
async def check_signup(payload: SignupPayload):
    return validate_signup_data(payload)


@router.post("/phone", response_model=FieldResult)
async def check_phone(request: PhoneCheckRequest):
    if request.algerian_only:
        return validate_algerian_phone_number(request.phone)
    return validate_phone_number(request.phone, request.country_code)


@router.post("/account-number", response_model=FieldResult)
async def check_account_number(request: AccountNumberRequest):
    return validate_account_number(request.account_number)
