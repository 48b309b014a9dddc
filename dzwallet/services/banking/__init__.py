from .validators import (
    validate_account_number,
    validate_algerian_phone_number,
    validate_amount,
    validate_currency,
    validate_date_range,
    validate_email,
    validate_investment_data,
    validate_investment_type,
    validate_password,
    validate_phone_number,
    validate_profit_rate,
    validate_signup_data,
    validate_transaction_data,
    validate_transaction_type,
)
from .rate_limiter import RateLimitState, check_transaction_rate_limit, evaluate_rate_limit
from .bills import BILL_TYPES, BillPaymentGate, validate_bill_payment, validate_bill_reference

__all__ = [
    "validate_account_number",
    "validate_algerian_phone_number",
    "validate_amount",
    "validate_currency",
    "validate_date_range",
    "validate_email",
    "validate_investment_data",
    "validate_investment_type",
    "validate_password",
    "validate_phone_number",
    "validate_profit_rate",
    "validate_signup_data",
    "validate_transaction_data",
    "validate_transaction_type",
    "RateLimitState",
    "check_transaction_rate_limit",
    "evaluate_rate_limit",
    "BILL_TYPES",
    "BillPaymentGate",
    "validate_bill_payment",
    "validate_bill_reference",
]
