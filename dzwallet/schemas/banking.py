# dzwallet/schemas/banking.py
"""
Pydantic schemas for banking operations
"""
from datetime import date, datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from dzwallet.core.constants import ALGERIA_COUNTRY_CODE, DEFAULT_OTP_TYPE, OTP_VALIDITY_MINUTES

# Raw numeric input as typed by a user: a number or the text of one
RawNumber = Union[int, float, str, None]
RawDate = Union[datetime, date, str, None]


class TransactionPayload(BaseModel):
    """Transaction submitted by the wallet client"""

    amount: RawNumber = None
    currency: Optional[str] = None
    type: str = ""
    description: Optional[str] = None


class InvestmentPayload(BaseModel):
    """Investment submitted by the wallet client"""

    amount: RawNumber = None
    type: str = ""
    profit_rate: RawNumber = None
    start_date: RawDate = None
    end_date: RawDate = None


class SignupPayload(BaseModel):
    """Signup form"""

    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(default="", alias="fullName")
    email: str = ""
    phone: str = ""
    username: str = ""
    password: str = ""
    confirm_password: str = Field(default="", alias="confirmPassword")
    address: str = ""
    referral_code: Optional[str] = Field(default=None, alias="referralCode")


class AmountCheckRequest(BaseModel):
    """Standalone amount check"""

    amount: RawNumber = None
    min_amount: Optional[float] = None
    max_amount: Optional[float] = None
    balance: Optional[float] = None


class PhoneCheckRequest(BaseModel):
    """Phone check; algerian_only switches to the strict signup rule"""

    phone: str = ""
    country_code: str = ALGERIA_COUNTRY_CODE
    algerian_only: bool = False


class AccountNumberRequest(BaseModel):
    account_number: str = ""


class ConversionRequest(BaseModel):
    amount: RawNumber = None
    from_currency: str
    to_currency: str


class RateLimitSnapshot(BaseModel):
    """Caller-owned rate-limit state, echoed back after each decision"""

    last_action_time: Optional[datetime] = None
    attempt_count: int = Field(default=0, ge=0)


class BillPaymentRequest(BaseModel):
    bill_type: str = ""
    reference: str = ""
    amount: str = ""
    balance: Optional[float] = None
    rate_limit: RateLimitSnapshot = Field(default_factory=RateLimitSnapshot)


class BillPaymentCheckResponse(BaseModel):
    """Form errors plus the rate-limit state to keep for the next submit"""

    is_valid: bool
    errors: dict[str, str] = Field(default_factory=dict)
    rate_limit: RateLimitSnapshot


class TransferRequest(BaseModel):
    sender_email: str
    recipient_identifier: str
    amount: float
    description: Optional[str] = None


class TransferLimitsRequest(BaseModel):
    user_id: str
    amount: float


class VerificationDecisionRequest(BaseModel):
    admin_notes: Optional[str] = None
    admin_id: Optional[str] = None


class OTPSendRequest(BaseModel):
    phone_number: str
    user_id: Optional[str] = None
    otp_type: str = DEFAULT_OTP_TYPE
    expires_in_minutes: int = Field(default=OTP_VALIDITY_MINUTES, ge=1, le=60)


class OTPVerifyRequest(BaseModel):
    phone_number: str
    otp_code: str = Field(..., min_length=4, max_length=8)
    otp_type: str = DEFAULT_OTP_TYPE
