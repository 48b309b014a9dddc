"""
OTP issuance and verification through the backend

Codes are generated, stored and checked by the backend; this service only
normalises the phone number and shapes the calls.
"""
from dataclasses import dataclass
from typing import Optional

from .client import BackendClient, backend_client
from dzwallet.core.constants import DEFAULT_OTP_TYPE, OTP_VALIDITY_MINUTES
from dzwallet.core.exception import BackendAPIError, ValidationError
from dzwallet.core.logging import logger
from dzwallet.services.banking.security import mask_phone
from dzwallet.services.banking.validators import validate_algerian_phone_number


@dataclass
class OTPIssued:
    otp_id: str
    expires_at: Optional[str] = None
    message: Optional[str] = None


@dataclass
class OTPVerified:
    user_id: Optional[str]
    phone_number: Optional[str]
    otp_type: Optional[str]
    message: Optional[str] = None


@dataclass
class OTPStatus:
    has_active_otp: bool = False
    expires_at: Optional[str] = None
    attempts_used: int = 0
    can_resend: bool = False
    next_resend_at: Optional[str] = None


class OTPService:
    """Phone-verification OTP calls (create_otp, verify_otp, ...)"""

    def __init__(self, client: Optional[BackendClient] = None):
        self.client = client or backend_client

    @staticmethod
    def _normalize_phone(phone_number: str) -> str:
        result = validate_algerian_phone_number(phone_number)
        if not result.is_valid:
            raise ValidationError(result.error, {"kind": result.kind})
        return result.value

    async def create_otp(
        self,
        phone_number: str,
        user_id: Optional[str] = None,
        otp_type: str = DEFAULT_OTP_TYPE,
        expires_in_minutes: int = OTP_VALIDITY_MINUTES,
    ) -> OTPIssued:
        phone = self._normalize_phone(phone_number)
        logger.info("🔐 Creating OTP for {} ({})", mask_phone(phone), otp_type)

        result = await self.client.rpc_first(
            "create_otp",
            {
                "p_user_id": user_id,
                "p_phone_number": phone,
                "p_email": None,
                "p_otp_type": otp_type,
                "p_expires_in_minutes": expires_in_minutes,
                "p_ip_address": None,
                "p_user_agent": None,
            },
        )

        if not result or not result.get("success"):
            raise BackendAPIError(
                status_code=400,
                message=(result or {}).get("message") or "فشل في إنشاء رمز التحقق",
                details={"rpc": "create_otp"},
            )

        # The backend may echo the code for demo setups; it is never passed on
        return OTPIssued(
            otp_id=str(result.get("otp_id")),
            expires_at=result.get("expires_at"),
            message=result.get("message"),
        )

    async def verify_otp(
        self,
        phone_number: str,
        otp_code: str,
        otp_type: str = DEFAULT_OTP_TYPE,
    ) -> OTPVerified:
        phone = self._normalize_phone(phone_number)
        logger.info("🔐 Verifying OTP for {} ({})", mask_phone(phone), otp_type)

        result = await self.client.rpc_first(
            "verify_otp",
            {
                "p_phone_number": phone,
                "p_email": None,
                "p_otp_code": otp_code,
                "p_otp_type": otp_type,
                "p_ip_address": None,
                "p_user_agent": None,
            },
        )

        if not result or not result.get("success"):
            raise BackendAPIError(
                status_code=400,
                message=(result or {}).get("message") or "فشل في التحقق من OTP",
                details={"rpc": "verify_otp"},
            )

        return OTPVerified(
            user_id=result.get("user_id"),
            phone_number=result.get("phone_number"),
            otp_type=result.get("otp_type"),
            message=result.get("message"),
        )

    async def increment_otp_attempts(
        self,
        phone_number: str,
        otp_code: str,
        otp_type: str = DEFAULT_OTP_TYPE,
    ) -> int:
        """Record a failed attempt; returns the attempts the backend still allows"""
        phone = self._normalize_phone(phone_number)
        result = await self.client.rpc_first(
            "increment_otp_attempts",
            {
                "p_phone_number": phone,
                "p_otp_code": otp_code,
                "p_otp_type": otp_type,
                "p_ip_address": None,
                "p_user_agent": None,
            },
        )
        return int((result or {}).get("attempts_remaining") or 0)

    async def get_otp_status(self, phone_number: str, otp_type: str = DEFAULT_OTP_TYPE) -> OTPStatus:
        phone = self._normalize_phone(phone_number)
        result = await self.client.rpc_first(
            "get_otp_status",
            {"p_phone_number": phone, "p_email": None, "p_otp_type": otp_type},
        ) or {}

        return OTPStatus(
            has_active_otp=bool(result.get("has_active_otp")),
            expires_at=result.get("expires_at"),
            attempts_used=int(result.get("attempts_used") or 0),
            can_resend=bool(result.get("can_resend")),
            next_resend_at=result.get("next_resend_at"),
        )


otp_service = OTPService()
