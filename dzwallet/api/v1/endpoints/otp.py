# dzwallet/api/v1/endpoints/otp.py
"""
Phone verification codes
"""
from fastapi import APIRouter, Depends

from dzwallet.api.dependencies import get_otp_service
from dzwallet.core.constants import DEFAULT_OTP_TYPE
from dzwallet.core.exception import BackendAPIError
from dzwallet.core.logging import logger
from dzwallet.schemas.banking import OTPSendRequest, OTPVerifyRequest
from dzwallet.services.backend import OTPService

router = APIRouter()


@router.post("/send")
async def send_otp(
    request: OTPSendRequest,
    service: OTPService = Depends(get_otp_service),
):
    return await service.create_otp(
        request.phone_number,
        user_id=request.user_id,
        otp_type=request.otp_type,
        expires_in_minutes=request.expires_in_minutes,
    )


@router.post("/verify")
async def verify_otp(
    request: OTPVerifyRequest,
    service: OTPService = Depends(get_otp_service),
):
    """Check a code; a rejected code is counted against the attempt budget"""
    try:
        return await service.verify_otp(request.phone_number, request.otp_code, request.otp_type)
    except BackendAPIError as e:
        if e.status_code != 400:
            raise
        remaining = await service.increment_otp_attempts(
            request.phone_number, request.otp_code, request.otp_type
        )
        logger.info("🔐 OTP rejected, {} attempt(s) left", remaining)
        e.details["attempts_remaining"] = remaining
        raise


@router.get("/status")
async def otp_status(
    phone_number: str,
    otp_type: str = DEFAULT_OTP_TYPE,
    service: OTPService = Depends(get_otp_service),
):
    return await service.get_otp_status(phone_number, otp_type)
