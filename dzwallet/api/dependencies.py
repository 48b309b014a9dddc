# dzwallet/api/dependencies.py
"""
Service providers for the API routes

Routes receive their services through Depends() so tests can swap them
with app.dependency_overrides.
"""
from dzwallet.services.backend import (
    OTPService,
    TransferService,
    VerificationService,
    otp_service,
    transfer_service,
    verification_service,
)


def get_transfer_service() -> TransferService:
    return transfer_service


def get_verification_service() -> VerificationService:
    return verification_service


def get_otp_service() -> OTPService:
    return otp_service
