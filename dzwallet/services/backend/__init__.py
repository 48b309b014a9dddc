from .client import BackendClient, backend_client
from .transfers import TransferService, transfer_service, TransferResult, UserMatch
from .verifications import VerificationService, verification_service
from .otp import OTPService, otp_service

__all__ = [
    "BackendClient",
    "backend_client",
    "TransferService",
    "transfer_service",
    "TransferResult",
    "UserMatch",
    "VerificationService",
    "verification_service",
    "OTPService",
    "otp_service",
]
