# dzwallet/api/v1/router.py
"""
Main API router
"""
from fastapi import APIRouter

from dzwallet.api.v1.endpoints import (
    bills,
    currency,
    health,
    otp,
    transfers,
    validation,
    verifications,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(validation.router, prefix="/validation", tags=["Validation"])
api_router.include_router(currency.router, prefix="/currency", tags=["Currency"])
api_router.include_router(bills.router, prefix="/bills", tags=["Bills"])
api_router.include_router(transfers.router, tags=["Transfers"])
api_router.include_router(verifications.router, prefix="/verifications", tags=["Verifications"])
api_router.include_router(otp.router, prefix="/otp", tags=["OTP"])
