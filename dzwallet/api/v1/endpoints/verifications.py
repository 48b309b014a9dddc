"""Admin verification review"""

from fastapi import APIRouter, Depends, Query

from dzwallet.api.dependencies import get_verification_service
from dzwallet.schemas.banking import VerificationDecisionRequest
from dzwallet.services.backend import VerificationService

router = APIRouter()


@router.get("/pending")
async def pending_verifications(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    service: VerificationService = Depends(get_verification_service),
):
    return await service.get_pending_verifications(limit=limit, offset=offset)


@router.post("/{verification_id}/approve")
async def approve(
    verification_id: str,
    request: VerificationDecisionRequest,
    service: VerificationService = Depends(get_verification_service),
):
    return await service.approve_verification(
        verification_id, admin_notes=request.admin_notes, admin_id=request.admin_id
    )


@router.post("/{verification_id}/reject")
async def reject(
    verification_id: str,
    request: VerificationDecisionRequest,
    service: VerificationService = Depends(get_verification_service),
):
    return await service.reject_verification(
        verification_id, admin_notes=request.admin_notes, admin_id=request.admin_id
    )


@router.get("/stats")
async def verification_stats(service: VerificationService = Depends(get_verification_service)):
    return await service.get_verification_stats() or {}
