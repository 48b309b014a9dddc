# dzwallet/api/v1/endpoints/transfers.py
"""
Instant transfers, transfer history and user search
"""
from fastapi import APIRouter, Depends, Query

from dzwallet.api.dependencies import get_transfer_service
from dzwallet.core.exception import ResourceNotFoundError
from dzwallet.schemas.banking import TransferLimitsRequest, TransferRequest
from dzwallet.services.backend import TransferService

router = APIRouter()


@router.post("/transfers")
async def create_transfer(
    request: TransferRequest,
    service: TransferService = Depends(get_transfer_service),
):
    """Send money to another user; bad input never reaches the backend"""
    return await service.process_transfer(
        sender_email=request.sender_email,
        recipient_identifier=request.recipient_identifier,
        amount=request.amount,
        description=request.description,
    )


@router.get("/transfers/history")
async def transfer_history(
    user_email: str = Query(""),
    service: TransferService = Depends(get_transfer_service),
):
    return await service.get_transfer_history(user_email)


@router.get("/transfers/stats/{user_id}")
async def transfer_stats(
    user_id: str,
    service: TransferService = Depends(get_transfer_service),
):
    stats = await service.get_instant_transfer_stats(user_id)
    if stats is None:
        raise ResourceNotFoundError("No transfer statistics", {"user_id": user_id})
    return stats


@router.post("/transfers/limits")
async def transfer_limits(
    request: TransferLimitsRequest,
    service: TransferService = Depends(get_transfer_service),
):
    return await service.check_instant_transfer_limits(request.user_id, request.amount)


@router.get("/users/search")
async def search_users(
    q: str = Query(""),
    service: TransferService = Depends(get_transfer_service),
):
    return await service.find_user(q)
