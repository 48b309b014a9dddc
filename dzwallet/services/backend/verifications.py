"""Admin review of account verification requests"""

from typing import Any, Dict, List, Optional

from .client import BackendClient, backend_client
from dzwallet.core.exception import BackendAPIError
from dzwallet.core.logging import logger


class VerificationService:
    """Service for the admin verification-review screen"""

    def __init__(self, client: Optional[BackendClient] = None):
        self.client = client or backend_client

    async def get_pending_verifications(self, limit: int = 50, offset: int = 0) -> List[Dict[str, Any]]:
        return await self.client.rpc_rows(
            "get_pending_verifications",
            {"p_limit": limit, "p_offset": offset},
        )

    async def _decide(
        self,
        rpc_name: str,
        verification_id: str,
        admin_notes: Optional[str],
        admin_id: Optional[str],
        fallback_message: str,
    ) -> Dict[str, Any]:
        result = await self.client.rpc_first(
            rpc_name,
            {
                "p_verification_id": verification_id,
                "p_admin_notes": admin_notes,
                "p_admin_id": admin_id,
            },
        )

        if not result or not result.get("success"):
            message = (result or {}).get("message") or fallback_message
            logger.warning("Verification {} not applied ({}): {}", verification_id, rpc_name, message)
            raise BackendAPIError(
                status_code=400,
                message=message,
                details={"rpc": rpc_name, "verification_id": verification_id},
            )

        logger.info("🪪 {} applied to verification {} by {}", rpc_name, verification_id, admin_id)
        return result

    async def approve_verification(
        self,
        verification_id: str,
        admin_notes: Optional[str] = None,
        admin_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._decide(
            "approve_verification",
            verification_id,
            admin_notes,
            admin_id,
            "فشل في الموافقة على التوثيق",
        )

    async def reject_verification(
        self,
        verification_id: str,
        admin_notes: Optional[str] = None,
        admin_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._decide(
            "reject_verification",
            verification_id,
            admin_notes,
            admin_id,
            "فشل في رفض التوثيق",
        )

    async def get_verification_stats(self) -> Optional[Dict[str, Any]]:
        return await self.client.rpc_first("get_verification_stats")


verification_service = VerificationService()
