"""Instant transfer, balance and user-lookup backend calls"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .client import BackendClient, backend_client
from dzwallet.core.config import settings
from dzwallet.core.constants import ErrorKind, message_for
from dzwallet.core.exception import BackendAPIError, ValidationError
from dzwallet.core.logging import log_rejection, logger
from dzwallet.services.banking.security import mask_email
from dzwallet.services.banking.validators import parse_number, validate_amount
from dzwallet.services.notifications import Notification, transfer_success

DEFAULT_TRANSFER_DESCRIPTION = "تحويل"
MIN_SEARCH_LENGTH = 2


# =============================================================================
# DATA MODELS
# =============================================================================

@dataclass
class TransferResult:
    """Outcome of process_simple_transfer"""
    success: bool
    message: str
    reference: Optional[str] = None
    new_balance: Optional[float] = None
    notification: Optional[Notification] = None


@dataclass
class UserMatch:
    """A user returned by find_user_simple"""
    email: str
    full_name: Optional[str] = None
    account_number: Optional[str] = None
    balance: Optional[float] = None


def _to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(str(value))
    except (TypeError, ValueError):
        return None


# =============================================================================
# TRANSFER SERVICE
# =============================================================================

class TransferService:
    """Service for instant transfers and balance lookups"""

    def __init__(self, client: Optional[BackendClient] = None):
        self.client = client or backend_client

    def _check_transfer(self, sender_email: str, recipient_identifier: str, amount: Any) -> float:
        """Local checks before a transfer; returns the parsed amount"""
        kind: Optional[ErrorKind] = None
        params: Dict[str, Any] = {}
        value = parse_number(amount)

        if not sender_email:
            kind = ErrorKind.SENDER_EMAIL_MISSING
        elif value is None:
            # NaN, infinity and non-numeric text
            kind = ErrorKind.INVALID_AMOUNT_FORMAT
        elif value <= 0:
            kind = ErrorKind.AMOUNT_NON_POSITIVE
        elif not (recipient_identifier or "").strip():
            kind = ErrorKind.RECIPIENT_REQUIRED
        elif value < settings.MIN_TRANSFER_AMOUNT:
            kind = ErrorKind.TRANSFER_BELOW_MINIMUM
            params["min_amount"] = f"{settings.MIN_TRANSFER_AMOUNT:,.0f}"
        elif value > settings.MAX_TRANSFER_AMOUNT:
            kind = ErrorKind.TRANSFER_ABOVE_MAXIMUM
            params["max_amount"] = f"{settings.MAX_TRANSFER_AMOUNT:,.0f}"

        if kind is not None:
            message = message_for(kind, **params)
            log_rejection("transfer", [message], {"sender": mask_email(sender_email)})
            raise ValidationError(message, {"kind": kind})

        return value

    async def process_transfer(
        self,
        sender_email: str,
        recipient_identifier: str,
        amount: float,
        description: Optional[str] = None,
    ) -> TransferResult:
        """
        Send an instant transfer through process_simple_transfer.

        Input is checked locally first (amount > 0, recipient present,
        transfer minimum and maximum); nothing reaches the backend otherwise.
        """
        value = self._check_transfer(sender_email, recipient_identifier, amount)
        recipient = recipient_identifier.strip()

        logger.info(
            "🔄 Processing transfer: {} DZD from {} to {}",
            value,
            mask_email(sender_email),
            recipient,
        )

        result = await self.client.rpc_first(
            "process_simple_transfer",
            {
                "p_sender_email": sender_email,
                "p_recipient_identifier": recipient,
                "p_amount": value,
                "p_description": description or DEFAULT_TRANSFER_DESCRIPTION,
            },
        )

        if not result:
            logger.error("❌ No data returned from process_simple_transfer")
            raise BackendAPIError(
                status_code=502,
                message="لم يتم إرجاع نتيجة من قاعدة البيانات",
                details={"rpc": "process_simple_transfer"},
            )

        if result.get("success") is False:
            logger.error("❌ Transfer failed: {}", result)
            raise BackendAPIError(
                status_code=400,
                message=result.get("message") or "فشل في معالجة التحويل",
                details={"rpc": "process_simple_transfer", **result},
            )

        reference = result.get("reference_number")
        new_balance = _to_float(result.get("sender_new_balance"))

        logger.info("✅ Transfer successful: ref={} new_balance={}", reference, new_balance)

        return TransferResult(
            success=True,
            message=result.get("message") or "تم التحويل بنجاح",
            reference=reference,
            new_balance=new_balance,
            notification=transfer_success(value, recipient, reference or ""),
        )

    async def get_transfer_history(self, user_email: str) -> List[Dict[str, Any]]:
        """Transfers sent or received by a user (get_transfer_history_simple)"""
        if not user_email:
            raise ValidationError.from_kind(ErrorKind.SENDER_EMAIL_MISSING)
        return await self.client.rpc_rows(
            "get_transfer_history_simple", {"p_user_email": user_email}
        )

    async def get_instant_transfer_stats(self, user_id: str) -> Optional[Dict[str, Any]]:
        return await self.client.rpc_first(
            "get_instant_transfer_stats", {"p_user_id": user_id}
        )

    async def check_instant_transfer_limits(self, user_id: str, amount: float) -> Optional[Dict[str, Any]]:
        """Ask the backend whether amount fits the user's daily/monthly limits"""
        checked = validate_amount(amount, min_amount=0)
        if not checked.is_valid:
            raise ValidationError(checked.error, {"kind": checked.kind})
        return await self.client.rpc_first(
            "check_instant_transfer_limits",
            {"p_user_id": user_id, "p_amount": checked.value},
        )

    async def find_user(self, identifier: str) -> List[UserMatch]:
        """Look up users by email, account number or name"""
        term = (identifier or "").strip()
        if len(term) < MIN_SEARCH_LENGTH:
            return []

        rows = await self.client.rpc_rows("find_user_simple", {"p_identifier": term})
        logger.debug("🔍 find_user_simple({}) -> {} match(es)", term, len(rows))

        return [
            UserMatch(
                email=row.get("user_email", ""),
                full_name=row.get("user_name"),
                account_number=row.get("account_number"),
                balance=_to_float(row.get("balance")),
            )
            for row in rows
        ]

    async def get_user_balance(self, identifier: str) -> Optional[Dict[str, Any]]:
        return await self.client.rpc_first(
            "get_user_balance_simple", {"p_identifier": identifier}
        )

    async def update_user_balance(self, identifier: str, new_balance: float) -> Optional[Dict[str, Any]]:
        logger.info("💰 Updating balance of {} to {}", identifier, new_balance)
        return await self.client.rpc_first(
            "update_user_balance_simple",
            {"p_identifier": identifier, "p_new_balance": new_balance},
        )


transfer_service = TransferService()
