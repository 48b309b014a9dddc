# dzwallet/services/notifications.py
"""
In-app notification records and Arabic message templates
"""
import secrets
import string
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

_BASE36 = string.digits + string.ascii_lowercase


class NotificationType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


@dataclass
class Notification:
    id: str
    type: NotificationType
    title: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    read: bool = False


def create_notification(type: NotificationType, title: str, message: str) -> Notification:
    notification_id = str(int(time.time() * 1000)) + "".join(
        secrets.choice(_BASE36) for _ in range(9)
    )
    return Notification(id=notification_id, type=NotificationType(type), title=title, message=message)


def _dzd(amount: float) -> str:
    return f"{amount:,.3f}".rstrip("0").rstrip(".")


# =============================================================================
# TEMPLATES
# =============================================================================

def transfer_success(amount: float, recipient: str, reference: str) -> Notification:
    return create_notification(
        NotificationType.SUCCESS,
        "تم التحويل بنجاح",
        f"تم تحويل {_dzd(amount)} دج إلى {recipient} برقم المرجع: {reference}",
    )


def transfer_failed(error: str) -> Notification:
    return create_notification(NotificationType.ERROR, "فشل في التحويل", error)


def recharge_success(amount: float) -> Notification:
    return create_notification(
        NotificationType.SUCCESS,
        "تم الشحن بنجاح",
        f"تم شحن {_dzd(amount)} دج في محفظتك",
    )


def recharge_pending(amount: float, rib: str) -> Notification:
    return create_notification(
        NotificationType.INFO,
        "تم استلام طلب الشحن",
        f"سيتم إضافة {_dzd(amount)} دج من RIB: {rib} خلال 5-10 دقائق",
    )


def investment_success(amount: float, operation: str = "invest") -> Notification:
    invest = operation == "invest"
    return create_notification(
        NotificationType.SUCCESS,
        "تم الاستثمار بنجاح" if invest else "تم سحب الاستثمار بنجاح",
        f"تم {'استثمار' if invest else 'سحب'} مبلغ {_dzd(amount)} دج",
    )


def bill_success(amount: float, bill_type: str, reference: str) -> Notification:
    return create_notification(
        NotificationType.SUCCESS,
        "تم دفع الفاتورة بنجاح",
        f"تم دفع فاتورة {bill_type} بمبلغ {_dzd(amount)} دج - المرجع: {reference}",
    )


def format_notification_time(timestamp: datetime, now: datetime | None = None) -> str:
    """Relative age in Arabic: now, minutes, hours, then days"""
    now = now or datetime.now(timestamp.tzinfo)
    minutes = int((now - timestamp).total_seconds() // 60)

    if minutes < 1:
        return "الآن"
    if minutes < 60:
        return f"منذ {minutes} دقيقة"
    if minutes < 1440:
        return f"منذ {minutes // 60} ساعة"
    return f"منذ {minutes // 1440} يوم"
