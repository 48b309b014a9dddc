import asyncio

import pytest

from dzwallet.core.constants import DEFAULT_OTP_TYPE, ErrorKind
from dzwallet.core.exception import BackendAPIError, ValidationError


# ==================== VERIFICATIONS ====================

def test_pending_verifications_are_paged(verifications, fake_backend):
    fake_backend.on("get_pending_verifications", [{"id": "v-1"}, {"id": "v-2"}])

    rows = asyncio.run(verifications.get_pending_verifications(limit=10, offset=20))

    assert [row["id"] for row in rows] == ["v-1", "v-2"]
    assert fake_backend.params_of("get_pending_verifications") == {"p_limit": 10, "p_offset": 20}


def test_approve_verification(verifications, fake_backend):
    fake_backend.on("approve_verification", [{"success": True, "message": "ok"}])

    result = asyncio.run(verifications.approve_verification("v-1", admin_notes="docs ok", admin_id="admin-7"))

    assert result["success"] is True
    assert fake_backend.params_of("approve_verification") == {
        "p_verification_id": "v-1",
        "p_admin_notes": "docs ok",
        "p_admin_id": "admin-7",
    }


def test_reject_failure_uses_fallback_message(verifications, fake_backend):
    fake_backend.on("reject_verification", [{"success": False}])

    with pytest.raises(BackendAPIError) as exc_info:
        asyncio.run(verifications.reject_verification("v-1"))

    assert exc_info.value.message == "فشل في رفض التوثيق"


def test_approve_failure_keeps_backend_message(verifications, fake_backend):
    fake_backend.on("approve_verification", [{"success": False, "message": "already reviewed"}])

    with pytest.raises(BackendAPIError) as exc_info:
        asyncio.run(verifications.approve_verification("v-1"))

    assert exc_info.value.message == "already reviewed"


def test_verification_stats(verifications, fake_backend):
    fake_backend.on("get_verification_stats", [{"pending": 4, "approved": 10}])
    assert asyncio.run(verifications.get_verification_stats()) == {"pending": 4, "approved": 10}


# ==================== OTP ====================

def test_create_otp_normalises_phone(otp, fake_backend):
    fake_backend.on(
        "create_otp",
        [{"success": True, "otp_id": "otp-1", "otp_code": "123456", "expires_at": "2024-06-01T12:05:00Z"}],
    )

    issued = asyncio.run(otp.create_otp("0555 12 34 56", user_id="u-1"))

    assert issued.otp_id == "otp-1"
    assert not hasattr(issued, "otp_code")
    params = fake_backend.params_of("create_otp")
    assert params["p_phone_number"] == "+213555123456"
    assert params["p_user_id"] == "u-1"
    assert params["p_otp_type"] == DEFAULT_OTP_TYPE
    assert params["p_expires_in_minutes"] == 5


def test_invalid_phone_never_reaches_backend(otp, fake_backend):
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(otp.create_otp("+213812345678"))

    assert exc_info.value.kind == ErrorKind.INVALID_ALGERIAN_PHONE
    assert fake_backend.calls == []


def test_verify_otp(otp, fake_backend):
    fake_backend.on("verify_otp", [{"success": True, "user_id": "u-1", "phone_number": "+213555123456"}])

    verified = asyncio.run(otp.verify_otp("0555123456", "123456"))

    assert verified.user_id == "u-1"
    assert fake_backend.params_of("verify_otp")["p_otp_code"] == "123456"


def test_wrong_code_raises(otp, fake_backend):
    fake_backend.on("verify_otp", [{"success": False, "message": "رمز غير صحيح"}])

    with pytest.raises(BackendAPIError) as exc_info:
        asyncio.run(otp.verify_otp("0555123456", "000000"))

    assert exc_info.value.message == "رمز غير صحيح"


def test_otp_status_and_attempts(otp, fake_backend):
    fake_backend.on(
        "get_otp_status",
        [{"has_active_otp": True, "attempts_used": 1, "can_resend": False, "next_resend_at": "later"}],
    )
    fake_backend.on("increment_otp_attempts", [{"attempts_remaining": 2}])

    status = asyncio.run(otp.get_otp_status("0555123456"))
    assert status.has_active_otp
    assert status.attempts_used == 1
    assert not status.can_resend

    assert asyncio.run(otp.increment_otp_attempts("0555123456", "000000")) == 2
