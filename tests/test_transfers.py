import asyncio

import pytest

from dzwallet.core.constants import ErrorKind
from dzwallet.core.exception import BackendAPIError, ValidationError
from dzwallet.services.notifications import NotificationType

TRANSFER_OK = [
    {
        "success": True,
        "message": "تم التحويل بنجاح",
        "reference_number": "TRF-0001",
        "sender_new_balance": "8500.00",
    }
]


def test_transfer_calls_backend(transfers, fake_backend):
    fake_backend.on("process_simple_transfer", TRANSFER_OK)

    result = asyncio.run(
        transfers.process_transfer("amina@example.dz", " ACC123456789 ", 1500)
    )

    assert result.success
    assert result.reference == "TRF-0001"
    assert result.new_balance == 8500.0
    assert result.notification.type == NotificationType.SUCCESS
    assert fake_backend.params_of("process_simple_transfer") == {
        "p_sender_email": "amina@example.dz",
        "p_recipient_identifier": "ACC123456789",
        "p_amount": 1500.0,
        "p_description": "تحويل",
    }


@pytest.mark.parametrize(
    "sender, recipient, amount, kind",
    [
        ("", "ACC123456789", 1500, ErrorKind.SENDER_EMAIL_MISSING),
        ("amina@example.dz", "ACC123456789", 0, ErrorKind.AMOUNT_NON_POSITIVE),
        ("amina@example.dz", "ACC123456789", -10, ErrorKind.AMOUNT_NON_POSITIVE),
        ("amina@example.dz", "   ", 1500, ErrorKind.RECIPIENT_REQUIRED),
        ("amina@example.dz", "ACC123456789", 99, ErrorKind.TRANSFER_BELOW_MINIMUM),
        ("amina@example.dz", "ACC123456789", 100_001, ErrorKind.TRANSFER_ABOVE_MAXIMUM),
        ("amina@example.dz", "ACC123456789", 5e12, ErrorKind.TRANSFER_ABOVE_MAXIMUM),
        ("amina@example.dz", "ACC123456789", float("nan"), ErrorKind.INVALID_AMOUNT_FORMAT),
        ("amina@example.dz", "ACC123456789", float("inf"), ErrorKind.INVALID_AMOUNT_FORMAT),
    ],
)
def test_invalid_transfer_never_reaches_backend(transfers, fake_backend, sender, recipient, amount, kind):
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(transfers.process_transfer(sender, recipient, amount))

    assert exc_info.value.kind == kind
    assert fake_backend.calls == []


def test_backend_refusal_is_raised(transfers, fake_backend):
    fake_backend.on("process_simple_transfer", [{"success": False, "message": "الرصيد غير كافي"}])

    with pytest.raises(BackendAPIError) as exc_info:
        asyncio.run(transfers.process_transfer("amina@example.dz", "ACC123456789", 1500))

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "الرصيد غير كافي"


def test_empty_backend_answer_is_a_gateway_error(transfers, fake_backend):
    fake_backend.on("process_simple_transfer", [])

    with pytest.raises(BackendAPIError) as exc_info:
        asyncio.run(transfers.process_transfer("amina@example.dz", "ACC123456789", 1500))

    assert exc_info.value.status_code == 502


def test_history_and_stats(transfers, fake_backend):
    fake_backend.on("get_transfer_history_simple", [{"id": 1}, {"id": 2}])
    fake_backend.on("get_instant_transfer_stats", [{"total_sent": 3}])
    fake_backend.on("check_instant_transfer_limits", [{"allowed": True}])

    assert len(asyncio.run(transfers.get_transfer_history("amina@example.dz"))) == 2
    assert asyncio.run(transfers.get_instant_transfer_stats("u-1")) == {"total_sent": 3}
    assert asyncio.run(transfers.check_instant_transfer_limits("u-1", 2000)) == {"allowed": True}
    assert fake_backend.params_of("check_instant_transfer_limits") == {"p_user_id": "u-1", "p_amount": 2000}


def test_history_requires_email(transfers, fake_backend):
    with pytest.raises(ValidationError):
        asyncio.run(transfers.get_transfer_history(""))
    assert fake_backend.calls == []


def test_find_user(transfers, fake_backend):
    fake_backend.on(
        "find_user_simple",
        [{"user_email": "karim@example.dz", "user_name": "Karim", "account_number": "ACC000000001", "balance": 120}],
    )

    matches = asyncio.run(transfers.find_user("kar"))

    assert matches[0].email == "karim@example.dz"
    assert matches[0].balance == 120.0
    assert fake_backend.params_of("find_user_simple") == {"p_identifier": "kar"}


def test_short_search_term_skips_backend(transfers, fake_backend):
    assert asyncio.run(transfers.find_user("k")) == []
    assert fake_backend.calls == []


def test_balance_calls(transfers, fake_backend):
    fake_backend.on("get_user_balance_simple", [{"balance": 100}])
    fake_backend.on("update_user_balance_simple", [{"success": True}])

    assert asyncio.run(transfers.get_user_balance("ACC000000001")) == {"balance": 100}
    asyncio.run(transfers.update_user_balance("ACC000000001", 250))
    assert fake_backend.params_of("update_user_balance_simple") == {
        "p_identifier": "ACC000000001",
        "p_new_balance": 250,
    }


def test_transfer_at_the_maximum_is_sent(transfers, fake_backend):
    fake_backend.on("process_simple_transfer", TRANSFER_OK)

    asyncio.run(transfers.process_transfer("amina@example.dz", "ACC123456789", 100_000))

    assert fake_backend.params_of("process_simple_transfer")["p_amount"] == 100_000


def test_maximum_message_names_the_ceiling(transfers):
    with pytest.raises(ValidationError) as exc_info:
        asyncio.run(transfers.process_transfer("amina@example.dz", "ACC123456789", 250_000))

    assert exc_info.value.message == "الحد الأقصى للتحويل هو 100,000 دج"


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), -5, 0])
def test_limit_check_rejects_bad_amounts_locally(transfers, fake_backend, amount):
    with pytest.raises(ValidationError):
        asyncio.run(transfers.check_instant_transfer_limits("u-1", amount))

    assert fake_backend.calls == []
