from datetime import date, datetime, timezone

import pytest

from dzwallet.core.constants import ErrorKind
from dzwallet.schemas.banking import SignupPayload
from dzwallet.services.banking import (
    validate_account_number,
    validate_algerian_phone_number,
    validate_amount,
    validate_currency,
    validate_date_range,
    validate_email,
    validate_investment_data,
    validate_investment_type,
    validate_password,
    validate_phone_number,
    validate_profit_rate,
    validate_signup_data,
    validate_transaction_data,
    validate_transaction_type,
)
from dzwallet.services.banking.validators import parse_number


# ==================== AMOUNTS ====================

def test_zero_amount_is_rejected():
    result = validate_amount("0")
    assert not result.is_valid
    assert result.kind == ErrorKind.AMOUNT_NON_POSITIVE
    assert result.value == 0


def test_amount_bounds_are_inclusive():
    assert validate_amount("500", 500, 50000).is_valid
    assert validate_amount("500", 500, 50000).value == 500
    assert validate_amount("50000", 500, 50000).is_valid

    over = validate_amount("50001", 500, 50000)
    assert not over.is_valid
    assert over.kind == ErrorKind.AMOUNT_ABOVE_MAXIMUM


@pytest.mark.parametrize(
    "raw, kind",
    [
        ("abc", ErrorKind.INVALID_AMOUNT_FORMAT),
        ("12abc", ErrorKind.INVALID_AMOUNT_FORMAT),
        ("", ErrorKind.INVALID_AMOUNT_FORMAT),
        (None, ErrorKind.INVALID_AMOUNT_FORMAT),
        (True, ErrorKind.INVALID_AMOUNT_FORMAT),
        ("nan", ErrorKind.INVALID_AMOUNT_FORMAT),
        ("inf", ErrorKind.INVALID_AMOUNT_FORMAT),
        ("-5", ErrorKind.AMOUNT_NEGATIVE),
        (0, ErrorKind.AMOUNT_NON_POSITIVE),
        (0.5, ErrorKind.AMOUNT_BELOW_MINIMUM),
        (2_000_000_000, ErrorKind.AMOUNT_ABOVE_MAXIMUM),
    ],
)
def test_invalid_amounts(raw, kind):
    result = validate_amount(raw)
    assert not result.is_valid
    assert result.kind == kind
    assert result.error
    assert result.value == 0


def test_amount_is_trimmed_and_parsed():
    result = validate_amount(" 250.75 ")
    assert result.is_valid
    assert result.value == 250.75
    assert result.error is None


def test_balance_is_checked_last():
    assert validate_amount(100, balance=100).is_valid
    result = validate_amount(101, balance=100)
    assert result.kind == ErrorKind.INSUFFICIENT_BALANCE
    # range failures win over the balance check
    assert validate_amount(-1, balance=0).kind == ErrorKind.AMOUNT_NEGATIVE


def test_parse_number_is_strict():
    assert parse_number("1e3") == 1000
    assert parse_number(" 42 ") == 42
    assert parse_number("4 2") is None
    assert parse_number(False) is None
    assert parse_number([1]) is None


# ==================== PROFIT RATE ====================

def test_profit_rate_range():
    assert validate_profit_rate("12.5").value == 12.5
    assert validate_profit_rate(0).is_valid
    assert validate_profit_rate(100).is_valid
    assert validate_profit_rate(100.01).kind == ErrorKind.PROFIT_RATE_ABOVE_MAXIMUM
    assert validate_profit_rate(-1).kind == ErrorKind.PROFIT_RATE_NEGATIVE
    assert validate_profit_rate("x").kind == ErrorKind.INVALID_PROFIT_RATE_FORMAT


# ==================== CLOSED SETS ====================

def test_currency_is_normalised_to_lowercase():
    result = validate_currency(" EUR ")
    assert result.is_valid
    assert result.value == "eur"


def test_unknown_codes_discard_the_value():
    currency = validate_currency("XYZ")
    assert not currency.is_valid
    assert currency.value == ""
    assert currency.kind == ErrorKind.UNSUPPORTED_CURRENCY

    assert validate_transaction_type("Foo").kind == ErrorKind.INVALID_TRANSACTION_TYPE
    assert validate_investment_type("daily").kind == ErrorKind.INVALID_INVESTMENT_TYPE


@pytest.mark.parametrize("value", ["recharge", "TRANSFER", "bill", "investment", "conversion", "withdrawal"])
def test_transaction_types(value):
    assert validate_transaction_type(value).value == value.lower()


def test_investment_types():
    for value in ("weekly", "monthly", "quarterly", "Yearly"):
        assert validate_investment_type(value).is_valid


# ==================== DATES ====================

def test_date_range_requires_end_after_start():
    assert validate_date_range("2024-01-01", "2024-02-01").is_valid
    assert validate_date_range(date(2024, 1, 1), date(2024, 1, 2)).is_valid

    same = validate_date_range("2024-01-01", "2024-01-01")
    assert not same.is_valid
    assert same.kind == ErrorKind.END_NOT_AFTER_START

    backwards = validate_date_range("2024-03-01", "2024-02-01")
    assert backwards.kind == ErrorKind.END_NOT_AFTER_START


def test_date_range_rejects_unparseable_dates():
    assert validate_date_range("not a date", "2024-01-01").kind == ErrorKind.INVALID_START_DATE
    assert validate_date_range("2024-01-01", None).kind == ErrorKind.INVALID_END_DATE


def test_naive_dates_compare_as_utc():
    start = date(2024, 1, 1)
    end = datetime(2024, 1, 1, 0, 0, 1, tzinfo=timezone.utc)
    assert validate_date_range(start, end).is_valid
    assert not validate_date_range(start, "2024-01-01T00:00:00+00:00").is_valid


# ==================== IDENTIFIERS ====================

def test_account_number():
    assert validate_account_number("ACC123456789").is_valid
    assert validate_account_number(" ACC123456789 ").value == "ACC123456789"
    assert validate_account_number("ACC12345").kind == ErrorKind.INVALID_ACCOUNT_NUMBER
    assert validate_account_number("acc123456789").kind == ErrorKind.INVALID_ACCOUNT_NUMBER
    assert validate_account_number("   ").kind == ErrorKind.ACCOUNT_NUMBER_REQUIRED


def test_algerian_phone_is_normalised():
    result = validate_algerian_phone_number("0555123456")
    assert result.is_valid
    assert result.value == "+213555123456"

    assert validate_algerian_phone_number("0555 12 34 56").value == "+213555123456"
    assert validate_algerian_phone_number("661234567").value == "+213661234567"
    assert validate_algerian_phone_number("+213771234567").is_valid


def test_algerian_phone_rejections():
    assert validate_algerian_phone_number("+213812345678").kind == ErrorKind.INVALID_ALGERIAN_PHONE
    assert validate_algerian_phone_number("05551234").kind == ErrorKind.INVALID_ALGERIAN_PHONE
    assert validate_algerian_phone_number("").kind == ErrorKind.PHONE_REQUIRED


def test_optional_phone_accepts_empty_input():
    result = validate_phone_number("")
    assert result.is_valid
    assert result.value == ""


def test_optional_phone_formats():
    assert validate_phone_number("555 12-34-56").value == "+213555123456"
    assert validate_phone_number("+213555123456").is_valid
    # only the algerian-specific validator strips a trunk 0
    assert validate_phone_number("0555123456").kind == ErrorKind.INVALID_PHONE_NUMBER

    assert validate_phone_number("+33612345678", country_code="+33").value == "+33612345678"
    assert (
        validate_phone_number("12345", country_code="+33").kind
        == ErrorKind.INVALID_INTERNATIONAL_PHONE
    )


def test_email():
    assert validate_email(" User@Example.COM ").value == "user@example.com"
    assert validate_email("user@example").kind == ErrorKind.INVALID_EMAIL
    assert validate_email("a b@example.com").kind == ErrorKind.INVALID_EMAIL
    assert validate_email("").kind == ErrorKind.EMAIL_REQUIRED


def test_password_length():
    assert validate_password("secret").is_valid
    assert validate_password("").kind == ErrorKind.PASSWORD_REQUIRED
    assert validate_password("12345").kind == ErrorKind.PASSWORD_TOO_SHORT
    assert validate_password("x" * 129).kind == ErrorKind.PASSWORD_TOO_LONG
    assert validate_password("x" * 128).is_valid


# ==================== COMPOSITES ====================

VALID_SIGNUP = {
    "fullName": "Amina Benali",
    "email": "amina@example.dz",
    "phone": "0555123456",
    "username": "amina_b",
    "password": "secret1",
    "confirmPassword": "secret1",
    "address": "Alger Centre",
}


def test_valid_signup():
    report = validate_signup_data(VALID_SIGNUP)
    assert report.is_valid
    assert report.errors == {}


def test_signup_accepts_model_and_field_names():
    payload = SignupPayload(
        full_name="Amina Benali",
        email="amina@example.dz",
        phone="0555123456",
        username="amina_b",
        password="secret1",
        confirm_password="secret1",
        address="Alger Centre",
        referral_code="INVITE1",
    )
    assert validate_signup_data(payload).is_valid


def test_empty_signup_reports_every_required_field():
    report = validate_signup_data({})
    assert not report.is_valid
    assert set(report.errors) == {"full_name", "email", "phone", "username", "password", "address"}


def test_signup_field_rules():
    report = validate_signup_data(
        VALID_SIGNUP
        | {
            "fullName": "A",
            "username": "ab!",
            "confirmPassword": "other1",
            "referralCode": "abc",
        }
    )
    assert set(report.errors) == {"full_name", "username", "confirm_password", "referral_code"}

    short_username = validate_signup_data(VALID_SIGNUP | {"username": "ab"})
    assert "username" in short_username.errors


def test_transaction_errors_are_collected():
    report = validate_transaction_data(
        {"amount": "0", "currency": "xyz", "type": "foo", "description": ""}
    )
    assert not report.is_valid
    assert len(report.errors) == 4
    assert report.kinds == [
        ErrorKind.AMOUNT_NON_POSITIVE,
        ErrorKind.UNSUPPORTED_CURRENCY,
        ErrorKind.INVALID_TRANSACTION_TYPE,
        ErrorKind.DESCRIPTION_REQUIRED,
    ]


def test_transaction_currency_defaults_to_dinar():
    report = validate_transaction_data({"amount": 1500, "type": "transfer", "description": "loyer"})
    assert report.is_valid
    assert report.errors == []


def test_blank_description_is_rejected():
    report = validate_transaction_data(
        {"amount": 10, "currency": "dzd", "type": "bill", "description": "   "}
    )
    assert report.kinds == [ErrorKind.DESCRIPTION_REQUIRED]


def test_investment_validation():
    valid = validate_investment_data(
        {
            "amount": "10000",
            "type": "monthly",
            "profit_rate": 5,
            "start_date": "2024-01-01",
            "end_date": "2024-02-01",
        }
    )
    assert valid.is_valid

    invalid = validate_investment_data(
        {
            "amount": "-3",
            "type": "daily",
            "profit_rate": 150,
            "start_date": "2024-02-01",
            "end_date": "2024-01-01",
        }
    )
    assert invalid.kinds == [
        ErrorKind.AMOUNT_NEGATIVE,
        ErrorKind.INVALID_INVESTMENT_TYPE,
        ErrorKind.PROFIT_RATE_ABOVE_MAXIMUM,
        ErrorKind.END_NOT_AFTER_START,
    ]
