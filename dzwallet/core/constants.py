"""
Application constants - centralized to avoid magic strings/numbers
"""
from enum import Enum


# Currencies
class Currency(str, Enum):
    DZD = "DZD"
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"


SUPPORTED_CURRENCIES = ("dzd", "eur", "usd", "gbp")
DEFAULT_CURRENCY = "dzd"


class TransactionType(str, Enum):
    RECHARGE = "recharge"
    TRANSFER = "transfer"
    BILL = "bill"
    INVESTMENT = "investment"
    CONVERSION = "conversion"
    WITHDRAWAL = "withdrawal"


class InvestmentType(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


# Amount limits
MIN_AMOUNT = 1
MAX_AMOUNT = 1_000_000_000
MIN_TRANSFER_AMOUNT = 100
MAX_TRANSFER_AMOUNT = 100_000
MAX_PROFIT_RATE = 100

# Identifiers
ALGERIA_COUNTRY_CODE = "+213"
ACCOUNT_NUMBER_PATTERN = r"^ACC\d{9}$"
ALGERIAN_PHONE_PATTERN = r"^\+213[567]\d{8}$"
INTERNATIONAL_PHONE_PATTERN = r"^\+\d{10,15}$"
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"
PASSWORD_MIN_LENGTH = 6
PASSWORD_MAX_LENGTH = 128
FULL_NAME_MIN_LENGTH = 2
USERNAME_MIN_LENGTH = 3
REFERRAL_CODE_MIN_LENGTH = 6
RIB_MIN_LENGTH = 10

# Rate limiting
RATE_LIMIT_COOLDOWN_MS = 30_000
BILL_PAYMENT_MAX_ATTEMPTS = 3

# OTP
DEFAULT_OTP_TYPE = "phone_verification"
OTP_VALIDITY_MINUTES = 5


class ErrorKind(str, Enum):
    """Every rejection the gateway can produce"""

    INVALID_AMOUNT_FORMAT = "invalid_amount_format"
    AMOUNT_NEGATIVE = "amount_negative"
    AMOUNT_NON_POSITIVE = "amount_non_positive"
    AMOUNT_BELOW_MINIMUM = "amount_below_minimum"
    AMOUNT_ABOVE_MAXIMUM = "amount_above_maximum"
    INSUFFICIENT_BALANCE = "insufficient_balance"

    UNSUPPORTED_CURRENCY = "unsupported_currency"
    INVALID_TRANSACTION_TYPE = "invalid_transaction_type"
    INVALID_INVESTMENT_TYPE = "invalid_investment_type"
    DESCRIPTION_REQUIRED = "description_required"

    INVALID_PROFIT_RATE_FORMAT = "invalid_profit_rate_format"
    PROFIT_RATE_NEGATIVE = "profit_rate_negative"
    PROFIT_RATE_ABOVE_MAXIMUM = "profit_rate_above_maximum"

    INVALID_START_DATE = "invalid_start_date"
    INVALID_END_DATE = "invalid_end_date"
    END_NOT_AFTER_START = "end_not_after_start"

    ACCOUNT_NUMBER_REQUIRED = "account_number_required"
    INVALID_ACCOUNT_NUMBER = "invalid_account_number"

    PHONE_REQUIRED = "phone_required"
    INVALID_PHONE_NUMBER = "invalid_phone_number"
    INVALID_ALGERIAN_PHONE = "invalid_algerian_phone"
    INVALID_INTERNATIONAL_PHONE = "invalid_international_phone"

    EMAIL_REQUIRED = "email_required"
    INVALID_EMAIL = "invalid_email"
    PASSWORD_REQUIRED = "password_required"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    PASSWORD_MISMATCH = "password_mismatch"
    FULL_NAME_REQUIRED = "full_name_required"
    FULL_NAME_TOO_SHORT = "full_name_too_short"
    USERNAME_REQUIRED = "username_required"
    USERNAME_TOO_SHORT = "username_too_short"
    USERNAME_INVALID_CHARS = "username_invalid_chars"
    ADDRESS_REQUIRED = "address_required"
    REFERRAL_CODE_TOO_SHORT = "referral_code_too_short"

    BILL_TYPE_REQUIRED = "bill_type_required"
    BILL_REFERENCE_REQUIRED = "bill_reference_required"
    INVALID_BILL_REFERENCE = "invalid_bill_reference"
    BILL_AMOUNT_REQUIRED = "bill_amount_required"
    BILL_AMOUNT_INVALID = "bill_amount_invalid"
    BILL_AMOUNT_BELOW_MINIMUM = "bill_amount_below_minimum"
    BILL_AMOUNT_ABOVE_MAXIMUM = "bill_amount_above_maximum"

    RIB_REQUIRED = "rib_required"
    RIB_TOO_SHORT = "rib_too_short"
    RIB_NOT_NUMERIC = "rib_not_numeric"

    RECIPIENT_REQUIRED = "recipient_required"
    TRANSFER_BELOW_MINIMUM = "transfer_below_minimum"
    TRANSFER_ABOVE_MAXIMUM = "transfer_above_maximum"
    SENDER_EMAIL_MISSING = "sender_email_missing"

    UNSUPPORTED_CONVERSION = "unsupported_conversion"
    RATE_LIMIT_COOLDOWN = "rate_limit_cooldown"
    RATE_LIMIT_ATTEMPTS_EXCEEDED = "rate_limit_attempts_exceeded"

    BACKEND_FAILURE = "backend_failure"


# User-facing messages (Arabic). Some carry str.format placeholders.
MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_AMOUNT_FORMAT: "المبلغ يجب أن يكون رقماً صحيحاً",
    ErrorKind.AMOUNT_NEGATIVE: "المبلغ لا يمكن أن يكون سالباً",
    ErrorKind.AMOUNT_NON_POSITIVE: "المبلغ يجب أن يكون أكبر من صفر",
    ErrorKind.AMOUNT_BELOW_MINIMUM: "المبلغ أقل من الحد الأدنى المسموح ({min_amount})",
    ErrorKind.AMOUNT_ABOVE_MAXIMUM: "المبلغ يتجاوز الحد الأقصى المسموح",
    ErrorKind.INSUFFICIENT_BALANCE: "الرصيد غير كافي لإتمام هذه العملية",
    ErrorKind.UNSUPPORTED_CURRENCY: "رمز العملة غير صحيح",
    ErrorKind.INVALID_TRANSACTION_TYPE: "نوع المعاملة غير صحيح",
    ErrorKind.INVALID_INVESTMENT_TYPE: "نوع الاستثمار غير صحيح",
    ErrorKind.DESCRIPTION_REQUIRED: "وصف المعاملة مطلوب",
    ErrorKind.INVALID_PROFIT_RATE_FORMAT: "معدل الربح يجب أن يكون رقماً صحيحاً",
    ErrorKind.PROFIT_RATE_NEGATIVE: "معدل الربح لا يمكن أن يكون سالباً",
    ErrorKind.PROFIT_RATE_ABOVE_MAXIMUM: "معدل الربح لا يمكن أن يتجاوز 100%",
    ErrorKind.INVALID_START_DATE: "تاريخ البداية غير صحيح",
    ErrorKind.INVALID_END_DATE: "تاريخ النهاية غير صحيح",
    ErrorKind.END_NOT_AFTER_START: "تاريخ النهاية يجب أن يكون بعد تاريخ البداية",
    ErrorKind.ACCOUNT_NUMBER_REQUIRED: "رقم الحساب مطلوب",
    ErrorKind.INVALID_ACCOUNT_NUMBER: (
        "تنسيق رقم الحساب غير صحيح (يجب أن يكون ACC متبوعاً بـ 9 أرقام)"
    ),
    ErrorKind.PHONE_REQUIRED: "رقم الهاتف مطلوب",
    ErrorKind.INVALID_PHONE_NUMBER: (
        "رقم الهاتف يجب أن يكون 10 أرقام ويبدأ بـ 5 أو 6 أو 7 (مثال: +213555123456)"
    ),
    ErrorKind.INVALID_ALGERIAN_PHONE: (
        "رقم الهاتف يجب أن يكون 9 أرقام ويبدأ بـ 5 أو 6 أو 7 (مثال: 555123456)"
    ),
    ErrorKind.INVALID_INTERNATIONAL_PHONE: (
        "تنسيق رقم الهاتف غير صحيح (يجب أن يبدأ بـ + ويتبعه 10-15 رقماً)"
    ),
    ErrorKind.EMAIL_REQUIRED: "البريد الإلكتروني مطلوب",
    ErrorKind.INVALID_EMAIL: "تنسيق البريد الإلكتروني غير صحيح",
    ErrorKind.PASSWORD_REQUIRED: "كلمة المرور مطلوبة",
    ErrorKind.PASSWORD_TOO_SHORT: "كلمة المرور يجب أن تكون 6 أحرف على الأقل",
    ErrorKind.PASSWORD_TOO_LONG: "كلمة المرور طويلة جداً (الحد الأقصى 128 حرف)",
    ErrorKind.PASSWORD_MISMATCH: "كلمات المرور غير متطابقة",
    ErrorKind.FULL_NAME_REQUIRED: "الاسم الكامل مطلوب",
    ErrorKind.FULL_NAME_TOO_SHORT: "الاسم الكامل يجب أن يكون حرفين على الأقل",
    ErrorKind.USERNAME_REQUIRED: "اسم المستخدم مطلوب",
    ErrorKind.USERNAME_TOO_SHORT: "اسم المستخدم يجب أن يكون 3 أحرف على الأقل",
    ErrorKind.USERNAME_INVALID_CHARS: "اسم المستخدم يجب أن يحتوي على أحرف وأرقام فقط",
    ErrorKind.ADDRESS_REQUIRED: "العنوان مطلوب",
    ErrorKind.REFERRAL_CODE_TOO_SHORT: "كود الإحالة يجب أن يكون 6 أحرف على الأقل",
    ErrorKind.BILL_TYPE_REQUIRED: "يرجى اختيار نوع الفاتورة",
    ErrorKind.BILL_REFERENCE_REQUIRED: "يرجى إدخال رقم المرجع",
    ErrorKind.INVALID_BILL_REFERENCE: "تنسيق رقم المرجع غير صحيح ({hint})",
    ErrorKind.BILL_AMOUNT_REQUIRED: "يرجى إدخال المبلغ",
    ErrorKind.BILL_AMOUNT_INVALID: "يرجى إدخال مبلغ صحيح",
    ErrorKind.BILL_AMOUNT_BELOW_MINIMUM: "الحد الأدنى للدفع هو {min_amount} دج",
    ErrorKind.BILL_AMOUNT_ABOVE_MAXIMUM: "الحد الأقصى للدفع هو {max_amount} دج",
    ErrorKind.RIB_REQUIRED: "يرجى إدخال رقم RIB",
    ErrorKind.RIB_TOO_SHORT: "رقم RIB يجب أن يكون 10 أرقام على الأقل",
    ErrorKind.RIB_NOT_NUMERIC: "رقم RIB يجب أن يحتوي على أرقام فقط",
    ErrorKind.RECIPIENT_REQUIRED: "معرف المستلم مطلوب",
    ErrorKind.TRANSFER_BELOW_MINIMUM: "الحد الأدنى للتحويل هو {min_amount} دج",
    ErrorKind.TRANSFER_ABOVE_MAXIMUM: "الحد الأقصى للتحويل هو {max_amount} دج",
    ErrorKind.SENDER_EMAIL_MISSING: "البريد الإلكتروني غير متوفر",
    ErrorKind.UNSUPPORTED_CONVERSION: "Conversion from {from_currency} to {to_currency} is not supported",
    ErrorKind.RATE_LIMIT_COOLDOWN: "يرجى الانتظار {seconds} ثانية بين كل معاملة",
    ErrorKind.RATE_LIMIT_ATTEMPTS_EXCEEDED: (
        "تم تجاوز الحد الأقصى للمحاولات ({max_attempts} محاولات)"
    ),
    ErrorKind.BACKEND_FAILURE: "حدث خطأ غير متوقع، يرجى المحاولة مرة أخرى",
}


def message_for(kind: ErrorKind, **params: object) -> str:
    """Render the localized message for an error kind"""
    template = MESSAGES[kind]
    return template.format(**params) if params else template
