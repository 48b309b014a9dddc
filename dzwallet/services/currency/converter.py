# dzwallet/services/currency/converter.py
"""
Static-table currency conversion between DZD, EUR, USD and GBP

Every directed pair is listed explicitly; inverses are not derived, so a
round trip X -> Y -> X is only approximately the identity.
"""
from datetime import datetime, timezone

from dzwallet.core.constants import Currency, ErrorKind
from dzwallet.core.exception import UnsupportedConversionError
from dzwallet.core.logging import logger
from dzwallet.schemas.validation import ConversionResult

# Approximate market rates, one unit of FROM in TO
EXCHANGE_RATES: dict[str, float] = {
    "DZD_TO_EUR": 0.0074,
    "EUR_TO_DZD": 135.14,
    "DZD_TO_USD": 0.0075,
    "USD_TO_DZD": 133.33,
    "DZD_TO_GBP": 0.0059,
    "GBP_TO_DZD": 169.49,
    "EUR_TO_USD": 1.08,
    "USD_TO_EUR": 0.93,
    "EUR_TO_GBP": 0.85,
    "GBP_TO_EUR": 1.18,
    "USD_TO_GBP": 0.79,
    "GBP_TO_USD": 1.27,
}

CURRENCY_SYMBOLS = {
    Currency.EUR.value: "€",
    Currency.USD.value: "$",
    Currency.GBP.value: "£",
}


def _pair_key(from_currency: str, to_currency: str) -> str:
    return f"{from_currency.upper()}_TO_{to_currency.upper()}"


def supported_pairs() -> list[tuple[str, str]]:
    return [tuple(key.split("_TO_")) for key in EXCHANGE_RATES]


def get_exchange_rate(from_currency: str, to_currency: str) -> float:
    """Rate for a directed pair, 0 when the table has no entry"""
    return EXCHANGE_RATES.get(_pair_key(from_currency, to_currency), 0)


def convert_currency(amount: float, from_currency: str, to_currency: str) -> ConversionResult:
    """
    Convert amount from one currency to another.

    Raises:
        UnsupportedConversionError: the pair is not in the rate table
    """
    from_currency = from_currency.upper()
    to_currency = to_currency.upper()
    timestamp = datetime.now(timezone.utc)

    if from_currency == to_currency:
        return ConversionResult(
            from_amount=amount,
            to_amount=amount,
            from_currency=from_currency,
            to_currency=to_currency,
            rate=1,
            timestamp=timestamp,
        )

    rate = EXCHANGE_RATES.get(_pair_key(from_currency, to_currency))

    if not rate:
        logger.warning("💱 Unsupported conversion {} -> {}", from_currency, to_currency)
        raise UnsupportedConversionError.from_kind(
            ErrorKind.UNSUPPORTED_CONVERSION,
            from_currency=from_currency,
            to_currency=to_currency,
        )

    return ConversionResult(
        from_amount=amount,
        to_amount=round(amount * rate, 2),
        from_currency=from_currency,
        to_currency=to_currency,
        rate=rate,
        timestamp=timestamp,
    )


def format_currency(amount: float, currency: str) -> str:
    """Display form of an amount ("1,500 دج", "€12.50")"""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)) or amount != amount:
        amount = 0

    if currency == Currency.DZD.value:
        return f"{amount:,.3f}".rstrip("0").rstrip(".") + " دج"

    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol:
        return f"{symbol}{amount:.2f}"

    return str(amount)
