from .converter import (
    EXCHANGE_RATES,
    convert_currency,
    format_currency,
    get_exchange_rate,
    supported_pairs,
)

__all__ = [
    "EXCHANGE_RATES",
    "convert_currency",
    "format_currency",
    "get_exchange_rate",
    "supported_pairs",
]
