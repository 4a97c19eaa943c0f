"""Supported display currencies.

Only the symbol is used when formatting; amounts are never converted.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

DEFAULT_CURRENCY = "USD"
DEFAULT_SYMBOL = "$"


class CurrencyInfo(NamedTuple):
    code: str
    name: str
    symbol: str


CURRENCIES: tuple[CurrencyInfo, ...] = (
    CurrencyInfo("USD", "US Dollar", "$"),
    CurrencyInfo("EUR", "Euro", "€"),
    CurrencyInfo("GBP", "British Pound", "£"),
    CurrencyInfo("JPY", "Japanese Yen", "¥"),
    CurrencyInfo("CAD", "Canadian Dollar", "C$"),
    CurrencyInfo("AUD", "Australian Dollar", "A$"),
    CurrencyInfo("INR", "Indian Rupee", "₹"),
    CurrencyInfo("CNY", "Chinese Yuan", "¥"),
    CurrencyInfo("BRL", "Brazilian Real", "R$"),
    CurrencyInfo("ZAR", "South African Rand", "R"),
    CurrencyInfo("MXN", "Mexican Peso", "Mex$"),
    CurrencyInfo("SGD", "Singapore Dollar", "S$"),
    CurrencyInfo("NZD", "New Zealand Dollar", "NZ$"),
    CurrencyInfo("HKD", "Hong Kong Dollar", "HK$"),
    CurrencyInfo("SEK", "Swedish Krona", "kr"),
    CurrencyInfo("NOK", "Norwegian Krone", "kr"),
    CurrencyInfo("DKK", "Danish Krone", "kr"),
    CurrencyInfo("CHF", "Swiss Franc", "Fr"),
    CurrencyInfo("RUB", "Russian Ruble", "₽"),
    CurrencyInfo("TRY", "Turkish Lira", "₺"),
)

_SYMBOLS = {info.code: info.symbol for info in CURRENCIES}
CURRENCY_CODES = frozenset(_SYMBOLS)


def currency_symbol(code: Optional[str]) -> str:
    """Return the display symbol for ``code``, falling back to ``$``."""

    if not code:
        return DEFAULT_SYMBOL
    return _SYMBOLS.get(code.upper(), DEFAULT_SYMBOL)


def format_amount(amount: float, code: Optional[str] = None) -> str:
    """Render ``amount`` with the currency symbol and two decimals.

    The symbol always leads, so an overspent balance reads ``$-200.00``.
    """

    return f"{currency_symbol(code)}{amount:.2f}"
