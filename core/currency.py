# =============================================================================
# core/currency.py  —  Currency Conversion with Fixed Rates
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Converts an amount between USD, EUR, GBP, JPY and CAD using a frozen
#   table of rates.
#
# THE RATE TABLE:
#   _RATES[from][to] is how many units of `to` one unit of `from` buys.
#   The table is NOT derived from a single base currency, so EUR→USD is not
#   exactly 1 / (USD→EUR).  That's fine for a demo and keeps each pair
#   independently editable.
#
#   There are no identity pairs (USD→USD).  Asking for one is treated the
#   same as asking for an unsupported currency.
# =============================================================================

from typing import Optional

from core.formatting import format_money, format_number
from core.models import CurrencyConversion

_RATES: dict[str, dict[str, float]] = {
    "USD": {"EUR": 0.93, "GBP": 0.79, "JPY": 153.72, "CAD": 1.38},
    "EUR": {"USD": 1.07, "GBP": 0.85, "JPY": 164.78, "CAD": 1.48},
    "GBP": {"USD": 1.26, "EUR": 1.18, "JPY": 194.21, "CAD": 1.74},
    "JPY": {"USD": 0.0065, "EUR": 0.0061, "GBP": 0.0052, "CAD": 0.0090},
    "CAD": {"USD": 0.73, "EUR": 0.68, "GBP": 0.57, "JPY": 111.50},
}


def get_rate(from_currency: str, to_currency: str) -> Optional[float]:
    """Return the rate for a currency pair (case-insensitive), or None."""
    return _RATES.get(from_currency.upper(), {}).get(to_currency.upper())


def convert(amount: float, from_currency: str, to_currency: str) -> Optional[CurrencyConversion]:
    """Convert ``amount`` from one currency to another.

    Returns:
        A CurrencyConversion, or None if the pair isn't in the rate table.
    """
    rate = get_rate(from_currency, to_currency)
    if rate is None:
        return None
    return CurrencyConversion(
        amount=amount,
        from_currency=from_currency.upper(),
        to_currency=to_currency.upper(),
        converted=amount * rate,
    )


def describe_conversion(conversion: CurrencyConversion) -> str:
    """``100 USD = 93.00 EUR``"""
    return (
        f"{format_number(conversion.amount)} {conversion.from_currency} = "
        f"{format_money(conversion.converted)} {conversion.to_currency}"
    )


def unsupported_pair_message(from_currency: str, to_currency: str) -> str:
    # Echo the caller's spelling, not the upper-cased codes.
    return f"Sorry, I don't have conversion data for {from_currency} to {to_currency}."


def supported_currencies() -> list[str]:
    return sorted(_RATES)
