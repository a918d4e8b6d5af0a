"""Currency precision table.

Mirrors the decimal precision used by the storefront `money` filter.
Codes missing from the table use DEFAULT_CURRENCY_DECIMALS.
"""
from __future__ import annotations

from types import MappingProxyType

DEFAULT_CURRENCY_DECIMALS = 2

# Currencies whose minor unit is not 1/100 of the major unit
CURRENCY_DECIMALS = MappingProxyType({
    "BHD": 3,
    "BIF": 0,
    "BYR": 0,
    "CLF": 4,
    "CLP": 0,
    "DJF": 0,
    "GNF": 0,
    "IQD": 3,
    "ISK": 0,
    "JOD": 3,
    "JPY": 0,
    "KMF": 0,
    "KRW": 0,
    "KWD": 3,
    "LYD": 3,
    "MRO": 5,
    "OMR": 3,
    "PYG": 0,
    "RWF": 0,
    "TND": 3,
    "UGX": 0,
    "UYI": 0,
    "UYW": 4,
    "VND": 0,
    "VUV": 0,
    "XAF": 0,
    "XAG": 0,
    "XAU": 0,
    "XBA": 0,
    "XBB": 0,
    "XBC": 0,
    "XBD": 0,
    "XDR": 0,
    "XOF": 0,
    "XPD": 0,
    "XPF": 0,
    "XPT": 0,
    "XSU": 0,
    "XTS": 0,
    "XUA": 0,
})


def precision_of(currency: str) -> int:
    """Number of fractional digits for a currency code (case-insensitive)."""
    return CURRENCY_DECIMALS.get(currency.upper(), DEFAULT_CURRENCY_DECIMALS)
