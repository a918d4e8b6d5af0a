"""Money string → minor units.

Does not assume the text follows a particular locale. Both "1,000.50" and
"1.000,50" parse to 100050 for a 2-decimal currency, and currency symbols
or stray characters are ignored.
"""
from __future__ import annotations

import re
from decimal import Decimal

from .currencies import precision_of

_NON_DIGIT = re.compile(r"[^0-9]")


def convert_money_to_minor_units(value: str | None, currency: str) -> int | None:
    """Parse a money string into minor units (cents for USD, yen for JPY).

    Returns None when the text is blank or contains no digits. Signs are not
    recognized: "-5.00" parses the same as "5.00".

    The last digit run is read as the fractional part only when the currency
    has decimals, there is more than one run, and the run is no longer than
    the currency precision:

        "2,000,000.50" USD → ["2", "000", "000", "50"] → "50" is the fraction
        "2,000,000"    USD → ["2", "000", "000"]       → "000" is a thousands group
        "9,500"        KWD → ["9", "500"]              → "500" is the fraction (3 ≤ 3)
    """
    if not value or not value.strip():
        return None

    parts = [p for p in _NON_DIGIT.split(value.strip()) if p]
    if not parts:
        return None

    precision = precision_of(currency)
    last = parts[-1]
    last_is_fraction = precision > 0 and len(parts) > 1 and len(last) <= precision

    if last_is_fraction:
        whole_str = "".join(parts[:-1])
        fraction_str = last
    else:
        whole_str = "".join(parts)
        fraction_str = ""

    # Through Decimal: int(str) refuses very long digit strings
    whole = int(Decimal(whole_str))

    fraction = 0
    if fraction_str:
        # One digit typed for a 2-decimal currency means tenths
        fraction = int(fraction_str) * 10 ** (precision - len(fraction_str))

    return whole * 10 ** precision + fraction


parse_to_minor_units = convert_money_to_minor_units
