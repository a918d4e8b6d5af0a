"""Money formatting that reproduces the storefront `money` template filter.

Used by the price facet helpers and anything else that renders minor units
for display. Output must match the server-side filter character for
character, so rounding goes through Decimal, never float.
"""
from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .currencies import precision_of

PLACEHOLDER_PATTERN = re.compile(r"{{\s*(\w+)\s*}}", re.ASCII)
_THOUSANDS = re.compile(r"\d(?=(\d{3})+(?!\d))")

# placeholder → (thousands separator, decimal separator, keep native precision)
PLACEHOLDER_SEPARATORS = {
    "amount": (",", ".", True),
    "amount_no_decimals": (",", ".", False),
    "amount_with_comma_separator": (".", ",", True),
    # Same as amount_with_comma_separator minus the decimals, so the output
    # never contains a comma despite the name.
    "amount_no_decimals_with_comma_separator": (".", ",", False),
    "amount_no_decimals_with_space_separator": (" ", ".", False),
    "amount_with_space_separator": (" ", ",", True),
    "amount_with_period_and_space_separator": (" ", ".", True),
    "amount_with_apostrophe_separator": ("'", ".", True),
}


def format_cents(
    money_value: int,
    thousands_separator: str,
    decimal_separator: str,
    precision: int,
    divisor: int,
) -> str:
    """Render money_value / divisor with `precision` decimals.

    Rounds half away from zero and groups the whole part by thousands.
    """
    # Decimal reads ints directly, so no int/str digit limit applies
    amount = Decimal(abs(money_value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 1 + precision + 1)
        major = amount / Decimal(divisor)
        rounded = major.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)

    whole, _, fraction = f"{rounded:f}".partition(".")
    whole = whole or "0"
    whole = _THOUSANDS.sub(lambda m: m.group(0) + thousands_separator, whole)
    sign = "-" if money_value < 0 else ""

    if precision <= 0:
        return sign + whole
    return sign + whole + decimal_separator + fraction.ljust(precision, "0")


def format_money(money_value: int, format: str, currency: str) -> str:
    """Expand every `{{ placeholder }}` in a money format.

    Example::

        format_money(100050, "${{amount}}", "USD")                      # "$1,000.50"
        format_money(100050, "{{amount_with_comma_separator}} €", "EUR") # "1.000,50 €"
        format_money(1000, "{{ amount }} {{ currency }}", "JPY")        # "1,000 JPY"

    `currency` is echoed verbatim; unknown placeholders expand to "".
    """
    currency_precision = precision_of(currency)
    divisor = 10 ** currency_precision

    def _expand(match: re.Match) -> str:
        placeholder = match.group(1)
        if placeholder == "currency":
            return currency

        separators = PLACEHOLDER_SEPARATORS.get(placeholder)
        if separators is None:
            return ""

        thousands_separator, decimal_separator, native = separators
        precision = currency_precision if native else 0
        return format_cents(
            money_value, thousands_separator, decimal_separator, precision, divisor
        )

    return PLACEHOLDER_PATTERN.sub(_expand, format)
