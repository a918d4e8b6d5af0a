"""Price facet helpers — the caller side of parse/format.

Everything the storefront price filter does with typed amounts: pull the
placeholder out of a money format, parse inputs with fallbacks, clamp them
to the available range, render the summary line and build the filter
query parameters. All functions are pure.
"""
from __future__ import annotations

import re
from decimal import Decimal
from typing import Iterable, Mapping

from .currencies import precision_of
from .format import PLACEHOLDER_PATTERN, format_cents, format_money
from .parse import convert_money_to_minor_units
from .types import PriceRange

DEFAULT_MONEY_FORMAT = "{{amount}}"
PRICE_GTE = "filter.v.price.gte"
PRICE_LTE = "filter.v.price.lte"
SEARCH_QUERY = "q"
PAGE = "page"

_NON_DIGIT = re.compile(r"[^0-9]")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def extract_money_placeholder(money_format: str) -> str:
    """Strip symbols from a money format, keeping the first placeholder.

    "${{amount}}" → "{{amount}}", "{{ amount }} USD" → "{{ amount }}".
    """
    match = PLACEHOLDER_PATTERN.search(money_format)
    return match.group(0) if match else DEFAULT_MONEY_FORMAT


def parse_display_value(value: str | None, currency: str) -> int:
    """Parse a typed or API-supplied amount, treating unparseable text as 0."""
    result = convert_money_to_minor_units(value, currency)
    return result if result is not None else 0


def parse_cents(value: str | None, fallback: str = "0", currency: str = "") -> int:
    """Parse `value`, falling back to `fallback` (which may itself be formatted, e.g. "11,400")."""
    result = convert_money_to_minor_units(value, currency)
    if result is not None:
        return result

    fallback_result = convert_money_to_minor_units(fallback, currency)
    if fallback_result is not None:
        return fallback_result

    digits = _NON_DIGIT.sub("", fallback or "")
    return int(Decimal(digits)) if digits else 0


# ---------------------------------------------------------------------------
# Range handling and display
# ---------------------------------------------------------------------------

def adjust_to_valid_value(
    value: str,
    price_range: PriceRange,
    money_format: str,
    currency: str,
) -> str:
    """Return the input text, or the formatted bound it falls outside of."""
    if not value.strip():
        return value

    cents = parse_display_value(value, currency)
    if price_range.contains(cents):
        return value

    placeholder = extract_money_placeholder(money_format)
    return format_money(price_range.clamp(cents), placeholder, currency)


def price_summary(
    min_value: str,
    max_value: str,
    range_max: str,
    money_format: str,
    currency: str,
) -> str:
    """Summary line shown next to the price facet, e.g. "$10.00–$250.00"."""
    if not min_value and not max_value:
        return ""

    money_format = money_format or DEFAULT_MONEY_FORMAT
    low = parse_cents(min_value, "0", currency)
    high = parse_cents(max_value, range_max, currency)
    return f"{format_money(low, money_format, currency)}–{format_money(high, money_format, currency)}"


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------

def price_filter_parameters(
    min_value: str | None,
    max_value: str | None,
    currency: str,
) -> list[tuple[str, str]]:
    """Normalize typed bounds into filter parameters ("1.000,5" EUR → "1000.50")."""
    precision = precision_of(currency)

    def _normalize(text: str | None) -> str:
        cents = convert_money_to_minor_units(text, currency)
        if cents is None:
            return ""
        return format_cents(cents, "", ".", precision, 10 ** precision)

    return [(PRICE_GTE, _normalize(min_value)), (PRICE_LTE, _normalize(max_value))]


def create_url_parameters(
    form_data: Mapping[str, str] | Iterable[tuple[str, str]],
    search_query: str | None = None,
) -> list[tuple[str, str]]:
    """Build facet query parameters from submitted form data.

    Empty price bounds and the page number are dropped; a search query,
    when present, replaces any existing `q`.
    """
    pairs = list(form_data.items()) if isinstance(form_data, Mapping) else list(form_data)

    for key in (PRICE_GTE, PRICE_LTE):
        first = next((v for k, v in pairs if k == key), None)
        if first == "":
            pairs = [(k, v) for k, v in pairs if k != key]

    pairs = [(k, v) for k, v in pairs if k != PAGE]

    if search_query:
        index = next((i for i, (k, _) in enumerate(pairs) if k == SEARCH_QUERY), None)
        pairs = [(k, v) for k, v in pairs if k != SEARCH_QUERY]
        if index is None:
            pairs.append((SEARCH_QUERY, search_query))
        else:
            pairs.insert(index, (SEARCH_QUERY, search_query))

    return pairs
