"""shopmoney — storefront money parsing and formatting."""
from .currencies import CURRENCY_DECIMALS, DEFAULT_CURRENCY_DECIMALS, precision_of
from .parse import convert_money_to_minor_units, parse_to_minor_units
from .format import format_cents, format_money
from .facets import (
    adjust_to_valid_value,
    create_url_parameters,
    extract_money_placeholder,
    parse_cents,
    parse_display_value,
    price_filter_parameters,
    price_summary,
)
from .types import PriceRange
from .errors import StorefrontError
from .client import StorefrontClient

__all__ = [
    "CURRENCY_DECIMALS",
    "DEFAULT_CURRENCY_DECIMALS",
    "precision_of",
    "convert_money_to_minor_units",
    "parse_to_minor_units",
    "format_cents",
    "format_money",
    "adjust_to_valid_value",
    "create_url_parameters",
    "extract_money_placeholder",
    "parse_cents",
    "parse_display_value",
    "price_filter_parameters",
    "price_summary",
    "PriceRange",
    "StorefrontError",
    "StorefrontClient",
]
