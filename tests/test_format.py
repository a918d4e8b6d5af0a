"""Unit tests for shopmoney.format.

Expected strings match the server-side money filter output.
"""
from __future__ import annotations

import pytest

from shopmoney.currencies import CURRENCY_DECIMALS
from shopmoney.format import format_cents, format_money
from shopmoney.parse import convert_money_to_minor_units


# ---------------------------------------------------------------------------
# format_cents
# ---------------------------------------------------------------------------

class TestFormatCents:
    def test_native_precision(self):
        assert format_cents(123456, ",", ".", 2, 100) == "1,234.56"

    def test_rounds_half_away_from_zero(self):
        assert format_cents(150, ",", ".", 0, 100) == "2"
        assert format_cents(250, ",", ".", 0, 100) == "3"
        assert format_cents(149, ",", ".", 0, 100) == "1"
        assert format_cents(1005, ",", ".", 0, 1000) == "1"
        assert format_cents(1500, ",", ".", 0, 1000) == "2"

    def test_small_values(self):
        assert format_cents(0, ",", ".", 2, 100) == "0.00"
        assert format_cents(5, ",", ".", 2, 100) == "0.05"
        assert format_cents(1, ",", ".", 5, 100000) == "0.00001"

    def test_grouping(self):
        assert format_cents(100, ",", ".", 0, 1) == "100"
        assert format_cents(1000, ",", ".", 0, 1) == "1,000"
        assert format_cents(123456789, " ", ",", 0, 1) == "123 456 789"

    def test_empty_thousands_separator(self):
        assert format_cents(123456789, "", ".", 2, 100) == "1234567.89"

    def test_huge_value_stays_exact(self):
        value = 12345678901234567890123456789012345
        assert format_cents(value, ",", ".", 2, 100) == (
            "123,456,789,012,345,678,901,234,567,890,123.45"
        )

    def test_more_digits_than_int_str_limit(self):
        assert format_cents(10 ** 5000, ",", ".", 2, 100) == "1" + ",000" * 1666 + ".00"

    def test_five_decimal_zero_padding(self):
        assert format_cents(1, ",", ".", 5, 100000) == "0.00001"
        assert format_cents(12, ",", ".", 5, 100000) == "0.00012"

    def test_negative(self):
        assert format_cents(-123456, ",", ".", 2, 100) == "-1,234.56"


# ---------------------------------------------------------------------------
# format_money
# ---------------------------------------------------------------------------

class TestFormatMoney:
    def test_amount(self):
        assert format_money(100050, "{{amount}}", "USD") == "1,000.50"

    def test_amount_no_decimals(self):
        assert format_money(100050, "{{amount_no_decimals}}", "USD") == "1,001"
        assert format_money(100049, "{{amount_no_decimals}}", "USD") == "1,000"

    def test_amount_with_comma_separator(self):
        assert format_money(100050, "{{amount_with_comma_separator}}", "USD") == "1.000,50"

    def test_amount_no_decimals_with_comma_separator(self):
        assert format_money(123456789, "{{amount_no_decimals_with_comma_separator}}", "EUR") == "1.234.568"

    def test_amount_no_decimals_with_space_separator(self):
        assert format_money(123456789, "{{amount_no_decimals_with_space_separator}}", "EUR") == "1 234 568"

    def test_amount_with_space_separator(self):
        assert format_money(123456789, "{{amount_with_space_separator}}", "EUR") == "1 234 567,89"

    def test_amount_with_period_and_space_separator(self):
        assert format_money(123456789, "{{amount_with_period_and_space_separator}}", "EUR") == "1 234 567.89"

    def test_amount_with_apostrophe_separator(self):
        assert format_money(123456789, "{{amount_with_apostrophe_separator}}", "CHF") == "1'234'567.89"

    def test_zero_decimal_currency(self):
        assert format_money(1000, "{{amount}}", "JPY") == "1,000"
        assert format_money(1000, "{{amount_with_comma_separator}}", "JPY") == "1.000"

    def test_three_decimal_currency(self):
        assert format_money(9500, "{{amount}}", "KWD") == "9.500"
        assert format_money(1234567, "{{amount_with_comma_separator}}", "KWD") == "1.234,567"

    def test_whitespace_inside_braces(self):
        assert format_money(100050, "{{ amount }}", "USD") == "1,000.50"
        assert format_money(100050, "{{amount   }}", "USD") == "1,000.50"

    def test_surrounding_text_preserved(self):
        assert format_money(100050, "${{amount}} USD", "USD") == "$1,000.50 USD"
        assert format_money(100050, "€{{amount_with_comma_separator}}", "EUR") == "€1.000,50"

    def test_currency_placeholder(self):
        assert format_money(100050, "{{amount}} {{currency}}", "USD") == "1,000.50 USD"

    def test_currency_placeholder_keeps_case(self):
        assert format_money(1000, "{{ currency }} {{amount}}", "jpy") == "jpy 1,000"

    def test_each_placeholder_independent(self):
        result = format_money(
            123456,
            "{{amount}} / {{amount_no_decimals}} / {{amount_with_comma_separator}}",
            "USD",
        )
        assert result == "1,234.56 / 1,235 / 1.234,56"

    def test_unknown_placeholder_is_empty(self):
        assert format_money(100050, "[{{amount_in_words}}]", "USD") == "[]"

    def test_placeholder_names_case_sensitive(self):
        assert format_money(100050, "{{AMOUNT}}", "USD") == ""

    def test_no_placeholders(self):
        assert format_money(100050, "Price on request", "USD") == "Price on request"
        assert format_money(100050, "", "USD") == ""

    def test_malformed_token_left_alone(self):
        assert format_money(100050, "{amount}", "USD") == "{amount}"

    def test_lowercase_currency_uses_precision(self):
        assert format_money(1000, "{{amount}}", "jpy") == "1,000"

    def test_unknown_currency_defaults_to_two_decimals(self):
        assert format_money(100, "{{amount}}", "XYZ") == "1.00"


# ---------------------------------------------------------------------------
# parse(format(m)) identity
# ---------------------------------------------------------------------------

# 10**k - 1, 10**k and 10**k + 1 cross every rounding and grouping boundary
_SAMPLE_VALUES = sorted(
    {v for k in range(13) for v in (10 ** k - 1, 10 ** k, 10 ** k + 1)}
    | {5, 12, 12345, 100050, 123456789}
)


class TestParseFormatIdentity:
    @pytest.mark.parametrize("currency", sorted({"USD", "EUR", *CURRENCY_DECIMALS}))
    def test_amount_placeholder(self, currency):
        for value in _SAMPLE_VALUES:
            formatted = format_money(value, "{{amount}}", currency)
            assert convert_money_to_minor_units(formatted, currency) == value, formatted

    def test_beyond_int_str_limit(self):
        value = 10 ** 5000 + 7
        formatted = format_money(value, "{{amount}}", "USD")
        assert convert_money_to_minor_units(formatted, "USD") == value
