"""Unit tests for price and decimal formatting."""

import pytest

from orderdesk.application.price_formatter import CURRENCY_SYMBOLS, PriceFormatter
from orderdesk.domain.model.value_objects import Currency

fmt = PriceFormatter()


class TestFormatPrice:

    @pytest.mark.parametrize(
        "style, expected",
        [
            (0, "4.99"),
            (1, "4.99 EUR"),
            (2, "4.99EUR"),
            (3, "4.99€"),
            (4, "4.99$"),
            (5, "4.99£"),
            (6, "499¥"),
            (7, "499"),
        ],
    )
    def test_styles(self, style, expected):
        assert fmt.format_price(499, style) == expected

    def test_default_style(self):
        assert fmt.format_price(499) == "4.99"

    def test_unknown_style_falls_back_to_default(self):
        assert fmt.format_price(499, 42) == "4.99"
        assert fmt.format_price(499, -1) == "4.99"

    def test_euro_glyph(self):
        assert fmt.format_price(499, 3).endswith("€")

    def test_thousands_separator(self):
        assert fmt.format_price(1690000, 1) == "16,900.00 EUR"

    def test_zero(self):
        assert fmt.format_price(0) == "0.00"

    def test_small_amount_is_zero_padded(self):
        assert fmt.format_price(5) == "0.05"


class TestFormatDecimal:

    def test_no_digits_with_separator(self):
        assert fmt.format_decimal(16000, 0) == "16,000"

    def test_one_digit(self):
        assert fmt.format_decimal(1234, 1) == "123.4"

    def test_two_digits(self):
        assert fmt.format_decimal(1699999, 2) == "16,999.99"

    def test_three_digits(self):
        assert fmt.format_decimal(16999, 3, "-") == "16.999-"

    def test_unit_appended(self):
        assert fmt.format_decimal(16000, 0, "¥") == "16,000¥"

    def test_empty_unit_ignored(self):
        assert fmt.format_decimal(499, 2, "") == "4.99"

    def test_digits_clamped(self):
        assert fmt.format_decimal(1234, 7) == "1.234"
        assert fmt.format_decimal(1234, -2) == "1,234"

    def test_negative_sign_on_integer_part(self):
        assert fmt.format_decimal(-499, 2) == "-4.99"

    def test_negative_fraction_stays_positive(self):
        # truncating division: -50 / 100 -> 0, fraction |-50 % 100| -> 50
        assert fmt.format_decimal(-50, 2) == "0.50"

    def test_negative_large(self):
        assert fmt.format_decimal(-123456, 2) == "-1,234.56"


class TestCurrencySymbols:

    def test_every_currency_has_a_symbol(self):
        assert set(CURRENCY_SYMBOLS) == set(Currency)

    def test_bitcoin_has_no_glyph(self):
        assert CURRENCY_SYMBOLS[Currency.BTC] == "BTC"
