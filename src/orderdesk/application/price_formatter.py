"""Price and decimal formatting for reports.

Amounts arrive as integers in the minor currency unit and are rendered
with a fixed number of decimal digits and an optional unit suffix:

    style  499 ->
      0    "4.99"
      1    "4.99 EUR"
      2    "4.99EUR"
      3    "4.99€"
      4    "4.99$"
      5    "4.99£"
      6    "499¥"
      7    "499"
"""

from __future__ import annotations

from orderdesk.domain.model.value_objects import Currency

DEFAULT_PRICE_STYLE = 0

CURRENCY_SYMBOLS: dict[Currency, str] = {
    Currency.EUR: "€",
    Currency.USD: "$",
    Currency.GBP: "£",
    Currency.YEN: "¥",
    Currency.BTC: "BTC",  # no unicode glyph
}

# style -> (decimal digits, unit)
_PRICE_STYLES: dict[int, tuple[int, str | None]] = {
    0: (2, None),
    1: (2, " EUR"),
    2: (2, "EUR"),
    3: (2, CURRENCY_SYMBOLS[Currency.EUR]),
    4: (2, CURRENCY_SYMBOLS[Currency.USD]),
    5: (2, CURRENCY_SYMBOLS[Currency.GBP]),
    6: (0, CURRENCY_SYMBOLS[Currency.YEN]),
    7: (0, None),
}

MAX_DECIMAL_DIGITS = 3


class PriceFormatter:

    def format_price(self, cents: int, style: int = DEFAULT_PRICE_STYLE) -> str:
        """Render *cents* in one of the numbered styles; unknown styles use 0."""
        digits, unit = _PRICE_STYLES.get(style, _PRICE_STYLES[DEFAULT_PRICE_STYLE])
        return self.format_decimal(cents, digits, unit)

    @staticmethod
    def format_decimal(value: int, decimal_digits: int, unit: str | None = None) -> str:
        """Render *value* as a decimal with *decimal_digits* fractional digits.

        The integer part uses truncating division and thousands separators;
        the fractional part is always non-negative, so the sign of a negative
        value shows only on the integer part (and disappears when it is 0):

            format_decimal(16000, 0)   -> "16,000"
            format_decimal(-499, 2)    -> "-4.99"
            format_decimal(-50, 2)     -> "0.50"
        """
        digits = max(0, min(MAX_DECIMAL_DIGITS, decimal_digits))
        suffix = unit or ""
        if digits == 0:
            return f"{value:,}{suffix}"

        divisor = 10 ** digits
        whole = abs(value) // divisor
        if value < 0:
            whole = -whole
        fraction = abs(value) % divisor
        return f"{whole:,}.{fraction:0{digits}d}{suffix}"
