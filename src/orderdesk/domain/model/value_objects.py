"""Value Objects shared across the domain.

Prices are plain integers in the minor currency unit (cents), so the only
value objects left are the closed enumerations that qualify them.
"""

from __future__ import annotations

from enum import Enum


class Currency(Enum):
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
    YEN = "YEN"
    BTC = "BTC"


class Tax(Enum):
    """Tax-rate variant applied to an article.

    The percentage for each variant lives with the calculator
    (``ValueCalculator.tax_percent``); the enum only names the variant.
    """

    TAX_FREE = "TAX_FREE"
    STANDARD_VAT = "STANDARD_VAT"  # German MwSt, 19%
    REDUCED_VAT = "REDUCED_VAT"  # books, food, 7%
